"""AWS cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class GlobalAwsOpts:
    """Global options of the AWS cloud provider."""

    zone: str = ""
    vpc: str = ""
    subnet_id: str = ""
    route_table_id: str = ""
    role_arn: str = ""
    kubernetes_cluster_tag: str = ""
    kubernetes_cluster_id: str = ""
    disable_security_group_ingress: bool = False
    elb_security_group: str = ""
    disable_strict_zone_check: bool = False


@dataclass
class ServiceOverride:
    """Endpoint override for one AWS service."""

    service: str = ""
    region: str = ""
    url: str = ""
    signing_region: str = ""
    signing_method: str = ""
    signing_name: str = ""


@dataclass
class AWSCloudProvider:
    """AWS cloud provider: global options and per-service overrides."""

    global_opts: GlobalAwsOpts = field(default_factory=GlobalAwsOpts)
    service_override: dict[str, ServiceOverride] = field(default_factory=dict)


_GLOBAL_BOOLS = ("disable_security_group_ingress", "disable_strict_zone_check")
_GLOBAL_STRINGS = (
    "elb_security_group",
    "kubernetes_cluster_id",
    "kubernetes_cluster_tag",
    "role_arn",
    "route_table_id",
    "subnet_id",
    "vpc",
    "zone",
)
_OVERRIDE_STRINGS = (
    "region",
    "service",
    "signing_method",
    "signing_name",
    "signing_region",
    "url",
)


def flatten_aws_global(opts: GlobalAwsOpts) -> list[dict[str, Any]]:
    """Turn AWS global options into their one-element schema list."""
    obj: dict[str, Any] = {name: getattr(opts, name) for name in _GLOBAL_BOOLS}
    for name in _GLOBAL_STRINGS:
        value = getattr(opts, name)
        if value:
            obj[name] = value
    return [obj]


def flatten_aws_service_override(
    overrides: Mapping[str, ServiceOverride] | None,
) -> list[dict[str, Any]]:
    """Turn service overrides into a schema list, one entry per override."""
    if not overrides:
        return []
    out: list[dict[str, Any]] = []
    for override in overrides.values():
        obj: dict[str, Any] = {}
        for name in _OVERRIDE_STRINGS:
            value = getattr(override, name)
            if value:
                obj[name] = value
        out.append(obj)
    return out


def flatten_aws_cloud_provider(provider: AWSCloudProvider | None) -> list[dict[str, Any]]:
    """Turn an AWS cloud provider into its schema list; None gives []."""
    if provider is None:
        return []
    obj: dict[str, Any] = {"global": flatten_aws_global(provider.global_opts)}
    if provider.service_override:
        obj["service_override"] = flatten_aws_service_override(provider.service_override)
    return [obj]


def expand_aws_global(items: list[Any] | None) -> GlobalAwsOpts:
    """Build AWS global options from their schema list."""
    opts = GlobalAwsOpts()
    if not items or items[0] is None:
        return opts
    data = items[0]

    for name in _GLOBAL_BOOLS:
        value = data.get(name)
        if isinstance(value, bool):
            setattr(opts, name, value)

    for name in _GLOBAL_STRINGS:
        value = data.get(name)
        if isinstance(value, str) and value:
            setattr(opts, name, value)

    return opts


def expand_aws_service_override(items: list[Any] | None) -> dict[str, ServiceOverride]:
    """Build service overrides keyed by service name from their schema list.

    Raises KeyError for an entry without a service and TypeError for a
    service name that is not a string.
    """
    if not items or items[0] is None:
        return {}

    overrides: dict[str, ServiceOverride] = {}
    for data in items:
        key = data["service"]
        if not isinstance(key, str):
            raise TypeError(f"service override name must be a string, not {type(key).__name__}")
        override = ServiceOverride()
        for name in _OVERRIDE_STRINGS:
            value = data.get(name)
            if isinstance(value, str) and value:
                setattr(override, name, value)
        overrides[key] = override
    return overrides


def expand_aws_cloud_provider(items: list[Any] | None) -> AWSCloudProvider:
    """Build an AWS cloud provider from its schema list."""
    provider = AWSCloudProvider()
    if not items or items[0] is None:
        return provider
    data = items[0]

    global_items = data.get("global")
    if isinstance(global_items, list) and global_items:
        provider.global_opts = expand_aws_global(global_items)

    override_items = data.get("service_override")
    if isinstance(override_items, list) and override_items:
        provider.service_override = expand_aws_service_override(override_items)

    return provider