"""Cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rkeconf.cloud_provider_aws import (
    AWSCloudProvider,
    expand_aws_cloud_provider,
    flatten_aws_cloud_provider,
)
from rkeconf.cloud_provider_azure import (
    AzureCloudProvider,
    expand_azure_cloud_provider,
    flatten_azure_cloud_provider,
)
from rkeconf.cloud_provider_openstack import (
    OpenstackCloudProvider,
    expand_openstack_cloud_provider,
    flatten_openstack_cloud_provider,
)
from rkeconf.cloud_provider_vsphere import (
    VsphereCloudProvider,
    expand_vsphere_cloud_provider,
    flatten_vsphere_cloud_provider,
)


@dataclass
class CloudProvider:
    """The cluster's cloud provider: its name and provider-specific settings."""

    name: str = ""
    aws_cloud_provider: AWSCloudProvider | None = None
    azure_cloud_provider: AzureCloudProvider | None = None
    openstack_cloud_provider: OpenstackCloudProvider | None = None
    vsphere_cloud_provider: VsphereCloudProvider | None = None
    custom_cloud_provider: str = ""


def _current_section(obj: dict[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def flatten_cloud_provider(
    provider: CloudProvider, current: list[Any] | None
) -> list[dict[str, Any]] | None:
    """Turn a cloud provider into its schema list, or None if it has no name.

    The first entry of ``current``, if any, is updated in place and returned;
    the Azure, OpenStack and vSphere sections in it are updated rather than
    replaced.
    """
    if not provider.name:
        return None

    obj: dict[str, Any] = current[0] if current and current[0] is not None else {}
    obj["name"] = provider.name

    if provider.aws_cloud_provider is not None:
        obj["aws_cloud_provider"] = flatten_aws_cloud_provider(provider.aws_cloud_provider)

    if provider.azure_cloud_provider is not None:
        obj["azure_cloud_provider"] = flatten_azure_cloud_provider(
            provider.azure_cloud_provider, _current_section(obj, "azure_cloud_provider")
        )

    if provider.custom_cloud_provider:
        obj["custom_cloud_provider"] = provider.custom_cloud_provider

    if provider.openstack_cloud_provider is not None:
        obj["openstack_cloud_provider"] = flatten_openstack_cloud_provider(
            provider.openstack_cloud_provider,
            _current_section(obj, "openstack_cloud_provider"),
        )

    if provider.vsphere_cloud_provider is not None:
        obj["vsphere_cloud_provider"] = flatten_vsphere_cloud_provider(
            provider.vsphere_cloud_provider,
            _current_section(obj, "vsphere_cloud_provider"),
        )

    return [obj]


def expand_cloud_provider(items: list[Any] | None) -> CloudProvider:
    """Build a cloud provider from its schema list."""
    provider = CloudProvider()
    if not items or items[0] is None:
        return provider
    data = items[0]

    sections = (
        ("aws_cloud_provider", expand_aws_cloud_provider),
        ("azure_cloud_provider", expand_azure_cloud_provider),
        ("openstack_cloud_provider", expand_openstack_cloud_provider),
        ("vsphere_cloud_provider", expand_vsphere_cloud_provider),
    )
    for key, expand in sections:
        value = data.get(key)
        if isinstance(value, list) and value:
            setattr(provider, key, expand(value))

    for key in ("custom_cloud_provider", "name"):
        value = data.get(key)
        if isinstance(value, str) and value:
            setattr(provider, key, value)

    return provider