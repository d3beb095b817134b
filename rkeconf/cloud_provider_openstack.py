"""OpenStack cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BlockStorageOpenstackOpts:
    """Block storage options of the OpenStack cloud provider."""

    bs_version: str = ""
    trust_device_path: bool = False
    ignore_volume_az: bool = False


@dataclass
class GlobalOpenstackOpts:
    """Global options (credentials and endpoint) of the OpenStack cloud provider."""

    auth_url: str = ""
    username: str = ""
    user_id: str = ""
    password: str = ""
    tenant_id: str = ""
    tenant_name: str = ""
    trust_id: str = ""
    domain_id: str = ""
    domain_name: str = ""
    region: str = ""
    ca_file: str = ""


@dataclass
class LoadBalancerOpenstackOpts:
    """Load balancer options of the OpenStack cloud provider."""

    lb_version: str = ""
    use_octavia: bool = False
    subnet_id: str = ""
    floating_network_id: str = ""
    lb_method: str = ""
    lb_provider: str = ""
    create_monitor: bool = False
    monitor_delay: str = ""
    monitor_timeout: str = ""
    monitor_max_retries: int = 0
    manage_security_groups: bool = False


@dataclass
class MetadataOpenstackOpts:
    """Metadata service options of the OpenStack cloud provider."""

    search_order: str = ""
    request_timeout: int = 0


@dataclass
class RouteOpenstackOpts:
    """Routing options of the OpenStack cloud provider."""

    router_id: str = ""


@dataclass
class OpenstackCloudProvider:
    """OpenStack cloud provider with all of its option sections."""

    global_opts: GlobalOpenstackOpts = field(default_factory=GlobalOpenstackOpts)
    load_balancer: LoadBalancerOpenstackOpts = field(default_factory=LoadBalancerOpenstackOpts)
    block_storage: BlockStorageOpenstackOpts = field(default_factory=BlockStorageOpenstackOpts)
    route: RouteOpenstackOpts = field(default_factory=RouteOpenstackOpts)
    metadata: MetadataOpenstackOpts = field(default_factory=MetadataOpenstackOpts)


_BLOCK_STORAGE_BOOLS = ("ignore_volume_az", "trust_device_path")
_GLOBAL_STRINGS = (
    "auth_url",
    "password",
    "ca_file",
    "domain_id",
    "domain_name",
    "region",
    "tenant_id",
    "tenant_name",
    "trust_id",
    "username",
    "user_id",
)
_LB_STRINGS = (
    "floating_network_id",
    "lb_method",
    "lb_provider",
    "lb_version",
    "monitor_delay",
    "monitor_timeout",
    "subnet_id",
)
_LB_BOOLS = ("create_monitor", "manage_security_groups", "use_octavia")


def _first(items: list[Any] | None) -> dict[str, Any] | None:
    if not items or items[0] is None:
        return None
    return items[0]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _copy_strings(data: dict[str, Any], target: Any, names: tuple[str, ...]) -> None:
    for name in names:
        value = data.get(name)
        if isinstance(value, str) and value:
            setattr(target, name, value)


def _copy_bools(data: dict[str, Any], target: Any, names: tuple[str, ...]) -> None:
    for name in names:
        value = data.get(name)
        if isinstance(value, bool):
            setattr(target, name, value)


def flatten_openstack_block_storage(opts: BlockStorageOpenstackOpts) -> list[dict[str, Any]]:
    """Turn block storage options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.bs_version:
        obj["bs_version"] = opts.bs_version
    for name in _BLOCK_STORAGE_BOOLS:
        obj[name] = getattr(opts, name)
    return [obj]


def flatten_openstack_global(
    opts: GlobalOpenstackOpts, current: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn global options into their schema list.

    The first entry of ``current``, if any, is updated in place and returned.
    """
    obj: dict[str, Any] = _first(current)
    if obj is None:
        obj = {}
    for name in _GLOBAL_STRINGS:
        value = getattr(opts, name)
        if value:
            obj[name] = value
    return [obj]


def flatten_openstack_load_balancer(opts: LoadBalancerOpenstackOpts) -> list[dict[str, Any]]:
    """Turn load balancer options into their one-element schema list."""
    obj: dict[str, Any] = {}
    for name in _LB_STRINGS:
        value = getattr(opts, name)
        if value:
            obj[name] = value
    for name in _LB_BOOLS:
        obj[name] = getattr(opts, name)
    if opts.monitor_max_retries > 0:
        obj["monitor_max_retries"] = opts.monitor_max_retries
    return [obj]


def flatten_openstack_metadata(opts: MetadataOpenstackOpts) -> list[dict[str, Any]]:
    """Turn metadata options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.request_timeout > 0:
        obj["request_timeout"] = opts.request_timeout
    if opts.search_order:
        obj["search_order"] = opts.search_order
    return [obj]


def flatten_openstack_route(opts: RouteOpenstackOpts) -> list[dict[str, Any]]:
    """Turn route options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.router_id:
        obj["router_id"] = opts.router_id
    return [obj]


def flatten_openstack_cloud_provider(
    provider: OpenstackCloudProvider | None, current: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn an OpenStack cloud provider into its schema list; None gives [].

    The first entry of ``current``, if any, is updated in place and returned,
    and its global section is updated rather than replaced.
    """
    obj: dict[str, Any] = _first(current)
    if obj is None:
        obj = {}
    if provider is None:
        return []

    obj["block_storage"] = flatten_openstack_block_storage(provider.block_storage)

    current_global = obj.get("global")
    if not isinstance(current_global, list):
        current_global = []
    obj["global"] = flatten_openstack_global(provider.global_opts, current_global)

    obj["load_balancer"] = flatten_openstack_load_balancer(provider.load_balancer)
    obj["metadata"] = flatten_openstack_metadata(provider.metadata)
    obj["route"] = flatten_openstack_route(provider.route)
    return [obj]


def expand_openstack_block_storage(items: list[Any] | None) -> BlockStorageOpenstackOpts:
    """Build block storage options from their schema list."""
    opts = BlockStorageOpenstackOpts()
    data = _first(items)
    if data is None:
        return opts
    _copy_strings(data, opts, ("bs_version",))
    _copy_bools(data, opts, _BLOCK_STORAGE_BOOLS)
    return opts


def expand_openstack_global(items: list[Any] | None) -> GlobalOpenstackOpts:
    """Build global options from their schema list."""
    opts = GlobalOpenstackOpts()
    data = _first(items)
    if data is None:
        return opts
    _copy_strings(data, opts, _GLOBAL_STRINGS)
    return opts


def expand_openstack_load_balancer(items: list[Any] | None) -> LoadBalancerOpenstackOpts:
    """Build load balancer options from their schema list."""
    opts = LoadBalancerOpenstackOpts()
    data = _first(items)
    if data is None:
        return opts
    _copy_strings(data, opts, _LB_STRINGS)
    _copy_bools(data, opts, _LB_BOOLS)
    retries = data.get("monitor_max_retries")
    if _is_int(retries) and retries > 0:
        opts.monitor_max_retries = retries
    return opts


def expand_openstack_metadata(items: list[Any] | None) -> MetadataOpenstackOpts:
    """Build metadata options from their schema list."""
    opts = MetadataOpenstackOpts()
    data = _first(items)
    if data is None:
        return opts
    timeout = data.get("request_timeout")
    if _is_int(timeout) and timeout > 0:
        opts.request_timeout = timeout
    _copy_strings(data, opts, ("search_order",))
    return opts


def expand_openstack_route(items: list[Any] | None) -> RouteOpenstackOpts:
    """Build route options from their schema list."""
    opts = RouteOpenstackOpts()
    data = _first(items)
    if data is None:
        return opts
    _copy_strings(data, opts, ("router_id",))
    return opts


def expand_openstack_cloud_provider(items: list[Any] | None) -> OpenstackCloudProvider:
    """Build an OpenStack cloud provider from its schema list."""
    provider = OpenstackCloudProvider()
    data = _first(items)
    if data is None:
        return provider

    sections = (
        ("block_storage", "block_storage", expand_openstack_block_storage),
        ("global", "global_opts", expand_openstack_global),
        ("load_balancer", "load_balancer", expand_openstack_load_balancer),
        ("metadata", "metadata", expand_openstack_metadata),
        ("route", "route", expand_openstack_route),
    )
    for key, attribute, expand in sections:
        value = data.get(key)
        if isinstance(value, list) and value:
            setattr(provider, attribute, expand(value))

    return provider