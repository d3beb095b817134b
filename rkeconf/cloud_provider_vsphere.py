"""vSphere cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class DiskVsphereOpts:
    """Disk options of the vSphere cloud provider."""

    scsi_controller_type: str = ""


@dataclass
class GlobalVsphereOpts:
    """Global options of the vSphere cloud provider."""

    user: str = ""
    password: str = ""
    vcenter_port: str = ""
    insecure_flag: bool = False
    datacenters: str = ""
    default_datastore: str = ""
    working_dir: str = ""
    round_tripper_count: int = 0
    vm_uuid: str = ""
    vm_name: str = ""


@dataclass
class NetworkVsphereOpts:
    """Network options of the vSphere cloud provider."""

    public_network: str = ""


@dataclass
class VirtualCenterConfig:
    """Connection settings for one vCenter server."""

    user: str = ""
    password: str = ""
    vcenter_port: str = ""
    datacenters: str = ""
    round_tripper_count: int = 0


@dataclass
class WorkspaceVsphereOpts:
    """Workspace options of the vSphere cloud provider."""

    vcenter_ip: str = ""
    datacenter: str = ""
    folder: str = ""
    default_datastore: str = ""
    resource_pool_path: str = ""


@dataclass
class VsphereCloudProvider:
    """vSphere cloud provider with all of its option sections."""

    global_opts: GlobalVsphereOpts = field(default_factory=GlobalVsphereOpts)
    virtual_center: dict[str, VirtualCenterConfig] = field(default_factory=dict)
    network: NetworkVsphereOpts = field(default_factory=NetworkVsphereOpts)
    disk: DiskVsphereOpts = field(default_factory=DiskVsphereOpts)
    workspace: WorkspaceVsphereOpts = field(default_factory=WorkspaceVsphereOpts)


# (schema key, attribute name) pairs
_GLOBAL_STRINGS = (
    ("datacenters", "datacenters"),
    ("datastore", "default_datastore"),
    ("password", "password"),
    ("port", "vcenter_port"),
    ("user", "user"),
    ("vm_name", "vm_name"),
    ("vm_uuid", "vm_uuid"),
    ("working_dir", "working_dir"),
)
_CENTER_STRINGS = (
    ("datacenters", "datacenters"),
    ("password", "password"),
    ("port", "vcenter_port"),
    ("user", "user"),
)
_WORKSPACE_STRINGS = (
    ("datacenter", "datacenter"),
    ("folder", "folder"),
    ("server", "vcenter_ip"),
    ("default_datastore", "default_datastore"),
    ("resourcepool_path", "resource_pool_path"),
)
_ROUNDTRIP = ("soap_roundtrip_count", "round_tripper_count")


def _first(items: list[Any] | None) -> dict[str, Any] | None:
    if not items or items[0] is None:
        return None
    return items[0]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _put_strings(obj: dict[str, Any], source: Any, pairs: tuple[tuple[str, str], ...]) -> None:
    for key, attribute in pairs:
        value = getattr(source, attribute)
        if value:
            obj[key] = value


def _take_strings(data: dict[str, Any], target: Any, pairs: tuple[tuple[str, str], ...]) -> None:
    for key, attribute in pairs:
        value = data.get(key)
        if isinstance(value, str) and value:
            setattr(target, attribute, value)


def _put_roundtrip(obj: dict[str, Any], source: Any) -> None:
    key, attribute = _ROUNDTRIP
    value = getattr(source, attribute)
    if value > 0:
        obj[key] = value


def _take_roundtrip(data: dict[str, Any], target: Any) -> None:
    key, attribute = _ROUNDTRIP
    value = data.get(key)
    if _is_int(value) and value > 0:
        setattr(target, attribute, value)


def flatten_vsphere_disk(opts: DiskVsphereOpts) -> list[dict[str, Any]]:
    """Turn disk options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.scsi_controller_type:
        obj["scsi_controller_type"] = opts.scsi_controller_type
    return [obj]


def flatten_vsphere_global(
    opts: GlobalVsphereOpts, current: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn global options into their schema list.

    The first entry of ``current``, if any, is updated in place and returned.
    """
    obj = _first(current)
    if obj is None:
        obj = {}
    _put_strings(obj, opts, _GLOBAL_STRINGS)
    obj["insecure_flag"] = opts.insecure_flag
    _put_roundtrip(obj, opts)
    return [obj]


def flatten_vsphere_network(opts: NetworkVsphereOpts) -> list[dict[str, Any]]:
    """Turn network options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.public_network:
        obj["public_network"] = opts.public_network
    return [obj]


def flatten_vsphere_virtual_center(
    centers: Mapping[str, VirtualCenterConfig] | None, current: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn vCenter settings into a schema list, one entry per server.

    The entries of ``current`` are updated in place, position by position,
    and new entries are made for servers beyond its length.
    """
    if not centers:
        return []
    existing = list(current or [])
    out: list[dict[str, Any]] = []
    for position, (name, center) in enumerate(centers.items()):
        obj: dict[str, Any] = existing[position] if position < len(existing) else {}
        obj["name"] = name
        _put_strings(obj, center, _CENTER_STRINGS)
        _put_roundtrip(obj, center)
        out.append(obj)
    return out


def flatten_vsphere_workspace(opts: WorkspaceVsphereOpts) -> list[dict[str, Any]]:
    """Turn workspace options into their one-element schema list."""
    obj: dict[str, Any] = {}
    _put_strings(obj, opts, _WORKSPACE_STRINGS)
    return [obj]


def flatten_vsphere_cloud_provider(
    provider: VsphereCloudProvider | None, current: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn a vSphere cloud provider into its schema list; None gives [].

    The first entry of ``current``, if any, is updated in place and returned;
    its global and virtual center sections are updated rather than replaced.
    """
    obj = _first(current)
    if obj is None:
        obj = {}
    if provider is None:
        return []

    obj["disk"] = flatten_vsphere_disk(provider.disk)

    current_global = obj.get("global")
    if not isinstance(current_global, list):
        current_global = []
    obj["global"] = flatten_vsphere_global(provider.global_opts, current_global)

    obj["network"] = flatten_vsphere_network(provider.network)

    current_centers = obj.get("virtual_center")
    if not isinstance(current_centers, list):
        current_centers = []
    obj["virtual_center"] = flatten_vsphere_virtual_center(provider.virtual_center, current_centers)

    obj["workspace"] = flatten_vsphere_workspace(provider.workspace)
    return [obj]


def expand_vsphere_disk(items: list[Any] | None) -> DiskVsphereOpts:
    """Build disk options from their schema list."""
    opts = DiskVsphereOpts()
    data = _first(items)
    if data is None:
        return opts
    _take_strings(data, opts, (("scsi_controller_type", "scsi_controller_type"),))
    return opts


def expand_vsphere_global(items: list[Any] | None) -> GlobalVsphereOpts:
    """Build global options from their schema list."""
    opts = GlobalVsphereOpts()
    data = _first(items)
    if data is None:
        return opts
    _take_strings(data, opts, _GLOBAL_STRINGS)
    insecure = data.get("insecure_flag")
    if isinstance(insecure, bool):
        opts.insecure_flag = insecure
    _take_roundtrip(data, opts)
    return opts


def expand_vsphere_network(items: list[Any] | None) -> NetworkVsphereOpts:
    """Build network options from their schema list."""
    opts = NetworkVsphereOpts()
    data = _first(items)
    if data is None:
        return opts
    _take_strings(data, opts, (("public_network", "public_network"),))
    return opts


def expand_vsphere_virtual_center(items: list[Any] | None) -> dict[str, VirtualCenterConfig]:
    """Build vCenter settings keyed by server name from their schema list.

    Raises KeyError for an entry without a name and TypeError for a name
    that is not a string.
    """
    if not items or items[0] is None:
        return {}

    centers: dict[str, VirtualCenterConfig] = {}
    for data in items:
        key = data["name"]
        if not isinstance(key, str):
            raise TypeError(f"virtual center name must be a string, not {type(key).__name__}")
        center = VirtualCenterConfig()
        _take_strings(data, center, _CENTER_STRINGS)
        _take_roundtrip(data, center)
        centers[key] = center
    return centers


def expand_vsphere_workspace(items: list[Any] | None) -> WorkspaceVsphereOpts:
    """Build workspace options from their schema list."""
    opts = WorkspaceVsphereOpts()
    data = _first(items)
    if data is None:
        return opts
    _take_strings(data, opts, _WORKSPACE_STRINGS)
    return opts


def expand_vsphere_cloud_provider(items: list[Any] | None) -> VsphereCloudProvider:
    """Build a vSphere cloud provider from its schema list."""
    provider = VsphereCloudProvider()
    data = _first(items)
    if data is None:
        return provider

    sections = (
        ("disk", "disk", expand_vsphere_disk),
        ("global", "global_opts", expand_vsphere_global),
        ("network", "network", expand_vsphere_network),
        ("virtual_center", "virtual_center", expand_vsphere_virtual_center),
        ("workspace", "workspace", expand_vsphere_workspace),
    )
    for key, attribute, expand in sections:
        value = data.get(key)
        if isinstance(value, list) and value:
            setattr(provider, attribute, expand(value))

    return provider