"""vSphere cloud provider settings and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class DiskVsphereOpts:
    """Disk section of the vSphere configuration."""

    scsi_controller_type: str = ""


@dataclass
class GlobalVsphereOpts:
    """Global section of the vSphere configuration."""

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
    """Network section of the vSphere configuration."""

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
    """Workspace section of the vSphere configuration."""

    vcenter_ip: str = ""
    datacenter: str = ""
    folder: str = ""
    default_datastore: str = ""
    resource_pool_path: str = ""


@dataclass
class VsphereCloudProvider:
    """vSphere cloud provider configuration."""

    global_opts: GlobalVsphereOpts = field(default_factory=GlobalVsphereOpts)
    virtual_center: dict[str, VirtualCenterConfig] = field(default_factory=dict)
    network: NetworkVsphereOpts = field(default_factory=NetworkVsphereOpts)
    disk: DiskVsphereOpts = field(default_factory=DiskVsphereOpts)
    workspace: WorkspaceVsphereOpts = field(default_factory=WorkspaceVsphereOpts)


# (attribute, schema key) pairs for text fields
_GLOBAL_TEXT = (
    ("datacenters", "datacenters"),
    ("default_datastore", "datastore"),
    ("password", "password"),
    ("vcenter_port", "port"),
    ("user", "user"),
    ("vm_name", "vm_name"),
    ("vm_uuid", "vm_uuid"),
    ("working_dir", "working_dir"),
)
_CENTER_TEXT = (
    ("datacenters", "datacenters"),
    ("password", "password"),
    ("vcenter_port", "port"),
    ("user", "user"),
)
_WORKSPACE_TEXT = (
    ("datacenter", "datacenter"),
    ("folder", "folder"),
    ("vcenter_ip", "server"),
    ("default_datastore", "default_datastore"),
    ("resource_pool_path", "resourcepool_path"),
)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _base(state: list[Any] | None) -> dict[str, Any]:
    return dict(state[0]) if state and state[0] is not None else {}


def _first(items: list[Any] | None) -> dict[str, Any] | None:
    if not items or items[0] is None:
        return None
    return items[0]


def _put_text(obj: dict[str, Any], source: Any, pairs: tuple[tuple[str, str], ...]) -> None:
    for attr, key in pairs:
        if value := getattr(source, attr):
            obj[key] = value


def _take_text(target: Any, entry: dict[str, Any], pairs: tuple[tuple[str, str], ...]) -> None:
    for attr, key in pairs:
        if isinstance(value := entry.get(key), str) and value:
            setattr(target, attr, value)


def flatten_vsphere_disk(opts: DiskVsphereOpts) -> list[dict[str, Any]]:
    """Turn disk options into their schema list."""
    obj: dict[str, Any] = {}
    if opts.scsi_controller_type:
        obj["scsi_controller_type"] = opts.scsi_controller_type
    return [obj]


def flatten_vsphere_global(
    opts: GlobalVsphereOpts, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn global options into their schema list, keeping keys from ``state``."""
    obj = _base(state)
    _put_text(obj, opts, _GLOBAL_TEXT)
    obj["insecure_flag"] = opts.insecure_flag
    if opts.round_tripper_count > 0:
        obj["soap_roundtrip_count"] = opts.round_tripper_count
    return [obj]


def flatten_vsphere_network(opts: NetworkVsphereOpts) -> list[dict[str, Any]]:
    """Turn network options into their schema list."""
    obj: dict[str, Any] = {}
    if opts.public_network:
        obj["public_network"] = opts.public_network
    return [obj]


def flatten_vsphere_virtual_center(
    centers: Mapping[str, VirtualCenterConfig] | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn vCenter settings into a list of maps, one per server name.

    The n-th entry of ``state``, when present, supplies the starting keys of
    the n-th map.
    """
    state = state or []
    out: list[dict[str, Any]] = []
    for position, (name, center) in enumerate((centers or {}).items()):
        previous = state[position] if position < len(state) else None
        obj: dict[str, Any] = dict(previous) if previous is not None else {}
        obj["name"] = name
        _put_text(obj, center, _CENTER_TEXT)
        if center.round_tripper_count > 0:
            obj["soap_roundtrip_count"] = center.round_tripper_count
        out.append(obj)
    return out


def flatten_vsphere_workspace(opts: WorkspaceVsphereOpts) -> list[dict[str, Any]]:
    """Turn workspace options into their schema list."""
    obj: dict[str, Any] = {}
    _put_text(obj, opts, _WORKSPACE_TEXT)
    return [obj]


def flatten_vsphere_cloud_provider(
    provider: VsphereCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn a vSphere provider into its schema list; None gives []."""
    obj = _base(state)
    if provider is None:
        return []

    obj["disk"] = flatten_vsphere_disk(provider.disk)
    global_state = obj.get("global")
    if not isinstance(global_state, list):
        global_state = []
    obj["global"] = flatten_vsphere_global(provider.global_opts, global_state)
    obj["network"] = flatten_vsphere_network(provider.network)
    center_state = obj.get("virtual_center")
    if not isinstance(center_state, list):
        center_state = []
    obj["virtual_center"] = flatten_vsphere_virtual_center(
        provider.virtual_center, center_state
    )
    obj["workspace"] = flatten_vsphere_workspace(provider.workspace)
    return [obj]


def expand_vsphere_disk(items: list[Any] | None) -> DiskVsphereOpts:
    """Build disk options from their schema list."""
    opts = DiskVsphereOpts()
    if (entry := _first(items)) is None:
        return opts
    _take_text(opts, entry, (("scsi_controller_type", "scsi_controller_type"),))
    return opts


def expand_vsphere_global(items: list[Any] | None) -> GlobalVsphereOpts:
    """Build global options from their schema list."""
    opts = GlobalVsphereOpts()
    if (entry := _first(items)) is None:
        return opts
    _take_text(opts, entry, _GLOBAL_TEXT)
    if isinstance(flag := entry.get("insecure_flag"), bool):
        opts.insecure_flag = flag
    if _is_positive_int(count := entry.get("soap_roundtrip_count")):
        opts.round_tripper_count = count
    return opts


def expand_vsphere_network(items: list[Any] | None) -> NetworkVsphereOpts:
    """Build network options from their schema list."""
    opts = NetworkVsphereOpts()
    if (entry := _first(items)) is None:
        return opts
    _take_text(opts, entry, (("public_network", "public_network"),))
    return opts


def expand_vsphere_virtual_center(items: list[Any] | None) -> dict[str, VirtualCenterConfig]:
    """Build vCenter settings keyed by server name.

    Raises KeyError or TypeError when an entry lacks a string "name".
    """
    if not items or items[0] is None:
        return {}

    result: dict[str, VirtualCenterConfig] = {}
    for entry in items:
        key = entry["name"]
        if not isinstance(key, str):
            raise TypeError(f"virtual center name must be a string, got {key!r}")
        center = VirtualCenterConfig()
        _take_text(center, entry, _CENTER_TEXT)
        if _is_positive_int(count := entry.get("soap_roundtrip_count")):
            center.round_tripper_count = count
        result[key] = center
    return result


def expand_vsphere_workspace(items: list[Any] | None) -> WorkspaceVsphereOpts:
    """Build workspace options from their schema list."""
    opts = WorkspaceVsphereOpts()
    if (entry := _first(items)) is None:
        return opts
    _take_text(opts, entry, _WORKSPACE_TEXT)
    return opts


def expand_vsphere_cloud_provider(items: list[Any] | None) -> VsphereCloudProvider:
    """Build a vSphere cloud provider from its schema list."""
    provider = VsphereCloudProvider()
    if (entry := _first(items)) is None:
        return provider

    if isinstance(value := entry.get("disk"), list) and value:
        provider.disk = expand_vsphere_disk(value)
    if isinstance(value := entry.get("global"), list) and value:
        provider.global_opts = expand_vsphere_global(value)
    if isinstance(value := entry.get("network"), list) and value:
        provider.network = expand_vsphere_network(value)
    if isinstance(value := entry.get("virtual_center"), list) and value:
        provider.virtual_center = expand_vsphere_virtual_center(value)
    if isinstance(value := entry.get("workspace"), list) and value:
        provider.workspace = expand_vsphere_workspace(value)
    return provider