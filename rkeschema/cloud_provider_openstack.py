"""OpenStack cloud provider settings and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BlockStorageOpenstackOpts:
    """Block storage section of the OpenStack configuration."""

    bs_version: str = ""
    trust_device_path: bool = False
    ignore_volume_az: bool = False


@dataclass
class GlobalOpenstackOpts:
    """Global section of the OpenStack configuration."""

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
    """Load balancer section of the OpenStack configuration."""

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
    """Metadata section of the OpenStack configuration."""

    search_order: str = ""
    request_timeout: int = 0


@dataclass
class RouteOpenstackOpts:
    """Route section of the OpenStack configuration."""

    router_id: str = ""


@dataclass
class OpenstackCloudProvider:
    """OpenStack cloud provider configuration."""

    global_opts: GlobalOpenstackOpts = field(default_factory=GlobalOpenstackOpts)
    load_balancer: LoadBalancerOpenstackOpts = field(
        default_factory=LoadBalancerOpenstackOpts
    )
    block_storage: BlockStorageOpenstackOpts = field(
        default_factory=BlockStorageOpenstackOpts
    )
    route: RouteOpenstackOpts = field(default_factory=RouteOpenstackOpts)
    metadata: MetadataOpenstackOpts = field(default_factory=MetadataOpenstackOpts)


_GLOBAL_TEXT = (
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
_LB_TEXT = (
    "floating_network_id",
    "lb_method",
    "lb_provider",
    "lb_version",
    "monitor_delay",
    "monitor_timeout",
    "subnet_id",
)
_LB_BOOLS = ("create_monitor", "manage_security_groups", "use_octavia")
_BS_BOOLS = ("ignore_volume_az", "trust_device_path")


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _base(state: list[Any] | None) -> dict[str, Any]:
    return dict(state[0]) if state and state[0] is not None else {}


def _first(items: list[Any] | None) -> dict[str, Any] | None:
    if not items or items[0] is None:
        return None
    return items[0]


def _set_text(target: Any, entry: dict[str, Any], names: tuple[str, ...]) -> None:
    for name in names:
        if isinstance(value := entry.get(name), str) and value:
            setattr(target, name, value)


def _set_bools(target: Any, entry: dict[str, Any], names: tuple[str, ...]) -> None:
    for name in names:
        if isinstance(value := entry.get(name), bool):
            setattr(target, name, value)


def flatten_openstack_block_storage(opts: BlockStorageOpenstackOpts) -> list[dict[str, Any]]:
    """Turn block storage options into their schema list."""
    obj: dict[str, Any] = {}
    if opts.bs_version:
        obj["bs_version"] = opts.bs_version
    for name in _BS_BOOLS:
        obj[name] = getattr(opts, name)
    return [obj]


def flatten_openstack_global(
    opts: GlobalOpenstackOpts, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn global options into their schema list, keeping keys from ``state``."""
    obj = _base(state)
    for name in _GLOBAL_TEXT:
        if value := getattr(opts, name):
            obj[name] = value
    return [obj]


def flatten_openstack_load_balancer(opts: LoadBalancerOpenstackOpts) -> list[dict[str, Any]]:
    """Turn load balancer options into their schema list."""
    obj: dict[str, Any] = {name: getattr(opts, name) for name in _LB_BOOLS}
    for name in _LB_TEXT:
        if value := getattr(opts, name):
            obj[name] = value
    if opts.monitor_max_retries > 0:
        obj["monitor_max_retries"] = opts.monitor_max_retries
    return [obj]


def flatten_openstack_metadata(opts: MetadataOpenstackOpts) -> list[dict[str, Any]]:
    """Turn metadata options into their schema list."""
    obj: dict[str, Any] = {}
    if opts.request_timeout > 0:
        obj["request_timeout"] = opts.request_timeout
    if opts.search_order:
        obj["search_order"] = opts.search_order
    return [obj]


def flatten_openstack_route(opts: RouteOpenstackOpts) -> list[dict[str, Any]]:
    """Turn route options into their schema list."""
    obj: dict[str, Any] = {}
    if opts.router_id:
        obj["router_id"] = opts.router_id
    return [obj]


def flatten_openstack_cloud_provider(
    provider: OpenstackCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn an OpenStack provider into its schema list; None gives []."""
    obj = _base(state)
    if provider is None:
        return []

    obj["block_storage"] = flatten_openstack_block_storage(provider.block_storage)
    global_state = obj.get("global")
    if not isinstance(global_state, list):
        global_state = []
    obj["global"] = flatten_openstack_global(provider.global_opts, global_state)
    obj["load_balancer"] = flatten_openstack_load_balancer(provider.load_balancer)
    obj["metadata"] = flatten_openstack_metadata(provider.metadata)
    obj["route"] = flatten_openstack_route(provider.route)
    return [obj]


def expand_openstack_block_storage(items: list[Any] | None) -> BlockStorageOpenstackOpts:
    """Build block storage options from their schema list."""
    opts = BlockStorageOpenstackOpts()
    if (entry := _first(items)) is None:
        return opts
    _set_text(opts, entry, ("bs_version",))
    _set_bools(opts, entry, _BS_BOOLS)
    return opts


def expand_openstack_global(items: list[Any] | None) -> GlobalOpenstackOpts:
    """Build global options from their schema list."""
    opts = GlobalOpenstackOpts()
    if (entry := _first(items)) is None:
        return opts
    _set_text(opts, entry, _GLOBAL_TEXT)
    return opts


def expand_openstack_load_balancer(items: list[Any] | None) -> LoadBalancerOpenstackOpts:
    """Build load balancer options from their schema list."""
    opts = LoadBalancerOpenstackOpts()
    if (entry := _first(items)) is None:
        return opts
    _set_text(opts, entry, _LB_TEXT)
    _set_bools(opts, entry, _LB_BOOLS)
    if _is_positive_int(retries := entry.get("monitor_max_retries")):
        opts.monitor_max_retries = retries
    return opts


def expand_openstack_metadata(items: list[Any] | None) -> MetadataOpenstackOpts:
    """Build metadata options from their schema list."""
    opts = MetadataOpenstackOpts()
    if (entry := _first(items)) is None:
        return opts
    if _is_positive_int(timeout := entry.get("request_timeout")):
        opts.request_timeout = timeout
    _set_text(opts, entry, ("search_order",))
    return opts


def expand_openstack_route(items: list[Any] | None) -> RouteOpenstackOpts:
    """Build route options from their schema list."""
    opts = RouteOpenstackOpts()
    if (entry := _first(items)) is None:
        return opts
    _set_text(opts, entry, ("router_id",))
    return opts


def expand_openstack_cloud_provider(items: list[Any] | None) -> OpenstackCloudProvider:
    """Build an OpenStack cloud provider from its schema list."""
    provider = OpenstackCloudProvider()
    if (entry := _first(items)) is None:
        return provider

    if isinstance(value := entry.get("block_storage"), list) and value:
        provider.block_storage = expand_openstack_block_storage(value)
    if isinstance(value := entry.get("global"), list) and value:
        provider.global_opts = expand_openstack_global(value)
    if isinstance(value := entry.get("load_balancer"), list) and value:
        provider.load_balancer = expand_openstack_load_balancer(value)
    if isinstance(value := entry.get("metadata"), list) and value:
        provider.metadata = expand_openstack_metadata(value)
    if isinstance(value := entry.get("route"), list) and value:
        provider.route = expand_openstack_route(value)
    return provider