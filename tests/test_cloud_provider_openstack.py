import copy

import pytest

from rkeschema.cloud_provider_openstack import (
    BlockStorageOpenstackOpts,
    GlobalOpenstackOpts,
    LoadBalancerOpenstackOpts,
    MetadataOpenstackOpts,
    OpenstackCloudProvider,
    RouteOpenstackOpts,
    expand_openstack_block_storage,
    expand_openstack_cloud_provider,
    expand_openstack_global,
    expand_openstack_load_balancer,
    expand_openstack_metadata,
    expand_openstack_route,
    flatten_openstack_block_storage,
    flatten_openstack_cloud_provider,
    flatten_openstack_global,
    flatten_openstack_load_balancer,
    flatten_openstack_metadata,
    flatten_openstack_route,
)


def block_storage_conf():
    return BlockStorageOpenstackOpts(
        bs_version="test", ignore_volume_az=True, trust_device_path=True
    )


def block_storage_iface():
    return [{"bs_version": "test", "ignore_volume_az": True, "trust_device_path": True}]


def global_conf():
    password = "password"
    return GlobalOpenstackOpts(
        auth_url="auth.terraform.test",
        password=password,
        tenant_id="YYYYYYYY",
        username="user",
        ca_file="ca_file",
        domain_id="domain_id",
        domain_name="domain_name",
        region="region",
        tenant_name="tenant",
        trust_id="VVVVVVVV",
    )


def global_iface():
    return [
        {
            "auth_url": "auth.terraform.test",
            "password": "password",
            "tenant_id": "YYYYYYYY",
            "username": "user",
            "ca_file": "ca_file",
            "domain_id": "domain_id",
            "domain_name": "domain_name",
            "region": "region",
            "tenant_name": "tenant",
            "trust_id": "VVVVVVVV",
        }
    ]


def load_balancer_conf():
    return LoadBalancerOpenstackOpts(
        create_monitor=True,
        floating_network_id="test",
        lb_method="method",
        lb_provider="provider",
        lb_version="version",
        manage_security_groups=True,
        monitor_delay="30s",
        monitor_max_retries=5,
        monitor_timeout="10s",
        subnet_id="subnet",
        use_octavia=True,
    )


def load_balancer_iface():
    return [
        {
            "create_monitor": True,
            "floating_network_id": "test",
            "lb_method": "method",
            "lb_provider": "provider",
            "lb_version": "version",
            "manage_security_groups": True,
            "monitor_delay": "30s",
            "monitor_max_retries": 5,
            "monitor_timeout": "10s",
            "subnet_id": "subnet",
            "use_octavia": True,
        }
    ]


def metadata_conf():
    return MetadataOpenstackOpts(request_timeout=30, search_order="order")


def metadata_iface():
    return [{"request_timeout": 30, "search_order": "order"}]


def route_conf():
    return RouteOpenstackOpts(router_id="test")


def route_iface():
    return [{"router_id": "test"}]


def provider_conf():
    return OpenstackCloudProvider(
        block_storage=block_storage_conf(),
        global_opts=global_conf(),
        load_balancer=load_balancer_conf(),
        metadata=metadata_conf(),
        route=route_conf(),
    )


def provider_iface():
    return [
        {
            "block_storage": block_storage_iface(),
            "global": global_iface(),
            "load_balancer": load_balancer_iface(),
            "metadata": metadata_iface(),
            "route": route_iface(),
        }
    ]


def test_flatten_block_storage():
    assert flatten_openstack_block_storage(block_storage_conf()) == block_storage_iface()


def test_flatten_global():
    assert flatten_openstack_global(global_conf(), global_iface()) == global_iface()


def test_flatten_load_balancer():
    assert flatten_openstack_load_balancer(load_balancer_conf()) == load_balancer_iface()


def test_flatten_metadata():
    assert flatten_openstack_metadata(metadata_conf()) == metadata_iface()


def test_flatten_route():
    assert flatten_openstack_route(route_conf()) == route_iface()


def test_flatten_provider():
    assert flatten_openstack_cloud_provider(provider_conf(), provider_iface()) == provider_iface()


def test_expand_block_storage():
    assert expand_openstack_block_storage(block_storage_iface()) == block_storage_conf()


def test_expand_global():
    assert expand_openstack_global(global_iface()) == global_conf()


def test_expand_load_balancer():
    assert expand_openstack_load_balancer(load_balancer_iface()) == load_balancer_conf()


def test_expand_metadata():
    assert expand_openstack_metadata(metadata_iface()) == metadata_conf()


def test_expand_route():
    assert expand_openstack_route(route_iface()) == route_conf()


def test_expand_provider():
    assert expand_openstack_cloud_provider(provider_iface()) == provider_conf()


def test_flatten_none_provider_gives_empty_list():
    assert flatten_openstack_cloud_provider(None, provider_iface()) == []


def test_flatten_provider_without_state():
    assert flatten_openstack_cloud_provider(provider_conf(), None) == provider_iface()


def test_flatten_global_keeps_state_keys_without_mutation():
    state = [{"extra": "kept"}]
    before = copy.deepcopy(state)
    out = flatten_openstack_global(GlobalOpenstackOpts(region="r1"), state)
    assert out == [{"extra": "kept", "region": "r1"}]
    assert state == before


def test_flatten_provider_passes_global_state():
    state = [{"global": [{"extra": "kept"}], "other": 1}]
    out = flatten_openstack_cloud_provider(OpenstackCloudProvider(), state)
    assert out[0]["global"] == [{"extra": "kept"}]
    assert out[0]["other"] == 1


def test_flatten_empty_load_balancer_keeps_only_bools():
    assert flatten_openstack_load_balancer(LoadBalancerOpenstackOpts()) == [
        {"create_monitor": False, "manage_security_groups": False, "use_octavia": False}
    ]


def test_flatten_empty_metadata_and_route():
    assert flatten_openstack_metadata(MetadataOpenstackOpts()) == [{}]
    assert flatten_openstack_route(RouteOpenstackOpts()) == [{}]


@pytest.mark.parametrize(
    "expand, default",
    [
        (expand_openstack_block_storage, BlockStorageOpenstackOpts()),
        (expand_openstack_global, GlobalOpenstackOpts()),
        (expand_openstack_load_balancer, LoadBalancerOpenstackOpts()),
        (expand_openstack_metadata, MetadataOpenstackOpts()),
        (expand_openstack_route, RouteOpenstackOpts()),
        (expand_openstack_cloud_provider, OpenstackCloudProvider()),
    ],
)
@pytest.mark.parametrize("items", [None, [], [None]])
def test_expand_empty_gives_default(expand, default, items):
    assert expand(items) == default


def test_expand_ignores_non_positive_numbers():
    opts = expand_openstack_load_balancer([{"monitor_max_retries": 0}])
    assert opts.monitor_max_retries == 0
    meta = expand_openstack_metadata([{"request_timeout": True}])
    assert meta.request_timeout == 0


def test_round_trip_provider():
    conf = provider_conf()
    assert expand_openstack_cloud_provider(flatten_openstack_cloud_provider(conf, [])) == conf