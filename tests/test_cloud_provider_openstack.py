import pytest

from rkeconf.cloud_provider_openstack import (
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

PASSWORD = "password"


def block_storage_conf():
    return BlockStorageOpenstackOpts(bs_version="test", ignore_volume_az=True, trust_device_path=True)


def block_storage_items():
    return [{"bs_version": "test", "ignore_volume_az": True, "trust_device_path": True}]


def global_conf():
    password = PASSWORD
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


def global_items():
    return [
        {
            "auth_url": "auth.terraform.test",
            "password": PASSWORD,
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


def load_balancer_items():
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


def metadata_items():
    return [{"request_timeout": 30, "search_order": "order"}]


def route_conf():
    return RouteOpenstackOpts(router_id="test")


def route_items():
    return [{"router_id": "test"}]


def provider_conf():
    return OpenstackCloudProvider(
        block_storage=block_storage_conf(),
        global_opts=global_conf(),
        load_balancer=load_balancer_conf(),
        metadata=metadata_conf(),
        route=route_conf(),
    )


def provider_items():
    return [
        {
            "block_storage": block_storage_items(),
            "global": global_items(),
            "load_balancer": load_balancer_items(),
            "metadata": metadata_items(),
            "route": route_items(),
        }
    ]


def test_flatten_block_storage():
    assert flatten_openstack_block_storage(block_storage_conf()) == block_storage_items()


def test_flatten_global():
    assert flatten_openstack_global(global_conf(), global_items()) == global_items()


def test_flatten_load_balancer():
    assert flatten_openstack_load_balancer(load_balancer_conf()) == load_balancer_items()


def test_flatten_metadata():
    assert flatten_openstack_metadata(metadata_conf()) == metadata_items()


def test_flatten_route():
    assert flatten_openstack_route(route_conf()) == route_items()


def test_flatten_cloud_provider():
    assert flatten_openstack_cloud_provider(provider_conf(), provider_items()) == provider_items()


def test_expand_block_storage():
    assert expand_openstack_block_storage(block_storage_items()) == block_storage_conf()


def test_expand_global():
    assert expand_openstack_global(global_items()) == global_conf()


def test_expand_load_balancer():
    assert expand_openstack_load_balancer(load_balancer_items()) == load_balancer_conf()


def test_expand_metadata():
    assert expand_openstack_metadata(metadata_items()) == metadata_conf()


def test_expand_route():
    assert expand_openstack_route(route_items()) == route_conf()


def test_expand_cloud_provider():
    assert expand_openstack_cloud_provider(provider_items()) == provider_conf()


def test_flatten_cloud_provider_without_current():
    assert flatten_openstack_cloud_provider(provider_conf(), None) == provider_items()


def test_flatten_cloud_provider_none_gives_empty_list():
    assert flatten_openstack_cloud_provider(None, provider_items()) == []


def test_flatten_global_updates_current_in_place():
    current = [{"extra": "kept"}]
    result = flatten_openstack_global(GlobalOpenstackOpts(region="r1"), current)
    assert result[0] is current[0]
    assert current[0] == {"extra": "kept", "region": "r1"}


def test_flatten_cloud_provider_keeps_global_entry():
    current = [{"global": [{"extra": "kept"}]}]
    result = flatten_openstack_cloud_provider(
        OpenstackCloudProvider(global_opts=GlobalOpenstackOpts(region="r1")), current
    )
    assert result[0]["global"] == [{"extra": "kept", "region": "r1"}]


def test_flatten_defaults_keep_only_bools():
    assert flatten_openstack_block_storage(BlockStorageOpenstackOpts()) == [
        {"ignore_volume_az": False, "trust_device_path": False}
    ]
    assert flatten_openstack_load_balancer(LoadBalancerOpenstackOpts()) == [
        {"create_monitor": False, "manage_security_groups": False, "use_octavia": False}
    ]
    assert flatten_openstack_metadata(MetadataOpenstackOpts()) == [{}]
    assert flatten_openstack_route(RouteOpenstackOpts()) == [{}]


@pytest.mark.parametrize("items", [None, [], [None]])
def test_expand_empty_input_gives_defaults(items):
    assert expand_openstack_cloud_provider(items) == OpenstackCloudProvider()
    assert expand_openstack_global(items) == GlobalOpenstackOpts()
    assert expand_openstack_load_balancer(items) == LoadBalancerOpenstackOpts()
    assert expand_openstack_metadata(items) == MetadataOpenstackOpts()
    assert expand_openstack_route(items) == RouteOpenstackOpts()
    assert expand_openstack_block_storage(items) == BlockStorageOpenstackOpts()


def test_expand_ignores_wrong_types_and_non_positive_values():
    lb = expand_openstack_load_balancer(
        [{"monitor_max_retries": 0, "use_octavia": "yes", "lb_method": 3}]
    )
    assert lb == LoadBalancerOpenstackOpts()
    meta = expand_openstack_metadata([{"request_timeout": True, "search_order": ""}])
    assert meta == MetadataOpenstackOpts()


def test_round_trip_cloud_provider():
    conf = provider_conf()
    assert expand_openstack_cloud_provider(flatten_openstack_cloud_provider(conf, None)) == conf