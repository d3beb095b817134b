import copy

import pytest

from rkeconf.cloud_provider_vsphere import (
    DiskVsphereOpts,
    GlobalVsphereOpts,
    NetworkVsphereOpts,
    VirtualCenterConfig,
    VsphereCloudProvider,
    WorkspaceVsphereOpts,
    expand_vsphere_cloud_provider,
    expand_vsphere_disk,
    expand_vsphere_global,
    expand_vsphere_network,
    expand_vsphere_virtual_center,
    expand_vsphere_workspace,
    flatten_vsphere_cloud_provider,
    flatten_vsphere_disk,
    flatten_vsphere_global,
    flatten_vsphere_network,
    flatten_vsphere_virtual_center,
    flatten_vsphere_workspace,
)

password = "password"


def disk_conf():
    return DiskVsphereOpts(scsi_controller_type="test")


def disk_items():
    return [{"scsi_controller_type": "test"}]


def global_conf():
    return GlobalVsphereOpts(
        datacenters="auth.terraform.test",
        insecure_flag=True,
        password=password,
        vcenter_port="123",
        user="user",
        round_tripper_count=10,
    )


def global_items():
    return [
        {
            "datacenters": "auth.terraform.test",
            "insecure_flag": True,
            "password": "password",
            "port": "123",
            "user": "user",
            "soap_roundtrip_count": 10,
        }
    ]


def network_conf():
    return NetworkVsphereOpts(public_network="test")


def network_items():
    return [{"public_network": "test"}]


def center_conf():
    return {
        "test": VirtualCenterConfig(
            datacenters="auth.terraform.test",
            password=password,
            vcenter_port="123",
            user="user",
            round_tripper_count=10,
        )
    }


def center_items():
    return [
        {
            "name": "test",
            "datacenters": "auth.terraform.test",
            "password": "password",
            "port": "123",
            "user": "user",
            "soap_roundtrip_count": 10,
        }
    ]


def workspace_conf():
    return WorkspaceVsphereOpts(
        datacenter="test",
        folder="folder",
        vcenter_ip="vcenter",
        default_datastore="datastore",
        resource_pool_path="resourcepool",
    )


def workspace_items():
    return [
        {
            "datacenter": "test",
            "folder": "folder",
            "server": "vcenter",
            "default_datastore": "datastore",
            "resourcepool_path": "resourcepool",
        }
    ]


def provider_conf():
    return VsphereCloudProvider(
        disk=disk_conf(),
        global_opts=global_conf(),
        network=network_conf(),
        virtual_center=center_conf(),
        workspace=workspace_conf(),
    )


def provider_items():
    return [
        {
            "disk": disk_items(),
            "global": global_items(),
            "network": network_items(),
            "virtual_center": center_items(),
            "workspace": workspace_items(),
        }
    ]


def test_flatten_disk():
    assert flatten_vsphere_disk(disk_conf()) == disk_items()


def test_flatten_global():
    assert flatten_vsphere_global(global_conf(), global_items()) == global_items()


def test_flatten_global_without_current():
    assert flatten_vsphere_global(global_conf(), None) == global_items()


def test_flatten_global_keeps_unset_current_keys():
    current = [{"vm_name": "kept"}]
    result = flatten_vsphere_global(GlobalVsphereOpts(), current)
    assert result == [{"vm_name": "kept", "insecure_flag": False}]
    assert result[0] is current[0]


def test_flatten_network():
    assert flatten_vsphere_network(network_conf()) == network_items()


def test_flatten_virtual_center():
    assert flatten_vsphere_virtual_center(center_conf(), center_items()) == center_items()


def test_flatten_virtual_center_without_current():
    assert flatten_vsphere_virtual_center(center_conf(), []) == center_items()


def test_flatten_virtual_center_empty():
    assert flatten_vsphere_virtual_center({}, center_items()) == []


def test_flatten_workspace():
    assert flatten_vsphere_workspace(workspace_conf()) == workspace_items()


def test_flatten_provider():
    assert flatten_vsphere_cloud_provider(provider_conf(), provider_items()) == provider_items()


def test_flatten_provider_without_current():
    assert flatten_vsphere_cloud_provider(provider_conf(), None) == provider_items()


def test_flatten_provider_none():
    assert flatten_vsphere_cloud_provider(None, provider_items()) == []


def test_expand_disk():
    assert expand_vsphere_disk(disk_items()) == disk_conf()


def test_expand_global():
    assert expand_vsphere_global(global_items()) == global_conf()


def test_expand_network():
    assert expand_vsphere_network(network_items()) == network_conf()


def test_expand_virtual_center():
    assert expand_vsphere_virtual_center(center_items()) == center_conf()


def test_expand_virtual_center_missing_name():
    items = center_items()
    del items[0]["name"]
    with pytest.raises(KeyError):
        expand_vsphere_virtual_center(items)


def test_expand_virtual_center_empty():
    assert expand_vsphere_virtual_center([]) == {}


def test_expand_workspace():
    assert expand_vsphere_workspace(workspace_items()) == workspace_conf()


def test_expand_provider():
    assert expand_vsphere_cloud_provider(provider_items()) == provider_conf()


def test_expand_provider_empty():
    assert expand_vsphere_cloud_provider([None]) == VsphereCloudProvider()


def test_round_trip():
    items = copy.deepcopy(provider_items())
    assert flatten_vsphere_cloud_provider(expand_vsphere_cloud_provider(items), None) == items