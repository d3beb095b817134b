# rkeconf

`rkeconf` converts sections of an RKE cluster configuration between
dataclasses and the nested "list holding one dict" state shape used by
declarative infrastructure tools.

Each section has one or more dataclasses and a pair of functions:

- `flatten_*` turns a dataclass into a list of plain dicts. Strings,
  numbers and collections are left out when they are empty or zero;
  booleans are always written.
- `expand_*` turns such a list back into the dataclass. A missing or
  empty list, a first entry of `None`, and values that are missing,
  empty, zero or of the wrong type leave the dataclass defaults in place.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sections

| Module | Classes | Functions |
| --- | --- | --- |
| `rkeconf.authentication` | `AuthnConfig` | `flatten_authentication`, `expand_authentication` |
| `rkeconf.authorization` | `AuthzConfig` | `flatten_authorization`, `expand_authorization` |
| `rkeconf.bastion_host` | `BastionHost` | `flatten_bastion_host`, `expand_bastion_host` |
| `rkeconf.certificates` | `CertificatePKI` | `flatten_certificates` |
| `rkeconf.dns` | `Nodelocal`, `DNSConfig` | `flatten_dns_nodelocal`, `flatten_dns`, `expand_dns_nodelocal`, `expand_dns` |
| `rkeconf.ingress` | `IngressConfig` | `flatten_ingress`, `expand_ingress` |
| `rkeconf.monitoring` | `MonitoringConfig` | `flatten_monitoring`, `expand_monitoring` |
| `rkeconf.cloud_provider_aws` | `GlobalAwsOpts`, `ServiceOverride`, `AWSCloudProvider` | `flatten_aws_global`, `flatten_aws_service_override`, `flatten_aws_cloud_provider`, `expand_aws_global`, `expand_aws_service_override`, `expand_aws_cloud_provider` |
| `rkeconf.cloud_provider_azure` | `AzureCloudProvider` | `flatten_azure_cloud_provider`, `expand_azure_cloud_provider` |
| `rkeconf.cloud_provider_openstack` | `BlockStorageOpenstackOpts`, `GlobalOpenstackOpts`, `LoadBalancerOpenstackOpts`, `MetadataOpenstackOpts`, `RouteOpenstackOpts`, `OpenstackCloudProvider` | `flatten_openstack_*`, `expand_openstack_*` for `block_storage`, `global`, `load_balancer`, `metadata`, `route` and `cloud_provider` |
| `rkeconf.cloud_provider_vsphere` | `DiskVsphereOpts`, `GlobalVsphereOpts`, `NetworkVsphereOpts`, `VirtualCenterConfig`, `WorkspaceVsphereOpts`, `VsphereCloudProvider` | `flatten_vsphere_*`, `expand_vsphere_*` for `disk`, `global`, `network`, `virtual_center`, `workspace` and `cloud_provider` |
| `rkeconf.cloud_provider` | `CloudProvider` | `flatten_cloud_provider`, `expand_cloud_provider` |

## Example

```python
from rkeconf.authorization import AuthzConfig, expand_authorization, flatten_authorization

state = flatten_authorization(AuthzConfig(mode="rbac", options={"option1": "value1"}))
# [{"mode": "rbac", "options": {"option1": "value1"}}]

config = expand_authorization(state)
assert config == AuthzConfig(mode="rbac", options={"option1": "value1"})
```

## Details worth knowing

**Keeping existing state.** `flatten_cloud_provider`,
`flatten_azure_cloud_provider`, `flatten_openstack_cloud_provider`,
`flatten_openstack_global`, `flatten_vsphere_cloud_provider`,
`flatten_vsphere_global` and `flatten_vsphere_virtual_center` take a second
argument, `current`: the state already held. Its first entry (for
`flatten_vsphere_virtual_center`, each entry by position) is updated in
place and returned, so keys the configuration does not set keep their
present values. Pass `None` or `[]` to start from empty dicts.

**Empty results.**

- `flatten_bastion_host` returns `None` unless both `address` and `user`
  are set.
- `flatten_cloud_provider` returns `None` when the provider has no `name`.
- `flatten_dns_nodelocal` returns `None` for `None`, and
  `expand_dns_nodelocal` returns `None` for an empty list.
- `flatten_dns`, `flatten_aws_cloud_provider`,
  `flatten_azure_cloud_provider`, `flatten_openstack_cloud_provider` and
  `flatten_vsphere_cloud_provider` return `[]` for `None`.

**Keyed sections.** AWS service overrides and vSphere virtual centers are
dicts keyed by name in the dataclasses and lists of dicts in the state.
`expand_aws_service_override` takes the key from each entry's `service`,
`expand_vsphere_virtual_center` from each entry's `name`; an entry without
it raises `KeyError`, and a key that is not a string raises `TypeError`.

**Renamed keys.** The `global` state key maps to the `global_opts`
attribute of the AWS, OpenStack and vSphere provider classes. In the
vSphere sections the state keys `datastore`, `port`, `soap_roundtrip_count`,
`server` and `resourcepool_path` map to `default_datastore`,
`vcenter_port`, `round_tripper_count`, `vcenter_ip` and
`resource_pool_path`.

**Certificates.** `flatten_certificates` takes a mapping of certificate id
to `CertificatePKI` and returns a tuple
`(ca_cert, client_cert, client_key, entries)`. The entries are sorted by
id and carry every field. `ca_cert` is the certificate with id `kube-ca`
(`CA_CERT_NAME`); `client_cert` and `client_key` come from `kube-admin`
(`KUBE_ADMIN_CERT_NAME`). Missing ones are empty strings.

## What this package does not do

It covers only the sections listed above. It does not read or write
cluster YAML files, has no sections for nodes, network, services, private
registries, system images or upgrade strategy, does not build a whole
cluster configuration, and does not contact or provision any cluster.
There is no command-line tool.