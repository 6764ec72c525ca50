# rkeschema

Typed objects for the sections of an RKE cluster configuration, and functions that
move them to and from the flat schema form used in declarative state. In that form a
section is a list that holds a single dict, and nested blocks are stored the same way.

Each section has two functions:

- a `flatten_*` function takes a typed object and returns the schema form;
- an `expand_*` function takes the schema form and returns the typed object.

When flattening, empty strings, zero or negative numbers and empty collections are
left out. Boolean fields are always written. When expanding, values of the wrong type,
empty strings, non-positive numbers and empty collections are ignored, and an empty
list, or one whose first element is `None`, gives the default object.

## Install

```
pip install rkeschema
```

## Example

```python
from rkeschema.authentication import AuthnConfig, expand_authentication, flatten_authentication

config = AuthnConfig(sans=["sans1", "sans2"], strategy="strategy")
data = flatten_authentication(config)
# [{"sans": ["sans1", "sans2"], "strategy": "strategy"}]
assert expand_authentication(data) == config
```

Some flatteners take the state that is already recorded as a second argument. Keys
that the typed object does not fill keep their recorded values:

```python
from rkeschema.cloud_provider import expand_cloud_provider, flatten_cloud_provider

state = [{"name": "test", "custom_cloud_provider": "custom"}]
provider = expand_cloud_provider(state)
assert flatten_cloud_provider(provider, state) == state
```

## Modules

| Module | Contents |
| --- | --- |
| `rkeschema.authentication` | `AuthnConfig`, `flatten_authentication`, `expand_authentication` |
| `rkeschema.authorization` | `AuthzConfig`, `flatten_authorization`, `expand_authorization` |
| `rkeschema.bastion_host` | `BastionHost`, `flatten_bastion_host`, `expand_bastion_host` |
| `rkeschema.certificates` | `CertificatePKI`, `FlattenedCertificates`, `flatten_certificates` |
| `rkeschema.dns` | `DNSConfig`, `Nodelocal`, `flatten_dns`, `expand_dns`, `flatten_dns_nodelocal`, `expand_dns_nodelocal` |
| `rkeschema.ingress` | `IngressConfig`, `flatten_ingress`, `expand_ingress` |
| `rkeschema.monitoring` | `MonitoringConfig`, `flatten_monitoring`, `expand_monitoring` |
| `rkeschema.cloud_provider` | `CloudProvider`, `flatten_cloud_provider`, `expand_cloud_provider` |
| `rkeschema.cloud_provider_aws` | `AWSCloudProvider`, `GlobalAwsOpts`, `ServiceOverride` and their functions |
| `rkeschema.cloud_provider_azure` | `AzureCloudProvider`, `flatten_azure_cloud_provider`, `expand_azure_cloud_provider` |
| `rkeschema.cloud_provider_openstack` | `OpenstackCloudProvider` and its option blocks with their functions |
| `rkeschema.cloud_provider_vsphere` | `VsphereCloudProvider` and its option blocks with their functions |
| `rkeschema.cluster` | `ExternalFlags`, `expand_cluster_flags`, `flatten_cluster_flags`, `k8s_version_requires_cri` |

Notes on particular functions:

- `flatten_bastion_host` returns `None` when the host has no address or no user.
- `flatten_cloud_provider` returns `None` when the provider has no name.
- `flatten_dns_nodelocal(None)` returns `None`; `flatten_dns(None)` returns `[]`.
- `flatten_certificates` sorts certificates by id and returns a `FlattenedCertificates`
  named tuple: the `kube-ca` certificate, the `kube-admin` certificate and key, and the
  list of certificate maps. Certificates have no expander.
- `expand_aws_service_override` and `expand_vsphere_virtual_center` raise `KeyError` or
  `TypeError` when an entry has no string `service` or `name` key.
- `expand_cluster_flags(data, cluster_file_path)` reads `update_only`,
  `disable_port_check`, `dind`, `cert_dir` and `custom_certs` from a mapping. With
  `dind` set, `update_only` is forced off and the certificate settings are ignored.
  `flatten_cluster_flags` returns those values as a dict.
- `k8s_version_requires_cri("v1.24.13-rancher2-2")` returns `True`: Kubernetes 1.24 and
  later need cri-dockerd. A version string that cannot be parsed returns `False`.

## What it does not do

The package converts individual configuration sections and run flags. It does not
assemble a whole cluster configuration, produce cluster YAML, cover the nodes,
network, services, registries, restore, certificate rotation, system images or
upgrade strategy sections, and it does not connect to hosts or provision a cluster.

## Tests

```
pip install -e ".[test]"
pytest
```