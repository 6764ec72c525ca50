"""Cloud provider selection of an RKE cluster and its schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rkeschema.cloud_provider_aws import (
    AWSCloudProvider,
    expand_aws_cloud_provider,
    flatten_aws_cloud_provider,
)
from rkeschema.cloud_provider_azure import (
    AzureCloudProvider,
    expand_azure_cloud_provider,
    flatten_azure_cloud_provider,
)
from rkeschema.cloud_provider_openstack import (
    OpenstackCloudProvider,
    expand_openstack_cloud_provider,
    flatten_openstack_cloud_provider,
)
from rkeschema.cloud_provider_vsphere import (
    VsphereCloudProvider,
    expand_vsphere_cloud_provider,
    flatten_vsphere_cloud_provider,
)


@dataclass
class CloudProvider:
    """Named cloud provider with the settings of whichever kind is in use."""

    name: str = ""
    aws_cloud_provider: AWSCloudProvider | None = None
    azure_cloud_provider: AzureCloudProvider | None = None
    openstack_cloud_provider: OpenstackCloudProvider | None = None
    vsphere_cloud_provider: VsphereCloudProvider | None = None
    custom_cloud_provider: str = ""


def _nested_state(obj: dict[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def flatten_cloud_provider(
    provider: CloudProvider, state: list[Any] | None
) -> list[dict[str, Any]] | None:
    """Turn a cloud provider into its schema list; None when it has no name.

    Keys already present in ``state`` are kept unless overwritten.
    """
    if not provider.name:
        return None

    obj: dict[str, Any] = dict(state[0]) if state and state[0] is not None else {}
    obj["name"] = provider.name

    if provider.aws_cloud_provider is not None:
        obj["aws_cloud_provider"] = flatten_aws_cloud_provider(provider.aws_cloud_provider)
    if provider.azure_cloud_provider is not None:
        obj["azure_cloud_provider"] = flatten_azure_cloud_provider(
            provider.azure_cloud_provider, _nested_state(obj, "azure_cloud_provider")
        )
    if provider.custom_cloud_provider:
        obj["custom_cloud_provider"] = provider.custom_cloud_provider
    if provider.openstack_cloud_provider is not None:
        obj["openstack_cloud_provider"] = flatten_openstack_cloud_provider(
            provider.openstack_cloud_provider, _nested_state(obj, "openstack_cloud_provider")
        )
    if provider.vsphere_cloud_provider is not None:
        obj["vsphere_cloud_provider"] = flatten_vsphere_cloud_provider(
            provider.vsphere_cloud_provider, _nested_state(obj, "vsphere_cloud_provider")
        )
    return [obj]


def expand_cloud_provider(items: list[Any] | None) -> CloudProvider:
    """Build a cloud provider from its schema list."""
    provider = CloudProvider()
    if not items or items[0] is None:
        return provider
    entry = items[0]

    if isinstance(value := entry.get("aws_cloud_provider"), list) and value:
        provider.aws_cloud_provider = expand_aws_cloud_provider(value)
    if isinstance(value := entry.get("azure_cloud_provider"), list) and value:
        provider.azure_cloud_provider = expand_azure_cloud_provider(value)
    if isinstance(value := entry.get("custom_cloud_provider"), str) and value:
        provider.custom_cloud_provider = value
    if isinstance(value := entry.get("name"), str) and value:
        provider.name = value
    if isinstance(value := entry.get("openstack_cloud_provider"), list) and value:
        provider.openstack_cloud_provider = expand_openstack_cloud_provider(value)
    if isinstance(value := entry.get("vsphere_cloud_provider"), list) and value:
        provider.vsphere_cloud_provider = expand_vsphere_cloud_provider(value)
    return provider