"""Azure cloud provider settings and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AzureCloudProvider:
    """Azure cloud provider configuration."""

    cloud: str = ""
    tenant_id: str = ""
    subscription_id: str = ""
    resource_group: str = ""
    location: str = ""
    vnet_name: str = ""
    vnet_resource_group: str = ""
    subnet_name: str = ""
    security_group_name: str = ""
    route_table_name: str = ""
    primary_availability_set_name: str = ""
    vm_type: str = ""
    primary_scale_set_name: str = ""
    aad_client_id: str = ""
    aad_client_secret: str = ""
    aad_client_cert_path: str = ""
    aad_client_cert_password: str = ""
    cloud_provider_backoff: bool = False
    cloud_provider_backoff_retries: int = 0
    cloud_provider_backoff_exponent: int = 0
    cloud_provider_backoff_duration: int = 0
    cloud_provider_backoff_jitter: int = 0
    cloud_provider_rate_limit: bool = False
    cloud_provider_rate_limit_qps: int = 0
    cloud_provider_rate_limit_bucket: int = 0
    use_instance_metadata: bool = False
    use_managed_identity_extension: bool = False
    maximum_load_balancer_rule_count: int = 0


_TEXT = (
    "aad_client_id",
    "aad_client_secret",
    "subscription_id",
    "tenant_id",
    "aad_client_cert_password",
    "aad_client_cert_path",
    "cloud",
    "location",
    "primary_availability_set_name",
    "primary_scale_set_name",
    "resource_group",
    "route_table_name",
    "security_group_name",
    "subnet_name",
    "vm_type",
    "vnet_name",
    "vnet_resource_group",
)
_INTS = (
    "cloud_provider_backoff_duration",
    "cloud_provider_backoff_exponent",
    "cloud_provider_backoff_jitter",
    "cloud_provider_backoff_retries",
    "cloud_provider_rate_limit_bucket",
    "cloud_provider_rate_limit_qps",
    "maximum_load_balancer_rule_count",
)
_BOOLS = (
    "cloud_provider_backoff",
    "cloud_provider_rate_limit",
    "use_instance_metadata",
    "use_managed_identity_extension",
)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def flatten_azure_cloud_provider(
    provider: AzureCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn an Azure provider into its schema list, keeping keys from ``state``.

    A None provider gives an empty list.
    """
    obj: dict[str, Any] = dict(state[0]) if state and state[0] is not None else {}
    if provider is None:
        return []

    for name in _TEXT:
        if value := getattr(provider, name):
            obj[name] = value
    for name in _BOOLS:
        obj[name] = getattr(provider, name)
    for name in _INTS:
        if (value := getattr(provider, name)) > 0:
            obj[name] = value
    return [obj]


def expand_azure_cloud_provider(items: list[Any] | None) -> AzureCloudProvider:
    """Build an Azure cloud provider from its schema list."""
    provider = AzureCloudProvider()
    if not items or items[0] is None:
        return provider
    entry = items[0]

    for name in _TEXT:
        if isinstance(value := entry.get(name), str) and value:
            setattr(provider, name, value)
    for name in _BOOLS:
        if isinstance(value := entry.get(name), bool):
            setattr(provider, name, value)
    for name in _INTS:
        if _is_positive_int(value := entry.get(name)):
            setattr(provider, name, value)
    return provider