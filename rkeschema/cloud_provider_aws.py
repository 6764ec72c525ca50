"""AWS cloud provider settings and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass
class GlobalAwsOpts:
    """Global section of the AWS cloud provider configuration."""

    zone: str = ""
    vpc: str = ""
    subnet_id: str = ""
    route_table_id: str = ""
    role_arn: str = ""
    kubernetes_cluster_tag: str = ""
    kubernetes_cluster_id: str = ""
    disable_security_group_ingress: bool = False
    elb_security_group: str = ""
    disable_strict_zone_check: bool = False


@dataclass
class ServiceOverride:
    """Endpoint override for a single AWS service."""

    service: str = ""
    region: str = ""
    url: str = ""
    signing_region: str = ""
    signing_method: str = ""
    signing_name: str = ""


@dataclass
class AWSCloudProvider:
    """AWS cloud provider configuration."""

    global_opts: GlobalAwsOpts = field(default_factory=GlobalAwsOpts)
    service_override: dict[str, ServiceOverride] = field(default_factory=dict)


_GLOBAL_BOOLS = ("disable_security_group_ingress", "disable_strict_zone_check")
_GLOBAL_TEXT = (
    "elb_security_group",
    "kubernetes_cluster_id",
    "kubernetes_cluster_tag",
    "role_arn",
    "route_table_id",
    "subnet_id",
    "vpc",
    "zone",
)
_OVERRIDE_TEXT = (
    "region",
    "service",
    "signing_method",
    "signing_name",
    "signing_region",
    "url",
)


def flatten_aws_global(opts: GlobalAwsOpts) -> list[dict[str, Any]]:
    """Turn the AWS global options into their schema list."""
    obj: dict[str, Any] = {name: getattr(opts, name) for name in _GLOBAL_BOOLS}
    for name in _GLOBAL_TEXT:
        if value := getattr(opts, name):
            obj[name] = value
    return [obj]


def flatten_aws_service_override(
    overrides: Mapping[str, ServiceOverride] | None,
) -> list[dict[str, Any]]:
    """Turn service overrides into a list of maps, one per service."""
    out: list[dict[str, Any]] = []
    for override in (overrides or {}).values():
        out.append(
            {name: value for name in _OVERRIDE_TEXT if (value := getattr(override, name))}
        )
    return out


def flatten_aws_cloud_provider(provider: AWSCloudProvider | None) -> list[dict[str, Any]]:
    """Turn an AWS cloud provider into its schema list; None gives []."""
    if provider is None:
        return []
    obj: dict[str, Any] = {"global": flatten_aws_global(provider.global_opts)}
    if provider.service_override:
        obj["service_override"] = flatten_aws_service_override(provider.service_override)
    return [obj]


def expand_aws_global(items: list[Any] | None) -> GlobalAwsOpts:
    """Build the AWS global options from their schema list."""
    opts = GlobalAwsOpts()
    if not items or items[0] is None:
        return opts
    entry = items[0]

    for name in _GLOBAL_BOOLS:
        if isinstance(value := entry.get(name), bool):
            setattr(opts, name, value)
    for name in _GLOBAL_TEXT:
        if isinstance(value := entry.get(name), str) and value:
            setattr(opts, name, value)
    return opts


def expand_aws_service_override(items: list[Any] | None) -> dict[str, ServiceOverride]:
    """Build service overrides keyed by service name.

    Raises KeyError or TypeError when an entry lacks a string "service".
    """
    if not items or items[0] is None:
        return {}

    result: dict[str, ServiceOverride] = {}
    for entry in items:
        key = entry["service"]
        if not isinstance(key, str):
            raise TypeError(f"service override name must be a string, got {key!r}")
        override = ServiceOverride()
        for name in _OVERRIDE_TEXT:
            if isinstance(value := entry.get(name), str) and value:
                setattr(override, name, value)
        result[key] = override
    return result


def expand_aws_cloud_provider(items: list[Any] | None) -> AWSCloudProvider:
    """Build an AWS cloud provider from its schema list."""
    provider = AWSCloudProvider()
    if not items or items[0] is None:
        return provider
    entry = items[0]

    if isinstance(global_items := entry.get("global"), list) and global_items:
        provider.global_opts = expand_aws_global(global_items)
    if isinstance(overrides := entry.get("service_override"), list) and overrides:
        provider.service_override = expand_aws_service_override(overrides)
    return provider