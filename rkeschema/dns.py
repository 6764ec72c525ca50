"""Cluster DNS settings and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Nodelocal:
    """Node-local DNS cache settings."""

    ip_address: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)


@dataclass
class DNSConfig:
    """DNS provider and its options."""

    provider: str = ""
    upstream_nameservers: list[str] = field(default_factory=list)
    reverse_cidrs: list[str] = field(default_factory=list)
    node_selector: dict[str, str] = field(default_factory=dict)
    nodelocal: Nodelocal | None = None


def flatten_dns_nodelocal(nodelocal: Nodelocal | None) -> list[dict[str, Any]] | None:
    """Turn node-local DNS settings into a schema list; None stays None."""
    if nodelocal is None:
        return None
    obj: dict[str, Any] = {}
    if nodelocal.ip_address:
        obj["ip_address"] = nodelocal.ip_address
    if nodelocal.node_selector:
        obj["node_selector"] = dict(nodelocal.node_selector)
    return [obj]


def flatten_dns(config: DNSConfig | None) -> list[dict[str, Any]]:
    """Turn a DNS config into its schema list; None gives an empty list."""
    if config is None:
        return []
    obj: dict[str, Any] = {}
    if config.nodelocal is not None:
        obj["nodelocal"] = flatten_dns_nodelocal(config.nodelocal)
    if config.node_selector:
        obj["node_selector"] = dict(config.node_selector)
    if config.provider:
        obj["provider"] = config.provider
    if config.reverse_cidrs:
        obj["reverse_cidrs"] = list(config.reverse_cidrs)
    if config.upstream_nameservers:
        obj["upstream_nameservers"] = list(config.upstream_nameservers)
    return [obj]


def expand_dns_nodelocal(items: list[Any] | None) -> Nodelocal | None:
    """Build node-local DNS settings; None when the list is empty."""
    if not items or items[0] is None:
        return None
    entry = items[0]
    nodelocal = Nodelocal()
    if isinstance(ip := entry.get("ip_address"), str) and ip:
        nodelocal.ip_address = ip
    if isinstance(selector := entry.get("node_selector"), dict) and selector:
        nodelocal.node_selector = dict(selector)
    return nodelocal


def expand_dns(items: list[Any] | None) -> DNSConfig:
    """Build a DNS config from its schema list."""
    config = DNSConfig()
    if not items or items[0] is None:
        return config
    entry = items[0]

    if isinstance(nodelocal := entry.get("nodelocal"), list) and nodelocal:
        config.nodelocal = expand_dns_nodelocal(nodelocal)
    if isinstance(selector := entry.get("node_selector"), dict) and selector:
        config.node_selector = dict(selector)
    if isinstance(provider := entry.get("provider"), str) and provider:
        config.provider = provider
    if isinstance(cidrs := entry.get("reverse_cidrs"), list) and cidrs:
        config.reverse_cidrs = [str(c) for c in cidrs]
    if isinstance(servers := entry.get("upstream_nameservers"), list) and servers:
        config.upstream_nameservers = [str(s) for s in servers]
    return config