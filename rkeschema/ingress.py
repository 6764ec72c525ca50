"""Ingress controller settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IngressConfig:
    """Ingress provider, ports and options."""

    provider: str = ""
    options: dict[str, str] = field(default_factory=dict)
    node_selector: dict[str, str] = field(default_factory=dict)
    extra_args: dict[str, str] = field(default_factory=dict)
    dns_policy: str = ""
    network_mode: str = ""
    http_port: int = 0
    https_port: int = 0
    default_backend: bool | None = None


_MAPS = ("extra_args", "node_selector", "options")
_TEXT = ("dns_policy", "network_mode", "provider")
_PORTS = ("http_port", "https_port")


def flatten_ingress(config: IngressConfig) -> list[dict[str, Any]]:
    """Turn an ingress config into its one-element schema list."""
    obj: dict[str, Any] = {}
    for name in _TEXT:
        if value := getattr(config, name):
            obj[name] = value
    for name in _MAPS:
        if value := getattr(config, name):
            obj[name] = dict(value)
    for name in _PORTS:
        if (value := getattr(config, name)) > 0:
            obj[name] = value
    if config.default_backend is not None:
        obj["default_backend"] = config.default_backend
    return [obj]


def expand_ingress(items: list[Any] | None) -> IngressConfig:
    """Build an ingress config from its schema list."""
    config = IngressConfig()
    if not items or items[0] is None:
        return config
    entry = items[0]

    for name in _TEXT:
        if isinstance(value := entry.get(name), str) and value:
            setattr(config, name, value)
    for name in _MAPS:
        if isinstance(value := entry.get(name), dict) and value:
            setattr(config, name, dict(value))
    for name in _PORTS:
        value = entry.get(name)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            setattr(config, name, value)
    if isinstance(backend := entry.get("default_backend"), bool):
        config.default_backend = backend
    return config