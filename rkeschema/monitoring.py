"""Monitoring settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MonitoringConfig:
    """Metrics provider and its options."""

    provider: str = ""
    options: dict[str, str] = field(default_factory=dict)


def flatten_monitoring(config: MonitoringConfig) -> list[dict[str, Any]]:
    """Turn a monitoring config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.options:
        obj["options"] = dict(config.options)
    if config.provider:
        obj["provider"] = config.provider
    return [obj]


def expand_monitoring(items: list[Any] | None) -> MonitoringConfig:
    """Build a monitoring config from its schema list."""
    config = MonitoringConfig()
    if not items or items[0] is None:
        return config
    entry = items[0]

    if isinstance(options := entry.get("options"), dict) and options:
        config.options = dict(options)
    if isinstance(provider := entry.get("provider"), str) and provider:
        config.provider = provider
    return config