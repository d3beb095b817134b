"""Ingress controller settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IngressConfig:
    """Ingress controller settings."""

    provider: str = ""
    options: dict[str, str] = field(default_factory=dict)
    node_selector: dict[str, str] = field(default_factory=dict)
    extra_args: dict[str, str] = field(default_factory=dict)
    dns_policy: str = ""
    network_mode: str = ""
    http_port: int = 0
    https_port: int = 0
    default_backend: bool | None = None


_STRINGS = ("dns_policy", "network_mode", "provider")
_MAPS = ("extra_args", "node_selector", "options")
_PORTS = ("http_port", "https_port")


def flatten_ingress(config: IngressConfig) -> list[dict[str, Any]]:
    """Turn an ingress config into its one-element schema list."""
    obj: dict[str, Any] = {}
    for name in _STRINGS:
        value = getattr(config, name)
        if value:
            obj[name] = value
    for name in _MAPS:
        value = getattr(config, name)
        if value:
            obj[name] = dict(value)
    for name in _PORTS:
        value = getattr(config, name)
        if value > 0:
            obj[name] = value
    if config.default_backend is not None:
        obj["default_backend"] = config.default_backend
    return [obj]


def expand_ingress(items: list[Any] | None) -> IngressConfig:
    """Build an ingress config from its schema list."""
    config = IngressConfig()
    if not items or items[0] is None:
        return config
    data = items[0]

    for name in _STRINGS:
        value = data.get(name)
        if isinstance(value, str) and value:
            setattr(config, name, value)

    for name in _MAPS:
        value = data.get(name)
        if isinstance(value, dict) and value:
            setattr(config, name, {key: str(item) for key, item in value.items()})

    for name in _PORTS:
        value = data.get(name)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            setattr(config, name, value)

    default_backend = data.get("default_backend")
    if isinstance(default_backend, bool):
        config.default_backend = default_backend

    return config