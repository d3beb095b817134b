"""DNS settings of an RKE cluster and their schema form."""

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
    """Cluster DNS provider settings."""

    provider: str = ""
    upstream_nameservers: list[str] = field(default_factory=list)
    reverse_cidrs: list[str] = field(default_factory=list)
    node_selector: dict[str, str] = field(default_factory=dict)
    nodelocal: Nodelocal | None = None


def _string_map(data: dict[str, Any]) -> dict[str, str]:
    return {key: str(value) for key, value in data.items()}


def flatten_dns_nodelocal(nodelocal: Nodelocal | None) -> list[dict[str, Any]] | None:
    """Turn node-local DNS settings into their schema list, or None if absent."""
    if nodelocal is None:
        return None
    obj: dict[str, Any] = {}
    if nodelocal.ip_address:
        obj["ip_address"] = nodelocal.ip_address
    if nodelocal.node_selector:
        obj["node_selector"] = dict(nodelocal.node_selector)
    return [obj]


def flatten_dns(config: DNSConfig | None) -> list[dict[str, Any]]:
    """Turn a DNS config into its schema list; an absent config gives []."""
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
    """Build node-local DNS settings from their schema list, or None if empty."""
    if not items or items[0] is None:
        return None
    data = items[0]
    nodelocal = Nodelocal()

    ip_address = data.get("ip_address")
    if isinstance(ip_address, str) and ip_address:
        nodelocal.ip_address = ip_address

    selector = data.get("node_selector")
    if isinstance(selector, dict) and selector:
        nodelocal.node_selector = _string_map(selector)

    return nodelocal


def expand_dns(items: list[Any] | None) -> DNSConfig:
    """Build a DNS config from its schema list."""
    config = DNSConfig()
    if not items or items[0] is None:
        return config
    data = items[0]

    nodelocal = data.get("nodelocal")
    if isinstance(nodelocal, list) and nodelocal:
        config.nodelocal = expand_dns_nodelocal(nodelocal)

    selector = data.get("node_selector")
    if isinstance(selector, dict) and selector:
        config.node_selector = _string_map(selector)

    provider = data.get("provider")
    if isinstance(provider, str) and provider:
        config.provider = provider

    for name in ("reverse_cidrs", "upstream_nameservers"):
        value = data.get(name)
        if isinstance(value, list) and value:
            setattr(config, name, [str(item) for item in value])

    return config