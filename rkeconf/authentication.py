"""Authentication settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthnConfig:
    """Cluster authentication: strategy and extra subject alternative names."""

    strategy: str = ""
    sans: list[str] = field(default_factory=list)


def flatten_authentication(config: AuthnConfig) -> list[dict[str, Any]]:
    """Turn an authentication config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.sans:
        obj["sans"] = list(config.sans)
    if config.strategy:
        obj["strategy"] = config.strategy
    return [obj]


def expand_authentication(items: list[Any] | None) -> AuthnConfig:
    """Build an authentication config from its schema list."""
    config = AuthnConfig()
    if not items or items[0] is None:
        return config
    data = items[0]

    sans = data.get("sans")
    if isinstance(sans, list) and sans:
        config.sans = [str(item) for item in sans]

    strategy = data.get("strategy")
    if isinstance(strategy, str) and strategy:
        config.strategy = strategy

    return config