"""Authorization settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthzConfig:
    """Cluster authorization: mode and mode options."""

    mode: str = ""
    options: dict[str, str] = field(default_factory=dict)


def flatten_authorization(config: AuthzConfig) -> list[dict[str, Any]]:
    """Turn an authorization config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.mode:
        obj["mode"] = config.mode
    if config.options:
        obj["options"] = dict(config.options)
    return [obj]


def expand_authorization(items: list[Any] | None) -> AuthzConfig:
    """Build an authorization config from its schema list."""
    config = AuthzConfig()
    if not items or items[0] is None:
        return config
    data = items[0]

    mode = data.get("mode")
    if isinstance(mode, str) and mode:
        config.mode = mode

    options = data.get("options")
    if isinstance(options, dict) and options:
        config.options = {key: str(value) for key, value in options.items()}

    return config