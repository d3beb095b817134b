"""Bastion host settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class BastionHost:
    """An SSH jump host used to reach the cluster nodes."""

    address: str = ""
    port: str = ""
    user: str = ""
    ignore_proxy_env_vars: bool = False
    ssh_agent_auth: bool = False
    ssh_cert: str = ""
    ssh_cert_path: str = ""
    ssh_key: str = ""
    ssh_key_path: str = ""


_OPTIONAL_STRINGS = ("port", "ssh_cert", "ssh_cert_path", "ssh_key", "ssh_key_path")


def flatten_bastion_host(host: BastionHost) -> list[dict[str, Any]] | None:
    """Turn a bastion host into its schema list, or None without address and user."""
    if not host.address or not host.user:
        return None

    obj: dict[str, Any] = {
        "address": host.address,
        "user": host.user,
        "ignore_proxy_env_vars": host.ignore_proxy_env_vars,
        "ssh_agent_auth": host.ssh_agent_auth,
    }
    for name in _OPTIONAL_STRINGS:
        value = getattr(host, name)
        if value:
            obj[name] = value
    return [obj]


def expand_bastion_host(items: list[Any] | None) -> BastionHost:
    """Build a bastion host from its schema list."""
    host = BastionHost()
    if not items or items[0] is None:
        return host
    data = items[0]

    for name in ("address", "user", *_OPTIONAL_STRINGS):
        value = data.get(name)
        if isinstance(value, str) and value:
            setattr(host, name, value)

    for name in ("ignore_proxy_env_vars", "ssh_agent_auth"):
        value = data.get(name)
        if isinstance(value, bool):
            setattr(host, name, value)

    return host