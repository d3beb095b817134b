"""Cluster certificates and their flattened schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

CA_CERT_NAME = "kube-ca"
KUBE_ADMIN_CERT_NAME = "kube-admin"


@dataclass
class CertificatePKI:
    """One certificate of the cluster with its key and file locations."""

    certificate_pem: str = ""
    key_pem: str = ""
    config: str = ""
    name: str = ""
    common_name: str = ""
    ou_name: str = ""
    env_name: str = ""
    path: str = ""
    key_env_name: str = ""
    key_path: str = ""
    config_env_name: str = ""
    config_path: str = ""


def flatten_certificates(
    certs: Mapping[str, CertificatePKI] | None,
) -> tuple[str, str, str, list[dict[str, Any]]]:
    """Return the CA certificate, admin certificate, admin key and all certificates.

    Certificates are listed in order of their identifiers.
    """
    ca_crt = client_crt = client_key = ""
    if not certs:
        return ca_crt, client_crt, client_key, []

    out: list[dict[str, Any]] = []
    for cert_id in sorted(certs):
        cert = certs[cert_id]
        if cert_id == CA_CERT_NAME:
            ca_crt = cert.certificate_pem
        if cert_id == KUBE_ADMIN_CERT_NAME:
            client_crt = cert.certificate_pem
            client_key = cert.key_pem
        out.append(
            {
                "id": cert_id,
                "certificate": cert.certificate_pem,
                "key": cert.key_pem,
                "config": cert.config,
                "name": cert.name,
                "common_name": cert.common_name,
                "ou_name": cert.ou_name,
                "env_name": cert.env_name,
                "path": cert.path,
                "key_env_name": cert.key_env_name,
                "key_path": cert.key_path,
                "config_env_name": cert.config_env_name,
                "config_path": cert.config_path,
            }
        )
    return ca_crt, client_crt, client_key, out