"""Cluster certificate bundles and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple

CA_CERT_NAME = "kube-ca"
KUBE_ADMIN_CERT_NAME = "kube-admin"


@dataclass
class CertificatePKI:
    """One certificate of the cluster PKI with its key and locations."""

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


class FlattenedCertificates(NamedTuple):
    """CA and admin credentials pulled out, plus every certificate as a map."""

    ca_crt: str
    client_cert: str
    client_key: str
    certificates: list[dict[str, Any]]


def flatten_certificates(
    certificates: Mapping[str, CertificatePKI] | None,
) -> FlattenedCertificates:
    """Flatten certificates sorted by id, extracting the CA and admin PEMs."""
    ca_crt = client_cert = client_key = ""
    out: list[dict[str, Any]] = []
    for cert_id in sorted(certificates or {}):
        cert = certificates[cert_id]
        if cert_id == CA_CERT_NAME:
            ca_crt = cert.certificate_pem
        if cert_id == KUBE_ADMIN_CERT_NAME:
            client_cert = cert.certificate_pem
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
    return FlattenedCertificates(ca_crt, client_cert, client_key, out)