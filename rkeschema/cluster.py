"""Cluster-wide run flags and Kubernetes version checks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)

_CRI_REQUIRED_FROM = (1, 24)


@dataclass
class ExternalFlags:
    """Flags that steer a cluster run but are not part of its configuration."""

    certificate_dir: str = ""
    cluster_file_path: str = ""
    dind: bool = False
    config_dir: str = ""
    custom_certs: bool = False
    disable_port_check: bool = False
    generate_csr: bool = False
    local: bool = False
    update_only: bool = False
    use_local_state: bool = False


def _parse_version(version: str) -> tuple[int, int, int]:
    """Parse a semantic version, with or without a leading "v"."""
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise ValueError(f"invalid semantic version: {version!r}")
    return int(match["major"]), int(match["minor"]), int(match["patch"])


def k8s_version_requires_cri(kubernetes_version: str) -> bool:
    """Tell whether the Kubernetes version needs cri-dockerd (1.24 and later).

    A version that cannot be parsed gives False.
    """
    try:
        major, minor, _ = _parse_version(kubernetes_version)
    except ValueError:
        logger.debug(
            "Unable to get the semantic version for kubernetesVersion, value: %s",
            kubernetes_version,
        )
        return False
    return (major, minor) >= _CRI_REQUIRED_FROM


def expand_cluster_flags(
    data: Mapping[str, Any] | None, cluster_file_path: str
) -> ExternalFlags:
    """Build the run flags from resource data.

    With ``dind`` set, update-only mode and custom certificate settings are
    ignored.
    """
    if data is None:
        return ExternalFlags()

    update_only = bool(data.get("update_only", False))
    disable_port_check = bool(data.get("disable_port_check", False))
    dind = bool(data.get("dind", False))
    if dind:
        update_only = False

    flags = ExternalFlags(
        local=False,
        update_only=update_only,
        disable_port_check=disable_port_check,
        use_local_state=False,
        config_dir="",
        cluster_file_path=cluster_file_path,
        dind=dind,
    )
    if not dind:
        if isinstance(cert_dir := data.get("cert_dir"), str) and cert_dir:
            flags.certificate_dir = cert_dir
        flags.custom_certs = bool(data.get("custom_certs", False))
    return flags


def flatten_cluster_flags(flags: ExternalFlags | None) -> dict[str, Any]:
    """Turn run flags into the resource values they set; None gives {}."""
    if flags is None:
        return {}
    out: dict[str, Any] = {
        "update_only": flags.update_only,
        "disable_port_check": flags.disable_port_check,
        "dind": flags.dind,
        "custom_certs": flags.custom_certs,
    }
    if flags.certificate_dir:
        out["cert_dir"] = flags.certificate_dir
    return out