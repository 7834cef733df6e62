"""
Manifest Module - Kubernetes objects for end-to-end test applications

This module builds the objects a test scenario submits to the cluster:
- ManifestBuilder: Deployments, Services and TLS Secrets with names and
  labels derived from an instance name
- PEM loading: Reading TLS fixtures byte-for-byte with explicit results
- Serialization: Plain dicts and YAML for the external apply step

Nothing here talks to the cluster. Creating, waiting on and deleting the
objects is the caller's job.
"""

from .builder import ManifestBuilder, APP_CONTAINER_NAME
from .pem import (
    PemFileError,
    PemFileOpenError,
    PemFileReadError,
    PemLoadResult,
    read_pem_file,
    load_pem_files,
)
from .serialization import to_manifest_dict, dump_manifests
from .service_discovery import ServiceDiscoveryType

__all__ = [
    # Builder
    "ManifestBuilder",
    "APP_CONTAINER_NAME",
    "ServiceDiscoveryType",
    # PEM loading
    "PemFileError",
    "PemFileOpenError",
    "PemFileReadError",
    "PemLoadResult",
    "read_pem_file",
    "load_pem_files",
    # Serialization
    "to_manifest_dict",
    "dump_manifests",
]
