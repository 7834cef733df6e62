"""
PEM fixture loading for TLS test secrets.

Reads PEM-encoded certificate and key files byte-for-byte. No PEM parsing is
performed; content is stored exactly as found on disk.

Paths are built as base_path + file_name (plain concatenation), so callers
pass base paths with a trailing separator.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

logger = logging.getLogger(__name__)


class PemFileError(Exception):
    """Base exception for PEM fixture loading errors."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class PemFileOpenError(PemFileError):
    """Raised when a PEM file cannot be opened."""
    pass


class PemFileReadError(PemFileError):
    """Raised when a PEM file was opened but reading it failed."""
    pass


@dataclass
class PemLoadResult:
    """
    Outcome of loading a set of PEM files.

    Either every requested file is present in `files` (in request order) and
    `error` is None, or `error` describes the first failure and `files` is empty.
    """

    files: Dict[str, bytes] = field(default_factory=dict)
    error: Optional[PemFileError] = None

    @property
    def success(self) -> bool:
        return self.error is None


def read_pem_file(path: str) -> bytes:
    """
    Read one PEM file into memory.

    Args:
        path: Full file path

    Returns:
        Raw file content

    Raises:
        PemFileOpenError: If the file cannot be opened
        PemFileReadError: If reading fails after a successful open
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise PemFileOpenError(f"PEM file open error: {e}", path=path) from e

    with handle:
        try:
            return handle.read()
        except OSError as e:
            raise PemFileReadError(f"PEM file read error: {e}", path=path) from e


def load_pem_files(pem_file_base_path: str, tls_files: Sequence[str]) -> PemLoadResult:
    """
    Load PEM files without logging, reporting failures in the result.

    Stops at the first file that fails; nothing loaded before the failure
    is returned.

    Args:
        pem_file_base_path: Prefix joined to each file name
        tls_files: File names, also used as keys of the result mapping

    Returns:
        PemLoadResult with either all file contents or the first error
    """
    loaded: Dict[str, bytes] = {}
    for tls_file in tls_files:
        try:
            loaded[tls_file] = read_pem_file(pem_file_base_path + tls_file)
        except PemFileError as e:
            return PemLoadResult(error=e)

    logger.debug("Loaded %d PEM file(s) from %s", len(loaded), pem_file_base_path)
    return PemLoadResult(files=loaded)
