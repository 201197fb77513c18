"""Generate run identifiers and stable checksums for postbayes runs.

What:
  Provide helpers for creating unique run IDs and SHA-256 checksums that tie a
  log line to the exact training file it describes.

Why:
  Two runs over files with the same name but different contents print
  different reports; the checksum in the log makes that visible.

How:
  Combine ISO8601 timestamps with random suffixes for IDs and wrap ``hashlib``
  with a ``sha256:`` prefix for checksums.

Interfaces:
  :func:`new_run_id`, :func:`checksum`, :func:`file_checksum`.
"""
from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timezone
from pathlib import Path
from typing import Union


def new_run_id() -> str:
    """Return a sortable unique identifier such as ``2024-01-01T00:00:00+00:00#1a2b3c``."""

    timestamp = datetime.now(timezone.utc).isoformat()
    suffix = secrets.token_hex(3)
    return f"{timestamp}#{suffix}"


def checksum(data: bytes) -> str:
    """Compute a namespaced SHA-256 digest for ``data``."""

    return _namespaced(hashlib.sha256(data))


def file_checksum(path: Union[str, Path], *, chunk_size: int = 65536) -> str:
    """Compute the same digest as :func:`checksum` over a file, streamed in chunks.

    Raises:
      OSError: If the file cannot be read.
    """

    digest = hashlib.sha256()
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            digest.update(chunk)
    return _namespaced(digest)


def _namespaced(digest) -> str:
    return f"sha256:{digest.hexdigest()}"
