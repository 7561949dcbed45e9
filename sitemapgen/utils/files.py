"""
Filesystem and compression helpers for writing sitemap files.
"""

import gzip
import logging
from pathlib import Path
from typing import Union

from ..exceptions import IOFailure

logger = logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create the directory (and parents) if it does not exist yet.

    Raises:
        IOFailure: if the directory cannot be created
    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure(f"Cannot create output directory {directory}: {e}") from e
    return directory


def gzip_bytes(data: bytes) -> bytes:
    """Gzip-compress data. mtime is pinned so identical input gives identical output."""
    return gzip.compress(data, mtime=0)


def write_bytes(path: Path, data: bytes) -> None:
    """
    Write data to path, replacing any existing file.

    Raises:
        IOFailure: if the file cannot be written
    """
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise IOFailure(f"Cannot write {path}: {e}") from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
