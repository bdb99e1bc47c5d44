"""
Flat file stream opener.

Provides `create_reader` and `create_writer`, which return binary file
objects for a flat file regardless of whether it is stored plain or
gzip-compressed. Lines are handled as raw bytes so that partitions
reproduce the input byte for byte.

Both return objects usable as context managers; the caller owns closing them.
"""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import IO

from flatsplit.models import Compression


def create_reader(path: Path, compression: Compression) -> IO[bytes]:
    """
    Open a flat file for reading.

    - compression == NONE: open() in 'rb'
    - compression == GZIP: gzip.open(..., 'rb')
    """
    if compression is Compression.GZIP:
        return gzip.open(path, "rb")
    return open(path, "rb")


def create_writer(path: Path, compression: Compression) -> IO[bytes]:
    """Open a partition file for writing, truncating any previous content."""
    if compression is Compression.GZIP:
        return gzip.open(path, "wb")
    return open(path, "wb")


def partition_path(work_dir: Path, index: int, source: Path) -> Path:
    """Return the file for the 1-based partition `index` of `source`."""
    return work_dir / f"split-{index}-{source.name}"
