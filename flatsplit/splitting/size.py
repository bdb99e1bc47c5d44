"""Uncompressed size estimation for flat files."""

from __future__ import annotations

import struct
from pathlib import Path

from flatsplit.errors import SizeEstimationError
from flatsplit.models import Compression

GZIP_MAGIC = b"\x1f\x8b"

# 10-byte header + 8-byte trailer (CRC32, ISIZE)
GZIP_MIN_LENGTH = 18


def gzip_uncompressed_size(path: Path) -> int:
    """Read the uncompressed size from the ISIZE trailer of a gzip file.

    ISIZE is the input size modulo 2^32, so the result is exact only for
    payloads under 4 GiB. For multi-member files it covers the last member.

    Raises:
        SizeEstimationError: If the file is too short or not gzip
    """
    with open(path, "rb") as f:
        header = f.read(2)
        f.seek(0, 2)
        length = f.tell()
        if length < GZIP_MIN_LENGTH:
            raise SizeEstimationError(
                str(path), f"{length} bytes is shorter than a gzip member"
            )
        if header != GZIP_MAGIC:
            raise SizeEstimationError(str(path), "missing gzip magic bytes")
        f.seek(length - 4)
        trailer = f.read(4)

    (size,) = struct.unpack("<I", trailer)
    return size


class SizeEstimator:
    """Computes the uncompressed byte size of a flat file."""

    def __init__(self, compression: Compression) -> None:
        self._compression = compression

    def estimate(self, path: Path) -> int:
        """Return the uncompressed size of `path` in bytes."""
        if self._compression is Compression.GZIP:
            return gzip_uncompressed_size(path)
        return path.stat().st_size
