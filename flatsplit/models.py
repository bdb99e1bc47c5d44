"""Data models for the flat file splitter."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Compression(str, Enum):
    """Container format of a flat file and its partitions."""

    NONE = "none"
    GZIP = "gzip"


@dataclass(frozen=True)
class Record:
    """One line of a sorted flat file, reduced to what splitting needs."""

    path: str
    category: str = ""

    @property
    def segments(self) -> list[str]:
        """Path segments, without the empty root segment."""
        return [part for part in self.path.split("/") if part]

    @property
    def depth(self) -> int:
        """Number of path segments (the root record has depth 0)."""
        return len(self.segments)


@dataclass
class Partition:
    """One output file produced by a split pass."""

    index: int
    path: Path
    bytes_written: int = 0
    record_count: int = 0
