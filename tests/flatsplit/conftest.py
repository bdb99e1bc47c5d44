"""Shared test fixtures for flatsplit tests."""

import gzip
import json
import logging
from pathlib import Path

import pytest

from flatsplit.config import SplitConfig
from flatsplit.logging_config import LOGGER_NAME
from flatsplit.models import Compression

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _make_line(path: str, category: str | None = None) -> str:
    """Build a flat file line with an optional NAME-typed category."""
    attributes = {} if category is None else {"jcr:primaryType": f"nam:{category}"}
    return f"{path}|{json.dumps(attributes, separators=(',', ':'))}"


def _read_lines(path: Path, compression: Compression = Compression.NONE) -> list[str]:
    """Read the lines of a (possibly compressed) flat file."""
    opener = gzip.open if compression is Compression.GZIP else open
    with opener(path, "rt", encoding="utf-8") as f:
        return f.read().splitlines()


def _read_bytes(path: Path, compression: Compression = Compression.NONE) -> bytes:
    """Read the uncompressed content of a flat file."""
    if compression is Compression.GZIP:
        with gzip.open(path, "rb") as f:
            return f.read()
    return path.read_bytes()


def _start_category(path: Path, compression: Compression = Compression.NONE) -> str:
    """Return the category of the first record in a flat file."""
    first = _read_lines(path, compression)[0]
    value = json.loads(first.split("|", 1)[1]).get("jcr:primaryType", "")
    return value.removeprefix("nam:")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def flat_file(tmp_path: Path):
    """Factory fixture writing records to a flat file.

    Usage:
        def test_example(flat_file):
            path = flat_file([("/a", "nt:folder"), ("/a/b", None)])
    """

    def _create(
        records: list[tuple[str, str | None]],
        compression: Compression = Compression.NONE,
        name: str = "store.json",
    ) -> Path:
        content = "".join(f"{_make_line(p, c)}\n" for p, c in records).encode("utf-8")
        path = tmp_path / (name + (".gz" if compression is Compression.GZIP else ""))
        if compression is Compression.GZIP:
            with gzip.open(path, "wb") as f:
                f.write(content)
        else:
            path.write_bytes(content)
        return path

    return _create


@pytest.fixture
def split_config(tmp_path: Path):
    """Factory fixture for a SplitConfig that splits as eagerly as possible."""

    def _create(**overrides) -> SplitConfig:
        values = {
            "work_dir": tmp_path / "split",
            "partition_count": 2**31 - 1,
            "min_split_size": 0,
            "compression": Compression.NONE,
        }
        values.update(overrides)
        return SplitConfig(**values)

    return _create


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def read_lines():
    """Return a reader for the lines of a (possibly compressed) flat file."""
    return _read_lines


@pytest.fixture
def read_bytes():
    """Return a reader for the uncompressed content of a flat file."""
    return _read_bytes


@pytest.fixture
def start_category():
    """Return a reader for the category of a flat file's first record."""
    return _start_category
