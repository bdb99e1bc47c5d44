"""Reader for `<path>|<json>` flat file lines."""

from __future__ import annotations

import json

from flatsplit.config import DEFAULT_CATEGORY_FIELD
from flatsplit.errors import RecordFormatError
from flatsplit.models import Record

# Separates the path from the serialized attributes
PATH_SEPARATOR = "|"

# Type prefix of NAME-typed values in the JSON serialization
NAME_PREFIX = "nam:"


def split_line(line: str) -> tuple[str, str]:
    """Split a line into its path and serialized attributes.

    Raises:
        RecordFormatError: If the line has no separator or an empty path
    """
    path, sep, payload = line.partition(PATH_SEPARATOR)
    if not sep:
        raise RecordFormatError(line, f"no '{PATH_SEPARATOR}' separator")
    if not path.startswith("/"):
        raise RecordFormatError(line, "path is not absolute")
    return path, payload


class JsonRecordReader:
    """Extracts path and category from lines whose attributes are JSON objects.

    Only the category attribute is looked at. A category stored as a NAME
    value ("nam:nt:folder") is returned without its type prefix; a missing
    or non-string category reads as "".

    Untyped string values ("nt:folder") are accepted as categories too, so
    hand-written or YAML-converted exports need no type prefixes. Values of
    other JSON types never name a category.
    """

    def __init__(self, category_field: str = DEFAULT_CATEGORY_FIELD) -> None:
        self._category_field = category_field

    def read(self, line: str) -> Record:
        path, payload = split_line(line)
        try:
            attributes = json.loads(payload)
        except json.JSONDecodeError as e:
            raise RecordFormatError(line, f"invalid attributes: {e.msg}") from e
        if not isinstance(attributes, dict):
            raise RecordFormatError(line, "attributes are not an object")

        return Record(path=path, category=self._category(attributes))

    def _category(self, attributes: dict) -> str:
        value = attributes.get(self._category_field)
        if not isinstance(value, str):
            return ""
        if value.startswith(NAME_PREFIX):
            return value[len(NAME_PREFIX) :]
        return value
