"""Protocols and data structures for the splitting system."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from flatsplit.models import Record


@dataclass(frozen=True)
class CategoryInfo:
    """A category and its direct subtypes in the category hierarchy."""

    name: str
    """Category name (e.g. "nt:folder")."""

    primary_subtypes: frozenset[str] = field(default_factory=frozenset)
    """Categories that declare this one as a supertype."""

    auxiliary_subtypes: frozenset[str] = field(default_factory=frozenset)
    """Auxiliary (mixin) categories that declare this one as a supertype."""


@runtime_checkable
class RecordCategoryReader(Protocol):
    """Turns one flat file line into a Record carrying its category."""

    def read(self, line: str) -> Record:
        """Parse a line (without line terminator).

        Args:
            line: A `<path>|<serialized-attributes>` line

        Returns:
            The record's path and category ("" when it has none)
        """
        ...


@runtime_checkable
class CategoryHierarchyProvider(Protocol):
    """Looks up categories in the category hierarchy."""

    def lookup(self, name: str) -> CategoryInfo | None:
        """Return the category, or None if the hierarchy does not know it."""
        ...


class IndexingConfiguration(Protocol):
    """One indexing configuration entry (an index definition)."""

    @property
    def aggregate_rules(self) -> Mapping[str, Iterable[str]]:
        """Category -> related category names aggregated into its documents."""
        ...

    @property
    def rule_base_categories(self) -> Iterable[str]:
        """Base category of every indexing rule."""
        ...


class BoundarySource(Protocol):
    """Anything that can produce the set of protected categories."""

    def resolve(self) -> frozenset[str]:
        """Return the protected category names."""
        ...
