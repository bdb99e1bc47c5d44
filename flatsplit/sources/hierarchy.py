"""Category hierarchy registry and its YAML loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from flatsplit.errors import ConfigurationError
from flatsplit.logging_config import logger
from flatsplit.splitting.protocols import CategoryInfo


class CategoryDefinition(BaseModel):
    """A category as declared in a hierarchy file."""

    supertypes: list[str] = Field(default_factory=list)
    auxiliary: bool = False
    """Auxiliary (mixin) categories are added to records, never their main type."""


class HierarchyDocument(BaseModel):
    """Top-level structure of a hierarchy YAML file."""

    categories: dict[str, CategoryDefinition] = Field(default_factory=dict)


class CategoryHierarchy:
    """Registry of categories and their direct subtypes.

    Implements the CategoryHierarchyProvider protocol.
    """

    def __init__(self) -> None:
        """Initialize an empty hierarchy."""
        self._categories: dict[str, CategoryInfo] = {}

    @classmethod
    def from_definitions(
        cls, definitions: Mapping[str, CategoryDefinition]
    ) -> CategoryHierarchy:
        """Build a hierarchy from declared supertypes.

        Each category becomes a primary or auxiliary subtype of every
        supertype it names. Supertypes that are not declared themselves
        are ignored.

        Args:
            definitions: Category name -> declaration

        Returns:
            Hierarchy with subtypes derived from the supertype declarations
        """
        primary: dict[str, set[str]] = {name: set() for name in definitions}
        auxiliary: dict[str, set[str]] = {name: set() for name in definitions}

        for name, definition in definitions.items():
            for supertype in definition.supertypes:
                if supertype not in definitions:
                    logger.debug(f"Undeclared supertype {supertype} of {name}")
                    continue
                target = auxiliary if definition.auxiliary else primary
                target[supertype].add(name)

        hierarchy = cls()
        for name in definitions:
            hierarchy.register(
                CategoryInfo(
                    name=name,
                    primary_subtypes=frozenset(primary[name]),
                    auxiliary_subtypes=frozenset(auxiliary[name]),
                )
            )
        return hierarchy

    def register(self, info: CategoryInfo) -> None:
        """Register a category, replacing any earlier entry of that name."""
        self._categories[info.name] = info

    def lookup(self, name: str) -> CategoryInfo | None:
        """Return the category, or None if it is not registered."""
        return self._categories.get(name)

    def registered_categories(self) -> set[str]:
        """Return the names of all registered categories."""
        return set(self._categories.keys())


def load_hierarchy(path: Path) -> CategoryHierarchy:
    """Load a category hierarchy from a YAML file.

    Expected layout:

    ```
    categories:
      nt:base: {}
      nt:hierarchyNode:
        supertypes: [nt:base]
      mix:referenceable:
        auxiliary: true
    ```

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        document = HierarchyDocument(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigurationError(f"Cannot load category hierarchy {path}: {e}") from e

    logger.debug(f"Loaded {len(document.categories)} categories from {path}")
    return CategoryHierarchy.from_definitions(document.categories)
