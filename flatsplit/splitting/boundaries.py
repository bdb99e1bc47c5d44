"""Resolution of the protected category set from indexing configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from flatsplit.logging_config import logger
from flatsplit.splitting.protocols import (
    CategoryHierarchyProvider,
    IndexingConfiguration,
)


def seed_categories(configurations: Iterable[IndexingConfiguration]) -> set[str]:
    """Collect aggregate-rule keys and rule base categories of all entries."""
    seeds: set[str] = set()
    for configuration in configurations:
        seeds.update(configuration.aggregate_rules.keys())
        seeds.update(configuration.rule_base_categories)
    return seeds


class CategoryBoundarySetResolver:
    """Expands indexing configuration into the closed set of protected categories.

    A category is protected when an index aggregates or indexes it, or when
    it is a (transitive) primary or auxiliary subtype of such a category.
    Documents for protected categories are built from their whole subtree,
    so a partition must never start inside one.

    The result is computed once and cached for the lifetime of the resolver.
    """

    def __init__(
        self,
        configurations: Iterable[IndexingConfiguration],
        hierarchy: CategoryHierarchyProvider,
    ) -> None:
        """Initialize the resolver.

        Args:
            configurations: Index definitions to take seed categories from
            hierarchy: Lookup for category subtypes
        """
        self._configurations = list(configurations)
        self._hierarchy = hierarchy
        self._resolved: frozenset[str] | None = None

    def resolve(self) -> frozenset[str]:
        """Return all protected category names."""
        if self._resolved is None:
            seeds = seed_categories(self._configurations)
            self._resolved = frozenset(self.closure(seeds))
            logger.debug(f"Protected categories: {sorted(self._resolved)}")
        return self._resolved

    def closure(self, seeds: Iterable[str]) -> set[str]:
        """Return the seeds and every subtype reachable from them.

        Names the hierarchy cannot resolve are dropped; their subtypes are
        not explored.
        """
        resolved: set[str] = set()
        visited: set[str] = set()
        pending = list(seeds)

        while pending:
            name = pending.pop()
            if name in visited:
                continue
            visited.add(name)

            info = self._hierarchy.lookup(name)
            if info is None:
                logger.debug(f"Skipping unknown category: {name}")
                continue

            resolved.add(info.name)
            for subtype in (*info.primary_subtypes, *info.auxiliary_subtypes):
                if subtype not in visited:
                    pending.append(subtype)

        return resolved


@dataclass(frozen=True)
class StaticBoundarySet:
    """A protected category set given up front instead of resolved."""

    categories: frozenset[str] = frozenset()

    def resolve(self) -> frozenset[str]:
        return self.categories
