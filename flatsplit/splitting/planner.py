"""Cut decisions for the split pass."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CutDecision:
    """Outcome of evaluating one record as a potential partition start."""

    due: bool
    """The active partition is past the threshold and partitions remain."""

    legal: bool
    """No ancestor of the record has a protected category."""

    @property
    def cut(self) -> bool:
        return self.due and self.legal


class PartitionPlanner:
    """Decides whether a new partition may start at the current record.

    Subtree integrity wins over size balance: when no legal cut point shows
    up, the active partition keeps growing. Once `max_partitions` is
    reached the rest of the stream goes to the last partition.
    """

    def __init__(
        self,
        protected: frozenset[str],
        threshold: int,
        max_partitions: int,
    ) -> None:
        """Initialize the planner.

        Args:
            protected: Categories whose subtrees must not be cut internally
            threshold: Bytes a partition must exceed before a cut is due
            max_partitions: Upper bound on the number of partitions
        """
        self._protected = protected
        self._threshold = threshold
        self._max_partitions = max_partitions

    def legal(self, ancestors: Sequence[str]) -> bool:
        """Check that no ancestor, excluding the record itself, is protected.

        Args:
            ancestors: Ancestor categories, outermost first, record's own last
        """
        return not any(
            category in self._protected for category in ancestors[:-1]
        )

    def due(self, bytes_since_cut: int, partition_index: int) -> bool:
        """Check whether the active partition should be closed."""
        return (
            bytes_since_cut > self._threshold
            and partition_index < self._max_partitions
        )

    def decide(
        self,
        bytes_since_cut: int,
        partition_index: int,
        ancestors: Sequence[str],
    ) -> CutDecision:
        """Evaluate the current record as a cut point.

        Args:
            bytes_since_cut: Bytes written to the active partition so far
            partition_index: 1-based index of the active partition
            ancestors: Ancestor categories of the current record

        Returns:
            The decision; a new partition starts here if `decision.cut`
        """
        return CutDecision(
            due=self.due(bytes_since_cut, partition_index),
            legal=self.legal(ancestors),
        )
