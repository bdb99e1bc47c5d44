"""Splitting module for partitioning sorted flat files.

Splits a depth-first sorted flat file into size-balanced partitions
while keeping every subtree rooted at a protected category intact.
"""

from flatsplit.splitting.ancestry import AncestryTracker
from flatsplit.splitting.boundaries import (
    CategoryBoundarySetResolver,
    StaticBoundarySet,
)
from flatsplit.splitting.planner import CutDecision, PartitionPlanner
from flatsplit.splitting.protocols import (
    BoundarySource,
    CategoryHierarchyProvider,
    CategoryInfo,
    IndexingConfiguration,
    RecordCategoryReader,
)
from flatsplit.splitting.size import SizeEstimator, gzip_uncompressed_size
from flatsplit.splitting.splitter import FileSplitter, SplitState

__all__ = [
    "AncestryTracker",
    "BoundarySource",
    "CategoryBoundarySetResolver",
    "CategoryHierarchyProvider",
    "CategoryInfo",
    "CutDecision",
    "FileSplitter",
    "IndexingConfiguration",
    "PartitionPlanner",
    "RecordCategoryReader",
    "SizeEstimator",
    "SplitState",
    "StaticBoundarySet",
    "gzip_uncompressed_size",
]
