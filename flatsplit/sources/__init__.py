"""Collaborator implementations: record reader, category hierarchy, index definitions."""

from flatsplit.sources.hierarchy import (
    CategoryDefinition,
    CategoryHierarchy,
    load_hierarchy,
)
from flatsplit.sources.indexing import (
    IndexDefinition,
    IndexingRule,
    load_index_definitions,
)
from flatsplit.sources.records import JsonRecordReader

__all__ = [
    "CategoryDefinition",
    "CategoryHierarchy",
    "IndexDefinition",
    "IndexingRule",
    "JsonRecordReader",
    "load_hierarchy",
    "load_index_definitions",
]
