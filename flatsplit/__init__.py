"""
flatsplit: partition sorted flat files without cutting protected subtrees.

Public API:
- SplitConfig               (configuration)
- FileSplitter              (runs one split pass)
- CategoryBoundarySetResolver (protected categories from index definitions)
- JsonRecordReader, CategoryHierarchy, IndexDefinition (collaborators)
"""

from flatsplit.config import SplitConfig
from flatsplit.models import Compression, Partition, Record
from flatsplit.sources import (
    CategoryHierarchy,
    IndexDefinition,
    JsonRecordReader,
    load_hierarchy,
    load_index_definitions,
)
from flatsplit.splitting import (
    CategoryBoundarySetResolver,
    FileSplitter,
    StaticBoundarySet,
)

__version__ = "0.1.0"

__all__ = [
    "CategoryBoundarySetResolver",
    "CategoryHierarchy",
    "Compression",
    "FileSplitter",
    "IndexDefinition",
    "JsonRecordReader",
    "Partition",
    "Record",
    "SplitConfig",
    "StaticBoundarySet",
    "load_hierarchy",
    "load_index_definitions",
]
