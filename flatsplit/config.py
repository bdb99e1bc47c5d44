"""Configuration surface for the flat file splitter."""

from pathlib import Path

from pydantic import BaseModel, Field

from flatsplit.models import Compression

# Default number of partitions a store is split into
DEFAULT_PARTITION_COUNT = 8

# Do not split when each partition would be smaller than this (10 MiB)
DEFAULT_MIN_SPLIT_SIZE = 10 * 1024 * 1024

# Sub-directory of the caller's working directory that receives partitions
SPLIT_DIR_NAME = "split"

# Category every other category derives from; protecting it protects everything
DEFAULT_BASE_CATEGORY = "nt:base"

# Attribute that carries a record's category
DEFAULT_CATEGORY_FIELD = "jcr:primaryType"


def validate_partition_count(count: int) -> None:
    """Validate the desired partition count.

    Args:
        count: Number of partitions requested

    Raises:
        ValueError: If the count is not a positive integer
    """
    if count < 1:
        raise ValueError(
            f"Invalid partition count: {count}. Expected 1 or more (1 disables splitting)"
        )


class SplitConfig(BaseModel):
    """Settings for one split pass.

    Replaces the process-wide properties of the original tool with explicit,
    validated values.
    """

    work_dir: Path = Field(
        ...,
        description="Directory that receives the partition files.",
    )
    partition_count: int = Field(
        default=DEFAULT_PARTITION_COUNT,
        ge=1,
        description="Desired (and maximum) number of partitions; 1 disables splitting.",
    )
    min_split_size: int = Field(
        default=DEFAULT_MIN_SPLIT_SIZE,
        ge=0,
        description="Skip splitting when the per-partition threshold is below this.",
    )
    threshold_override: int | None = Field(
        default=None,
        ge=0,
        description="Use this many bytes per partition instead of size / partition_count.",
    )
    compression: Compression = Field(
        default=Compression.GZIP,
        description="Container format of the input and of every partition.",
    )
    delete_original: bool = Field(
        default=False,
        description="Remove the input file after a successful (non-skipped) split.",
    )
    base_category: str | None = Field(
        default=DEFAULT_BASE_CATEGORY,
        description="Universal base category; if protected, splitting is skipped.",
    )
    strict_order: bool = Field(
        default=True,
        description="Fail fast when records are not in pre-order depth-first order.",
    )
    category_field: str = Field(
        default=DEFAULT_CATEGORY_FIELD,
        description="Attribute holding a record's category.",
    )

    class Config:
        frozen = True
