"""Split pass that partitions a sorted flat file without cutting protected subtrees."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from flatsplit.config import SplitConfig
from flatsplit.logging_config import display_size, logger
from flatsplit.models import Partition
from flatsplit.splitting.ancestry import AncestryTracker
from flatsplit.splitting.planner import PartitionPlanner
from flatsplit.splitting.protocols import BoundarySource, RecordCategoryReader
from flatsplit.splitting.size import SizeEstimator
from flatsplit.storage.streams import create_reader, create_writer, partition_path


def _decode(raw: bytes) -> str:
    """Decode a line for path and category extraction.

    Undecodable bytes map to lone surrogates instead of failing; the raw
    bytes are what gets written, so the payload is never altered.
    """
    return raw.rstrip(b"\r\n").decode("utf-8", errors="surrogateescape")


class SplitState(str, Enum):
    """Phases of a split pass."""

    INIT = "init"
    SKIP = "skip"
    STREAMING = "streaming"
    ROTATE = "rotate"
    DONE = "done"


class FileSplitter:
    """Splits one sorted flat file into partitions for parallel processing.

    Partitions are written to `config.work_dir` and returned in write order;
    concatenating them reproduces the input byte for byte. A new partition
    starts only at a record whose ancestors are all unprotected, so every
    subtree rooted at a protected category stays within one partition.

    A splitter handles a single input and is not safe for concurrent calls.
    """

    def __init__(
        self,
        source: Path,
        config: SplitConfig,
        reader: RecordCategoryReader,
        boundaries: BoundarySource,
    ) -> None:
        """Initialize the splitter.

        Args:
            source: The sorted flat file to split
            config: Split settings
            reader: Extracts path and category from each line
            boundaries: Supplies the protected category set
        """
        self._source = source
        self._config = config
        self._reader = reader
        self._boundaries = boundaries
        self.state = SplitState.INIT
        self.partitions: list[Partition] = []

    def split(self) -> list[Path]:
        """Run the split pass.

        Returns:
            Partition files in write order, or `[source]` when splitting is
            skipped

        Raises:
            SizeEstimationError: If the compressed size trailer is unreadable
            RecordFormatError: If a line is not a valid record
            UnsortedInputError: If strict ordering is enabled and violated
            OSError: On I/O failure while streaming; partial output is left
        """
        config = self._config
        self.state = SplitState.INIT
        self.partitions = []

        total_size = SizeEstimator(config.compression).estimate(self._source)
        logger.info(f"Original flat file size: {display_size(total_size)}")

        if config.threshold_override is not None:
            threshold = config.threshold_override
        else:
            threshold = total_size // config.partition_count
        logger.info(
            f"Split threshold: {display_size(threshold)}, "
            f"partition count: {config.partition_count}"
        )

        if threshold < config.min_split_size or config.partition_count <= 1:
            return self._skip("split is not necessary")

        protected = self._boundaries.resolve()
        logger.info(f"Protected categories: {len(protected)}")
        if config.base_category is not None and config.base_category in protected:
            return self._skip(f"protected categories contain {config.base_category}")

        try:
            config.work_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create split directory {config.work_dir}: {e}")
            return self._skip("no split directory")

        planner = PartitionPlanner(protected, threshold, config.partition_count)
        self._stream(planner)
        self.state = SplitState.DONE

        if config.delete_original:
            self._source.unlink()
            logger.info(f"Deleted original flat file {self._source}")

        return [partition.path for partition in self.partitions]

    def _skip(self, reason: str) -> list[Path]:
        logger.info(f"Skipping split of {self._source}: {reason}")
        self.state = SplitState.SKIP
        return [self._source]

    def _new_partition(self, index: int) -> Partition:
        partition = Partition(
            index=index,
            path=partition_path(self._config.work_dir, index, self._source),
        )
        self.partitions.append(partition)
        return partition

    def _stream(self, planner: PartitionPlanner) -> None:
        """Copy records into partitions, rotating at legal cut points."""
        compression = self._config.compression
        tracker = AncestryTracker(strict=self._config.strict_order)
        line_count = 0

        self.state = SplitState.STREAMING
        with create_reader(self._source, compression) as reader:
            partition = self._new_partition(1)
            writer = create_writer(partition.path, compression)
            try:
                for raw in reader:
                    record = self._reader.read(_decode(raw))
                    tracker.update(record)

                    decision = planner.decide(
                        partition.bytes_written, partition.index, tracker.categories
                    )
                    if decision.cut:
                        self.state = SplitState.ROTATE
                        writer.close()
                        logger.info(
                            f"Created split flat file {partition.path} with size "
                            f"{display_size(partition.bytes_written)}"
                        )
                        partition = self._new_partition(partition.index + 1)
                        writer = create_writer(partition.path, compression)
                        logger.info(
                            f"Split position found at line {line_count}, "
                            f"creating new split file {partition.path}"
                        )
                        self.state = SplitState.STREAMING

                    writer.write(raw)
                    partition.bytes_written += len(raw)
                    partition.record_count += 1
                    line_count += 1
            finally:
                writer.close()

        logger.info(
            f"Created split flat file {partition.path} with size "
            f"{display_size(partition.bytes_written)}"
        )
        logger.info(f"Split total line count: {line_count}")
