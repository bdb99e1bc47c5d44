"""Command-line interface for the flat file splitter."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from flatsplit import __version__
from flatsplit.config import (
    DEFAULT_MIN_SPLIT_SIZE,
    DEFAULT_PARTITION_COUNT,
    SPLIT_DIR_NAME,
    SplitConfig,
    validate_partition_count,
)
from flatsplit.errors import FlatSplitError
from flatsplit.logging_config import display_size, setup_logging
from flatsplit.models import Compression
from flatsplit.sources import JsonRecordReader, load_hierarchy, load_index_definitions
from flatsplit.splitting import (
    CategoryBoundarySetResolver,
    FileSplitter,
    SplitState,
    StaticBoundarySet,
)
from flatsplit.splitting.protocols import BoundarySource

app = typer.Typer(
    name="flatsplit",
    help="Split a sorted flat file into partitions for parallel indexing.",
)
console = Console()


def _boundaries(hierarchy: Path | None, indexes: Path | None) -> BoundarySource:
    """Build the protected category source from the optional YAML files."""
    if indexes is None:
        return StaticBoundarySet()
    if hierarchy is None:
        raise typer.BadParameter("--indexes requires --hierarchy")
    return CategoryBoundarySetResolver(
        load_index_definitions(indexes), load_hierarchy(hierarchy)
    )


@app.command()
def split(
    source: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Sorted flat file to split",
    ),
    work_dir: Path | None = typer.Option(
        None,
        "--work-dir",
        "-w",
        help=f"Directory for partitions (default: '{SPLIT_DIR_NAME}' next to the input)",
    ),
    partitions: int = typer.Option(
        DEFAULT_PARTITION_COUNT,
        "--partitions",
        "-n",
        help="Desired number of partitions (1 disables splitting)",
    ),
    min_size: int = typer.Option(
        DEFAULT_MIN_SPLIT_SIZE,
        "--min-size",
        help="Skip splitting when a partition would be smaller than this many bytes",
    ),
    threshold: int | None = typer.Option(
        None,
        "--threshold",
        help="Bytes per partition (default: input size / partitions)",
    ),
    compressed: bool = typer.Option(
        True,
        "--compressed/--plain",
        help="Input and partitions are gzip-compressed",
    ),
    delete_original: bool = typer.Option(
        False,
        "--delete-original",
        help="Remove the input after a successful split",
    ),
    hierarchy: Path | None = typer.Option(
        None,
        "--hierarchy",
        help="Category hierarchy YAML file",
    ),
    indexes: Path | None = typer.Option(
        None,
        "--indexes",
        help="Index definitions YAML file (protected categories are derived from it)",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Do not fail on records out of depth-first order",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Split a flat file, keeping protected subtrees whole."""
    setup_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        validate_partition_count(partitions)
        config = SplitConfig(
            work_dir=work_dir or source.parent / SPLIT_DIR_NAME,
            partition_count=partitions,
            min_split_size=min_size,
            threshold_override=threshold,
            compression=Compression.GZIP if compressed else Compression.NONE,
            delete_original=delete_original,
            strict_order=not lenient,
        )
        splitter = FileSplitter(
            source,
            config,
            JsonRecordReader(config.category_field),
            _boundaries(hierarchy, indexes),
        )
        files = splitter.split()
    except (FlatSplitError, ValueError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    if splitter.state is SplitState.SKIP:
        console.print(f"[yellow]Not split:[/yellow] {files[0]}")
        return

    table = Table(title=f"Partitions of {source.name}")
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Records", justify="right")
    table.add_column("Size", justify="right")
    for partition in splitter.partitions:
        table.add_row(
            str(partition.index),
            str(partition.path),
            str(partition.record_count),
            display_size(partition.bytes_written),
        )
    console.print(table)


@app.command()
def categories(
    hierarchy: Path = typer.Option(..., "--hierarchy", help="Category hierarchy YAML file"),
    indexes: Path = typer.Option(..., "--indexes", help="Index definitions YAML file"),
) -> None:
    """Show the protected categories derived from index definitions."""
    try:
        protected = _boundaries(hierarchy, indexes).resolve()
    except FlatSplitError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    for name in sorted(protected):
        console.print(name)
    console.print(f"[dim]{len(protected)} protected categories[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"flatsplit {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
