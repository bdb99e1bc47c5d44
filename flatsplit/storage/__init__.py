"""Reading and writing flat files."""

from flatsplit.storage.streams import create_reader, create_writer, partition_path

__all__ = ["create_reader", "create_writer", "partition_path"]
