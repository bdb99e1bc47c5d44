"""Exceptions raised by the flat file splitter."""


class FlatSplitError(Exception):
    """Base class for splitter errors."""


class SizeEstimationError(FlatSplitError):
    """Raised when the uncompressed size of an input cannot be determined."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize the error.

        Args:
            path: The file whose size could not be estimated
            reason: Why the size trailer could not be read
        """
        self.path = path
        super().__init__(f"Cannot estimate uncompressed size of {path}: {reason}")


class RecordFormatError(FlatSplitError, ValueError):
    """Raised when a line is not a valid `<path>|<attributes>` record."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        preview = line if len(line) <= 80 else f"{line[:77]}..."
        super().__init__(f"Malformed record ({reason}): {preview!r}")


class UnsortedInputError(FlatSplitError):
    """Raised when records are not in pre-order depth-first order."""

    def __init__(self, path: str, expected_parent: str) -> None:
        """Initialize the error.

        Args:
            path: Path of the offending record
            expected_parent: Path of the deepest ancestor seen so far
        """
        self.path = path
        self.expected_parent = expected_parent
        super().__init__(
            f"Record {path} does not follow its ancestors in sorted order "
            f"(current ancestor chain ends at {expected_parent})"
        )


class ConfigurationError(FlatSplitError, ValueError):
    """Raised when a hierarchy or index definition file cannot be loaded."""
