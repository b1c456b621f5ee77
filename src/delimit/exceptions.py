"""
Delimit Exceptions
==================
Error taxonomy for the splitting engine. Every error carries a human readable
message plus a ``details`` dict with the offending values.
"""

from typing import Any, Dict, Optional


class DelimitError(Exception):
    """Base class for all delimit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({detail_str})"


class ConfigurationError(DelimitError, ValueError):
    """Invalid splitter option, raised as soon as the option is set."""


class InvalidArgumentError(DelimitError, TypeError):
    """A missing or wrongly typed argument passed to a split operation."""


class DataError(DelimitError, ValueError):
    """Input data that cannot be split the way the configuration demands."""


class MalformedEntryError(DataError):
    """A map entry that does not split into exactly one key and one value."""


class DuplicateKeyError(DataError):
    """A key seen twice while building a map result."""


class UnsupportedOperationError(DelimitError, TypeError):
    """Attempt to modify a read-only token sequence."""


class FileError(DelimitError, OSError):
    """A data file that cannot be read."""


__all__ = [
    "DelimitError",
    "ConfigurationError",
    "InvalidArgumentError",
    "DataError",
    "MalformedEntryError",
    "DuplicateKeyError",
    "UnsupportedOperationError",
    "FileError",
]
