"""
Delimit - lazy, configurable text splitting.

Split text on a character, a literal string, a regular expression, or a fixed
chunk length, with optional trimming, empty-token suppression and a token
limit, and turn ``key=value`` lists into ordered mappings.
"""

from .splitter import Splitter
from .map_splitter import MapSplitter
from .cursor import SplitCursor, SplitResult
from .predicates import CharPredicate, whitespace, any_of, is_char, from_callable
from .config import DelimitConfig, SplittingConfig, KeyValueConfig, DataConfig, LoggingConfig
from .exceptions import (
    DelimitError, ConfigurationError, InvalidArgumentError, DataError,
    MalformedEntryError, DuplicateKeyError, UnsupportedOperationError, FileError,
)

__version__ = "0.1.0"

__all__ = [
    "Splitter",
    "MapSplitter",
    "SplitCursor",
    "SplitResult",
    # Predicates
    "CharPredicate",
    "whitespace",
    "any_of",
    "is_char",
    "from_callable",
    # Config
    "DelimitConfig",
    "SplittingConfig",
    "KeyValueConfig",
    "DataConfig",
    "LoggingConfig",
    # Exceptions
    "DelimitError",
    "ConfigurationError",
    "InvalidArgumentError",
    "DataError",
    "MalformedEntryError",
    "DuplicateKeyError",
    "UnsupportedOperationError",
    "FileError",
]
