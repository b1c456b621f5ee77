"""
Delimit Splitter
================
Immutable, chainable splitter configuration.

    >>> Splitter.on(",").trim_results().omit_empty_strings().split_to_list(" a, ,b ")
    ['a', 'b']

Every modifier returns a new ``Splitter``; instances are safe to share.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from delimit.constants import DEFAULT_OMIT_EMPTY, DEFAULT_SPLIT_LIMIT
from delimit.cursor import SplitCursor, SplitResult
from delimit.exceptions import ConfigurationError, InvalidArgumentError
from delimit.predicates import CharPredicate, coerce_predicate, whitespace
from delimit.strategies import (
    CharClassDelimiter,
    CharDelimiter,
    DelimiterStrategy,
    FixedLengthDelimiter,
    PatternDelimiter,
    StringDelimiter,
    strategy_from_dict,
)

if TYPE_CHECKING:
    from delimit.map_splitter import MapSplitter

log = logging.getLogger(__name__)

_OPTION_KEYS = ("trim", "omit_empty", "limit")


@dataclass(frozen=True)
class Splitter:
    """Split text into tokens around a delimiter strategy.

    Attributes:
        strategy: Where the boundaries are.
        trimmer: Characters stripped from both ends of every token, or None.
        omit_empty: Drop tokens that are empty after trimming.
        split_limit: Maximum number of tokens, or None for no limit.
    """

    strategy: DelimiterStrategy
    trimmer: Optional[CharPredicate] = None
    omit_empty: bool = DEFAULT_OMIT_EMPTY
    split_limit: Optional[int] = DEFAULT_SPLIT_LIMIT

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #

    @classmethod
    def on(cls, separator: Union[str, re.Pattern, CharPredicate]) -> "Splitter":
        """Split on a character, a literal string, a compiled pattern, or a character class."""
        if separator is None:
            raise InvalidArgumentError("separator may not be None.")
        if isinstance(separator, str):
            if len(separator) == 1:
                return cls(CharDelimiter(separator))
            return cls(StringDelimiter(separator))
        if isinstance(separator, re.Pattern):
            return cls(PatternDelimiter(separator))
        if isinstance(separator, CharPredicate):
            return cls(CharClassDelimiter(separator))
        raise ConfigurationError(
            f"Cannot split on a {type(separator).__name__}.",
            {"separator": separator, "suggestion": "Use a str, a compiled re.Pattern, or a CharPredicate"},
        )

    @classmethod
    def on_pattern(cls, pattern: str, flags: int = 0) -> "Splitter":
        if pattern is None:
            raise InvalidArgumentError("pattern may not be None.")
        return cls(PatternDelimiter.compile(pattern, flags))

    @classmethod
    def fixed_length(cls, length: int) -> "Splitter":
        return cls(FixedLengthDelimiter(length))

    # ------------------------------------------------------------------ #
    # Modifiers                                                          #
    # ------------------------------------------------------------------ #

    def trim_results(self, predicate: Any = None) -> "Splitter":
        """Strip leading and trailing characters matching ``predicate`` (whitespace by default)."""
        trimmer = whitespace() if predicate is None else coerce_predicate(predicate)
        return dataclasses.replace(self, trimmer=trimmer)

    def omit_empty_strings(self) -> "Splitter":
        return dataclasses.replace(self, omit_empty=True)

    def limit(self, max_tokens: int) -> "Splitter":
        """Stop splitting once ``max_tokens`` tokens exist; the last holds the rest of the input.

        Tokens dropped by ``omit_empty_strings`` do not count towards the limit.
        """
        _check_limit(max_tokens)
        return dataclasses.replace(self, split_limit=max_tokens)

    def with_key_value_separator(self, separator: Union[str, "Splitter"]) -> "MapSplitter":
        from delimit.map_splitter import MapSplitter

        if separator is None:
            raise InvalidArgumentError("The key/value separator may not be None.")
        if isinstance(separator, str):
            if not separator:
                raise ConfigurationError(
                    "The key/value separator may not be the empty string.",
                    {"separator": separator},
                )
            separator = Splitter.on(separator)
        return MapSplitter(self, separator)

    # ------------------------------------------------------------------ #
    # Splitting                                                          #
    # ------------------------------------------------------------------ #

    def split(self, text: Any) -> SplitResult:
        """Return a lazy, read-only view of the tokens of ``text``."""
        if text is None:
            raise InvalidArgumentError("Cannot split None.", {"splitter": repr(self)})
        return SplitResult(self, text)

    def split_to_list(self, text: Any) -> List[str]:
        return self.split(text).to_list()

    def split_to_iter(self, text: Any) -> Iterator[str]:
        """Return a single cursor over ``text``."""
        if text is None:
            raise InvalidArgumentError("Cannot split None.", {"splitter": repr(self)})
        return SplitCursor(self, text)

    # ------------------------------------------------------------------ #
    # Serialization                                                      #
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        d = self.strategy.to_dict()
        if self.trimmer is not None:
            d["trim"] = True if self.trimmer == whitespace() else self.trimmer.to_dict()
        if self.omit_empty:
            d["omit_empty"] = True
        if self.split_limit is not None:
            d["limit"] = self.split_limit
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Splitter":
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Splitter config must be a dictionary, got {type(data).__name__}",
                {"config_type": type(data).__name__},
            )
        strategy = strategy_from_dict({k: v for k, v in data.items() if k not in _OPTION_KEYS})
        splitter = cls(strategy)

        trim = data.get("trim")
        if trim is True or trim == "whitespace":
            splitter = splitter.trim_results()
        elif isinstance(trim, dict):
            splitter = splitter.trim_results(CharPredicate.from_dict(trim))
        elif trim not in (None, False):
            raise ConfigurationError(
                f"Invalid trim setting: {trim!r}",
                {"trim": trim, "suggestion": "Use true, 'whitespace', or {'any_of': ..., 'whitespace': ...}"},
            )

        if data.get("omit_empty", False):
            splitter = splitter.omit_empty_strings()
        if data.get("limit") is not None:
            splitter = splitter.limit(data["limit"])
        log.debug("Splitter built from config: %r", splitter)
        return splitter


def _check_limit(max_tokens: Any) -> None:
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens < 1:
        raise ConfigurationError(
            f"limit must be greater than zero: {max_tokens!r}",
            {"limit": max_tokens, "suggestion": "Use a positive integer"},
        )
