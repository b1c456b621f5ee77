"""
Delimit Delimiter Strategies
============================
The closed set of rules for finding the next split boundary.

Every strategy is an immutable value. ``locate(strategy, text, start)`` returns
``(start, end)`` of the next delimiter at or after ``start``, or ``None``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type, Union

from delimit.exceptions import ConfigurationError
from delimit.predicates import CharPredicate

log = logging.getLogger(__name__)

Boundary = Tuple[int, int]


@dataclass(frozen=True)
class CharDelimiter:
    """Split on one specific character."""

    char: str

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ConfigurationError(
                "CharDelimiter requires exactly one character.",
                {"char": self.char, "suggestion": "Use StringDelimiter for longer separators"},
            )

    def to_dict(self) -> dict:
        return {"type": "char", "separator": self.char}

    @classmethod
    def from_dict(cls, data: dict) -> "CharDelimiter":
        return cls(_require(data, "separator"))


@dataclass(frozen=True)
class StringDelimiter:
    """Split on an exact, non-empty substring."""

    separator: str

    def __post_init__(self):
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigurationError(
                "The separator may not be the empty string.",
                {"separator": self.separator, "suggestion": "Provide a non-empty separator"},
            )

    def to_dict(self) -> dict:
        return {"type": "string", "separator": self.separator}

    @classmethod
    def from_dict(cls, data: dict) -> "StringDelimiter":
        return cls(_require(data, "separator"))


@dataclass(frozen=True)
class PatternDelimiter:
    """Split wherever a regular expression matches."""

    pattern: re.Pattern

    def __post_init__(self):
        if not isinstance(self.pattern, re.Pattern):
            raise ConfigurationError(
                "PatternDelimiter requires a compiled regular expression.",
                {"pattern": self.pattern, "suggestion": "Use Splitter.on_pattern() for pattern strings"},
            )
        if self.pattern.fullmatch("") is not None:
            raise ConfigurationError(
                f"The pattern may not match the empty string: {self.pattern.pattern!r}",
                {"pattern": self.pattern.pattern},
            )

    @classmethod
    def compile(cls, pattern: str, flags: int = 0) -> "PatternDelimiter":
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid regular expression: {pattern!r}",
                {"pattern": pattern, "regex_error": str(e)},
            ) from e
        return cls(compiled)

    def to_dict(self) -> dict:
        d = {"type": "pattern", "pattern": self.pattern.pattern}
        # re.UNICODE is implied for str patterns.
        flags = self.pattern.flags & ~re.UNICODE
        if flags:
            d["flags"] = flags
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "PatternDelimiter":
        return cls.compile(_require(data, "pattern"), data.get("flags", 0))


@dataclass(frozen=True)
class FixedLengthDelimiter:
    """Break the text into chunks of ``length`` characters; the last may be shorter."""

    length: int

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise ConfigurationError(
                "The length may not be less than 1.",
                {"length": self.length, "suggestion": "Use a positive integer"},
            )

    def to_dict(self) -> dict:
        return {"type": "fixed_length", "length": self.length}

    @classmethod
    def from_dict(cls, data: dict) -> "FixedLengthDelimiter":
        return cls(_require(data, "length"))


@dataclass(frozen=True)
class CharClassDelimiter:
    """Split on any single character accepted by a predicate."""

    predicate: CharPredicate

    def __post_init__(self):
        if not isinstance(self.predicate, CharPredicate):
            raise ConfigurationError(
                "CharClassDelimiter requires a CharPredicate.",
                {"predicate_type": type(self.predicate).__name__},
            )

    def to_dict(self) -> dict:
        return {"type": "char_class", **self.predicate.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "CharClassDelimiter":
        fields = {k: v for k, v in data.items() if k != "type"}
        return cls(CharPredicate.from_dict(fields))


DelimiterStrategy = Union[
    CharDelimiter,
    StringDelimiter,
    PatternDelimiter,
    FixedLengthDelimiter,
    CharClassDelimiter,
]


def locate(strategy: DelimiterStrategy, text: str, start: int) -> Optional[Boundary]:
    """Find the next delimiter in ``text`` at or after ``start``."""
    match strategy:
        case CharDelimiter(char=char):
            pos = text.find(char, start)
            return None if pos == -1 else (pos, pos + 1)
        case StringDelimiter(separator=separator):
            pos = text.find(separator, start)
            return None if pos == -1 else (pos, pos + len(separator))
        case PatternDelimiter(pattern=pattern):
            m = pattern.search(text, start)
            return None if m is None else m.span()
        case FixedLengthDelimiter(length=length):
            # Zero-width boundary; the remainder becomes the final chunk.
            pos = start + length
            return (pos, pos) if pos < len(text) else None
        case CharClassDelimiter(predicate=predicate):
            for pos in range(start, len(text)):
                if predicate.matches(text[pos]):
                    return pos, pos + 1
            return None
    raise TypeError(f"Unknown delimiter strategy: {type(strategy).__name__}")


# Factory registry for strategy types
STRATEGY_REGISTRY: Dict[str, Type[Any]] = {
    "char": CharDelimiter,
    "string": StringDelimiter,
    "pattern": PatternDelimiter,
    "fixed_length": FixedLengthDelimiter,
    "char_class": CharClassDelimiter,
}


def strategy_from_dict(data: dict) -> DelimiterStrategy:
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Delimiter config must be a dictionary, got {type(data).__name__}",
            {"config_type": type(data).__name__},
        )
    if "type" not in data:
        raise ConfigurationError(
            "Delimiter config must include a 'type' field.",
            {"suggestion": f"Use one of {sorted(STRATEGY_REGISTRY)}"},
        )
    strategy_type = data["type"]
    if strategy_type not in STRATEGY_REGISTRY:
        raise ConfigurationError(
            f"Unknown delimiter type: {strategy_type}",
            {"type": strategy_type, "suggestion": f"Use one of {sorted(STRATEGY_REGISTRY)}"},
        )
    log.debug("Building %s delimiter from config", strategy_type)
    return STRATEGY_REGISTRY[strategy_type].from_dict(data)


def _require(data: dict, key: str) -> Any:
    if key not in data:
        raise ConfigurationError(
            f"{data.get('type', 'Delimiter')} config requires a '{key}' field.",
            {"config": data},
        )
    return data[key]
