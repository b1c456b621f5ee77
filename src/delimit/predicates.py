"""
Delimit Character Predicates
============================
Per-character tests used to trim tokens and to split on character classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Tuple

from delimit.exceptions import ConfigurationError

# File, group, record and unit separators.
_SEPARATOR_CONTROLS = frozenset("\x1c\x1d\x1e\x1f")


@dataclass(frozen=True)
class CharPredicate:
    """Match a single character against a set, whitespace, or custom tests.

    Predicates built from ``chars`` and ``whitespace`` alone compare by value and
    can be written to a config dict; ``functions`` hold arbitrary callables.
    """

    chars: FrozenSet[str] = field(default_factory=frozenset)
    whitespace: bool = False
    functions: Tuple[Callable[[str], bool], ...] = ()

    def matches(self, c: str) -> bool:
        if c in self.chars:
            return True
        if self.whitespace and c.isspace() and c not in _SEPARATOR_CONTROLS:
            return True
        return any(fn(c) for fn in self.functions)

    __call__ = matches

    def union(self, other: Any) -> "CharPredicate":
        """Return a predicate matching any character either one matches."""
        other = coerce_predicate(other)
        functions = self.functions + tuple(f for f in other.functions if f not in self.functions)
        return CharPredicate(
            chars=self.chars | other.chars,
            whitespace=self.whitespace or other.whitespace,
            functions=functions,
        )

    __or__ = union

    @property
    def is_serializable(self) -> bool:
        return not self.functions

    def to_dict(self) -> Dict[str, Any]:
        if not self.is_serializable:
            raise ConfigurationError(
                "Predicates built from callables cannot be serialized.",
                {"functions": [getattr(f, "__name__", repr(f)) for f in self.functions]},
            )
        data: Dict[str, Any] = {}
        if self.whitespace:
            data["whitespace"] = True
        if self.chars:
            data["any_of"] = "".join(sorted(self.chars))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CharPredicate":
        unknown = set(data) - {"whitespace", "any_of"}
        if unknown:
            raise ConfigurationError(
                f"Unknown predicate fields: {sorted(unknown)}",
                {"fields": sorted(unknown), "suggestion": "Use 'whitespace' and/or 'any_of'"},
            )
        any_of_chars = data.get("any_of", "")
        if not isinstance(any_of_chars, str):
            raise ConfigurationError(
                "any_of must be a string of characters.",
                {"any_of": any_of_chars},
            )
        return cls(chars=frozenset(any_of_chars), whitespace=bool(data.get("whitespace", False)))

    def __repr__(self) -> str:
        parts = []
        if self.whitespace:
            parts.append("whitespace")
        if self.chars:
            parts.append(f"any_of({''.join(sorted(self.chars))!r})")
        parts.extend(getattr(f, "__name__", repr(f)) for f in self.functions)
        return f"CharPredicate({' | '.join(parts) or 'none'})"


def whitespace() -> CharPredicate:
    """Unicode whitespace: characters for which ``str.isspace`` is true.

    The ASCII information separators U+001C to U+001F are excluded. Python
    counts them as whitespace; here they are never trimmed.
    """
    return CharPredicate(whitespace=True)


def any_of(chars: str) -> CharPredicate:
    return CharPredicate(chars=frozenset(chars))


def is_char(c: str) -> CharPredicate:
    if not isinstance(c, str) or len(c) != 1:
        raise ConfigurationError("is_char expects a single character.", {"char": c})
    return CharPredicate(chars=frozenset(c))


def from_callable(fn: Callable[[str], bool]) -> CharPredicate:
    return CharPredicate(functions=(fn,))


def coerce_predicate(value: Any) -> CharPredicate:
    """Turn a predicate, a string of characters, or a callable into a CharPredicate."""
    if isinstance(value, CharPredicate):
        return value
    if isinstance(value, str):
        return any_of(value)
    if callable(value):
        return from_callable(value)
    raise ConfigurationError(
        f"Cannot use {type(value).__name__} as a character predicate.",
        {"value": value, "suggestion": "Pass a CharPredicate, a string of characters, or a callable"},
    )


__all__ = [
    "CharPredicate",
    "whitespace",
    "any_of",
    "is_char",
    "from_callable",
    "coerce_predicate",
]
