"""
Delimit Split Cursor
====================
Lazy, pull-based token production.

A ``SplitCursor`` keeps its whole scan state in plain attributes (offset,
remaining splits, look-ahead slot) and re-reads the source on every pull, so a
mutable buffer such as ``io.StringIO`` may grow between tokens. Behaviour when
the buffer changes in any other way during iteration is not defined.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from delimit.exceptions import UnsupportedOperationError
from delimit.strategies import locate

if TYPE_CHECKING:
    from delimit.predicates import CharPredicate
    from delimit.splitter import Splitter

_NOT_READY = "not_ready"
_READY = "ready"
_DONE = "done"


def read_source(source: Any) -> str:
    """Return the current contents of ``source``."""
    if isinstance(source, str):
        return source
    getvalue = getattr(source, "getvalue", None)
    if callable(getvalue):
        return getvalue()
    return str(source)


class SplitCursor:
    """Single-pass iterator over the tokens of one source."""

    def __init__(self, splitter: Splitter, source: Any):
        self._splitter = splitter
        self._source = source
        # None once the last token has been cut.
        self._offset: Optional[int] = 0
        self._remaining = splitter.split_limit
        self._state = _NOT_READY
        self._next: Optional[str] = None

    def __iter__(self) -> "SplitCursor":
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        token = self._next
        self._next = None
        self._state = _NOT_READY
        return token

    def has_next(self) -> bool:
        if self._state == _READY:
            return True
        if self._state == _DONE:
            return False
        token = self._compute_next()
        if token is None:
            self._state = _DONE
            return False
        self._next = token
        self._state = _READY
        return True

    def _compute_next(self) -> Optional[str]:
        text = read_source(self._source)
        length = len(text)
        strategy = self._splitter.strategy
        trimmer = self._splitter.trimmer
        next_start = self._offset

        while self._offset is not None:
            start = next_start
            boundary = locate(strategy, text, self._offset)
            if boundary is None:
                end = length
                self._offset = None
            else:
                end, self._offset = boundary

            if self._offset == next_start:
                # Zero-width match where the token starts: search further on
                # without moving the token start.
                self._offset += 1
                if self._offset > length:
                    self._offset = None
                continue

            start, end = _trim(text, start, end, trimmer)

            if self._splitter.omit_empty and start == end:
                next_start = self._offset
                continue

            if self._remaining == 1:
                # Last slot: the token runs to the end of the input.
                end = length
                self._offset = None
                end = _trim_end(text, start, end, trimmer)
            elif self._remaining is not None:
                self._remaining -= 1
            return text[start:end]
        return None


def _trim(text: str, start: int, end: int, trimmer: Optional[CharPredicate]) -> tuple[int, int]:
    if trimmer is None:
        return start, end
    while start < end and trimmer.matches(text[start]):
        start += 1
    return start, _trim_end(text, start, end, trimmer)


def _trim_end(text: str, start: int, end: int, trimmer: Optional[CharPredicate]) -> int:
    if trimmer is None:
        return end
    while end > start and trimmer.matches(text[end - 1]):
        end -= 1
    return end


class SplitResult:
    """Read-only, re-iterable view of the tokens a splitter produces for one source.

    Nothing is read from the source until iteration starts; every ``iter()``
    starts a new scan from the beginning.
    """

    __slots__ = ("_splitter", "_source")

    def __init__(self, splitter: Splitter, source: Any):
        self._splitter = splitter
        self._source = source

    def __iter__(self) -> Iterator[str]:
        return SplitCursor(self._splitter, self._source)

    def to_list(self) -> List[str]:
        return list(self)

    def __setitem__(self, index, value) -> None:
        raise UnsupportedOperationError(
            "Split results are read-only.", {"index": index}
        )

    def __delitem__(self, index) -> None:
        raise UnsupportedOperationError(
            "Split results are read-only.", {"index": index}
        )

    def __str__(self) -> str:
        return "[" + ", ".join(self) + "]"

    def __repr__(self) -> str:
        return f"SplitResult(splitter={self._splitter!r})"
