"""
Unit tests for the delimit split cursor and split result view.
"""

import io

import pytest

from delimit import Splitter
from delimit.cursor import SplitCursor, SplitResult, read_source
from delimit.exceptions import UnsupportedOperationError


COMMA_SPLITTER = Splitter.on(",")


class RecordingBuffer:
    """A growable text buffer that counts how often it is read."""

    def __init__(self):
        self.parts = []
        self.reads = 0

    def append(self, text):
        self.parts.append(text)

    def getvalue(self):
        self.reads += 1
        return "".join(self.parts)


class TestReadSource:
    """Test read_source."""

    def test_str(self):
        assert read_source("abc") == "abc"

    def test_string_io(self):
        buf = io.StringIO()
        buf.write("a,b")
        assert read_source(buf) == "a,b"

    def test_other_object(self):
        class Text:
            def __str__(self):
                return "x,y"

        assert read_source(Text()) == "x,y"


class TestSplitCursor:
    """Test the lazy cursor."""

    def test_has_next_and_next(self):
        cursor = COMMA_SPLITTER.split_to_iter("a,b")
        assert cursor.has_next()
        assert cursor.has_next()  # no token consumed
        assert next(cursor) == "a"
        assert next(cursor) == "b"
        assert not cursor.has_next()
        with pytest.raises(StopIteration):
            next(cursor)

    def test_exhausted_cursor_stays_exhausted(self):
        cursor = SplitCursor(COMMA_SPLITTER, "a")
        assert list(cursor) == ["a"]
        assert list(cursor) == []

    def test_iter_returns_self(self):
        cursor = COMMA_SPLITTER.split_to_iter("a")
        assert iter(cursor) is cursor

    @pytest.mark.parametrize("splitter, separator", [
        (Splitter.on(","), ","),
        (Splitter.on("::"), "::"),
        (Splitter.on_pattern(","), ","),
    ])
    def test_lazy_on_growing_buffer(self, splitter, separator):
        """Text appended between pulls is seen by later tokens."""
        buf = io.StringIO()
        cursor = iter(splitter.split(buf))

        buf.write("A" + separator)
        assert next(cursor) == "A"
        buf.write("B" + separator)
        assert next(cursor) == "B"
        buf.write("C")
        assert next(cursor) == "C"
        assert not cursor.has_next()

    def test_nothing_read_before_first_pull(self):
        buf = RecordingBuffer()
        result = COMMA_SPLITTER.split(buf)
        cursor = iter(result)
        assert buf.reads == 0

        buf.append("x,y")
        assert next(cursor) == "x"
        assert buf.reads == 1

    def test_yielded_tokens_unaffected_by_later_mutation(self):
        buf = RecordingBuffer()
        buf.append("a,b")
        cursor = iter(COMMA_SPLITTER.split(buf))
        first = next(cursor)
        buf.parts = ["z,b"]
        assert first == "a"
        assert next(cursor) == "b"


class TestSplitResult:
    """Test the read-only split result."""

    def test_reiterable(self):
        """Every iteration starts from the beginning."""
        result = COMMA_SPLITTER.split("a,b,c")
        assert list(result) == ["a", "b", "c"]
        assert list(result) == ["a", "b", "c"]

    def test_independent_iterators(self):
        result = COMMA_SPLITTER.split("a,b")
        first, second = iter(result), iter(result)
        assert next(first) == "a"
        assert next(first) == "b"
        assert next(second) == "a"

    def test_to_list(self):
        assert COMMA_SPLITTER.split("a,b,c").to_list() == ["a", "b", "c"]

    def test_str(self):
        assert str(COMMA_SPLITTER.split("")) == "[]"
        assert str(COMMA_SPLITTER.split("a,b,c")) == "[a, b, c]"
        assert str(Splitter.on(", ").split("yam, bam, jam, ham")) == "[yam, bam, jam, ham]"

    def test_repr_does_not_drain(self):
        buf = RecordingBuffer()
        repr(COMMA_SPLITTER.split(buf))
        assert buf.reads == 0

    @pytest.mark.parametrize("splitter", [
        Splitter.on(","),
        Splitter.on(", "),
        Splitter.on_pattern(","),
    ])
    def test_unmodifiable(self, splitter):
        result = splitter.split("a,b")
        with pytest.raises(UnsupportedOperationError, match="read-only"):
            result[0] = "x"
        with pytest.raises(UnsupportedOperationError):
            del result[0]
        # Also a TypeError, like other read-only containers.
        with pytest.raises(TypeError):
            del result[0]

    def test_is_split_result(self):
        assert isinstance(COMMA_SPLITTER.split("a"), SplitResult)
