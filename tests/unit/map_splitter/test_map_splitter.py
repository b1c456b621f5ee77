"""
Unit tests for the delimit MapSplitter.
"""

import pytest

from delimit import MapSplitter, Splitter
from delimit.exceptions import (
    ConfigurationError,
    DataError,
    DuplicateKeyError,
    InvalidArgumentError,
    MalformedEntryError,
)


COMMA_SPLITTER = Splitter.on(",")
PETS = "boy  : tom , girl: tina , cat  : kitty , dog: tommy "
EXPECTED = {"boy": "tom", "girl": "tina", "cat": "kitty", "dog": "tommy"}


class TestMapSplitterConstruction:
    """Test with_key_value_separator and MapSplitter validation."""

    def test_with_string_separator(self):
        map_splitter = COMMA_SPLITTER.with_key_value_separator("=")
        assert isinstance(map_splitter, MapSplitter)
        assert map_splitter.entry_splitter is COMMA_SPLITTER
        assert map_splitter.key_value_splitter == Splitter.on("=")

    def test_with_splitter_separator(self):
        kv = Splitter.on(":").trim_results()
        assert COMMA_SPLITTER.with_key_value_separator(kv).key_value_splitter is kv

    def test_empty_separator(self):
        with pytest.raises(ConfigurationError, match="may not be the empty string"):
            COMMA_SPLITTER.with_key_value_separator("")

    def test_none_separator(self):
        """A None separator is an invalid argument, as in Splitter.on."""
        with pytest.raises(InvalidArgumentError, match="may not be None"):
            COMMA_SPLITTER.with_key_value_separator(None)

    def test_rejects_non_splitter(self):
        with pytest.raises(ConfigurationError, match="must be a Splitter"):
            MapSplitter(COMMA_SPLITTER, ":")


class TestMapSplitterSplit:
    """Test MapSplitter.split."""

    def test_character_separator(self):
        """Scenario: 'boy:tom,girl:tina'."""
        result = COMMA_SPLITTER.with_key_value_separator(":").split("boy:tom,girl:tina")
        assert result == {"boy": "tom", "girl": "tina"}
        assert list(result) == ["boy", "girl"]

    def test_multi_character_separator(self):
        result = Splitter.on(",").with_key_value_separator(":^&").split(
            "boy:^&tom,girl:^&tina,cat:^&kitty,dog:^&tommy"
        )
        assert result == EXPECTED

    def test_trimmed_both(self):
        result = (
            COMMA_SPLITTER.trim_results()
            .with_key_value_separator(Splitter.on(":").trim_results())
            .split(PETS)
        )
        assert list(result.items()) == list(EXPECTED.items())

    def test_trimmed_entries(self):
        """Trimming entries does not trim keys and values."""
        result = COMMA_SPLITTER.trim_results().with_key_value_separator(":").split(PETS)
        assert list(result.items()) == [
            ("boy  ", " tom"), ("girl", " tina"), ("cat  ", " kitty"), ("dog", " tommy"),
        ]

    def test_trimmed_key_value(self):
        result = COMMA_SPLITTER.with_key_value_separator(Splitter.on(":").trim_results()).split(PETS)
        assert list(result.items()) == list(EXPECTED.items())

    def test_not_trimmed(self):
        result = COMMA_SPLITTER.with_key_value_separator(":").split(
            " boy:tom , girl: tina , cat :kitty , dog:  tommy "
        )
        assert list(result.items()) == [
            (" boy", "tom "), (" girl", " tina "), (" cat ", "kitty "), (" dog", "  tommy "),
        ]

    def test_varying_trim_levels(self):
        map_splitter = COMMA_SPLITTER.trim_results().with_key_value_separator(Splitter.on("->"))
        result = map_splitter.split(" x -> y, z-> a ")
        assert result["x "] == " y"
        assert result["z"] == " a"

    def test_ordered_results(self):
        """Keys come back in the order the entries appear."""
        map_splitter = COMMA_SPLITTER.with_key_value_separator(":")
        result = map_splitter.split("girl:tina,boy:tom,dog:tommy,cat:kitty")
        assert list(result) == ["girl", "boy", "dog", "cat"]
        assert result == {"boy": "tom", "girl": "tina", "cat": "kitty", "dog": "tommy"}

    def test_value_may_contain_separator(self):
        """Only the first separator divides key from value."""
        result = COMMA_SPLITTER.with_key_value_separator("=").split("d=(sds(=) {}),e=1")
        assert result == {"d": "(sds(=) {})", "e": "1"}

    def test_empty_value(self):
        assert COMMA_SPLITTER.with_key_value_separator("=").split("a=") == {"a": ""}

    def test_omit_empty_entries(self):
        map_splitter = COMMA_SPLITTER.trim_results().omit_empty_strings().with_key_value_separator("=")
        assert map_splitter.split("a=1, , b=2,") == {"a": "1", "b": "2"}

    def test_result_is_read_only(self):
        result = COMMA_SPLITTER.with_key_value_separator(":").split("a:1")
        with pytest.raises(TypeError):
            result["b"] = "2"

    def test_malformed_entry(self):
        """Scenario: an entry without a separator."""
        with pytest.raises(MalformedEntryError, match=r"Chunk \[b\] is not a valid entry"):
            COMMA_SPLITTER.with_key_value_separator("=").split("a=1,b,c=2")

    def test_malformed_entry_is_data_error(self):
        with pytest.raises(DataError):
            COMMA_SPLITTER.with_key_value_separator("=").split("nothing here")

    def test_key_value_omission_leaves_one_field(self):
        """Omitting the empty key leaves a single field."""
        kv = Splitter.on("=").omit_empty_strings()
        with pytest.raises(MalformedEntryError):
            COMMA_SPLITTER.with_key_value_separator(kv).split("=1")

    def test_key_value_limit_one(self):
        """A key/value splitter limited to one field can never produce an entry."""
        kv = Splitter.on("=").limit(1)
        with pytest.raises(MalformedEntryError):
            COMMA_SPLITTER.with_key_value_separator(kv).split("a=1")

    def test_duplicate_keys(self):
        with pytest.raises(DuplicateKeyError, match=r"Duplicate key \[a\] found"):
            COMMA_SPLITTER.with_key_value_separator(":").split("a:1,b:2,a:3")

    def test_split_none(self):
        with pytest.raises(InvalidArgumentError):
            COMMA_SPLITTER.with_key_value_separator(":").split(None)


class TestMapSplitterSerialization:
    """Test MapSplitter.to_dict / from_dict."""

    def test_round_trip(self):
        map_splitter = COMMA_SPLITTER.trim_results().with_key_value_separator(Splitter.on("->"))
        assert MapSplitter.from_dict(map_splitter.to_dict()) == map_splitter

    def test_missing_sections(self):
        with pytest.raises(ConfigurationError, match="requires 'entries' and 'key_value'"):
            MapSplitter.from_dict({"entries": {"type": "char", "separator": ","}})
