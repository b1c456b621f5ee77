"""
Delimit Map Splitter
====================
Turns ``"k1=v1,k2=v2"`` style text into an ordered, read-only mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from delimit.constants import MAP_ENTRY_FIELDS
from delimit.exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    InvalidArgumentError,
    MalformedEntryError,
)
from delimit.splitter import Splitter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSplitter:
    """Split text into entries, then each entry into a key and a value.

    Attributes:
        entry_splitter: Splits the input into entries.
        key_value_splitter: Splits one entry into key and value. It is applied
            with a limit of two, so the value may contain the separator.
    """

    entry_splitter: Splitter
    key_value_splitter: Splitter

    def __post_init__(self):
        for name in ("entry_splitter", "key_value_splitter"):
            if not isinstance(getattr(self, name), Splitter):
                raise ConfigurationError(
                    f"{name} must be a Splitter.",
                    {name: type(getattr(self, name)).__name__},
                )

    @property
    def _field_splitter(self) -> Splitter:
        current = self.key_value_splitter.split_limit
        if current is not None and current <= MAP_ENTRY_FIELDS:
            return self.key_value_splitter
        return self.key_value_splitter.limit(MAP_ENTRY_FIELDS)

    def split(self, text: Any) -> Mapping[str, str]:
        """Split ``text`` into a mapping that keeps entries in the order they appear.

        Raises:
            MalformedEntryError: An entry does not hold exactly one key and one value.
            DuplicateKeyError: A key appears more than once.
        """
        if text is None:
            raise InvalidArgumentError("Cannot split None.", {"splitter": repr(self)})

        field_splitter = self._field_splitter
        result: Dict[str, str] = {}
        for entry in self.entry_splitter.split(text):
            fields = field_splitter.split_to_list(entry)
            if len(fields) != MAP_ENTRY_FIELDS:
                raise MalformedEntryError(
                    f"Chunk [{entry}] is not a valid entry",
                    {"entry": entry, "fields": fields},
                )
            key, value = fields
            if key in result:
                raise DuplicateKeyError(
                    f"Duplicate key [{key}] found.",
                    {"key": key, "entry": entry},
                )
            result[key] = value
        log.debug("Map split produced %d entries", len(result))
        return MappingProxyType(result)

    def to_dict(self) -> dict:
        return {
            "entries": self.entry_splitter.to_dict(),
            "key_value": self.key_value_splitter.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MapSplitter":
        if not isinstance(data, dict) or "entries" not in data or "key_value" not in data:
            raise ConfigurationError(
                "MapSplitter config requires 'entries' and 'key_value' sections.",
                {"config": data},
            )
        return cls(Splitter.from_dict(data["entries"]), Splitter.from_dict(data["key_value"]))
