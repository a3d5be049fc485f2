"""Java-compatible property store with a shared, read-only defaults table."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping, MutableMapping
from datetime import datetime
from typing import Any, BinaryIO, TextIO

from scripts.python.helpers.jproperties.reader import read_properties
from scripts.python.helpers.jproperties.writer import write_properties

logger = logging.getLogger(__name__)

LIST_HEADER = "-- listing properties --"
LIST_VALUE_LIMIT = 40


def _as_string(value: Any) -> str | None:
    return None if value is None else str(value)


class JavaProperties(MutableMapping[str, str]):
    """String-to-string table that can be loaded from and stored to .properties text.

    Lookups through ``get_property`` fall back to ``defaults`` when a key is
    missing from this table. The defaults mapping is held by reference and
    never modified, so later changes to it are seen by every store sharing it.
    The mapping protocol (``props[key]``, ``len``, iteration) covers this
    table only.
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._table: dict[str, str] = {}
        self._defaults = defaults

    @property
    def defaults(self) -> Mapping[str, Any] | None:
        return self._defaults

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __setitem__(self, key: str, value: str | None) -> None:
        if value is None:
            # Absent from this table; lookups fall through to the defaults.
            self._table.pop(key, None)
            return
        self._table[key] = value if isinstance(value, str) else str(value)

    def __delitem__(self, key: str) -> None:
        del self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r}, defaults={self._defaults!r})"

    def _default_property(self, key: str) -> str | None:
        if self._defaults is None:
            return None
        if isinstance(self._defaults, JavaProperties):
            return self._defaults.get_property(key)
        return _as_string(self._defaults.get(key))

    def get_property(self, key: str, default_value: str | None = None) -> str | None:
        """Return the value for key, then the defaults' value, then default_value."""
        value = self._table.get(key)
        if value is None:
            value = self._default_property(key)
        return default_value if value is None else value

    def set_property(self, key: str, new_value: str | None) -> str | None:
        """Store key in this table and return the value it replaced, if any.

        Setting None removes the key from this table, so the defaults show through.
        """
        old_value = self._table.get(key)
        self[key] = new_value
        return old_value

    def string_property_names(self) -> set[str]:
        """Every key visible through get_property, defaults included."""
        names: set[str] = set(self._table)
        if self._defaults is None:
            return names
        if isinstance(self._defaults, JavaProperties):
            return names | self._defaults.string_property_names()
        return names | {key for key, value in self._defaults.items() if value is not None}

    def property_names(self) -> Iterator[str]:
        """Iterate over a snapshot of the visible keys; order is unspecified."""
        return iter(self.string_property_names())

    def load(self, stream: BinaryIO | TextIO) -> None:
        """Insert every entry parsed from stream; later duplicates win."""
        count = 0
        for key, value in read_properties(stream):
            self.set_property(key, value)
            count += 1
        logger.debug("Loaded %d entries (%d distinct keys in table)", count, len(self._table))

    def store(
        self,
        stream: BinaryIO | TextIO,
        comments: str | None = None,
        *,
        sort_keys: bool | None = None,
        timestamp: bool | None = None,
        generated_at: datetime | None = None,
    ) -> None:
        """Write this table's entries, not the defaults, to stream."""
        write_properties(
            stream,
            list(self._table.items()),
            comments,
            sort_keys=sort_keys,
            timestamp=timestamp,
            generated_at=generated_at,
        )
        logger.debug("Stored %d entries", len(self._table))

    def list_properties(self, out: TextIO | None = None) -> None:
        """Print visible entries, truncating long values the way Java's list() does."""
        out = out or sys.stdout
        out.write(LIST_HEADER + "\n")
        for key in sorted(self.string_property_names()):
            value = self.get_property(key) or ""
            if len(value) > LIST_VALUE_LIMIT:
                value = value[: LIST_VALUE_LIMIT - 3] + "..."
            out.write(f"{key}={value}\n")


__all__ = ["JavaProperties"]
