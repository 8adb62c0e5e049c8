"""Table entries and single-entry responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .table_value import TableValue


class TableEntry(dict):
    """A single record of a table, keyed by field name."""

    def value(self, key: str) -> TableValue | None:
        """Return the field's value, unwrapping reference objects.

        Reference fields arrive as ``{"link": ..., "value": ...}``; for those
        the inner ``value`` is returned. Returns None if the key is absent.
        """
        if key not in self:
            return None
        raw = self[key]
        if isinstance(raw, Mapping):
            raw = raw.get("value")
        return TableValue(raw)

    def keys(self) -> list[str]:  # type: ignore[override]
        """Return the entry's field names in insertion order."""
        return list(iter(self))


@dataclass
class TableResponse:
    """A response holding one table entry."""

    result: TableEntry = field(default_factory=TableEntry)