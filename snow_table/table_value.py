"""Typed access to a single value of a table entry."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


def convert_type(value: Any, target: type[T]) -> T:
    """Return ``value`` if it is an instance of ``target``, else raise TypeError.

    Booleans are not accepted as integers.
    """
    is_bool_as_int = isinstance(value, bool) and target is int
    if not isinstance(value, target) or is_bool_as_int:
        raise TypeError(f"value ({value!r}) cannot be converted to {target.__name__}")
    return value


def _deprecated(old: str, new: str) -> None:
    warnings.warn(f"{old} is deprecated, use {new}", DeprecationWarning, stacklevel=3)


@dataclass(frozen=True)
class TableValue:
    """A raw value taken from a table entry."""

    value: Any = None

    def to_int(self) -> int:
        """Return the value as an integer."""
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return self.value
        raise TypeError(f"unable to convert {type(self.value).__name__} to int64")

    def to_int64(self) -> int:
        """Deprecated alias of :meth:`to_int`."""
        _deprecated("to_int64", "to_int")
        return self.to_int()

    def to_float(self) -> float:
        """Return the value as a float."""
        if isinstance(self.value, float):
            return self.value
        raise TypeError(f"unable to convert {type(self.value).__name__} to float64")

    def to_float64(self) -> float:
        """Deprecated alias of :meth:`to_float`."""
        _deprecated("to_float64", "to_float")
        return self.to_float()

    def to_string(self) -> str:
        """Return the value as a string."""
        return convert_type(self.value, str)

    def to_bool(self) -> bool:
        """Return the value as a boolean."""
        return convert_type(self.value, bool)

    def type(self) -> type | None:
        """Return the type of the value, or None when there is no value."""
        return None if self.value is None else type(self.value)

    def get_type(self) -> type | None:
        """Deprecated alias of :meth:`type`."""
        _deprecated("get_type", "type")
        return self.type()