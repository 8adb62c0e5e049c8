"""Enumerations used in table API query parameters."""

from __future__ import annotations

from enum import Enum


class DisplayValue(str, Enum):
    """Whether fields are returned as stored values, display values or both."""

    TRUE = "true"
    FALSE = "false"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


class View(str, Enum):
    """UI view used to decide which fields a response holds."""

    DESKTOP = "desktop"
    MOBILE = "mobile"
    BOTH = "both"

    def __str__(self) -> str:
        return self.value