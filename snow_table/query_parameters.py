"""Query parameters accepted by the table endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any

from .enums import DisplayValue, View


def _param(name: str, default: Any = None, *, factory: Any = None) -> Any:
    metadata = {"query": name}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _encode(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return ",".join(_encode(item) for item in value)
    return str(value)


def to_query_map(params: Any) -> dict[str, str]:
    """Return the query string values set on ``params``, keyed by parameter name.

    Unset values (False, zero, empty strings and empty lists) are left out.
    """
    if params is None:
        return {}
    if not is_dataclass(params) or isinstance(params, type):
        raise TypeError(f"{type(params).__name__} is not a query parameter object")
    query: dict[str, str] = {}
    for item in fields(params):
        name = item.metadata.get("query")
        if name is None:
            continue
        value = getattr(params, item.name)
        if value is None or value is False or value == "" or value == 0 or value == []:
            continue
        if isinstance(value, tuple) and not value:
            continue
        query[name] = _encode(value)
    return query


@dataclass
class TableItemRequestBuilderDeleteQueryParameters:
    """Query parameters for deleting a single record."""

    query_no_domain: bool = _param("sysparm_query_no_domain", False)


@dataclass
class TableItemRequestBuilderGetQueryParameters:
    """Query parameters for reading a single record."""

    display_value: DisplayValue | str = _param("sysparm_display_value", "")
    exclude_reference_link: bool = _param("sysparm_exclude_reference_link", False)
    fields: list[str] = _param("sysparm_fields", factory=list)
    query_no_domain: bool = _param("sysparm_query_no_domain", False)
    view: View | str = _param("sysparm_view", "")


@dataclass
class TableItemRequestBuilderPutQueryParameters:
    """Query parameters for replacing a single record."""

    display_value: DisplayValue | str = _param("sysparm_display_value", "")
    exclude_reference_link: bool = _param("sysparm_exclude_reference_link", False)
    fields: list[str] = _param("sysparm_fields", factory=list)
    input_display_value: bool = _param("sysparm_input_display_value", False)
    query_no_domain: bool = _param("sysparm_query_no_domain", False)
    view: View | str = _param("sysparm_view", "")


@dataclass
class TableRequestBuilderGetQueryParameters:
    """Query parameters for listing the records of a table."""

    display_value: DisplayValue | str = _param("sysparm_display_value", "")
    exclude_reference_link: bool = _param("sysparm_exclude_reference_link", False)
    fields: list[str] = _param("sysparm_fields", factory=list)
    query_no_domain: bool = _param("sysparm_query_no_domain", False)
    view: View | str = _param("sysparm_view", "")
    limit: int = _param("sysparm_limit", 0)
    no_count: bool = _param("sysparm_no_count", False)
    offset: int = _param("sysparm_offset", 0)
    query: str = _param("sysparm_query", "")
    query_category: str = _param("sysparm_query_category", "")
    suppress_pagination_header: bool = _param("sysparm_suppress_pagination_header", False)


@dataclass
class TableRequestBuilderPostQueryParameters:
    """Query parameters for creating a record."""

    display_value: DisplayValue | str = _param("sysparm_display_value", "")
    exclude_reference_link: bool = _param("sysparm_exclude_reference_link", False)
    fields: list[str] = _param("sysparm_fields", factory=list)
    input_display_value: bool = _param("sysparm_input_display_value", False)
    view: View | str = _param("sysparm_view", "")


@dataclass
class TableRequestBuilderPostQueryParamters(TableRequestBuilderPostQueryParameters):
    """Deprecated misspelt name of :class:`TableRequestBuilderPostQueryParameters`."""