"""Request configurations handed to the request builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .pagination import TableCollectionResponse, TableItemResponse
from .query_parameters import (
    TableItemRequestBuilderDeleteQueryParameters,
    TableItemRequestBuilderGetQueryParameters,
    TableItemRequestBuilderPutQueryParameters,
    TableRequestBuilderGetQueryParameters,
    TableRequestBuilderPostQueryParameters,
)


@dataclass
class RequestConfiguration:
    """Generic settings for one request: headers, query, body, errors and response."""

    header: Any = None
    query_parameters: Any = None
    data: Any = None
    error_mapping: dict[str, Any] | None = None
    response: Any = None


def _generic(config: Any) -> RequestConfiguration:
    return RequestConfiguration(
        header=config.header,
        query_parameters=config.query_parameters,
        data=config.data,
        error_mapping=config.error_mapping,
        response=config.response,
    )


@dataclass
class TableGetRequestConfiguration:
    """Configuration for listing table records."""

    header: Any = None
    query_parameters: TableRequestBuilderGetQueryParameters | None = None
    data: Any = None
    error_mapping: dict[str, Any] | None = None
    response: TableCollectionResponse | None = None

    def to_configuration(self) -> RequestConfiguration:
        """Return the generic configuration holding the same values."""
        return _generic(self)


@dataclass
class TableItemGetRequestConfiguration:
    """Configuration for reading one record."""

    header: Any = None
    query_parameters: TableItemRequestBuilderGetQueryParameters | None = None
    data: Any = None
    error_mapping: dict[str, Any] | None = None
    response: TableItemResponse | None = None

    def to_configuration(self) -> RequestConfiguration:
        """Return the generic configuration holding the same values."""
        return _generic(self)


@dataclass
class TableItemPutRequestConfiguration:
    """Configuration for replacing one record."""

    header: Any = None
    query_parameters: TableItemRequestBuilderPutQueryParameters | None = None
    data: Any = None
    error_mapping: dict[str, Any] | None = None
    response: TableItemResponse | None = None

    def to_configuration(self) -> RequestConfiguration:
        """Return the generic configuration holding the same values."""
        return _generic(self)


@dataclass
class TableItemDeleteRequestConfiguration:
    """Configuration for deleting one record."""

    header: Any = None
    query_parameters: TableItemRequestBuilderDeleteQueryParameters | None = None
    data: Any = None
    error_mapping: dict[str, Any] | None = None
    response: TableItemResponse | None = None

    def to_configuration(self) -> RequestConfiguration:
        """Return the generic configuration holding the same values."""
        return _generic(self)


@dataclass
class TablePostRequestConfiguration:
    """Configuration for creating a record."""

    header: Any = None
    query_parameters: TableRequestBuilderPostQueryParameters | None = None
    data: dict[str, str] | None = None
    error_mapping: dict[str, Any] | None = None
    response: TableItemResponse | None = None

    def to_configuration(self) -> RequestConfiguration:
        """Return the generic configuration holding the same values."""
        return _generic(self)