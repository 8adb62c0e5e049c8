"""Collection responses, single-item responses and page results."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import NilResponseError, WrongResponseTypeError
from .table_entry import TableEntry

_LINK_PATTERN = re.compile(r'<([^>]+)>;rel="([^"]+)"')

_REL_TO_FIELD = {
    "first": "first_page_link",
    "prev": "previous_page_link",
    "next": "next_page_link",
    "last": "last_page_link",
}

JsonData = Union[Mapping[str, Any], str, bytes, bytearray]
Headers = Mapping[str, Union[str, Iterable[str]]]


def _load_object(data: JsonData) -> Mapping[str, Any]:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise WrongResponseTypeError()
    return data


def _header_values(headers: Headers | None, name: str) -> list[str]:
    if not headers:
        return []
    value = headers.get(name)
    if value is None:
        wanted = name.lower()
        value = next((v for k, v in headers.items() if k.lower() == wanted), None)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _to_entry(item: Any) -> TableEntry:
    if not isinstance(item, Mapping):
        raise WrongResponseTypeError()
    return TableEntry(item)


@dataclass
class PageResult:
    """One page of table entries with links to its neighbours.

    ``result`` is None when the response carried no result.
    """

    result: list[TableEntry] | None = None
    next_page_link: str = ""
    previous_page_link: str = ""
    first_page_link: str = ""
    last_page_link: str = ""


@dataclass
class TableCollectionResponse:
    """A response holding several table entries and pagination links."""

    result: list[TableEntry] | None = None
    next_page_link: str = ""
    previous_page_link: str = ""
    first_page_link: str = ""
    last_page_link: str = ""

    def parse_headers(self, headers: Headers | None) -> None:
        """Set the pagination links from the ``Link`` headers."""
        links: dict[str, str] = {}
        for header in _header_values(headers, "Link"):
            for link, rel in _LINK_PATTERN.findall(header):
                field_name = _REL_TO_FIELD.get(rel)
                if field_name is not None:
                    links[field_name] = link
        for field_name in _REL_TO_FIELD.values():
            setattr(self, field_name, links.get(field_name, ""))

    @classmethod
    def from_json(
        cls, data: JsonData, headers: Headers | None = None
    ) -> TableCollectionResponse:
        """Build a response from a JSON body and its headers."""
        obj = _load_object(data)
        raw_result = obj.get("result")
        if raw_result is None:
            result = None
        elif isinstance(raw_result, list):
            result = [_to_entry(item) for item in raw_result]
        else:
            raise WrongResponseTypeError()
        response = cls(result=result)
        response.parse_headers(headers)
        return response


@dataclass
class TableItemResponse:
    """A response holding a single table entry."""

    result: TableEntry | None = None

    def parse_headers(self, headers: Headers | None) -> None:
        """Single-item responses carry nothing in their headers."""

    @classmethod
    def from_json(cls, data: JsonData, headers: Headers | None = None) -> TableItemResponse:
        """Build a response from a JSON body and its headers."""
        obj = _load_object(data)
        raw_result = obj.get("result")
        response = cls(result=None if raw_result is None else _to_entry(raw_result))
        response.parse_headers(headers)
        return response


def convert_to_page(response: Any) -> PageResult:
    """Turn a collection response into a page result."""
    if response is None:
        raise NilResponseError()
    if not isinstance(response, TableCollectionResponse):
        raise WrongResponseTypeError()
    return PageResult(
        result=response.result,
        next_page_link=response.next_page_link,
        previous_page_link=response.previous_page_link,
        first_page_link=response.first_page_link,
        last_page_link=response.last_page_link,
    )