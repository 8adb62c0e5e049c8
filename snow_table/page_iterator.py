"""Walking through paginated table results."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from .client import RequestInformation
from .errors import NilClientError, NilResponseError, ParsingError
from .pagination import PageResult, TableCollectionResponse, convert_to_page
from .table_entry import TableEntry

Callback = Callable[[TableEntry], bool]


def _default_callback(entry: TableEntry) -> bool:
    return True


class PageIterator:
    """Iterates over the entries of a result, fetching later pages as needed."""

    def __init__(self, current_page: Any, client: Any) -> None:
        if client is None:
            raise NilClientError()
        self._current_page = convert_to_page(current_page)
        self._client = client
        self._pause_index = 0

    @property
    def current_page(self) -> PageResult:
        """The page being iterated."""
        return self._current_page

    def iterate(self, callback: Callback | None = None) -> None:
        """Call ``callback`` on each entry until it returns False or pages run out.

        A later call resumes at the entry for which the callback returned False.
        """
        if callback is None:
            callback = _default_callback
        while True:
            if not self._enumerate(callback):
                return
            if not self._current_page.next_page_link:
                return
            self._current_page = self._next()
            self._pause_index = 0

    def _enumerate(self, callback: Callback) -> bool:
        items = self._current_page.result
        if items is None:
            return False
        for index, item in enumerate(items[self._pause_index :], start=self._pause_index):
            if not callback(item):
                return False
            self._pause_index = index + 1
        return True

    def _next(self) -> PageResult:
        return convert_to_page(self._fetch_next_page())

    def _fetch_next_page(self) -> TableCollectionResponse:
        link = self._current_page.next_page_link
        try:
            uri = urlsplit(link).geturl()
        except ValueError as exc:
            raise ParsingError() from exc
        info = RequestInformation(method="GET")
        info.set_uri(uri)
        response = self._client.send(info, None)
        if response is None:
            raise NilResponseError()
        return TableCollectionResponse.from_json(response.content, response.headers)