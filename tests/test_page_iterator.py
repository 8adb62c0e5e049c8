import json

import pytest
import responses

from snow_table.client import ServiceNowClient
from snow_table.errors import NilClientError, NilResponseError, WrongResponseTypeError
from snow_table.page_iterator import PageIterator
from snow_table.pagination import TableCollectionResponse, TableItemResponse
from snow_table.table_entry import TableEntry

FAKE_LINK = "https://fake-link.com/"
SECOND_LINK = "https://fake-link.com/page2"

RECORD = {
    "number": "PRB0000050",
    "state": "4",
    "opened_by": {
        "link": "https://instance.servicenow.com/api/now/table/sys_user/glide.maint",
        "value": "glide.maint",
    },
    "sys_id": "04ce72c9c0a8016600b5b7f75ac67b5b",
    "short_description": "Switch occasionally drops connections",
}


class _TokenCredential:
    def get_authentication(self):
        return "Bearer token"


class _NoneClient:
    def __init__(self):
        self.urls = []

    def send(self, request_information, error_mapping):
        self.urls.append(request_information.url())
        return None


def _client():
    return ServiceNowClient(_TokenCredential(), "instance")


def _collector(seen):
    def callback(entry):
        seen.append(entry["number"])
        return True

    return callback


def test_new_page_iterator_with_client():
    iterator = PageIterator(TableCollectionResponse(), _NoneClient())
    assert iterator.current_page.result is None
    assert iterator.current_page.next_page_link == ""


def test_new_page_iterator_without_client():
    with pytest.raises(NilClientError):
        PageIterator(TableCollectionResponse(), None)


def test_new_page_iterator_wrong_type():
    with pytest.raises(WrongResponseTypeError):
        PageIterator(TableItemResponse(), _NoneClient())


def test_iterate_empty_page_with_no_callback():
    client = _NoneClient()
    iterator = PageIterator(TableCollectionResponse(), client)
    iterator.iterate(None)
    assert client.urls == []


def test_iterate_single_page_with_callback():
    page = TableCollectionResponse(result=[TableEntry(number="A"), TableEntry(number="B")])
    seen = []
    PageIterator(page, _NoneClient()).iterate(_collector(seen))
    assert seen == ["A", "B"]


def test_iterate_follows_next_links():
    page = TableCollectionResponse(result=[TableEntry(number="first")], next_page_link=FAKE_LINK)
    seen = []
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            FAKE_LINK,
            body=json.dumps({"result": [RECORD]}),
            headers={"Link": f'<{SECOND_LINK}>;rel="next"'},
        )
        rsps.add(
            responses.GET,
            SECOND_LINK,
            body=json.dumps({"result": [dict(RECORD, number="PRB0000051")]}),
        )
        PageIterator(page, _client()).iterate(_collector(seen))
        call_count = len(rsps.calls)
    assert seen == ["first", "PRB0000050", "PRB0000051"]
    assert call_count == 2


def test_iterate_fetched_entries_unwrap_references():
    page = TableCollectionResponse(result=[], next_page_link=FAKE_LINK)
    entries = []
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, FAKE_LINK, body=json.dumps({"result": [RECORD]}))
        PageIterator(page, _client()).iterate(lambda entry: entries.append(entry) or True)
    assert len(entries) == 1
    assert entries[0].value("opened_by").to_string() == "glide.maint"


def test_iterate_stops_and_resumes():
    items = [TableEntry(number=n) for n in ("a", "b", "c")]
    iterator = PageIterator(TableCollectionResponse(result=items), _NoneClient())
    seen = []

    def stop_at_b(entry):
        if entry["number"] == "b":
            return False
        seen.append(entry["number"])
        return True

    iterator.iterate(stop_at_b)
    assert seen == ["a"]

    resumed = []
    iterator.iterate(_collector(resumed))
    assert resumed == ["b", "c"]


def test_iterate_stop_does_not_fetch_next_page():
    client = _NoneClient()
    page = TableCollectionResponse(result=[TableEntry(number="a")], next_page_link=FAKE_LINK)
    PageIterator(page, client).iterate(lambda entry: False)
    assert client.urls == []


def test_iterate_missing_response_raises():
    client = _NoneClient()
    page = TableCollectionResponse(result=[TableEntry(number="a")], next_page_link=FAKE_LINK)
    with pytest.raises(NilResponseError):
        PageIterator(page, client).iterate(None)
    assert client.urls == [FAKE_LINK]