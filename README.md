# snow_table

Building blocks for talking to the ServiceNow Table API. The package covers:

- `snow_table.client`: `ServiceNowClient` sends authenticated requests
  that `RequestInformation` describes.
- `snow_table.table_entry`: `TableEntry`, which holds one record, and
  `TableResponse`.
- `snow_table.table_value`: `TableValue` gives typed access to a field
  value, and `convert_type` does strict type checks.
- `snow_table.pagination`: `TableCollectionResponse`, `TableItemResponse`,
  `PageResult` and `convert_to_page`.
- `snow_table.page_iterator`: `PageIterator` walks the entries of a
  collection and follows `next` links across pages.
- `snow_table.query_parameters`: the `sysparm_*` parameter classes for
  each table operation, and `to_query_map`.
- `snow_table.request_configuration`: per-operation configuration objects
  that convert to a generic `RequestConfiguration`.
- `snow_table.enums`: the `DisplayValue` and `View` enums.
- `snow_table.errors`: the table errors, all derived from `TableApiError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sending a request

`ServiceNowClient(credential, instance)` appends `.service-now.com/api` to
the instance name if it is not already there, and prefixes `https://` if
that is missing. For example, `"instance"` becomes
`https://instance.service-now.com/api`, which is stored in `base_url`.

The credential can be any object with a `get_authentication()` method that
returns the value of the `Authorization` header. The client sets that
header, and it also sets `Content-Type` and `Accept` to
`application/json`.

```python
from snow_table.client import RequestInformation, ServiceNowClient
from snow_table.pagination import TableCollectionResponse


class BearerCredential:
    def get_authentication(self) -> str:
        return "Bearer token"


with ServiceNowClient(BearerCredential(), "instance") as client:
    info = RequestInformation(method="GET", uri=f"{client.base_url}/now/table/problem")
    response = client.send(info)
    collection = TableCollectionResponse.from_json(response.content, response.headers)
```

The client raises these errors:

- `send(None)` raises `NilRequestInfoError`.
- A transport failure raises `ConnectionError`.
- A status of 400 or above raises `ApiError`, which carries
  `response_status_code`. That happens unless the `error_mapping` argument
  has an entry for the exact code (`"404"`) or its class (`"4XX"`). In that
  case the body is parsed, and a `ServiceNowError` is raised with its
  `message`, `detail` and `status`.

## Reading records

```python
from snow_table.table_entry import TableEntry

entry = TableEntry({
    "number": "PRB0000050",
    "cmdb_ci": {"link": "https://instance.example.com/api/now/table/cmdb_ci/abc", "value": "abc"},
})

entry.value("number").to_string()   # "PRB0000050"
entry.value("cmdb_ci").to_string()  # "abc"
entry.value("missing")              # None
entry.keys()                        # ["number", "cmdb_ci"]
```

`TableValue` offers `to_int`, `to_float`, `to_string`, `to_bool` and
`type`. A conversion to the wrong type raises `TypeError` and does not try
to coerce the value. For example, calling `to_bool()` on the string
`"true"` fails. `to_int64`, `to_float64` and `get_type` are deprecated
aliases, and they issue a `DeprecationWarning`.

## Query parameters

```python
from snow_table.query_parameters import (
    TableRequestBuilderGetQueryParameters,
    to_query_map,
)

to_query_map(TableRequestBuilderGetQueryParameters(limit=1))
# {"sysparm_limit": "1"}
```

`to_query_map` leaves out values that are unset (False, zero, empty strings
and empty lists). True is encoded as `"1"`, and lists are joined with
commas. `DisplayValue` (`TRUE`, `FALSE`, `ALL`) and `View` (`DESKTOP`,
`MOBILE`, `BOTH`) hold the allowed values for `sysparm_display_value` and
`sysparm_view`.

## Paging

Build a `PageIterator` from a `TableCollectionResponse` and a client, then
call `iterate(callback)`:

```python
from snow_table.page_iterator import PageIterator

numbers = []

def collect(entry):
    numbers.append(entry.value("number").to_string())
    return True

PageIterator(collection, client).iterate(collect)
```

The callback is called with each `TableEntry` in turn. Return `False` from
it to stop; the next call to `iterate` resumes at that entry. When a page
runs out, the iterator sends a GET for the `next` link through the client.
It stops when there is no `next` link left. The links are read from the
`Link` headers by `TableCollectionResponse.parse_headers`.

## What this package does not do

- It has no request builders. Nothing here turns a table name or a
  `sys_id` into a URL, and there are no ready-made get, create, update,
  delete or count calls. You build the URL yourself and send it with
  `RequestInformation` and `ServiceNowClient.send`. The query parameter
  and request configuration classes only describe a request; they do not
  send one.
- It ships no credential classes. You supply an object with
  `get_authentication()`.
- It offers no command-line interface.