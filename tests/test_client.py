import base64
import json
from urllib.parse import urlsplit

import pytest
import responses

from snow_table.client import (
    ApiError,
    NilRequestInfoError,
    RequestInformation,
    ServiceNowClient,
    ServiceNowError,
)

EXAMPLE_URL = "https://www.example.com"


class _BasicCredential:
    def __init__(self, username, password):
        self.username = username
        self.password = password

    def get_authentication(self):
        raw = f"{self.username}:{self.password}".encode()
        return "Basic " + base64.b64encode(raw).decode()


@pytest.fixture
def client():
    password = "password"
    return ServiceNowClient(_BasicCredential("username", password=password), "instance")


def test_client_url(client):
    assert client.base_url == "https://instance.service-now.com/api"


def test_client_url_already_complete():
    password = "password"
    cred = _BasicCredential("username", password=password)
    full = ServiceNowClient(cred, "https://other.service-now.com/api")
    assert full.base_url == "https://other.service-now.com/api"


def test_client_url_adds_scheme_only():
    password = "password"
    cred = _BasicCredential("username", password=password)
    partial = ServiceNowClient(cred, "other.service-now.com/api")
    assert partial.base_url == "https://other.service-now.com/api"


def test_send_sets_headers_and_url(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, EXAMPLE_URL, body="", status=200)
        response = client.send(RequestInformation(uri=EXAMPLE_URL), None)
        request = rsps.calls[0].request

    assert response.status_code == 200
    parts = urlsplit(request.url)
    assert parts.scheme == "https"
    assert parts.hostname == "www.example.com"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Authorization"] == "Basic dXNlcm5hbWU6cGFzc3dvcmQ="


def test_send_without_request_information(client):
    with pytest.raises(NilRequestInfoError):
        client.send(None, None)


def test_mapped_error_is_parsed(client):
    body = {
        "error": {"detail": "Resource not found", "message": "Resource not found"},
        "status": "404",
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, EXAMPLE_URL, body=json.dumps(body), status=404)
        with pytest.raises(ServiceNowError) as info:
            client.send(RequestInformation(uri=EXAMPLE_URL), {"404": "not found"})

    expected = ServiceNowError(
        message="Resource not found", detail="Resource not found", status="404"
    )
    assert info.value == expected
    assert info.value.status == "404"


def test_mapped_error_with_bad_body(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, EXAMPLE_URL, body="bad response", status=404)
        with pytest.raises(json.JSONDecodeError):
            client.send(RequestInformation(uri=EXAMPLE_URL), {"404": "not found"})


def test_class_mapping_matches_status(client):
    body = {"error": {"detail": "d", "message": "m"}, "status": "failure"}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, EXAMPLE_URL, body=json.dumps(body), status=403)
        with pytest.raises(ServiceNowError) as info:
            client.send(RequestInformation(uri=EXAMPLE_URL), {"4XX": "hi"})
    assert info.value.message == "m"
    assert info.value.detail == "d"


def test_unmapped_error_raises_api_error(client):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, EXAMPLE_URL, body="", status=500)
        with pytest.raises(ApiError) as info:
            client.send(RequestInformation(uri=EXAMPLE_URL), {"4XX": "hi"})
    assert info.value.response_status_code == 500
    assert info.value.message.endswith(": 500")


def test_connection_failure(client):
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        with pytest.raises(ConnectionError, match="unable to complete request"):
            client.send(RequestInformation(uri=EXAMPLE_URL), None)


def test_request_information_set_uri_from_parsed():
    info = RequestInformation()
    info.set_uri(urlsplit("https://www.example.com/path?a=1"))
    assert info.url() == "https://www.example.com/path?a=1"


def test_request_information_without_uri():
    with pytest.raises(ValueError):
        RequestInformation().url()


def test_request_information_to_request():
    info = RequestInformation(method="PUT", uri=EXAMPLE_URL, headers={"X": "1"})
    request = info.to_request()
    assert request.method == "PUT"
    assert request.url == EXAMPLE_URL
    assert request.headers == {"X": "1"}