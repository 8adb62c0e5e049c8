"""HTTP client that sends table API requests to a ServiceNow instance."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import ParseResult, SplitResult

import requests

_INSTANCE_SUFFIX = ".service-now.com/api"
_HTTPS_PREFIX = "https://"


class _Credential(Protocol):
    def get_authentication(self) -> str:
        """Return the value of the Authorization header."""


class NilRequestInfoError(ValueError):
    """Raised when a request is sent without request information."""

    def __init__(self, message: str = "request information can't be nil") -> None:
        super().__init__(message)


class ApiError(Exception):
    """Raised when the server answers with a status code nobody handles."""

    def __init__(self, message: str, response_status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.response_status_code = response_status_code


class ServiceNowError(Exception):
    """An error reported by the instance in the response body."""

    def __init__(self, message: str = "", detail: str = "", status: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.status = status

    @classmethod
    def from_json(cls, body: str | bytes | bytearray) -> ServiceNowError:
        """Parse an error body of the form ``{"error": {...}, "status": ...}``.

        Raises json.JSONDecodeError if the body is not JSON.
        """
        obj = json.loads(body)
        if not isinstance(obj, Mapping):
            raise ValueError("error response is not a JSON object")
        exception = obj.get("error") or {}
        if not isinstance(exception, Mapping):
            raise ValueError("error property is not a JSON object")
        return cls(
            message=str(exception.get("message", "")),
            detail=str(exception.get("detail", "")),
            status=str(obj.get("status", "")),
        )

    def __str__(self) -> str:
        if self.detail and self.detail != self.message:
            return f"{self.message}: {self.detail}"
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceNowError):
            return NotImplemented
        return (self.message, self.detail, self.status) == (
            other.message,
            other.detail,
            other.status,
        )

    def __hash__(self) -> int:
        return hash((self.message, self.detail, self.status))


@dataclass
class RequestInformation:
    """Everything needed to build one HTTP request."""

    method: str = "GET"
    uri: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None

    def set_uri(self, uri: str | SplitResult | ParseResult) -> None:
        """Set the target URI from a string or a parsed URL."""
        self.uri = uri if isinstance(uri, str) else uri.geturl()

    def url(self) -> str:
        """Return the target URL; raise ValueError if none is set."""
        if not self.uri:
            raise ValueError("request information has no URI")
        return self.uri

    def to_request(self) -> requests.Request:
        """Return an unprepared request for this information."""
        return requests.Request(
            method=self.method,
            url=self.url(),
            headers=dict(self.headers),
            data=self.content,
        )


def _find_error_factory(error_mapping: Mapping[str, Any] | None, status: int) -> Any:
    if not error_mapping:
        return None
    normalized = {str(key).upper(): value for key, value in error_mapping.items()}
    for key in (str(status), f"{status // 100}XX"):
        factory = normalized.get(key)
        if factory is not None:
            return factory
    return None


class ServiceNowClient:
    """Sends authenticated requests to one ServiceNow instance."""

    def __init__(
        self,
        credential: _Credential,
        instance: str,
        session: requests.Session | None = None,
    ) -> None:
        if not instance.endswith(_INSTANCE_SUFFIX):
            instance += _INSTANCE_SUFFIX
        if not instance.startswith(_HTTPS_PREFIX):
            instance = _HTTPS_PREFIX + instance
        self.credential = credential
        self.base_url = instance
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> ServiceNowClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _to_request(
        self, request_information: RequestInformation | None
    ) -> requests.PreparedRequest:
        if request_information is None:
            raise NilRequestInfoError()
        request = request_information.to_request()
        request.headers["Authorization"] = self.credential.get_authentication()
        request.headers["Content-Type"] = "application/json"
        request.headers["Accept"] = "application/json"
        return self.session.prepare_request(request)

    @staticmethod
    def _raise_for_failed_response(
        response: requests.Response, error_mapping: Mapping[str, Any] | None
    ) -> None:
        status = response.status_code
        if status < 400:
            return
        if _find_error_factory(error_mapping, status) is None:
            raise ApiError(
                "The server returned an unexpected status code and no error factory "
                f"is registered for this code: {status}",
                response_status_code=status,
            )
        raise ServiceNowError.from_json(response.content)

    def send(
        self,
        request_information: RequestInformation | None,
        error_mapping: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        """Send the request and return the response.

        Raises ApiError for an unmapped failure status, ServiceNowError for a
        mapped one, and ConnectionError when the request cannot be completed.
        """
        prepared = self._to_request(request_information)
        try:
            response = self.session.send(prepared)
        except requests.RequestException as exc:
            raise ConnectionError(f"unable to complete request: {exc}") from exc
        self._raise_for_failed_response(response, error_mapping)
        return response