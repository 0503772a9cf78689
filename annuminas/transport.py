"""
HTTP Transport for Annuminas.

Handles the Docker Hub credential exchange, bearer-token caching, error
normalization and pagination aggregation. Every call is a single attempt.
"""

import json
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

import httpx

from annuminas.exceptions import (
    APIError,
    AuthError,
    DecodeError,
    EncodeError,
    TransportError,
)
from annuminas.logging import (
    get_logger,
    log_auth_operation,
    log_http_request,
    log_http_response,
    truncate_token,
)
from annuminas.types.pagination import Page

T = TypeVar("T")

PAGE_SIZE = 50

_logger = get_logger("http")

# Shape errors raised while turning decoded JSON into typed objects
_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError, OverflowError)


class AuthMode(Enum):
    """Which credential exchange to use."""

    LOGIN = "login"
    TOKEN = "token"


@dataclass(frozen=True)
class AuthEndpoint:
    """Path and field names of one credential exchange."""

    path: str
    identifier_field: str
    secret_field: str
    token_field: str


AUTH_ENDPOINTS = {
    AuthMode.LOGIN: AuthEndpoint(
        path="/v2/users/login",
        identifier_field="username",
        secret_field="password",
        token_field="token",
    ),
    AuthMode.TOKEN: AuthEndpoint(
        path="/v2/auth/token",
        identifier_field="identifier",
        secret_field="secret",
        token_field="access_token",
    ),
}


def parse_error_message(response: httpx.Response) -> str:
    """
    Extract the human-readable message from an error response.

    ``message`` wins when it is a non-empty string, then ``detail``. Bodies
    with neither (or no JSON at all) produce ``status <code>``.

    Args:
        response: HTTP response with error status

    Returns:
        Normalized error message
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("message", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value

    return f"status {response.status_code}"


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_page(data: dict[str, Any], parse_item: Callable[[Any], T]) -> Page[T]:
    return Page(
        count=int(data.get("count") or 0),
        next=data.get("next"),
        previous=data.get("previous"),
        results=[parse_item(item) for item in data.get("results") or []],
    )


class HTTPTransport:
    """
    HTTP transport layer with lazy authentication.

    Handles:
    - The credential exchange, performed once and cached per instance
    - Bearer-token injection on every request
    - Error response normalization into typed exceptions
    - Aggregation of paginated listings
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        secret: str,
        timeout: float = 30.0,
        auth_mode: AuthMode = AuthMode.LOGIN,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://hub.docker.com")
            username: Docker Hub account name
            secret: Password or personal access token
            timeout: Request timeout in seconds
            auth_mode: Which credential exchange to perform
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.username = username
        self._secret = secret
        self.timeout = timeout
        self.auth_mode = auth_mode

        self._token = ""
        self._auth_lock = threading.Lock()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def authenticated(self) -> bool:
        """Whether a bearer token has been obtained."""
        return bool(self._token)

    def authenticate(self) -> None:
        """
        Obtain a bearer token, unless one is already cached.

        Raises:
            AuthError: On transport failure, a >= 400 answer, or a response
                without a usable token
        """
        endpoint = AUTH_ENDPOINTS[self.auth_mode]

        with self._auth_lock:
            if self._token:
                return

            log_auth_operation("authenticate", self.username, endpoint.path)
            payload = {
                endpoint.identifier_field: self.username,
                endpoint.secret_field: self._secret,
            }

            try:
                response = self._client.post(endpoint.path, json=payload)
            except httpx.RequestError as e:
                raise AuthError(f"auth request: {e}") from e

            if response.status_code >= 400:
                raise AuthError(
                    f"authentication failed: {parse_error_message(response)}"
                )

            try:
                token = response.json()[endpoint.token_field]
            except _DECODE_ERRORS as e:
                raise AuthError(f"decode auth response: {e!r}") from e

            if not isinstance(token, str) or not token:
                raise AuthError("decode auth response: no token in response")

            self._token = token
            get_logger("auth").debug(f"Cached bearer token {truncate_token(token)}")
            get_logger().info(f"Authenticated '{self.username}' to {self.base_url}")

    def _send(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
        params: dict[str, Any] | None = None,
        log_body: Any = None,
    ) -> httpx.Response:
        """Authenticate if needed and issue one request."""
        self.authenticate()

        headers = {"Authorization": f"Bearer {self._token}"}
        if content is not None:
            headers["Content-Type"] = "application/json"

        log_http_request(method, path, headers=headers, body=log_body)
        started = time.monotonic()

        try:
            response = self._client.request(
                method, path, content=content, headers=headers, params=params
            )
        except httpx.RequestError as e:
            raise TransportError(f"http request: {e}") from e

        log_http_response(
            response.status_code,
            path,
            body=_error_body(response) if response.status_code >= 400 else None,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )
        return response

    def request(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
        decode: Callable[[Any], T] | None = None,
        params: dict[str, Any] | None = None,
        log_body: Any = None,
    ) -> T | None:
        """
        Make one authenticated request.

        Args:
            method: HTTP method
            path: API path (e.g., "/v2/namespaces/acme/repositories")
            content: Already-encoded JSON body
            decode: Turns the decoded JSON body into the result type
            params: Query parameters
            log_body: Unencoded body, for debug logging only

        Returns:
            The decoded result, or None when no decoder was given or the
            body is empty

        Raises:
            AuthError: If authentication fails (no request is sent)
            TransportError: On network errors
            APIError: On a >= 400 answer
            DecodeError: If a success body cannot be decoded
        """
        response = self._send(
            method, path, content=content, params=params, log_body=log_body
        )

        if response.status_code >= 400:
            raise APIError(response.status_code, parse_error_message(response))

        if decode is None or not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"decode response: {e}") from e

        try:
            return decode(data)
        except _DECODE_ERRORS as e:
            raise DecodeError(f"decode response: {e!r}") from e

    def head_check(self, path: str) -> int:
        """
        Probe a resource with HEAD.

        A 404 is a valid answer here and is returned rather than raised, so
        callers can tell "absent" apart from "unauthorized".

        Returns:
            The response status code

        Raises:
            APIError: On any >= 400 answer other than 404
        """
        response = self._send("HEAD", path)

        if response.status_code == httpx.codes.NOT_FOUND:
            return response.status_code
        if response.status_code >= 400:
            raise APIError(response.status_code, parse_error_message(response))
        return response.status_code

    def get(
        self,
        path: str,
        decode: Callable[[Any], T] | None = None,
        params: dict[str, Any] | None = None,
    ) -> T | None:
        return self.request("GET", path, decode=decode, params=params)

    def post(
        self,
        path: str,
        payload: Any,
        decode: Callable[[Any], T] | None = None,
    ) -> T | None:
        """JSON-encode ``payload`` and POST it."""
        try:
            content = json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(f"encode request: {e}") from e
        return self.request(
            "POST", path, content=content, decode=decode, log_body=payload
        )

    def delete(self, path: str) -> None:
        self.request("DELETE", path)

    def collect_all(self, path: str, parse_item: Callable[[Any], T]) -> list[T]:
        """
        Fetch every page of a listing endpoint.

        Pages are requested from 1 upwards with a fixed page size until a
        page carries no ``next`` cursor. There is no page limit.

        Args:
            path: Listing path without query string
            parse_item: Turns one entry of ``results`` into the item type

        Returns:
            All items, in server order
        """
        items: list[T] = []
        page = 1

        while True:
            _logger.debug(
                f"Requesting {path}: items "
                f"{(page - 1) * PAGE_SIZE + 1}-{page * PAGE_SIZE}"
            )
            envelope = self.get(
                path,
                decode=lambda data: _parse_page(data, parse_item),
                params={"page": page, "page_size": PAGE_SIZE},
            )
            if envelope is None:
                break

            items.extend(envelope.results)

            if envelope.next is None:
                break
            page += 1

        _logger.debug(f"Collected {len(items)} items from {path}")
        return items
