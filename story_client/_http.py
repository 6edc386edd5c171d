"""Internal HTTP handling utilities for the Story Spoiler client.

This module provides the low-level HTTP communication layer used by the
authenticator and the stories sub-client. It handles:
- Making HTTP requests with a base URL and a bearer token
- Wrapping responses so status, body and headers can be asserted on
- Mapping transport failures and error statuses to client exceptions
- Connection management

This is an internal module and should not be imported directly by users.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from story_client.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
)

logger = logging.getLogger(__name__)

# HTTP methods supported by the client
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Body fields the Story Spoiler API (and generic APIs) use for messages
_MESSAGE_FIELDS = ("msg", "message", "detail", "title", "error")


def _parse_error_message(status_code: int, body: str) -> str:
    """Extract a human-readable message from an error response body.

    Attempts to parse the body as JSON and pick the first known message
    field. Falls back to the raw text, then to a generic message.

    Args:
        status_code: The HTTP status code of the response.
        body: The decoded response body.

    Returns:
        The error message.
    """
    text = body.strip()
    if not text:
        return f"HTTP {status_code} error"

    try:
        data = json.loads(text)
    except ValueError:
        return text

    if isinstance(data, dict):
        for key in _MESSAGE_FIELDS:
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
        # ASP.NET validation problem details: {"errors": {"Title": ["..."]}}
        errors = data.get("errors")
        if isinstance(errors, dict):
            return "; ".join(
                f"{name}: {', '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
                for name, msgs in errors.items()
            )
    return str(data)


@dataclass
class APIResponse:
    """A completed HTTP exchange.

    The harness asserts on all three parts, so non-2xx responses are
    returned as-is rather than raised.

    Attributes:
        status_code: HTTP status code.
        body: Decoded response body (empty string for no content).
        headers: Response headers (lower-cased names).
        method: HTTP method of the request.
        url: Full URL of the request.
    """

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    method: str = ""
    url: str = ""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "APIResponse":
        """Build an APIResponse from an httpx response."""
        return cls(
            status_code=response.status_code,
            body=response.text,
            headers={k.lower(): v for k, v in response.headers.items()},
            method=response.request.method,
            url=str(response.request.url),
        )

    @property
    def text(self) -> str:
        """The decoded response body."""
        return self.body

    @property
    def is_success(self) -> bool:
        """Whether the status code is 2xx."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)

    def raise_for_status(self) -> None:
        """Raise an appropriate exception for error status codes.

        Raises:
            BadRequestError: For HTTP 400 responses.
            AuthenticationError: For HTTP 401/403 responses.
            NotFoundError: For HTTP 404 responses.
            ServerError: For HTTP 5xx responses.
            APIError: For other HTTP 4xx responses.
        """
        if self.is_success:
            return

        message = _parse_error_message(self.status_code, self.body)
        status_code = self.status_code

        if status_code == 400:
            raise BadRequestError(message=message, response_body=self.body)
        elif status_code in (401, 403):
            raise AuthenticationError(
                message=message,
                status_code=status_code,
                response_body=self.body,
            )
        elif status_code == 404:
            raise NotFoundError(message=message, response_body=self.body)
        elif status_code >= 500:
            raise ServerError(
                message=message,
                status_code=status_code,
                response_body=self.body,
            )
        else:
            raise APIError(
                message=message,
                status_code=status_code,
                response_body=self.body,
            )


class HTTPClient:
    """Synchronous HTTP client for the Story Spoiler API.

    Wraps httpx.Client with a base URL, an optional bearer token and
    transport error mapping. There is no retry policy.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        token: The bearer token attached to every request, if set.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            token: Bearer token to attach to every request.
            timeout: Request timeout in seconds.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token: str | None = None

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        if token is not None:
            self.set_token(token)

    def set_token(self, token: str | None) -> None:
        """Attach the bearer token to every following request.

        None or an empty token removes the Authorization header, so an
        unauthenticated session surfaces as 401 responses downstream.
        """
        self.token = token
        if not token:
            self._client.headers.pop("Authorization", None)
        else:
            self._client.headers["Authorization"] = f"Bearer {token}"

    @property
    def is_closed(self) -> bool:
        """Whether the underlying connection pool has been released."""
        return self._client.is_closed

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close client."""
        self.close()

    def execute(
        self,
        method: HttpMethod,
        path: str,
        json: Any = None,
    ) -> APIResponse:
        """Make an HTTP request and return the completed exchange.

        Args:
            method: The HTTP method (GET, POST, PUT, DELETE).
            path: The URL path (appended to base_url). A missing leading
                slash is added.
            json: JSON body to send with the request.

        Returns:
            The response, whatever its status code.

        Raises:
            ConnectionError: If the connection fails or the response cannot
                be read (e.g. a corrupt compressed body).
            TimeoutError: If the request times out.
        """
        if not path.startswith("/"):
            path = f"/{path}"
        url = f"{self.base_url}{path}"

        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method=method, url=path, json=json)
        except httpx.ConnectError as e:
            raise ConnectionError(
                message=f"Failed to connect to {url}",
                url=url,
                cause=e,
            ) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message=f"Request to {url} timed out",
                timeout=self.timeout,
                url=url,
            ) from e
        except httpx.TransportError as e:
            raise ConnectionError(
                message=f"Transport error talking to {url}: {e}",
                url=url,
                cause=e,
            ) from e
        except httpx.RequestError as e:
            # Body decoding, redirect loops and the like
            raise ConnectionError(
                message=f"Request to {url} failed: {e}",
                url=url,
                cause=e,
            ) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return APIResponse.from_httpx(response)

    def get(self, path: str) -> APIResponse:
        """Make a GET request."""
        return self.execute("GET", path)

    def post(self, path: str, json: Any = None) -> APIResponse:
        """Make a POST request."""
        return self.execute("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> APIResponse:
        """Make a PUT request."""
        return self.execute("PUT", path, json=json)

    def delete(self, path: str) -> APIResponse:
        """Make a DELETE request."""
        return self.execute("DELETE", path)
