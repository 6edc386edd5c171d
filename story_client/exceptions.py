"""Exception hierarchy for the Story Spoiler API client.

This module defines all exceptions that can be raised by the client library.
The hierarchy allows catching specific error types or broader categories
as needed.

Exception Hierarchy:
    StoryClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── BadRequestError (HTTP 400)
        ├── AuthenticationError (HTTP 401/403, or no token issued)
        ├── NotFoundError (HTTP 404)
        └── ServerError (HTTP 5xx)

Note that `HTTPClient.execute` never raises `APIError` on its own: status
codes are part of what the test suite asserts on. The API errors are raised
by `APIResponse.raise_for_status()` and by strict authentication.

Example:
    Catching all client errors::

        try:
            client.login("user", "secret")
        except StoryClientError as e:
            print(f"Client error: {e}")
"""

from typing import Any


class StoryClientError(Exception):
    """Base exception for all Story Spoiler client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class ConnectionError(StoryClientError):
    """Failed to connect to the Story Spoiler server.

    Raised when the client cannot establish a connection to the server,
    e.g. DNS failure, refused connection or a wrong base URL.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            url: The URL that failed to connect.
            cause: The underlying exception that caused the failure.
        """
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including URL if available."""
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(StoryClientError):
    """Request timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including timeout if available."""
        extras = []
        if self.timeout is not None:
            extras.append(f"timeout: {self.timeout}s")
        if self.url:
            extras.append(f"url: {self.url}")
        if not extras:
            return self.message
        return f"{self.message} ({', '.join(extras)})"


class APIError(StoryClientError):
    """Server returned an error response.

    Base class for all API-level errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: Any = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from the server.
            response_body: Raw response body for debugging.
        """
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including status code."""
        return f"[HTTP {self.status_code}] {self.message}"


class BadRequestError(APIError):
    """Request rejected by the server (HTTP 400).

    The Story Spoiler API answers 400 both for invalid payloads (missing
    title or description) and for deleting a story that does not exist.
    """

    def __init__(self, message: str, response_body: Any = None) -> None:
        super().__init__(message=message, status_code=400, response_body=response_body)


class AuthenticationError(APIError):
    """Authentication failed or no access token was issued.

    Raised for HTTP 401/403 responses, and by strict authentication when
    the login response carries no usable ``accessToken``.

    Attributes:
        username: The user the login was attempted for (if known).
    """

    def __init__(
        self,
        message: str,
        status_code: int = 401,
        username: str | None = None,
        response_body: Any = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code of the failed call.
            username: The user the login was attempted for.
            response_body: Raw response body for debugging.
        """
        self.username = username
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """Resource not found (HTTP 404).

    Attributes:
        resource_id: The identifier that wasn't found (if known).
    """

    def __init__(
        self,
        message: str,
        resource_id: str | None = None,
        response_body: Any = None,
    ) -> None:
        self.resource_id = resource_id
        super().__init__(message=message, status_code=404, response_body=response_body)


class ServerError(APIError):
    """Server-side error (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
        )
