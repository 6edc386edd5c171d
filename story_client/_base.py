"""Base class for sub-clients.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from story_client._http import APIResponse, HTTPClient


class BaseClient:
    """Base class for synchronous sub-clients.

    Provides access to the shared HTTP client, which carries the base URL
    and the session's bearer token.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize the sub-client.

        Args:
            http_client: The shared HTTP client instance.
        """
        self._http = http_client

    def _get(self, path: str) -> "APIResponse":
        return self._http.get(path)

    def _post(self, path: str, json: Any = None) -> "APIResponse":
        return self._http.post(path, json=json)

    def _put(self, path: str, json: Any = None) -> "APIResponse":
        return self._http.put(path, json=json)

    def _delete(self, path: str) -> "APIResponse":
        return self._http.delete(path)
