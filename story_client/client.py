"""Main Story Spoiler client class.

Example:
    Usage with the context manager::

        from story_client import StorySpoilerClient, StoryPayload

        with StorySpoilerClient(base_url="https://example.net") as client:
            client.login("user", "secret")
            response = client.stories.create(
                StoryPayload(title="New Story", description="Interesting story")
            )
            print(response.status_code, response.body)
"""

from typing import Any

from story_client._auth import Authenticator
from story_client._http import HTTPClient
from story_client._stories import StoriesClient


class StorySpoilerClient:
    """Synchronous client for the Story Spoiler REST API.

    Owns one HTTPClient shared by the authenticator and the stories
    sub-client. The connection pool is released by close() or by leaving
    the context manager.

    Attributes:
        base_url: The base URL of the Story Spoiler server.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the Story Spoiler server.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Custom HTTP transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url
        self.timeout = timeout

        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._stories: StoriesClient | None = None

    def __enter__(self) -> "StorySpoilerClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def http(self) -> HTTPClient:
        """The shared HTTP client, for requests outside the story endpoints."""
        return self._http

    @property
    def token(self) -> str | None:
        """The bearer token currently attached to requests."""
        return self._http.token

    def login(self, username: str, password: str, strict: bool = False) -> str:
        """Authenticate and attach the token to all following requests.

        Args:
            username: Account user name.
            password: Account password.
            strict: Raise AuthenticationError instead of attaching an
                empty token when none is issued.

        Returns:
            The token that was attached (possibly empty when not strict).
        """
        authenticator = Authenticator(self._http)
        if strict:
            token = authenticator.authenticate_or_raise(username, password)
        else:
            token = authenticator.authenticate(username, password)
        self._http.set_token(token)
        return token

    @property
    def stories(self) -> StoriesClient:
        """Access the story endpoints (/api/Story/*)."""
        if self._stories is None:
            self._stories = StoriesClient(self._http)
        return self._stories
