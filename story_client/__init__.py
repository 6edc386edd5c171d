"""Story Spoiler API Client Library.

A small typed client for the Story Spoiler REST API: JWT login and the
story CRUD endpoints. Responses are returned whatever their status so
test code can assert on error paths.

Example:
    Usage::

        from story_client import StorySpoilerClient

        with StorySpoilerClient(base_url="https://example.net") as client:
            client.login("user", "secret")
            response = client.stories.list_all()
            assert response.status_code == 200

Exports:
    StorySpoilerClient: Entry point owning the shared HTTP client.
    HTTPClient / APIResponse: Low-level request layer.
    HttpMethod: The request methods the client sends.
    Authenticator: Login helper returning the bearer token.
    StoriesClient: Story endpoints.

    Exceptions:
        StoryClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        BadRequestError: HTTP 400.
        AuthenticationError: HTTP 401/403 or no token issued.
        NotFoundError: HTTP 404.
        ServerError: HTTP 5xx.
"""

from story_client._auth import LOGIN_PATH, Authenticator
from story_client._http import APIResponse, HTTPClient, HttpMethod
from story_client._stories import (
    CREATE_PATH,
    DELETE_PATH,
    EDIT_PATH,
    LIST_PATH,
    StoriesClient,
    story_path,
)
from story_client.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConnectionError,
    NotFoundError,
    ServerError,
    StoryClientError,
    TimeoutError,
)
from story_client.models import (
    AuthenticationRequest,
    AuthenticationResponse,
    MessageResponse,
    StoryCreatedResponse,
    StoryPayload,
)
from story_client.client import StorySpoilerClient

__all__ = [
    # Main client
    "StorySpoilerClient",
    # Building blocks
    "HTTPClient",
    "APIResponse",
    "HttpMethod",
    "Authenticator",
    "StoriesClient",
    "story_path",
    # Endpoint paths
    "LOGIN_PATH",
    "CREATE_PATH",
    "EDIT_PATH",
    "LIST_PATH",
    "DELETE_PATH",
    # Exceptions
    "StoryClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "NotFoundError",
    "ServerError",
    # Models
    "AuthenticationRequest",
    "AuthenticationResponse",
    "MessageResponse",
    "StoryCreatedResponse",
    "StoryPayload",
]
