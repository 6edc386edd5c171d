"""JWT authentication against the Story Spoiler user endpoint.

This is an internal module. Import from `story_client` instead.
"""

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from story_client.exceptions import AuthenticationError
from story_client.models import AuthenticationRequest, AuthenticationResponse

if TYPE_CHECKING:
    from story_client._http import APIResponse, HTTPClient

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/User/Authentication"


class Authenticator:
    """Obtains a bearer token for a user.

    The authenticator only performs the login call and returns the token;
    attaching it to the shared HTTP client is the caller's job.

    Attributes:
        _http: The HTTP client used for the login call.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def authenticate(self, username: str, password: str) -> str:
        """Log in and return the access token.

        A response without a usable ``accessToken`` (error status, body that
        is not JSON, missing or non-string field) yields an empty string.
        The failure then shows up as 401s on later authenticated calls.

        Args:
            username: Account user name.
            password: Account password.

        Returns:
            The access token, or "" if none was issued.

        Raises:
            ConnectionError: If the server cannot be reached.
            TimeoutError: If the login call times out.
        """
        token, _ = self._login(username, password)
        return token

    def authenticate_or_raise(self, username: str, password: str) -> str:
        """Log in and return the access token, failing hard without one.

        Raises:
            AuthenticationError: If no token was issued.
            ConnectionError: If the server cannot be reached.
            TimeoutError: If the login call times out.
        """
        token, response = self._login(username, password)
        if not token:
            status_code = response.status_code if not response.is_success else 401
            raise AuthenticationError(
                message=f"No access token issued for user '{username}'",
                status_code=status_code,
                username=username,
                response_body=response.body,
            )
        return token

    def _login(self, username: str, password: str) -> tuple[str, "APIResponse"]:
        body = AuthenticationRequest(username=username, password=password)
        response = self._http.post(LOGIN_PATH, json=body.model_dump())

        try:
            data = response.json()
            token = AuthenticationResponse.model_validate(data).access_token
        except (ValueError, ValidationError) as e:
            logger.warning(
                "Login for '%s' returned HTTP %d with an unreadable body: %s",
                username,
                response.status_code,
                e,
            )
            return "", response

        if not token:
            logger.warning(
                "Login for '%s' returned HTTP %d without an access token",
                username,
                response.status_code,
            )
        else:
            logger.info("Authenticated as '%s'", username)
        return token, response
