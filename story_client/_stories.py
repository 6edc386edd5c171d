"""Story sub-client for the Story Spoiler API.

This module provides StoriesClient for the story endpoints (/api/Story/*).
Every method returns the raw APIResponse so callers can assert on status
codes, including the error statuses.

This is an internal module. Import from `story_client` instead.
"""

from typing import TYPE_CHECKING
from urllib.parse import quote

from story_client._base import BaseClient
from story_client.models import StoryCreatedResponse, StoryPayload

if TYPE_CHECKING:
    from story_client._http import APIResponse

CREATE_PATH = "/api/Story/Create"
EDIT_PATH = "/api/Story/Edit/{story_id}"
LIST_PATH = "/api/Story/All"
DELETE_PATH = "/api/Story/Delete/{story_id}"


def story_path(template: str, story_id: str) -> str:
    """Substitute a story id into a path template.

    The id is percent-encoded as a single path segment. An empty id is
    substituted as-is and yields a path with an empty trailing segment.
    """
    return template.format(story_id=quote(str(story_id), safe=""))


class StoriesClient(BaseClient):
    """Client for the story CRUD endpoints.

    Example:
        >>> response = client.stories.create(StoryPayload(title="T", description="D"))
        >>> response.status_code
        201
    """

    def create(self, payload: StoryPayload) -> "APIResponse":
        """Create a story (``POST /api/Story/Create``)."""
        return self._post(CREATE_PATH, json=payload.to_wire())

    def edit(self, story_id: str, payload: StoryPayload) -> "APIResponse":
        """Replace a story's fields (``PUT /api/Story/Edit/{id}``)."""
        return self._put(story_path(EDIT_PATH, story_id), json=payload.to_wire())

    def list_all(self) -> "APIResponse":
        """List all stories (``GET /api/Story/All``)."""
        return self._get(LIST_PATH)

    def delete(self, story_id: str) -> "APIResponse":
        """Delete a story (``DELETE /api/Story/Delete/{id}``)."""
        return self._delete(story_path(DELETE_PATH, story_id))

    def create_and_parse(self, payload: StoryPayload) -> StoryCreatedResponse:
        """Create a story and return the parsed confirmation.

        Raises:
            APIError: If the server rejects the story (see raise_for_status).
        """
        response = self.create(payload)
        response.raise_for_status()
        return StoryCreatedResponse.model_validate(response.json())
