"""
Story Spoiler CRUD suite.

Seven ordered scenarios against the story endpoints. The first creates a
story and captures its id; the next three edit, list and delete it. The
last three exercise the error paths and need no earlier state.

Scenario Flow:
1. Create a story -> 201, "Successfully created!", storyId captured
2. Edit the created story -> 200, "Successfully edited"
3. List all stories -> 200, non-empty array
4. Delete the created story -> 200, "Deleted successfully!"
5. Create with empty title and description -> 400
6. Edit story "123" -> 404, "No spoilers..."
7. Delete story "123" -> 400, "Unable to delete this story spoiler!"
"""

from harness.scenarios.base import Capture, scenario
from harness.session import STORY_ID
from harness.validators import ResponseValidator
from story_client import CREATE_PATH, DELETE_PATH, EDIT_PATH, LIST_PATH, StoryPayload

NON_EXISTING_STORY_ID = "123"

CREATED_MESSAGE = "Successfully created!"
EDITED_MESSAGE = "Successfully edited"
DELETED_MESSAGE = "Deleted successfully!"
NOT_FOUND_MESSAGE = "No spoilers..."
DELETE_FAILED_MESSAGE = "Unable to delete this story spoiler!"

NEW_STORY = StoryPayload(
    title="New Story",
    description="Interesting story",
    url="",
)

EDITED_STORY = StoryPayload(
    title="Edited Story",
    description="This is an updated test story description.",
    url="",
)

INVALID_STORY = StoryPayload(title="", description="", url=None)

NON_EXISTING_STORY_CHANGES = StoryPayload(
    title="Edited Non-Existing Story",
    description="This is an updated test story description for a non-existing story.",
    url="",
)


CREATE_STORY = scenario(
    "create_story",
    "Create a story with valid fields",
    "POST",
    CREATE_PATH,
    payload=NEW_STORY,
    expect_status=201,
    assertions=[
        ResponseValidator.json_field_not_empty("storyId"),
        ResponseValidator.body_contains(CREATED_MESSAGE),
    ],
    capture=Capture(json_field="storyId", store_as=STORY_ID),
)

EDIT_STORY = scenario(
    "edit_story",
    "Edit the created story",
    "PUT",
    EDIT_PATH,
    payload=EDITED_STORY,
    expect_status=200,
    assertions=[ResponseValidator.body_contains(EDITED_MESSAGE)],
    requires=[STORY_ID],
    depends_on=["create_story"],
)

LIST_STORIES = scenario(
    "list_stories",
    "List all stories",
    "GET",
    LIST_PATH,
    expect_status=200,
    assertions=[ResponseValidator.json_non_empty_list()],
    depends_on=["create_story"],
)

DELETE_STORY = scenario(
    "delete_story",
    "Delete the created story",
    "DELETE",
    DELETE_PATH,
    expect_status=200,
    assertions=[ResponseValidator.body_contains(DELETED_MESSAGE)],
    requires=[STORY_ID],
    depends_on=["create_story"],
)

CREATE_INVALID_STORY = scenario(
    "create_story_without_required_fields",
    "Create a story with empty title and description",
    "POST",
    CREATE_PATH,
    payload=INVALID_STORY,
    expect_status=400,
)

EDIT_NON_EXISTING_STORY = scenario(
    "edit_non_existing_story",
    "Edit a story that does not exist",
    "PUT",
    EDIT_PATH,
    payload=NON_EXISTING_STORY_CHANGES,
    path_params={"story_id": NON_EXISTING_STORY_ID},
    expect_status=404,
    assertions=[ResponseValidator.body_contains(NOT_FOUND_MESSAGE)],
)

DELETE_NON_EXISTING_STORY = scenario(
    "delete_non_existing_story",
    "Delete a story that does not exist",
    "DELETE",
    DELETE_PATH,
    path_params={"story_id": NON_EXISTING_STORY_ID},
    expect_status=400,
    assertions=[ResponseValidator.body_contains(DELETE_FAILED_MESSAGE)],
)


STORY_SPOILER_SCENARIOS = [
    CREATE_STORY,
    EDIT_STORY,
    LIST_STORIES,
    DELETE_STORY,
    CREATE_INVALID_STORY,
    EDIT_NON_EXISTING_STORY,
    DELETE_NON_EXISTING_STORY,
]
