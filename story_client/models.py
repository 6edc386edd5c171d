"""Request and response models for the Story Spoiler API.

The remote API uses PascalCase keys for story payloads and camelCase keys
in responses; the models expose snake_case attributes and keep the wire
names as aliases.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "AuthenticationRequest",
    "AuthenticationResponse",
    "MessageResponse",
    "StoryCreatedResponse",
    "StoryPayload",
]


class AuthenticationRequest(BaseModel):
    """Body of ``POST /api/User/Authentication``.

    Attributes:
        username: Account user name.
        password: Account password.
    """

    username: str
    password: str


class AuthenticationResponse(BaseModel):
    """Login response.

    Attributes:
        access_token: The JWT issued for the user, empty if none was issued.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    access_token: str = Field(default="", alias="accessToken")


class StoryPayload(BaseModel):
    """Story create/edit payload.

    Title and description may be empty here: sending an invalid payload
    is one of the scenarios the suite exercises.

    Attributes:
        title: Story title.
        description: Story description.
        url: Optional image URL. Omitted from the body when None.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", alias="Title")
    description: str = Field(default="", alias="Description")
    url: str | None = Field(default="", alias="Url")

    def to_wire(self) -> dict[str, str]:
        """Serialize with the API's PascalCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class MessageResponse(BaseModel):
    """Generic ``{"msg": ...}`` response body."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    msg: str = ""


class StoryCreatedResponse(MessageResponse):
    """Body of a successful ``POST /api/Story/Create``.

    Attributes:
        story_id: Identifier of the created story.
        msg: Confirmation message ("Successfully created!").
    """

    story_id: str = Field(default="", alias="storyId")
