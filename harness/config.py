"""Harness configuration.

Settings come from ``STORY_SPOILER_*`` environment variables, or from a
``.env`` file in the working directory. The defaults point at the public
Story Spoiler deployment and its shared test account.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "STORY_SPOILER_"
ENV_FILE = ".env"

DEFAULT_BASE_URL = "https://d3s5nxhwblsjbi.cloudfront.net"
DEFAULT_USERNAME = "inso92"
DEFAULT_PASSWORD = "inso92"


class HarnessSettings(BaseSettings):
    """Connection and behaviour settings for a suite run.

    Each field is read from ``STORY_SPOILER_<FIELD>`` (e.g.
    ``STORY_SPOILER_BASE_URL``). Values passed to the constructor take
    precedence over the environment.

    Attributes:
        base_url: Base URL of the Story Spoiler API.
        username: Test account user name.
        password: Test account password.
        timeout: Per-request transport timeout in seconds.
        strict_auth: Abort session setup when no token is issued.
        verbose: Print scenario progress while running.
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    timeout: float = Field(default=30.0, gt=0)
    strict_auth: bool = False
    verbose: bool = True

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")


def load_settings(dotenv: bool = True, **overrides) -> HarnessSettings:
    """Build settings from the environment.

    Args:
        dotenv: Also read ``.env`` from the working directory. Real
            environment variables win over the file.
        **overrides: Field values that win over both.

    Returns:
        The validated settings.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    return HarnessSettings(_env_file=ENV_FILE if dotenv else None, **overrides)
