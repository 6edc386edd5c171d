"""Suite session: the authenticated client plus state shared by scenarios.

A session is opened once per suite run and closed once at the end, on
every exit path::

    with open_session(load_settings()) as session:
        report = ScenarioRunner(session).run(STORY_SPOILER_SCENARIOS)
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import httpx

from harness.config import HarnessSettings
from story_client import StorySpoilerClient

logger = logging.getLogger(__name__)

STORY_ID = "story_id"


@dataclass
class ScenarioContext:
    """Mutable state passed from one scenario to the next.

    Values are stored by key; ``story_id`` is the identifier captured by
    the create scenario and read by the edit and delete scenarios.

    Attributes:
        values: Captured values by key.
    """

    values: dict[str, Any] = field(default_factory=dict)

    def store(self, key: str, value: Any) -> None:
        """Store a captured value.

        Raises:
            ValueError: If the value is None or an empty string.
        """
        if value is None or value == "":
            raise ValueError(f"Refusing to store an empty value for '{key}'")
        self.values[key] = value

    def has(self, key: str) -> bool:
        return key in self.values

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def missing(self, keys: list[str]) -> list[str]:
        """Return the keys from ``keys`` that are not defined yet."""
        return [key for key in keys if key not in self.values]

    def clear(self) -> None:
        self.values.clear()

    @property
    def story_id(self) -> str | None:
        """The id of the story created in this session, if any."""
        return self.values.get(STORY_ID)

    @story_id.setter
    def story_id(self, value: str) -> None:
        self.store(STORY_ID, value)


@dataclass
class Session:
    """Everything a suite run shares.

    Attributes:
        settings: The settings the session was opened with.
        client: The authenticated client (one connection pool per suite).
        token: The bearer token returned by the login call.
        context: State shared between scenarios.
    """

    settings: HarnessSettings
    client: StorySpoilerClient
    token: str = ""
    context: ScenarioContext = field(default_factory=ScenarioContext)

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def authenticated(self) -> bool:
        return bool(self.token)


@contextmanager
def open_session(
    settings: HarnessSettings,
    transport: httpx.BaseTransport | None = None,
) -> Iterator[Session]:
    """Open an authenticated session and close it on exit.

    The login happens before anything is yielded, so an unreachable base
    URL (or, with ``strict_auth``, a refused login) aborts the suite
    before the first scenario runs. The client is closed in every case.

    Args:
        settings: Suite settings.
        transport: Custom httpx transport (e.g. for offline tests).

    Yields:
        The open session.

    Raises:
        ConnectionError: If the base URL cannot be reached.
        TimeoutError: If the login call times out.
        AuthenticationError: If ``strict_auth`` is set and no token is issued.
    """
    client = StorySpoilerClient(
        base_url=settings.base_url,
        timeout=settings.timeout,
        transport=transport,
    )
    try:
        token = client.login(
            settings.username,
            settings.password,
            strict=settings.strict_auth,
        )
        session = Session(settings=settings, client=client, token=token)
        logger.info(
            "Session opened against %s (authenticated: %s)",
            settings.base_url,
            session.authenticated,
        )
        yield session
    finally:
        client.close()
        logger.info("Session against %s closed", settings.base_url)
