"""Fixtures for the live end-to-end suite.

One session (login plus client) is shared by every test in a module, so
the story created by the first test is edited and deleted by the later
ones. The whole module skips if the configured base URL is unreachable.
"""

import httpx
import pytest

from harness.config import load_settings
from harness.runner import ScenarioRunner
from harness.session import open_session


def is_reachable(url: str, timeout: float = 10.0) -> bool:
    """Whether anything answers HTTP at ``url`` (any status counts)."""
    try:
        httpx.get(url, timeout=timeout)
    except httpx.TransportError:
        return False
    return True


@pytest.fixture(scope="module")
def live_settings():
    """Settings from STORY_SPOILER_* / .env. Skips if the API is unreachable."""
    settings = load_settings()
    if not is_reachable(settings.base_url, timeout=min(settings.timeout, 10.0)):
        pytest.skip(f"Story Spoiler API not reachable at {settings.base_url}")
    return settings


@pytest.fixture(scope="module")
def live_session(live_settings):
    """Authenticated session shared by the module, closed at module end."""
    with open_session(live_settings) as session:
        yield session


@pytest.fixture(scope="module")
def live_runner(live_session):
    """Runner whose results persist across the module's tests."""
    return ScenarioRunner(live_session, verbose=live_session.settings.verbose)
