"""Shared fixtures for offline client and harness tests.

These fixtures provide a fresh fake Story Spoiler backend per test and an
httpx transport that routes the sync client into it, so no network is
needed.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from harness.config import HarnessSettings
from harness.runner import ScenarioRunner
from harness.session import open_session
from story_client import StorySpoilerClient
from tests.fixtures.fake_api import FakeStoryState, create_app

FAKE_BASE_URL = "http://story-spoiler.test"


class TestClientTransport(httpx.BaseTransport):
    """Route httpx.Client requests into an in-process ASGI app."""

    __test__ = False

    def __init__(self, app) -> None:
        self._client = TestClient(app, raise_server_exceptions=True)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        response = self._client.request(
            method=request.method,
            url=request.url.raw_path.decode(),
            content=request.read(),
            headers=dict(request.headers),
        )
        return httpx.Response(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
        )

    def shutdown(self) -> None:
        """Release the test client. close() is left a no-op so the
        transport outlives the httpx clients built on it."""
        self._client.close()


@pytest.fixture
def fake_state():
    """Provide an empty fake backend with the default test account."""
    return FakeStoryState()


@pytest.fixture
def fake_transport(fake_state):
    """Provide a transport serving the fake backend."""
    transport = TestClientTransport(create_app(fake_state))
    yield transport
    transport.shutdown()


@pytest.fixture
def settings():
    """Settings pointing at the fake backend, quiet output."""
    return HarnessSettings(
        base_url=FAKE_BASE_URL,
        username="inso92",
        password="inso92",
        timeout=30.0,
        strict_auth=False,
        verbose=False,
    )


@pytest.fixture
def story_client(fake_transport):
    """Provide an unauthenticated client bound to the fake backend."""
    with StorySpoilerClient(base_url=FAKE_BASE_URL, transport=fake_transport) as client:
        yield client


@pytest.fixture
def session(settings, fake_transport):
    """Provide an open, authenticated session against the fake backend."""
    with open_session(settings, transport=fake_transport) as session:
        yield session


@pytest.fixture
def runner(session):
    """Provide a quiet ScenarioRunner bound to the session."""
    return ScenarioRunner(session, verbose=False)
