"""Pytest configuration and shared fixtures."""

import os

import pytest

# Load environment variables from .env file at test startup
# This makes STORY_SPOILER_* settings available before fixtures are created
from dotenv import load_dotenv
load_dotenv()

pytest_plugins = [
    "tests.fixtures.api",
]


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run the end-to-end suite against the real Story Spoiler API.",
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked ``live`` unless --live or STORY_SPOILER_LIVE=1."""
    if config.getoption("--live") or os.environ.get("STORY_SPOILER_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="live suite: pass --live or set STORY_SPOILER_LIVE=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)
