"""Command-line entry point for the Story Spoiler suite.

Runs the seven scenarios against the configured deployment and exits
with the report's exit code:

    python -m harness        (or: story-spoiler-suite)

Settings come from ``STORY_SPOILER_*`` variables or a ``.env`` file (see
harness/config.py).
"""

import logging
import sys

import httpx

from harness.config import HarnessSettings, load_settings
from harness.runner import ScenarioRunner
from harness.scenarios import STORY_SPOILER_SCENARIOS
from harness.session import open_session
from story_client import StoryClientError

logger = logging.getLogger(__name__)


def main(
    settings: HarnessSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run the suite once and return the process exit code.

    A setup failure (unreachable base URL, or a refused login with strict
    auth) is logged and reported as exit code 2.
    """
    if settings is None:
        settings = load_settings()

    try:
        with open_session(settings, transport=transport) as session:
            runner = ScenarioRunner(session, verbose=settings.verbose)
            report = runner.run(STORY_SPOILER_SCENARIOS)
    except StoryClientError as e:
        logger.error("Suite setup failed: %s", e)
        return 2

    return report.exit_code


def cli() -> int:
    """Console script entry: configure logging, then run."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    return main()


if __name__ == "__main__":
    sys.exit(cli())
