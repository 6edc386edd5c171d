"""
Ordered API scenario harness.

Runs a declared list of HTTP scenarios against one authenticated session,
passing captured values (such as a created story's id) from one scenario
to the next.

Structure:
- config.py: Settings loaded from STORY_SPOILER_* variables and .env
- session.py: Session lifecycle and the shared ScenarioContext
- scenarios/: Scenario DSL and the Story Spoiler suite
- validators.py: Status and body assertions
- runner.py: ScenarioRunner that executes scenarios in order
- results.py: Per-scenario results and the suite report
"""

from .config import HarnessSettings, load_settings
from .results import ScenarioResult, ScenarioStatus, SuiteReport
from .runner import ScenarioRunner
from .scenarios import STORY_SPOILER_SCENARIOS, Capture, Scenario, scenario
from .session import STORY_ID, ScenarioContext, Session, open_session

__all__ = [
    "HarnessSettings",
    "load_settings",
    "ScenarioRunner",
    "ScenarioResult",
    "ScenarioStatus",
    "SuiteReport",
    "Capture",
    "Scenario",
    "scenario",
    "STORY_SPOILER_SCENARIOS",
    "STORY_ID",
    "ScenarioContext",
    "Session",
    "open_session",
]
