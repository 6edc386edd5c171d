"""
Scenario definitions.

Each scenario is a Scenario dataclass containing:
- Metadata (name, description)
- The request (method, path template, payload)
- The expected status and assertions
- What it captures into, and needs from, the shared context
"""

from .base import Capture, Scenario, scenario, validate_order
from .story_spoiler import STORY_SPOILER_SCENARIOS

__all__ = [
    "Capture",
    "Scenario",
    "scenario",
    "validate_order",
    "STORY_SPOILER_SCENARIOS",
]
