"""
Base classes for scenario definitions.

This module provides the DSL for declaring API test scenarios: one
request, its expected status, its assertions, what it captures into the
shared context and what it needs from earlier scenarios.
"""

from dataclasses import dataclass, field
from typing import Any

from harness.validators import AssertionFunc
from story_client import HttpMethod


@dataclass
class Capture:
    """A JSON response field to store in the scenario context.

    Args:
        json_field: Name of the field in the JSON object body.
        store_as: Context key to store the value under.
    """

    json_field: str
    store_as: str


@dataclass
class Scenario:
    """A single ordered test scenario.

    Args:
        name: Unique short name, used for dependencies and reporting.
        description: Human-readable description.
        method: HTTP method.
        path: Path template; ``{key}`` placeholders are filled from the
            scenario context, other keys from ``path_params``.
        payload: JSON body to send, if any.
        path_params: Fixed values for path placeholders.
        expect_status: Expected HTTP status code.
        assertions: Extra checks run on the response after the status check.
        capture: Response field to store in the context on success.
        requires: Context keys that must be defined before running.
        depends_on: Names of scenarios that must have passed.
    """

    name: str
    description: str
    method: HttpMethod
    path: str
    payload: Any = None
    path_params: dict[str, str] = field(default_factory=dict)
    expect_status: int = 200
    assertions: list[AssertionFunc] = field(default_factory=list)
    capture: Capture | None = None
    requires: list[str] = field(default_factory=list)
    depends_on: list[str] = field(default_factory=list)


def scenario(
    name: str,
    description: str,
    method: HttpMethod,
    path: str,
    *,
    payload: Any = None,
    path_params: dict[str, str] | None = None,
    expect_status: int = 200,
    assertions: list[AssertionFunc] | None = None,
    capture: Capture | None = None,
    requires: list[str] | None = None,
    depends_on: list[str] | None = None,
) -> Scenario:
    """Factory function for creating Scenario instances.

    Provides a cleaner syntax for defining scenarios in a suite.

    Returns:
        A configured Scenario instance.
    """
    return Scenario(
        name=name,
        description=description,
        method=method,
        path=path,
        payload=payload,
        path_params=path_params or {},
        expect_status=expect_status,
        assertions=assertions or [],
        capture=capture,
        requires=requires or [],
        depends_on=depends_on or [],
    )


def validate_order(scenarios: list[Scenario]) -> None:
    """Check that names are unique and dependencies point backwards.

    Raises:
        ValueError: On a duplicate name, an unknown dependency, or a
            dependency declared after the scenario that needs it.
    """
    seen: set[str] = set()
    names = {s.name for s in scenarios}
    for item in scenarios:
        if item.name in seen:
            raise ValueError(f"Duplicate scenario name '{item.name}'")
        for dependency in item.depends_on:
            if dependency not in names:
                raise ValueError(
                    f"Scenario '{item.name}' depends on unknown scenario '{dependency}'"
                )
            if dependency not in seen:
                raise ValueError(
                    f"Scenario '{item.name}' depends on '{dependency}', "
                    "which is declared after it"
                )
        seen.add(item.name)
