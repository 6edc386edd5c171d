"""
Scenario execution engine.

The ScenarioRunner executes scenarios one by one against a shared
session, handling path resolution, requests, captured state, dependency
checks and assertion validation.
"""

import logging
import string
import time
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from harness.results import ScenarioResult, ScenarioStatus, SuiteReport
from harness.scenarios.base import Scenario, validate_order
from harness.session import ScenarioContext, Session
from harness.validators import assert_status
from story_client import APIResponse, StoryClientError, StoryPayload

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """Executes scenarios in declared order against one session.

    The runner handles:
    - Skipping scenarios whose dependencies did not pass
    - Skipping scenarios whose required context values are undefined
    - Filling path placeholders from the context and path params
    - Checking the expected status and running assertions
    - Capturing response fields into the context
    - Printing progress for debugging

    A failing scenario never stops the run; the next one is attempted.

    Args:
        session: The open session (client, token, context).
        verbose: Whether to print progress messages.
    """

    def __init__(self, session: Session, verbose: bool = True):
        self.session = session
        self.verbose = verbose
        self.results: dict[str, ScenarioResult] = {}

    @property
    def context(self) -> ScenarioContext:
        return self.session.context

    def run(self, scenarios: list[Scenario]) -> SuiteReport:
        """Execute every scenario in order.

        Args:
            scenarios: The ordered scenario list.

        Returns:
            The report, one result per scenario.

        Raises:
            ValueError: If the list has duplicate names or forward dependencies.
        """
        validate_order(scenarios)
        self._print_header(scenarios)

        report = SuiteReport()
        for index, item in enumerate(scenarios, 1):
            self._print_step(index, item)
            result = self.run_scenario(item)
            report.results.append(result)
            self._print_step_complete(result)

        self._print_footer(report)
        return report

    def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        """Execute a single scenario and record its result.

        Args:
            scenario: The scenario to execute.

        Returns:
            The scenario's result. Failures are returned, not raised.
        """
        started = time.perf_counter()

        reason = self._unmet_precondition(scenario)
        if reason is not None:
            result = ScenarioResult(
                name=scenario.name,
                description=scenario.description,
                status=ScenarioStatus.SKIPPED,
                reason=reason,
            )
            return self._record(result)

        response: APIResponse | None = None
        captured: Any = None
        try:
            path = self._resolve_path(scenario)
            response = self.session.client.http.execute(
                scenario.method,
                path,
                json=self._payload(scenario.payload),
            )
            assert_status(response.status_code, scenario.expect_status, response.body)
            if scenario.capture is not None:
                captured = self._capture(scenario, response)
            for assertion in scenario.assertions:
                assertion(response)
        except (AssertionError, StoryClientError) as e:
            reason = str(e)
            if captured is not None:
                # The resource exists server-side even though the scenario failed
                reason += f" ({scenario.capture.store_as}={captured!r} was stored)"
            result = ScenarioResult(
                name=scenario.name,
                description=scenario.description,
                status=ScenarioStatus.FAILED,
                reason=reason,
                status_code=response.status_code if response is not None else None,
                elapsed=time.perf_counter() - started,
                error=e,
            )
            return self._record(result)

        result = ScenarioResult(
            name=scenario.name,
            description=scenario.description,
            status=ScenarioStatus.PASSED,
            status_code=response.status_code,
            elapsed=time.perf_counter() - started,
        )
        return self._record(result)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _unmet_precondition(self, scenario: Scenario) -> str | None:
        """Return why the scenario cannot run, or None if it can."""
        for dependency in scenario.depends_on:
            previous = self.results.get(dependency)
            if previous is None:
                return f"dependency '{dependency}' has not run"
            if not previous.passed:
                return f"dependency '{dependency}' {previous.status.value}"

        missing = self.context.missing(scenario.requires)
        if missing:
            return f"precondition not met: {', '.join(missing)} undefined"

        placeholders = [
            name
            for _, name, _, _ in string.Formatter().parse(scenario.path)
            if name
        ]
        undefined = [
            name
            for name in placeholders
            if name not in scenario.path_params and not self.context.has(name)
        ]
        if undefined:
            return f"precondition not met: {', '.join(undefined)} undefined"
        return None

    def _resolve_path(self, scenario: Scenario) -> str:
        """Fill path placeholders, path params taking precedence."""
        values = {**self.context.values, **scenario.path_params}
        path = scenario.path
        for name, value in values.items():
            placeholder = "{%s}" % name
            if placeholder in path:
                path = path.replace(placeholder, quote(str(value), safe=""))
        return path

    @staticmethod
    def _payload(payload: Any) -> Any:
        if isinstance(payload, StoryPayload):
            return payload.to_wire()
        if isinstance(payload, BaseModel):
            return payload.model_dump(by_alias=True, exclude_none=True)
        return payload

    def _capture(self, scenario: Scenario, response: APIResponse) -> Any:
        capture = scenario.capture
        try:
            data = response.json()
        except ValueError:
            raise AssertionError(
                f"Cannot capture '{capture.json_field}': body is not JSON"
            ) from None
        value = data.get(capture.json_field) if isinstance(data, dict) else None
        if value is None or value == "":
            raise AssertionError(
                f"Cannot capture '{capture.json_field}': field missing or empty"
            )
        self.context.store(capture.store_as, value)
        logger.debug("Captured %s=%r", capture.store_as, value)
        return value

    def _record(self, result: ScenarioResult) -> ScenarioResult:
        self.results[result.name] = result
        if result.failed:
            logger.warning("Scenario %s failed: %s", result.name, result.reason)
        elif result.skipped:
            logger.warning("Scenario %s skipped: %s", result.name, result.reason)
        else:
            logger.info("Scenario %s passed (%.2fs)", result.name, result.elapsed)
        return result

    # -------------------------------------------------------------------------
    # Printing Helpers
    # -------------------------------------------------------------------------

    def _print_header(self, scenarios: list[Scenario]) -> None:
        if self.verbose:
            print(f"\n{'='*60}")
            print(f"Running against: {self.session.base_url}")
            print(f"Authenticated: {self.session.authenticated}")
            print(f"Scenarios: {len(scenarios)}")
            print(f"{'='*60}\n")

    def _print_step(self, index: int, scenario: Scenario) -> None:
        if self.verbose:
            print(f"Scenario {index}: {scenario.description}")

    def _print_step_complete(self, result: ScenarioResult) -> None:
        if not self.verbose:
            return
        if result.passed:
            print(f"  ✓ Passed ({result.status_code})\n")
        elif result.skipped:
            print(f"  - Skipped: {result.reason}\n")
        else:
            print(f"  ✗ Failed: {result.reason}\n")

    def _print_footer(self, report: SuiteReport) -> None:
        if self.verbose:
            print(f"\n{'='*60}")
            print(f"{'✅' if report.ok else '❌'} {report.summary()}")
            print(f"{'='*60}\n")
