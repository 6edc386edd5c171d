"""Outcome types for scenario runs."""

from dataclasses import dataclass, field
from enum import Enum


class ScenarioStatus(Enum):
    """Outcome of a single scenario."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class ScenarioResult:
    """The outcome of running one scenario.

    Attributes:
        name: Scenario name.
        description: Scenario description.
        status: Passed, failed or skipped.
        reason: Failure message or skip reason.
        status_code: HTTP status received, if a request was sent.
        elapsed: Seconds spent on the scenario.
        error: The exception behind a failure, if any.
    """

    name: str
    description: str
    status: ScenarioStatus
    reason: str | None = None
    status_code: int | None = None
    elapsed: float = 0.0
    error: BaseException | None = None

    @property
    def passed(self) -> bool:
        return self.status is ScenarioStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status is ScenarioStatus.FAILED

    @property
    def skipped(self) -> bool:
        return self.status is ScenarioStatus.SKIPPED


@dataclass
class SuiteReport:
    """Aggregate outcome of a suite run, in execution order."""

    results: list[ScenarioResult] = field(default_factory=list)

    @property
    def passed(self) -> list[ScenarioResult]:
        return [r for r in self.results if r.passed]

    @property
    def failed(self) -> list[ScenarioResult]:
        return [r for r in self.results if r.failed]

    @property
    def skipped(self) -> list[ScenarioResult]:
        return [r for r in self.results if r.skipped]

    @property
    def ok(self) -> bool:
        """True when no scenario failed or was skipped."""
        return not self.failed and not self.skipped

    @property
    def exit_code(self) -> int:
        """Process exit code for this report (0 on success, 1 otherwise)."""
        return 0 if self.ok else 1

    def get(self, name: str) -> ScenarioResult | None:
        for result in self.results:
            if result.name == name:
                return result
        return None

    def summary(self) -> str:
        return (
            f"{len(self.passed)} passed, {len(self.failed)} failed, "
            f"{len(self.skipped)} skipped"
        )
