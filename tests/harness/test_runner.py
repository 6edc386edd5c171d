"""Tests for the ordered scenario runner and its DSL.

This module tests harness/runner.py, harness/scenarios/base.py and
harness/results.py against the in-process fake backend:

1. Scenario declaration and order validation
2. Status checks, assertions and captured context values
3. Skipping on failed dependencies and undefined context keys
4. Failures recorded per scenario without stopping the run
5. The suite report and progress output
"""

import httpx
import pytest

from harness.config import HarnessSettings
from harness.results import ScenarioResult, ScenarioStatus, SuiteReport
from harness.runner import ScenarioRunner
from harness.scenarios import Capture, scenario
from harness.scenarios import base as scenario_base
from harness.scenarios.base import validate_order
from harness.session import STORY_ID, open_session
from harness.validators import ResponseValidator
from story_client import (
    CREATE_PATH,
    DELETE_PATH,
    EDIT_PATH,
    LIST_PATH,
    HttpMethod,
    StoryPayload,
)

VALID_STORY = StoryPayload(title="T", description="D")

CREATE = scenario(
    "create",
    "Create a story",
    "POST",
    CREATE_PATH,
    payload=VALID_STORY,
    expect_status=201,
    capture=Capture(json_field="storyId", store_as=STORY_ID),
)

DELETE = scenario(
    "delete",
    "Delete the created story",
    "DELETE",
    DELETE_PATH,
    requires=[STORY_ID],
    depends_on=["create"],
)


# =============================================================================
# DSL
# =============================================================================


class TestScenarioFactory:
    def test_defaults(self) -> None:
        item = scenario("list", "List", "GET", LIST_PATH)

        assert item.expect_status == 200
        assert item.payload is None
        assert item.assertions == []
        assert item.capture is None
        assert item.requires == []
        assert item.depends_on == []
        assert item.path_params == {}

    def test_method_type_is_the_client_one(self) -> None:
        assert scenario_base.HttpMethod is HttpMethod


class TestValidateOrder:
    def test_accepts_backward_dependencies(self) -> None:
        validate_order([CREATE, DELETE])

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            validate_order([CREATE, CREATE])

    def test_rejects_unknown_dependency(self) -> None:
        with pytest.raises(ValueError, match="unknown scenario 'create'"):
            validate_order([DELETE])

    def test_rejects_forward_dependency(self) -> None:
        with pytest.raises(ValueError, match="declared after"):
            validate_order([DELETE, CREATE])

    def test_run_validates_first(self, runner, fake_state) -> None:
        requests_before = len(fake_state.requests)
        with pytest.raises(ValueError):
            runner.run([DELETE, CREATE])
        assert len(fake_state.requests) == requests_before


# =============================================================================
# run_scenario
# =============================================================================


class TestRunScenario:
    def test_pass_records_status_and_capture(self, runner, fake_state) -> None:
        result = runner.run_scenario(CREATE)

        assert result.passed
        assert result.status_code == 201
        assert result.elapsed >= 0
        assert runner.context.story_id in fake_state.stories
        assert runner.results["create"] is result

    def test_status_mismatch_fails(self, runner) -> None:
        item = scenario("list", "List", "GET", LIST_PATH, expect_status=204)

        result = runner.run_scenario(item)

        assert result.failed
        assert result.status_code == 200
        assert "Expected status 204, got 200" in result.reason
        assert isinstance(result.error, AssertionError)

    def test_assertion_failure_fails(self, runner) -> None:
        item = scenario(
            "list",
            "List",
            "GET",
            LIST_PATH,
            assertions=[ResponseValidator.json_non_empty_list()],
        )

        result = runner.run_scenario(item)

        assert result.failed
        assert "non-empty list" in result.reason

    def test_failure_after_capture_names_stored_id(self, runner, fake_state) -> None:
        """A story created by a failing scenario is named in the reason."""
        item = scenario(
            "create",
            "Create with an unmet message check",
            "POST",
            CREATE_PATH,
            payload=VALID_STORY,
            expect_status=201,
            assertions=[ResponseValidator.body_contains("Not the message")],
            capture=Capture(json_field="storyId", store_as=STORY_ID),
        )

        result = runner.run_scenario(item)

        story_id = runner.context.story_id
        assert result.failed
        assert story_id in fake_state.stories
        assert f"story_id={story_id!r} was stored" in result.reason

    def test_capture_missing_field_fails(self, runner) -> None:
        item = scenario(
            "create",
            "Create",
            "POST",
            CREATE_PATH,
            payload=VALID_STORY,
            expect_status=201,
            capture=Capture(json_field="id", store_as=STORY_ID),
        )

        result = runner.run_scenario(item)

        assert result.failed
        assert "Cannot capture 'id'" in result.reason
        assert not runner.context.has(STORY_ID)

    def test_context_fills_path(self, runner, fake_state) -> None:
        runner.run_scenario(CREATE)
        story_id = runner.context.story_id

        result = runner.run_scenario(DELETE)

        assert result.passed
        assert fake_state.requests[-1][:2] == ("DELETE", f"/api/Story/Delete/{story_id}")

    def test_path_params_take_precedence(self, runner, fake_state) -> None:
        runner.run_scenario(CREATE)
        item = scenario(
            "edit_missing",
            "Edit a missing story",
            "PUT",
            EDIT_PATH,
            payload=VALID_STORY,
            path_params={"story_id": "123"},
            expect_status=404,
        )

        assert runner.run_scenario(item).passed
        assert fake_state.requests[-1][:2] == ("PUT", "/api/Story/Edit/123")

    def test_dict_payload_sent_as_is(self, runner) -> None:
        item = scenario(
            "create_raw",
            "Create from a raw dict",
            "POST",
            CREATE_PATH,
            payload={"Title": "Raw", "Description": "Dict"},
            expect_status=201,
        )
        assert runner.run_scenario(item).passed


class TestPreconditions:
    def test_dependency_not_run_skips(self, runner, fake_state) -> None:
        requests_before = len(fake_state.requests)

        result = runner.run_scenario(DELETE)

        assert result.skipped
        assert result.reason == "dependency 'create' has not run"
        assert result.status_code is None
        assert len(fake_state.requests) == requests_before

    def test_failed_dependency_skips(self, runner) -> None:
        failing_create = scenario(
            "create",
            "Create with the wrong expectation",
            "POST",
            CREATE_PATH,
            payload=VALID_STORY,
            expect_status=200,
            capture=Capture(json_field="storyId", store_as=STORY_ID),
        )
        runner.run_scenario(failing_create)

        result = runner.run_scenario(DELETE)

        assert result.skipped
        assert result.reason == "dependency 'create' failed"

    def test_missing_required_key_skips(self, runner) -> None:
        item = scenario(
            "delete",
            "Delete",
            "DELETE",
            DELETE_PATH,
            requires=[STORY_ID],
        )

        result = runner.run_scenario(item)

        assert result.skipped
        assert result.reason == "precondition not met: story_id undefined"

    def test_undefined_placeholder_skips(self, runner, fake_state) -> None:
        requests_before = len(fake_state.requests)
        item = scenario("edit", "Edit", "PUT", EDIT_PATH, payload=VALID_STORY)

        result = runner.run_scenario(item)

        assert result.skipped
        assert "story_id undefined" in result.reason
        assert len(fake_state.requests) == requests_before


class TestTransportFailures:
    def test_transport_error_fails_and_run_continues(self) -> None:
        """A broken connection after login fails only the affected scenario."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if request.url.path == "/api/User/Authentication":
                return httpx.Response(200, json={"accessToken": "jwt"})
            if request.url.path == LIST_PATH:
                raise httpx.ReadTimeout("slow", request=request)
            return httpx.Response(400, json={"msg": "Unable to delete this story spoiler!"})

        settings = HarnessSettings(base_url="http://flaky.test", verbose=False)
        scenarios = [
            scenario("list", "List", "GET", LIST_PATH),
            scenario(
                "delete_missing",
                "Delete a missing story",
                "DELETE",
                DELETE_PATH,
                path_params={"story_id": "123"},
                expect_status=400,
            ),
        ]

        with open_session(settings, transport=httpx.MockTransport(handler)) as session:
            report = ScenarioRunner(session, verbose=False).run(scenarios)

        assert [r.status for r in report.results] == [
            ScenarioStatus.FAILED,
            ScenarioStatus.PASSED,
        ]
        assert "timed out" in report.get("list").reason
        assert calls[-1] == "/api/Story/Delete/123"

    def test_undecodable_body_fails_and_run_continues(self) -> None:
        """A corrupt compressed body fails its scenario, not the whole run."""
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/User/Authentication":
                return httpx.Response(200, json={"accessToken": "jwt"})
            if request.url.path == LIST_PATH:
                return httpx.Response(
                    200,
                    headers={"Content-Encoding": "gzip"},
                    content=b"not gzip",
                )
            return httpx.Response(400, json={"msg": "Unable to delete this story spoiler!"})

        settings = HarnessSettings(base_url="http://flaky.test", verbose=False)
        scenarios = [
            scenario("list", "List", "GET", LIST_PATH),
            scenario(
                "delete_missing",
                "Delete a missing story",
                "DELETE",
                DELETE_PATH,
                path_params={"story_id": "123"},
                expect_status=400,
            ),
        ]

        with open_session(settings, transport=httpx.MockTransport(handler)) as session:
            report = ScenarioRunner(session, verbose=False).run(scenarios)

        assert [r.status for r in report.results] == [
            ScenarioStatus.FAILED,
            ScenarioStatus.PASSED,
        ]
        assert report.get("list").status_code is None


# =============================================================================
# run and SuiteReport
# =============================================================================


class TestRun:
    def test_runs_in_declared_order(self, runner, fake_state) -> None:
        report = runner.run([CREATE, DELETE])

        assert [r.name for r in report.results] == ["create", "delete"]
        assert report.ok
        assert report.exit_code == 0
        assert fake_state.stories == {}

    def test_verbose_output(self, session, capsys: pytest.CaptureFixture) -> None:
        ScenarioRunner(session, verbose=True).run([CREATE, DELETE])

        out = capsys.readouterr().out
        assert "Scenario 1: Create a story" in out
        assert "✓ Passed (201)" in out
        assert "2 passed, 0 failed, 0 skipped" in out

    def test_quiet_runner_prints_nothing(self, runner, capsys: pytest.CaptureFixture) -> None:
        runner.run([CREATE])
        assert capsys.readouterr().out == ""


class TestSuiteReport:
    def _result(self, name: str, status: ScenarioStatus) -> ScenarioResult:
        return ScenarioResult(name=name, description=name, status=status)

    def test_counts_and_summary(self) -> None:
        report = SuiteReport(
            results=[
                self._result("a", ScenarioStatus.PASSED),
                self._result("b", ScenarioStatus.FAILED),
                self._result("c", ScenarioStatus.SKIPPED),
            ]
        )

        assert [r.name for r in report.passed] == ["a"]
        assert [r.name for r in report.failed] == ["b"]
        assert [r.name for r in report.skipped] == ["c"]
        assert report.summary() == "1 passed, 1 failed, 1 skipped"
        assert report.get("b").failed
        assert report.get("zzz") is None

    def test_skipped_is_not_ok(self) -> None:
        report = SuiteReport(results=[self._result("a", ScenarioStatus.SKIPPED)])
        assert not report.ok
        assert report.exit_code == 1

    def test_all_passed_is_ok(self) -> None:
        report = SuiteReport(results=[self._result("a", ScenarioStatus.PASSED)])
        assert report.ok
        assert report.exit_code == 0
