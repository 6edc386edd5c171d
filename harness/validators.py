"""Assertion helpers for scenario responses.

The module-level functions raise ``AssertionError`` with a message naming
the expected and the actual value. ``ResponseValidator`` wraps them into
callables that can be attached to a scenario.

Example:
    scenario(
        "delete_missing_story",
        "DELETE",
        DELETE_PATH,
        expect_status=400,
        assertions=[
            ResponseValidator.body_contains("Unable to delete this story spoiler!"),
        ],
    )
"""

from typing import Any, Callable

from story_client import APIResponse

# Type alias for assertion functions
AssertionFunc = Callable[[APIResponse], None]

_BODY_PREVIEW = 300


def _preview(body: str) -> str:
    if len(body) <= _BODY_PREVIEW:
        return body
    return body[:_BODY_PREVIEW] + "..."


def assert_status(actual: int, expected: int, body: str | None = None) -> None:
    """Assert an HTTP status code.

    Args:
        actual: The status code received.
        expected: The status code the scenario expects.
        body: Optional response body, quoted in the failure message.

    Raises:
        AssertionError: If the codes differ.
    """
    if actual != expected:
        message = f"Expected status {expected}, got {actual}"
        if body:
            message += f": {_preview(body)}"
        raise AssertionError(message)


def assert_body_contains(body: str | None, substring: str) -> None:
    """Assert that a response body contains a substring.

    Raises:
        AssertionError: If the body is empty or lacks the substring.
    """
    if not body or substring not in body:
        raise AssertionError(
            f"Expected body to contain {substring!r}, got {_preview(body or '')!r}"
        )


def assert_not_empty(value: Any, message: str) -> None:
    """Assert that a value is neither None nor empty.

    Raises:
        AssertionError: With ``message`` and the actual value.
    """
    if value is None or (hasattr(value, "__len__") and len(value) == 0):
        raise AssertionError(f"{message} (got {value!r})")


def _json_body(response: APIResponse) -> Any:
    try:
        return response.json()
    except ValueError:
        raise AssertionError(
            f"Expected a JSON body, got {_preview(response.body)!r}"
        ) from None


class ResponseValidator:
    """Factories for per-scenario response assertions."""

    @staticmethod
    def status(expected: int) -> AssertionFunc:
        """Assert the response status code."""
        def check(response: APIResponse) -> None:
            assert_status(response.status_code, expected, response.body)
        return check

    @staticmethod
    def body_contains(text: str) -> AssertionFunc:
        """Assert the raw body contains ``text``."""
        def check(response: APIResponse) -> None:
            assert_body_contains(response.body, text)
        return check

    @staticmethod
    def json_field_not_empty(name: str) -> AssertionFunc:
        """Assert the JSON object body has a non-empty field ``name``."""
        def check(response: APIResponse) -> None:
            data = _json_body(response)
            if not isinstance(data, dict):
                raise AssertionError(
                    f"Expected a JSON object with '{name}', got {type(data).__name__}"
                )
            assert_not_empty(data.get(name), f"Field '{name}' should not be null or empty")
        return check

    @staticmethod
    def json_non_empty_list() -> AssertionFunc:
        """Assert the body parses as a non-empty JSON array."""
        def check(response: APIResponse) -> None:
            data = _json_body(response)
            if not isinstance(data, list):
                raise AssertionError(
                    f"Expected a JSON array, got {type(data).__name__}"
                )
            assert_not_empty(data, "Expected a non-empty list")
        return check
