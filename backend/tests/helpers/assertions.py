"""Assertion helper utilities for tests."""

from __future__ import annotations

from typing import Any


def assert_json_keys(data: dict, required: set[str]) -> None:
    """Ensure that all required keys are present in ``data``.

    Parameters
    ----------
    data:
        JSON object under test.
    required:
        Set of required keys that must exist in ``data``.

    Raises
    ------
    AssertionError
        If any required key is missing.
    """

    missing = required - data.keys()
    assert not missing, f"Missing keys: {', '.join(sorted(missing))}"


def assert_success(body: dict[str, Any], message: str) -> Any:
    """Check the success envelope and return its ``data``.

    ``message`` is compared against the upper-cased wire value.
    """

    assert_json_keys(body, {"success", "data", "message"})
    assert body["success"] is True
    assert body["message"] == message.upper()
    return body["data"]


def assert_error(body: dict[str, Any], *, status: int, message: str | None = None) -> dict:
    """Check the error envelope and return its ``error`` object."""

    assert_json_keys(body, {"success", "message", "error"})
    assert body["success"] is False
    assert body["error"]["status"] == status
    assert body["error"]["request_id"]
    if message is not None:
        assert body["message"] == message
    return body["error"]
