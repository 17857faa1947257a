"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog logger rendering JSON
- Long text values are truncated before rendering
- Context binding
"""

import json
import logging

import pytest

from text_commonizer.utils.logging import (
    TRUNCATION_MARKER,
    bind_context,
    get_logger,
    text_preview_processor,
    truncate_for_logging,
)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")


@pytest.mark.unit
def test_log_output_is_json(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("json_logger").info("profile_applied", profile="optimize")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "profile_applied"
    assert log_data["profile"] == "optimize"
    assert log_data["logger"] == "json_logger"
    assert "timestamp" in log_data


@pytest.mark.unit
def test_long_text_values_are_truncated(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("preview_logger").info("long_text", text="あ" * 500)

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["text"] == "あ" * 80 + TRUNCATION_MARKER


@pytest.mark.unit
def test_truncate_for_logging() -> None:
    data = {"text": "abcdef", "rule": "trim", "count": 3, "nested": {"v": "xyzxyz"}}

    assert truncate_for_logging(data, 4) == {
        "text": "abcd...",
        "rule": "trim",
        "count": 3,
        "nested": {"v": "xyzx..."},
    }


@pytest.mark.unit
def test_truncation_disabled_with_zero_limit() -> None:
    assert truncate_for_logging({"text": "abcdef"}, 0) == {"text": "abcdef"}


@pytest.mark.unit
def test_preview_processor_keeps_event(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TXC_LOG_TEXT_PREVIEW_CHARS", "2")

    event = text_preview_processor(
        logging.getLogger("x"), "info", {"event": "a_long_event_name", "text": "abcd"}
    )

    assert event == {"event": "a_long_event_name", "text": "ab..."}


@pytest.mark.unit
def test_bind_context(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    bind_context(profile="cjk_width", field="title").info("field_cleansed")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["profile"] == "cjk_width"
    assert log_data["field"] == "title"
