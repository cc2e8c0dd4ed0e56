"""Unit tests for the structured logging configuration.

Verifies that ``configure_logging()`` produces well-formed output on stderr,
that the ``search_word_var`` context variable is propagated, and that
secret-bearing fields are redacted.
"""

from __future__ import annotations

import json
import logging
from io import StringIO

from malay_dictionary.core.logging_config import (
    _redact_secrets,
    configure_logging,
    search_word_var,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _capture_log_output(log_level: str, message: str) -> str:
    """Emit a single log record and capture the raw text written by the handler.

    Args:
        log_level: Logging level string (e.g. ``"INFO"``).
        message: Log message to emit.

    Returns:
        The raw text captured from the stream handler's output.
    """
    configure_logging(log_level)

    buffer = StringIO()
    root = logging.getLogger()
    original_streams = []
    for handler in root.handlers:
        if hasattr(handler, "stream"):
            original_streams.append((handler, handler.stream))
            handler.stream = buffer

    logging.getLogger("test.logging_config").info(message)

    for handler, stream in original_streams:
        handler.flush()
        handler.stream = stream

    return buffer.getvalue()


def _find_record(output: str, event: str) -> dict | None:
    lines = [line for line in output.strip().splitlines() if line.strip()]
    records = [json.loads(line) for line in lines]
    return next((r for r in records if r.get("event") == event), None)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestConfigureLoggingJson:
    """Verify INFO-level JSON output."""

    def test_logging_produces_json(self) -> None:
        output = _capture_log_output("INFO", "test_message_json")

        lines = [line for line in output.strip().splitlines() if line.strip()]
        assert lines, "Expected at least one log line, got none"
        for line in lines:
            assert isinstance(json.loads(line), dict)

    def test_json_contains_required_fields(self) -> None:
        record = _find_record(_capture_log_output("INFO", "required_fields_test"), "required_fields_test")

        assert record is not None, "Expected log record not found"
        assert "timestamp" in record
        assert record["level"] == "info"
        assert record["logger"] == "test.logging_config"

    def test_handler_writes_to_stderr(self, capsys) -> None:
        configure_logging("INFO")
        logging.getLogger("test.logging_config").warning("stderr_test")

        captured = capsys.readouterr()
        assert "stderr_test" not in captured.out

    def test_debug_level_uses_console_renderer(self) -> None:
        output = _capture_log_output("DEBUG", "console_render_test")

        assert "console_render_test" in output
        assert not output.lstrip().startswith("{")

    def test_http_libraries_quieted_outside_debug(self) -> None:
        configure_logging("INFO")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestSearchWordContextVar:
    """Verify that the search_word ContextVar is propagated into log records."""

    def test_search_word_appears_in_json_output(self) -> None:
        token = search_word_var.set("hello")
        try:
            output = _capture_log_output("INFO", "search_word_propagation_test")
        finally:
            search_word_var.reset(token)

        record = _find_record(output, "search_word_propagation_test")
        assert record is not None
        assert record.get("search_word") == "hello"

    def test_no_search_word_when_var_unset(self) -> None:
        output = _capture_log_output("INFO", "no_search_word_test")

        record = _find_record(output, "no_search_word_test")
        assert record is not None
        assert record.get("search_word") is None


class TestRedactSecrets:
    def test_top_level_keys_redacted(self) -> None:
        event = _redact_secrets(
            None, "info", {"event": "x", "proxy_password": "hunter2", "Authorization": "Basic abc"}
        )

        assert event["proxy_password"] == "[REDACTED]"
        assert event["Authorization"] == "[REDACTED]"
        assert event["event"] == "x"

    def test_nested_header_values_redacted(self) -> None:
        event = _redact_secrets(
            None, "info", {"event": "x", "headers": {"Cookie": "session=1", "Accept": "text/html"}}
        )

        assert event["headers"] == {"Cookie": "[REDACTED]", "Accept": "text/html"}

    def test_ordinary_fields_untouched(self) -> None:
        event = _redact_secrets(None, "info", {"event": "x", "word": "hello", "attempts": 2})

        assert event == {"event": "x", "word": "hello", "attempts": 2}


class TestConfigureLoggingIdempotent:
    def test_calling_twice_does_not_duplicate_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")

        assert len(logging.getLogger().handlers) == 1
