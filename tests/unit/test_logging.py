from __future__ import annotations

import json
import logging

from reducekit.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_COUNT = 2
EXPECTED_ITEMS = 6


def _make_record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _make_record()
    record.count = EXPECTED_COUNT
    record.matcher = "exact"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["count"] == EXPECTED_COUNT
    assert payload["matcher"] == "exact"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _make_record()
    record.extra = {"items": EXPECTED_ITEMS}

    payload = json.loads(_json_formatter(record))

    assert payload["items"] == EXPECTED_ITEMS
    assert "extra" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        import sys

        record = logging.LogRecord(
            name="test.logger",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_installs_json_handler() -> None:
    configure_logging(level="debug", json_logs=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    configure_logging(level="INFO")


def test_configure_logging_without_force_keeps_existing_handlers() -> None:
    configure_logging(level="INFO")
    handlers = list(logging.getLogger().handlers)
    configure_logging(level="DEBUG", json_logs=True, force=False)
    assert logging.getLogger().handlers == handlers
    assert logging.getLogger().level == logging.INFO
