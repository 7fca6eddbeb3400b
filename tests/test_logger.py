"""Tests for the structured logger."""

import json
import logging

from pulsegate.logging import LogLevel, StructuredLogger, configure_logging, get_logger


def test_json_record(caplog):
    logger = StructuredLogger("test.json", LogLevel.INFO, extra_fields={"gate": "nightly"})
    with caplog.at_level(logging.INFO, logger="test.json"):
        logger.info("hello", lag_ms=5)
    record = json.loads(caplog.records[-1].getMessage())
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["logger"] == "test.json"
    assert record["gate"] == "nightly"
    assert record["lag_ms"] == 5
    assert "timestamp" in record


def test_text_record(caplog):
    logger = StructuredLogger("test.text", LogLevel.INFO, format_json=False)
    with caplog.at_level(logging.INFO, logger="test.text"):
        logger.warning("careful", lag_ms=5)
    assert caplog.records[-1].getMessage() == "[WARNING] careful lag_ms=5"
    assert caplog.records[-1].levelno == logging.WARNING


def test_level_filters_records(caplog):
    logger = StructuredLogger("test.level", LogLevel.WARNING)
    with caplog.at_level(logging.DEBUG):
        logger.info("dropped")
        logger.error("kept")
    messages = [json.loads(r.getMessage())["message"] for r in caplog.records
                if r.name == "test.level"]
    assert messages == ["kept"]


def test_get_logger_follows_config(monkeypatch):
    monkeypatch.setenv("PULSEGATE_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("PULSEGATE_LOG_FORMAT", "text")
    logger = get_logger("test.config")
    assert logger.level == LogLevel.ERROR
    assert logger.format_json is False


def test_get_logger_explicit_arguments_win():
    logger = get_logger("test.explicit", LogLevel.DEBUG, format_json=True, component="x")
    assert logger.level == LogLevel.DEBUG
    assert logger.extra_fields == {"component": "x"}


def test_configure_logging_is_idempotent():
    root = logging.getLogger("pulsegate")
    before = list(root.handlers)
    try:
        configure_logging(LogLevel.DEBUG)
        configure_logging(LogLevel.DEBUG)
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers = before
        root.setLevel(logging.NOTSET)


def test_configured_logging_prints_suppressed_pulses(capsys, clock, sink, metrics):
    from pulsegate.scheduler.gate import Gate

    root = logging.getLogger("pulsegate")
    before = list(root.handlers)
    try:
        configure_logging(LogLevel.INFO)
        Gate("0 0 1 1 *", sink, clock=clock, metrics=metrics).pulse(None)
    finally:
        root.handlers = before
        root.setLevel(logging.NOTSET)
    err = capsys.readouterr().err
    assert "Not the right moment, see you again in 74d 10h 30min" in err
