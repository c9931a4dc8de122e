"""Unit coverage for structured logging utilities and library debug events."""

from __future__ import annotations

import json
import logging

from etrace.base.log_support import JsonFormatter
from etrace.base.logging import LogContext, get_logger, log_event


def _events(err_text: str) -> list[dict]:
    return [json.loads(line) for line in err_text.strip().splitlines() if line.strip()]


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("ETRACE_LOG_LEVEL", "ERROR")
    logger = get_logger(name="etrace.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"
    assert data["logger"] == "etrace.test"
    monkeypatch.delenv("ETRACE_LOG_LEVEL")
    get_logger(name="etrace.test")


def test_log_event_prunes_none_and_merges_context(capsys):
    logger = get_logger(name="etrace.test.events")
    log_event(logger, "trace.sample", LogContext(component="unit", extra={"k": 1, "gone": None}), a=1, b=None)
    payload = _events(capsys.readouterr().err)[-1]
    assert payload["event"] == "trace.sample"
    assert payload["component"] == "unit"
    assert payload["k"] == 1
    assert payload["a"] == 1
    assert "b" not in payload and "gone" not in payload
    assert "msg" not in payload


def test_log_event_respects_level(capsys):
    logger = get_logger(name="etrace.test.quiet")
    log_event(logger, "trace.hidden", level=logging.DEBUG)
    assert capsys.readouterr().err == ""


def test_configure_emits_debug_event(debug_logging, capsys, ctx):
    get_logger("etrace.base.context")
    ctx.update(default_format="brief")
    events = [e for e in _events(capsys.readouterr().err) if e.get("event") == "trace.configure"]
    assert events and events[-1]["default_format"] == "brief"
    assert events[-1]["level"] == "DEBUG"


def test_unavailable_call_site_emits_debug_event(debug_logging, capsys, bare_ctx):
    get_logger("etrace.base.context")
    bare_ctx.new_error("x")
    events = _events(capsys.readouterr().err)
    assert any(e.get("event") == "trace.callsite_unavailable" and e.get("component") == "callsite" for e in events)


def test_plain_formatter_mode(capsys):
    logger = get_logger(name="etrace.test.plain", json_mode=False)
    logger.warning("plain text")
    out = capsys.readouterr().err
    assert "WARNING etrace.test.plain plain text" in out
    get_logger(name="etrace.test.plain", json_mode=True)


def test_json_formatter_keeps_non_json_message():
    record = logging.LogRecord(
        name="etrace.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg="not %s",
        args=("json",),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "not json"
    assert payload["level"] == "INFO"
