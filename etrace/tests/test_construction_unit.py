"""Unit tests for node construction and nil-cause short-circuiting."""
from __future__ import annotations

import pytest

from etrace.base.errors import NO_CODE, NO_STATUS_CODE, NoCause, NodeCause, Stacktrace, TerminalCause, classify_cause


def test_new_error_formats_message_and_has_no_cause(ctx):
    err = ctx.new_error("failed %d of %s", 3, "jobs")
    assert isinstance(err, Stacktrace)
    assert err.message == "failed 3 of jobs"
    assert isinstance(err.cause, NoCause)
    assert err.code == NO_CODE
    assert err.status_code == NO_STATUS_CODE
    assert (err.file, err.line, err.function) == ("app/service.py", 10, "Service.run")


def test_new_error_without_args_keeps_percent_literally(ctx):
    assert ctx.new_error("100% done").message == "100% done"


def test_malformed_template_does_not_raise(ctx):
    err = ctx.new_error("%d items", "many")
    assert err.message == "%d items ('many',)"


@pytest.mark.parametrize(
    "build",
    [
        lambda c: c.wrap(None),
        lambda c: c.wrap_with_code(4, None),
        lambda c: c.wrap_with_status_code(500, None),
        lambda c: c.propagate(None, "anything"),
        lambda c: c.propagate(None, "failed %s", "x"),
        lambda c: c.propagate_with_code(None, 4, "anything"),
        lambda c: c.propagate_with_status_code(None, 500, "anything"),
    ],
)
def test_none_cause_short_circuits(ctx, fake_provider, build):
    assert build(ctx) is None
    assert fake_provider.skips == []


def test_wrap_has_empty_message_and_terminal_cause(ctx):
    boom = ValueError("boom")
    err = ctx.wrap(boom)
    assert err.message == ""
    assert err.cause == TerminalCause("boom")
    assert err.__cause__ is boom


def test_propagate_chains_nodes(ctx):
    inner = ctx.new_error("inner")
    outer = ctx.propagate(inner, "loading %s", "config")
    assert outer.message == "loading config"
    assert outer.cause == NodeCause(inner)
    assert outer.unwrap() is inner
    assert inner.unwrap() is None
    assert outer.line == 11


def test_call_site_is_captured_from_the_public_entry_point(ctx, fake_provider):
    ctx.new_error("a")
    ctx.wrap(ValueError("b"))
    ctx.propagate_with_code(ValueError("c"), 1, "c")
    assert fake_provider.skips == [2, 2, 2]


def test_new_message_with_code_skips_call_site(ctx, fake_provider):
    err = ctx.new_message_with_code(7, "missing ttl %s", "parameter")
    assert err.message == "missing ttl parameter"
    assert err.code == 7
    assert err.status_code == NO_STATUS_CODE
    assert (err.file, err.line, err.function) == ("", 0, "")
    assert fake_provider.skips == []


def test_new_message_with_status_code(ctx):
    err = ctx.new_message_with_status_code(400, "bad request")
    assert err.status_code == 400
    assert err.code == NO_CODE
    assert err.file == ""


def test_failed_capture_leaves_call_site_empty(bare_ctx):
    err = bare_ctx.propagate(ValueError("boom"), "context")
    assert (err.file, err.line, err.function) == ("", 0, "")
    assert err.message == "context"


def test_path_cleaner_applied_to_file(fake_provider):
    from etrace.base.context import TraceContext

    fake_provider.file = "/workspace/src/app/service.py"
    context = TraceContext(call_site_provider=fake_provider, clean_path=lambda p: p.replace("/workspace/src/", ""))
    assert context.new_error("x").file == "app/service.py"


def test_nodes_are_read_only(ctx):
    err = ctx.new_error_with_code(3, "x")
    with pytest.raises(AttributeError):
        err.code = 4  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.file = "elsewhere.py"  # type: ignore[misc]
    assert err.code == 3


def test_node_can_be_raised_and_caught(ctx):
    with pytest.raises(Stacktrace) as info:
        try:
            int("x")
        except ValueError as exc:
            raise ctx.propagate(exc, "parsing count")
    assert info.value.message == "parsing count"
    assert isinstance(info.value.__cause__, ValueError)


def test_classify_cause_tags():
    node = Stacktrace("inner")
    assert isinstance(classify_cause(None), NoCause)
    assert classify_cause(node) == NodeCause(node)
    assert classify_cause(KeyError("k")) == TerminalCause("'k'")
    tag = TerminalCause("already tagged")
    assert classify_cause(tag) is tag
