"""``format()`` integration: forced renderings and pass-through of width/precision."""
from __future__ import annotations

import pytest

from etrace.base.formatting import Format, format_brief, format_full


@pytest.fixture()
def chain(ctx):
    return ctx.propagate(ctx.propagate(ValueError("boom"), "a"), "b")


@pytest.mark.parametrize("default", [Format.FULL, Format.BRIEF])
def test_forced_directives_ignore_default(ctx, chain, default):
    ctx.update(default_format=default)
    assert f"{chain:+}" == format_full(chain)
    assert f"{chain:+s}" == format_full(chain)
    assert f"{chain:#}" == format_brief(chain)
    assert f"{chain:#s}" == format_brief(chain)


def test_other_directives_use_default(ctx, chain):
    assert f"{chain}" == format_full(chain)
    assert f"{chain:s}" == format_full(chain)
    assert f"{chain:+#}" == format_full(chain)
    ctx.update(default_format="brief")
    assert f"{chain}" == "b: a: boom"
    assert f"{chain:+#}" == "b: a: boom"
    assert "{}".format(chain) == "b: a: boom"


@pytest.fixture()
def leaf(ctx):
    return ctx.new_message_with_code(1, "abc")


@pytest.mark.parametrize(
    "spec, expected",
    [
        (">6", "   abc"),
        ("6", "abc   "),
        ("-6", "abc   "),
        ("06", "000abc"),
        ("-06", "abc   "),
        ("*^7", "**abc**"),
        (".2", "ab"),
        ("5.2", "ab   "),
        (" ", "abc"),
        ("r", "'abc'"),
        ("#7r", "'abc'  "),
        (".2r", "'ab'"),
        (">6.1r", "   'a'"),
    ],
)
def test_width_precision_and_flags_pass_through(leaf, spec, expected):
    assert format(leaf, spec) == expected


def test_padding_applies_to_chosen_rendering(ctx, chain):
    brief = format_brief(chain)
    assert format(chain, ">#20") == brief.rjust(20)
    assert format(chain, "#.4") == brief[:4]


@pytest.mark.parametrize("spec", ["x", "d", "10q", ".s"])
def test_invalid_spec_raises(leaf, spec):
    with pytest.raises(ValueError):
        format(leaf, spec)
