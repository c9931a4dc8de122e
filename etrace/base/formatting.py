"""Rendering of node chains.

Two renderings walk the chain from the outermost node to the innermost one:

* ``format_full``: every message followed, on a new line, by the location
  where it was added (`` file:line (function)``), joined by colons and ending
  with the terminal error's text.
* ``format_brief``: every non-empty message on one line joined by ``": "``,
  ending with the terminal error's text.

``str(node)`` uses the owning context's ``default_format``. Inside a format
spec the ``+`` flag forces the full form and the ``#`` flag forces the brief
form, so ``f"{err:+}"`` and ``f"{err:#}"`` behave the same under any default.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Union

from .errors_parts.cause import NodeCause, TerminalCause

if TYPE_CHECKING:  # pragma: no cover
    from .errors_parts.stacktrace import Stacktrace


class Format(str, Enum):
    """Available renderings of a chain."""

    FULL = "full"
    BRIEF = "brief"

    @classmethod
    def parse(cls, value: Union["Format", str]) -> "Format":
        """Coerce ``value`` (member or case-insensitive name) to a ``Format``.

        Raises:
            ValueError: If ``value`` names no known format.
        """
        if isinstance(value, Format):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown trace format {value!r}; expected 'full' or 'brief'") from None


def _walk(st: "Stacktrace") -> Iterator["Stacktrace"]:
    curr = st
    while True:
        yield curr
        cause = curr.cause
        if not isinstance(cause, NodeCause):
            return
        curr = cause.node


def format_full(st: "Stacktrace") -> str:
    text = ""

    def newline() -> None:
        nonlocal text
        if text and not text.endswith("\n"):
            text += "\n"

    for curr in _walk(st):
        text += curr.message

        if curr.file:
            newline()
            if curr.function:
                text += f" {curr.file}:{curr.line} ({curr.function})"
            else:
                text += f" {curr.file}:{curr.line}"

        # No newline before the separator, unlike the location branch above.
        cause = curr.cause
        if isinstance(cause, TerminalCause):
            text += ":" + cause.text
        elif isinstance(cause, NodeCause) and cause.node.message:
            text += ": "

    return text


def format_brief(st: "Stacktrace") -> str:
    parts = []
    curr = st
    for curr in _walk(st):
        parts.append(curr.message)
    if isinstance(curr.cause, TerminalCause):
        parts.append(curr.cause.text)
    return ": ".join(p for p in parts if p)


_RENDERERS = {
    Format.FULL: format_full,
    Format.BRIEF: format_brief,
}


def render(st: "Stacktrace", fmt: Union[Format, str]) -> str:
    return _RENDERERS[Format.parse(fmt)](st)


# [[fill]align][flags][width][.precision][type]
_SPEC_RE = re.compile(
    r"(?:(?P<fill>.)?(?P<align>[<>=^]))?"
    r"(?P<flags>[-+# 0]*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[sr]?)",
    re.DOTALL,
)


def format_node(st: "Stacktrace", format_spec: str, default: Union[Format, str]) -> str:
    """Implement ``Stacktrace.__format__``.

    Flags follow the printf set ``- + # space 0``: ``+`` alone selects the full
    form, ``#`` alone the brief form, ``-`` left-justifies, ``0`` pads with
    zeros and the space flag is accepted and ignored. Fill/align, width and
    precision are applied to the chosen text as for ``str``; type ``r`` quotes
    it with ``repr`` after precision has truncated it, before padding.

    Raises:
        ValueError: If ``format_spec`` is not a valid specifier.
    """
    match = _SPEC_RE.fullmatch(format_spec)
    if match is None:
        raise ValueError(f"Invalid format specifier '{format_spec}' for object of type 'Stacktrace'")
    flags = match.group("flags")
    if "+" in flags and "#" not in flags:
        text = format_full(st)
    elif "#" in flags and "+" not in flags:
        text = format_brief(st)
    else:
        text = render(st, default)
    precision = match.group("precision")
    if match.group("type") == "r":
        # truncate the rendering, then quote it
        if precision is not None:
            text = text[: int(precision)]
            precision = None
        text = repr(text)

    spec = ""
    if match.group("align"):
        spec += (match.group("fill") or "") + match.group("align")
    elif "-" in flags:
        spec += "<"
    elif "0" in flags:
        spec += "0>"
    if match.group("width"):
        spec += match.group("width")
    if precision is not None:
        spec += "." + precision
    return format(text, spec)


__all__ = ["Format", "format_full", "format_brief", "render", "format_node"]
