"""Lookups over annotated error chains.

Every function accepts any exception (or ``None``). An exception "is or
wraps" a node when it is a :class:`Stacktrace` itself or when one is reached
by following its ``__cause__`` links, as with ``raise Other(...) from node``.
"""
from __future__ import annotations

from typing import Iterator, Optional

from .errors_parts.cause import NodeCause, TerminalCause
from .errors_parts.error_code import DEFAULT_EXIT_CODE, NO_CODE, NO_STATUS_CODE, ErrorCode
from .errors_parts.stacktrace import Stacktrace, as_node


def root_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the original error that caused ``err``.

    Errors that are not (and do not wrap) nodes are returned unchanged. For a
    chain, a fresh ``Exception`` is built from the terminal error's text, or
    from the innermost message when the chain ends in a leaf node:

        err = etrace.propagate(etrace.wrap(ValueError("bad column")), "load failed")
        str(etrace.root_cause(err))  # "bad column"
    """
    node = as_node(err)
    if node is None:
        return err
    curr = node
    while isinstance(curr.cause, NodeCause):
        curr = curr.cause.node
    cause = curr.cause
    if isinstance(cause, TerminalCause):
        return Exception(cause.text)
    return Exception(curr.message)


def get_code(err: Optional[BaseException]) -> ErrorCode:
    """Return the error code attached to ``err`` (or anything it wraps).

    Returns ``NO_CODE`` when ``err`` is ``None`` or carries no code:

        for _ in range(attempts):
            try:
                return do()
            except Exception as exc:
                if etrace.get_code(exc) != ECODE_TIMEOUT:
                    raise
        raise etrace.new_error("timed out after %d attempts", attempts)
    """
    node = as_node(err)
    return node.code if node is not None else NO_CODE


def get_status_code(err: Optional[BaseException]) -> int:
    """Return the status code attached to ``err`` (or anything it wraps), else ``NO_STATUS_CODE``."""
    node = as_node(err)
    return node.status_code if node is not None else NO_STATUS_CODE


def call_site(err: Optional[BaseException]) -> str:
    """``"file:line (function)"`` of the outermost node ``err`` is or wraps; ``""`` when unknown."""
    node = as_node(err)
    if node is None or not node.site.known:
        return ""
    return str(node.site)


def exit_code(err: Optional[BaseException]) -> int:
    """Map ``err`` to a process exit status.

    ``0`` for ``None``, the attached code when there is one, else ``1``.
    """
    if err is None:
        return 0
    node = as_node(err)
    if node is None:
        return DEFAULT_EXIT_CODE
    return node.exit_code()


def iter_chain(err: Optional[BaseException]) -> Iterator[Stacktrace]:
    """Yield the nodes of ``err``'s chain, outermost first."""
    curr = as_node(err)
    while curr is not None:
        yield curr
        cause = curr.cause
        curr = cause.node if isinstance(cause, NodeCause) else None


def terminal_text(err: Optional[BaseException]) -> Optional[str]:
    """Text of the plain error ending the chain; ``None`` for leaf-terminated chains."""
    node = as_node(err)
    if node is None:
        return None if err is None else str(err)
    last = node
    for last in iter_chain(node):
        pass
    if isinstance(last.cause, TerminalCause):
        return last.cause.text
    return None


__all__ = [
    "root_cause",
    "get_code",
    "get_status_code",
    "call_site",
    "exit_code",
    "iter_chain",
    "terminal_text",
]
