"""
Annotated error node.

A :class:`Stacktrace` records the message added at one wrapping step, the
error it wraps, an optional error code and status code, and the call site
where it was created. Nodes are read-only once built; use the construction
functions in :mod:`etrace.base.construction` rather than instantiating this
class directly so that call sites and code inheritance are applied.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from ..callsite_parts.call_site import EMPTY_CALL_SITE, CallSite
from .cause import Cause, NoCause, NodeCause, TerminalCause
from .error_code import DEFAULT_EXIT_CODE, NO_CODE, NO_STATUS_CODE, ErrorCode

if TYPE_CHECKING:  # pragma: no cover
    from ..context import TraceContext


class Stacktrace(Exception):
    """Exception carrying a message, a cause chain, codes and a call site.

    Attributes:
        message: Text supplied at this wrapping step; may be empty.
        cause: Tagged cause (:class:`NodeCause`, :class:`TerminalCause` or
            :class:`NoCause`).
        code: Application error code or ``NO_CODE``.
        status_code: Status code or ``NO_STATUS_CODE``.
        file, line, function: Where the node was created.
    """

    def __init__(
        self,
        message: str = "",
        cause: Union[Cause, BaseException, None] = None,
        *,
        code: ErrorCode = NO_CODE,
        status_code: int = NO_STATUS_CODE,
        site: CallSite = EMPTY_CALL_SITE,
        context: Optional["TraceContext"] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._cause = classify_cause(cause)
        if isinstance(cause, BaseException):
            self.__cause__ = cause
        elif isinstance(self._cause, NodeCause):
            self.__cause__ = self._cause.node
        self._code = code
        self._status_code = status_code
        self._site = site
        self._context = context

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Cause:
        return self._cause

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def site(self) -> CallSite:
        return self._site

    @property
    def file(self) -> str:
        return self._site.file

    @property
    def line(self) -> int:
        return self._site.line

    @property
    def function(self) -> str:
        return self._site.function

    @property
    def context(self) -> "TraceContext":
        """Context governing how this node renders (process default if unset)."""
        if self._context is not None:
            return self._context
        from ..context import get_context

        return get_context()

    def unwrap(self) -> Optional["Stacktrace"]:
        """Return the wrapped node, or ``None`` when the chain ends here."""
        if isinstance(self._cause, NodeCause):
            return self._cause.node
        return None

    def exit_code(self) -> int:
        """Process exit code for this error: the code, or 1 when unset."""
        if self._code == NO_CODE:
            return DEFAULT_EXIT_CODE
        return int(self._code)

    def __str__(self) -> str:
        from ..formatting import render

        return render(self, self.context.default_format)

    def __format__(self, format_spec: str) -> str:
        from ..formatting import format_node

        return format_node(self, format_spec, self.context.default_format)

    def __repr__(self) -> str:
        return (
            f"Stacktrace(message={self._message!r}, code={self._code!r}, "
            f"status_code={self._status_code!r}, site={str(self._site)!r})"
        )


def classify_cause(cause: Union[Cause, BaseException, None]) -> Cause:
    """Map an arbitrary cause argument onto the tagged representation."""
    if cause is None:
        return NoCause()
    if isinstance(cause, (NodeCause, TerminalCause, NoCause)):
        return cause
    if isinstance(cause, Stacktrace):
        return NodeCause(cause)
    return TerminalCause(str(cause))


def as_node(err: Optional[BaseException]) -> Optional[Stacktrace]:
    """Return ``err`` if it is a node, else the first node in its ``__cause__`` links."""
    while err is not None:
        if isinstance(err, Stacktrace):
            return err
        err = err.__cause__
    return None


__all__ = ["Stacktrace", "classify_cause", "as_node"]
