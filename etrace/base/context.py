"""Trace context: configuration and node construction.

A :class:`TraceContext` bundles the settings every node depends on:

- ``clean_path``: applied to call-site files before they are stored.
- ``default_format``: rendering used by ``str(node)``.
- ``call_site_provider``: capability returning the caller's location.

and exposes the construction operations. Nodes keep a reference to the
context that built them, so changing a context's ``default_format`` affects
how its existing nodes render, exactly like a process-wide setting.

The module-level functions in :mod:`etrace.base.construction` are bound to
the process default context returned by :func:`get_context`. Configure it
once at start-up, before other threads create or format errors; there is no
internal locking.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .callsite_parts.call_site import EMPTY_CALL_SITE, CallSite
from .callsite_parts.frame_provider import FrameCallSiteProvider
from .callsite_parts.provider import CallSiteProvider
from .errors_parts.error_code import NO_CODE, NO_STATUS_CODE, ErrorCode
from .errors_parts.stacktrace import Stacktrace, as_node
from .formatting import Format
from .logging import LogContext, get_logger, log_event
from .paths import PathCleaner, remove_sys_path

logger = get_logger(__name__)

# _create -> public construction method -> caller
_CALLER_SKIP = 2


def _sprintf(msg: str, args: tuple) -> str:
    if not args:
        return msg
    try:
        return msg % args
    except (TypeError, ValueError):
        # malformed template; construction never fails
        return f"{msg} {args!r}"


def _inherited_code(cause: Optional[BaseException]) -> ErrorCode:
    node = as_node(cause)
    return node.code if node is not None else NO_CODE


def _inherited_status_code(cause: Optional[BaseException]) -> int:
    node = as_node(cause)
    return node.status_code if node is not None else NO_STATUS_CODE


class TraceContext:
    """Configuration for building and rendering annotated errors."""

    def __init__(
        self,
        *,
        clean_path: Optional[PathCleaner] = remove_sys_path,
        default_format: Union[Format, str] = Format.FULL,
        call_site_provider: Optional[CallSiteProvider] = None,
    ) -> None:
        self.clean_path = clean_path
        self.default_format = Format.parse(default_format)
        self.call_site_provider: CallSiteProvider = call_site_provider or FrameCallSiteProvider()

    def update(
        self,
        *,
        clean_path: Optional[PathCleaner] = None,
        default_format: Union[Format, str, None] = None,
        call_site_provider: Optional[CallSiteProvider] = None,
    ) -> "TraceContext":
        """Replace the given settings in place and return ``self``.

        Affects every node created afterwards; ``default_format`` also applies
        to existing nodes of this context the next time they render.
        """
        changed: dict[str, Any] = {}
        if clean_path is not None:
            self.clean_path = clean_path
            changed["clean_path"] = getattr(clean_path, "__name__", repr(clean_path))
        if default_format is not None:
            self.default_format = Format.parse(default_format)
            changed["default_format"] = self.default_format.value
        if call_site_provider is not None:
            self.call_site_provider = call_site_provider
            changed["call_site_provider"] = type(call_site_provider).__name__
        log_event(logger, "trace.configure", LogContext(component="context"), level=logging.DEBUG, **changed)
        return self

    # ------------------------------------------------------------------ #
    # construction
    # ------------------------------------------------------------------ #

    def new_error(self, msg: str, *args: Any) -> Stacktrace:
        """Drop-in replacement for ``Exception(msg % args)`` that records the call site.

            if not is_okay(arg):
                raise etrace.new_error("expected %r to be okay", arg)
        """
        return self._create(None, NO_CODE, NO_STATUS_CODE, msg, args)

    def new_error_with_code(self, code: ErrorCode, msg: str, *args: Any) -> Stacktrace:
        """Like :meth:`new_error` but also attaches an error code."""
        return self._create(None, code, NO_STATUS_CODE, msg, args)

    def new_error_with_status_code(self, status_code: int, msg: str, *args: Any) -> Stacktrace:
        """Like :meth:`new_error` but also attaches a status code."""
        return self._create(None, NO_CODE, status_code, msg, args)

    def new_message_with_code(self, code: ErrorCode, msg: str, *args: Any) -> Stacktrace:
        """Return an error that renders like a plain message, without a call site, carrying ``code``.

        Useful where the code mechanism is wanted but line numbers are not:

            if not ttl:
                return etrace.new_message_with_code(ECODE_BAD_INPUT, "missing ttl query parameter")
        """
        return Stacktrace(_sprintf(msg, args), code=code, context=self)

    def new_message_with_status_code(self, status_code: int, msg: str, *args: Any) -> Stacktrace:
        """Like :meth:`new_message_with_code` but carrying a status code instead."""
        return Stacktrace(_sprintf(msg, args), status_code=status_code, context=self)

    def wrap(self, cause: Optional[BaseException]) -> Optional[Stacktrace]:
        """Annotate ``cause`` with the call site only. ``None`` passes through."""
        if cause is None:
            return None
        return self._create(cause, NO_CODE, NO_STATUS_CODE, "", ())

    def wrap_with_code(self, code: ErrorCode, cause: Optional[BaseException]) -> Optional[Stacktrace]:
        """Like :meth:`wrap` but sets ``code``, overriding any code inherited from ``cause``."""
        if cause is None:
            return None
        return self._create(cause, code, NO_STATUS_CODE, "", ())

    def wrap_with_status_code(self, status_code: int, cause: Optional[BaseException]) -> Optional[Stacktrace]:
        """Like :meth:`wrap` but sets ``status_code``, overriding the inherited one."""
        if cause is None:
            return None
        return self._create(cause, NO_CODE, status_code, "", ())

    def propagate(self, cause: Optional[BaseException], msg: str, *args: Any) -> Optional[Stacktrace]:
        """Wrap ``cause`` with a message describing the action that failed.

            try:
                result = process(arg)
            except OSError as exc:
                raise etrace.propagate(exc, "failed to process %s", arg)

        Ask "what does this call do?" and say that it failed. The message can be
        empty when nothing useful can be added to the cause. If ``cause`` is
        ``None`` the result is ``None``, so callers holding an optional error
        can propagate it without checking it first.
        """
        if cause is None:
            return None
        return self._create(cause, NO_CODE, NO_STATUS_CODE, msg, args)

    def propagate_with_code(
        self, cause: Optional[BaseException], code: ErrorCode, msg: str, *args: Any
    ) -> Optional[Stacktrace]:
        """Like :meth:`propagate` but also attaches an error code.

            try:
                os.stat(manifest_path)
            except FileNotFoundError as exc:
                raise etrace.propagate_with_code(exc, ECODE_MANIFEST_NOT_FOUND, "")
        """
        if cause is None:
            return None
        return self._create(cause, code, NO_STATUS_CODE, msg, args)

    def propagate_with_status_code(
        self, cause: Optional[BaseException], status_code: int, msg: str, *args: Any
    ) -> Optional[Stacktrace]:
        """Like :meth:`propagate` but also attaches a status code.

            except TimeoutError as exc:
                raise etrace.propagate_with_status_code(exc, 504, "upstream %s timed out", host)
        """
        if cause is None:
            return None
        return self._create(cause, NO_CODE, status_code, msg, args)

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _create(
        self,
        cause: Optional[BaseException],
        code: ErrorCode,
        status_code: int,
        msg: str,
        args: tuple,
    ) -> Stacktrace:
        # Must be called directly by a public construction method so that
        # _CALLER_SKIP lands on user code.
        if code == NO_CODE:
            code = _inherited_code(cause)
        if status_code == NO_STATUS_CODE:
            status_code = _inherited_status_code(cause)
        site = self.call_site_provider.capture(_CALLER_SKIP)
        return Stacktrace(
            _sprintf(msg, args),
            cause,
            code=code,
            status_code=status_code,
            site=self._clean(site),
            context=self,
        )

    def _clean(self, site: Optional[CallSite]) -> CallSite:
        if site is None:
            log_event(logger, "trace.callsite_unavailable", LogContext(component="callsite"), level=logging.DEBUG)
            return EMPTY_CALL_SITE
        if self.clean_path is None or not site.file:
            return site
        return CallSite(file=self.clean_path(site.file), line=site.line, function=site.function)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"TraceContext(default_format={self.default_format.value!r}, "
            f"call_site_provider={self.call_site_provider!r})"
        )


_DEFAULT_CONTEXT = TraceContext()


def get_context() -> TraceContext:
    """Return the process default context."""
    return _DEFAULT_CONTEXT


__all__ = ["TraceContext", "get_context"]
