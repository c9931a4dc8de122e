"""Annotated error node public surface.

This module re-exports the one-class-per-file implementations under
``etrace.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode, NO_CODE, NO_STATUS_CODE, DEFAULT_EXIT_CODE
from .errors_parts.cause import Cause, NodeCause, TerminalCause, NoCause
from .errors_parts.stacktrace import Stacktrace, classify_cause, as_node

__all__ = [
    "ErrorCode",
    "NO_CODE",
    "NO_STATUS_CODE",
    "DEFAULT_EXIT_CODE",
    "Cause",
    "NodeCause",
    "TerminalCause",
    "NoCause",
    "Stacktrace",
    "classify_cause",
    "as_node",
]
