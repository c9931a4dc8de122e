"""Errors parts package public surface.

Re-exports individual node components for optional direct imports.
Prefer importing from `etrace.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, NO_CODE, NO_STATUS_CODE, DEFAULT_EXIT_CODE
from .cause import Cause, NodeCause, TerminalCause, NoCause
from .stacktrace import Stacktrace, classify_cause, as_node

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
