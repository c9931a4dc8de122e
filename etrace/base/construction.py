"""Module-level construction API bound to the process default context.

Each function here is the corresponding :class:`TraceContext` method of
:func:`get_context`, so call sites are captured exactly as if the method had
been called directly. Build a dedicated ``TraceContext`` instead when a
component needs its own settings (tests, embedded interpreters).
"""
from __future__ import annotations

from typing import Optional, Union

from .callsite_parts.provider import CallSiteProvider
from .context import TraceContext, get_context
from .formatting import Format
from .paths import PathCleaner

_ctx = get_context()

new_error = _ctx.new_error
new_error_with_code = _ctx.new_error_with_code
new_error_with_status_code = _ctx.new_error_with_status_code
new_message_with_code = _ctx.new_message_with_code
new_message_with_status_code = _ctx.new_message_with_status_code
wrap = _ctx.wrap
wrap_with_code = _ctx.wrap_with_code
wrap_with_status_code = _ctx.wrap_with_status_code
propagate = _ctx.propagate
propagate_with_code = _ctx.propagate_with_code
propagate_with_status_code = _ctx.propagate_with_status_code


def configure(
    *,
    clean_path: Optional[PathCleaner] = None,
    default_format: Union[Format, str, None] = None,
    call_site_provider: Optional[CallSiteProvider] = None,
) -> TraceContext:
    """Update the process default context; intended for start-up code.

        etrace.configure(default_format="brief")
    """
    return _ctx.update(
        clean_path=clean_path,
        default_format=default_format,
        call_site_provider=call_site_provider,
    )


__all__ = [
    "new_error",
    "new_error_with_code",
    "new_error_with_status_code",
    "new_message_with_code",
    "new_message_with_status_code",
    "wrap",
    "wrap_with_code",
    "wrap_with_status_code",
    "propagate",
    "propagate_with_code",
    "propagate_with_status_code",
    "configure",
]
