"""etrace package

Error annotation with call sites, error codes and cause chains.

Purpose:
    Wrap exceptions as they travel up the stack, recording at every step a
    message, the file/line/function where the wrap happened, and optional
    error and status codes inherited through the chain. Render the chain in
    full (multi-line, with locations) or brief (single line) form and query
    it for its root cause, codes and exit status.

Public API (re-exported):
    - Version: ``__version__``
    - Node: :class:`Stacktrace`, ``ErrorCode``, ``NO_CODE``, ``NO_STATUS_CODE``
    - Construction: ``new_error``, ``new_error_with_code``,
      ``new_error_with_status_code``, ``new_message_with_code``,
      ``new_message_with_status_code``, ``wrap``, ``wrap_with_code``,
      ``wrap_with_status_code``, ``propagate``, ``propagate_with_code``,
      ``propagate_with_status_code``
    - Formatting: :class:`Format`, ``format_full``, ``format_brief``
    - Inspection: ``root_cause``, ``get_code``, ``get_status_code``,
      ``call_site``, ``exit_code``, ``iter_chain``, ``to_dict``
    - Configuration: :class:`TraceContext`, ``configure``, ``get_context``

Example:
    >>> import etrace
    >>> try:
    ...     open("/missing/manifest.json")
    ... except OSError as exc:
    ...     err = etrace.propagate(exc, "failed to load manifest")
    >>> f"{err:#}"
    "failed to load manifest: [Errno 2] No such file or directory: '/missing/manifest.json'"
"""

from .base.errors import (
    ErrorCode,
    NO_CODE,
    NO_STATUS_CODE,
    Stacktrace,
    Cause,
    NodeCause,
    TerminalCause,
    NoCause,
)
from .base.callsite import CallSite, CallSiteProvider, FrameCallSiteProvider, short_func_name
from .base.paths import remove_sys_path, make_path_cleaner
from .base.formatting import Format, format_full, format_brief
from .base.context import TraceContext, get_context
from .base.construction import (
    configure,
    new_error,
    new_error_with_code,
    new_error_with_status_code,
    new_message_with_code,
    new_message_with_status_code,
    wrap,
    wrap_with_code,
    wrap_with_status_code,
    propagate,
    propagate_with_code,
    propagate_with_status_code,
)
from .base.inspection import (
    root_cause,
    get_code,
    get_status_code,
    call_site,
    exit_code,
    iter_chain,
)
from .base.dto import to_dict

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Node
    "ErrorCode",
    "NO_CODE",
    "NO_STATUS_CODE",
    "Stacktrace",
    "Cause",
    "NodeCause",
    "TerminalCause",
    "NoCause",
    # Call sites and paths
    "CallSite",
    "CallSiteProvider",
    "FrameCallSiteProvider",
    "short_func_name",
    "remove_sys_path",
    "make_path_cleaner",
    # Formatting
    "Format",
    "format_full",
    "format_brief",
    # Configuration
    "TraceContext",
    "get_context",
    "configure",
    # Construction
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
    # Inspection
    "root_cause",
    "get_code",
    "get_status_code",
    "call_site",
    "exit_code",
    "iter_chain",
    "to_dict",
]
