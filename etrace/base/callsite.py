"""Call-site capture public surface.

Re-exports the one-class-per-file implementations under
``etrace.base.callsite_parts`` to keep a stable import path.
"""

from .callsite_parts.call_site import CallSite, EMPTY_CALL_SITE, short_func_name
from .callsite_parts.provider import CallSiteProvider
from .callsite_parts.frame_provider import FrameCallSiteProvider

__all__ = [
    "CallSite",
    "EMPTY_CALL_SITE",
    "short_func_name",
    "CallSiteProvider",
    "FrameCallSiteProvider",
]
