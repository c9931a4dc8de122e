"""Call-site parts package public surface.

Prefer importing from ``etrace.base.callsite`` for the stable surface.
"""

from .call_site import CallSite, EMPTY_CALL_SITE, short_func_name
from .provider import CallSiteProvider
from .frame_provider import FrameCallSiteProvider

__all__ = [
    "CallSite",
    "EMPTY_CALL_SITE",
    "short_func_name",
    "CallSiteProvider",
    "FrameCallSiteProvider",
]
