"""Frame-based call-site provider (CPython and compatible interpreters)."""
from __future__ import annotations

import sys
from typing import Optional

from .call_site import CallSite, short_func_name


class FrameCallSiteProvider:
    """Capture call sites with ``sys._getframe``.

    Interpreters without ``sys._getframe`` yield ``None`` for every capture.
    """

    def capture(self, skip: int) -> Optional[CallSite]:
        getframe = getattr(sys, "_getframe", None)
        if getframe is None:
            return None
        try:
            # +1 steps over this method's own frame
            frame = getframe(skip + 1)
        except ValueError:
            return None
        code = frame.f_code
        qualname = getattr(code, "co_qualname", code.co_name)
        return CallSite(file=code.co_filename, line=frame.f_lineno or 0, function=short_func_name(qualname))

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return "FrameCallSiteProvider()"


__all__ = ["FrameCallSiteProvider"]
