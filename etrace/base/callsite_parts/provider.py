"""Call-site provider capability.

Runtime stack inspection is interpreter specific, so construction code talks
to this protocol instead of the frame API. Tests substitute a provider that
returns fixed values.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .call_site import CallSite


@runtime_checkable
class CallSiteProvider(Protocol):
    """Return the call site ``skip`` frames above the caller of ``capture``.

    ``skip=0`` designates the function that invoked ``capture`` itself. The
    returned ``file`` is the raw path; cleaning is the caller's concern.
    Implementations return ``None`` when the stack is unavailable or not deep
    enough and never raise.
    """

    def capture(self, skip: int) -> Optional[CallSite]:
        ...


__all__ = ["CallSiteProvider"]
