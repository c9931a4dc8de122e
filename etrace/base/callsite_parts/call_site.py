"""Call-site value type.

Defines :class:`CallSite`, the file/line/function triple recorded on every
node at construction time, and :func:`short_func_name` used to derive the
function part from a code object's qualified name.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallSite:
    """Where a node was created.

    Attributes:
        file: Source path after path cleaning; ``""`` when unknown.
        line: 1-based line number; ``0`` when unknown.
        function: Short function name (``func`` or ``Class.method``); ``""``
            when unknown.
    """

    file: str = ""
    line: int = 0
    function: str = ""

    @property
    def known(self) -> bool:
        return bool(self.file)

    def __str__(self) -> str:
        return f"{self.file}:{self.line} ({self.function})"


EMPTY_CALL_SITE = CallSite()


def short_func_name(qualname: str) -> str:
    """Return ``"func"`` or ``"Class.method"`` for a qualified name.

    Examples:
        - ``"load"`` -> ``"load"``
        - ``"Parser.parse"`` -> ``"Parser.parse"``
        - ``"outer.<locals>.inner"`` -> ``"inner"``
        - ``"Outer.method.<locals>.Helper.run"`` -> ``"Helper.run"``

    Qualified names never include the module, so only the enclosing scopes
    up to the innermost ``<locals>`` marker are dropped.
    """
    return qualname.rsplit("<locals>.", 1)[-1]


__all__ = ["CallSite", "EMPTY_CALL_SITE", "short_func_name"]
