"""
Tagged representation of the error a node wraps.

A cause is exactly one of:

- ``NodeCause``: another :class:`Stacktrace`, the chain continues.
- ``TerminalCause``: a plain (non-node) exception; only its text is kept.
- ``NoCause``: the node is a leaf.

Traversal and formatting match on these three shapes instead of probing the
runtime type of an arbitrary exception.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover
    from .stacktrace import Stacktrace


@dataclass(frozen=True)
class NodeCause:
    """Cause that is itself an annotated node."""

    node: "Stacktrace"


@dataclass(frozen=True)
class TerminalCause:
    """Cause that ends the chain with a plain error's text."""

    text: str


@dataclass(frozen=True)
class NoCause:
    """Absence of a cause (leaf node)."""


Cause = Union[NodeCause, TerminalCause, NoCause]


__all__ = ["Cause", "NodeCause", "TerminalCause", "NoCause"]
