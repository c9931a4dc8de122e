"""DTOs for exporting an error chain as structured data.

Callers that log errors as JSON (or return them from an API) can serialize a
chain without parsing its text rendering:

    payload = TraceChainDTO.from_error(err).model_dump()

Unset codes are exported as ``None`` rather than their sentinel values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors_parts.error_code import NO_CODE, NO_STATUS_CODE
from ..errors_parts.stacktrace import Stacktrace, as_node
from ..formatting import format_brief
from ..inspection import iter_chain, terminal_text


class TraceFrameDTO(BaseModel):
    """One node of a chain.

    Attributes:
        message: Message added at this step (may be empty).
        file: Call-site file, ``""`` when not captured.
        line: Call-site line, ``0`` when not captured.
        function: Call-site function, ``""`` when unknown.
        code: Error code, ``None`` when unset.
        status_code: Status code, ``None`` when unset.
    """

    message: str = ""
    file: str = ""
    line: int = 0
    function: str = ""
    code: Optional[int] = None
    status_code: Optional[int] = None

    @classmethod
    def from_node(cls, node: Stacktrace) -> "TraceFrameDTO":
        return cls(
            message=node.message,
            file=node.file,
            line=node.line,
            function=node.function,
            code=None if node.code == NO_CODE else node.code,
            status_code=None if node.status_code == NO_STATUS_CODE else node.status_code,
        )


class TraceChainDTO(BaseModel):
    """Whole chain, outermost frame first.

    Attributes:
        frames: Nodes from outermost to innermost.
        terminal: Text of the plain error ending the chain, if any.
        brief: Single-line rendering of the chain.
    """

    frames: List[TraceFrameDTO] = Field(default_factory=list)
    terminal: Optional[str] = None
    brief: str = ""

    @classmethod
    def from_error(cls, err: Optional[BaseException]) -> "TraceChainDTO":
        node = as_node(err)
        if node is None:
            text = None if err is None else str(err)
            return cls(terminal=text, brief=text or "")
        return cls(
            frames=[TraceFrameDTO.from_node(n) for n in iter_chain(node)],
            terminal=terminal_text(node),
            brief=format_brief(node),
        )


def to_dict(err: Optional[BaseException]) -> Dict[str, Any]:
    """Serialize ``err``'s chain to a JSON-compatible dict."""
    return TraceChainDTO.from_error(err).model_dump()


__all__ = ["TraceFrameDTO", "TraceChainDTO", "to_dict"]
