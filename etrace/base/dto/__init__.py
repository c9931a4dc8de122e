"""Data transfer objects for structured export of error chains."""

from .trace_chain import TraceChainDTO, TraceFrameDTO, to_dict

__all__ = ["TraceChainDTO", "TraceFrameDTO", "to_dict"]
