"""
Error code types and reserved sentinels.

There is no predefined set of error codes. Applications define the ones
relevant to them as plain integers:

    ECODE_MANIFEST_NOT_FOUND: ErrorCode = 1
    ECODE_BAD_INPUT: ErrorCode = 2

``NO_CODE`` and ``NO_STATUS_CODE`` are the only predefined values. They mark a
code as unset, in which case it is inherited from the cause at construction.
Avoid using them as real codes.
"""
from __future__ import annotations

from typing import Final

ErrorCode = int

# largest 16-bit value
NO_CODE: Final[ErrorCode] = 0xFFFF
NO_STATUS_CODE: Final[int] = 0

DEFAULT_EXIT_CODE: Final[int] = 1


__all__ = ["ErrorCode", "NO_CODE", "NO_STATUS_CODE", "DEFAULT_EXIT_CODE"]
