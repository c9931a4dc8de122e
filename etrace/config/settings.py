"""Validated settings model for the default trace context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from ..base.formatting import Format
from .defaults import DEFAULT_FORMAT, DEFAULT_PATH_PREFIX


class TraceSettings(BaseModel):
    """Settings applied to a :class:`~etrace.base.context.TraceContext`.

    Attributes:
        format: Default rendering, ``"full"`` or ``"brief"`` (case-insensitive).
        path_prefix: Extra prefix stripped from call-site files after the
            import-root cleanup.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    format: Format = Format(DEFAULT_FORMAT)
    path_prefix: str = DEFAULT_PATH_PREFIX

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value):
        return Format.parse(value)


__all__ = ["TraceSettings"]
