"""Built-in defaults and environment variable names for etrace settings."""

from __future__ import annotations

from typing import Final

DEFAULT_FORMAT: Final[str] = "full"
DEFAULT_PATH_PREFIX: Final[str] = ""

CONFIG_FILE_ENV: Final[str] = "ETRACE_CONFIG_FILE"
FORMAT_ENV: Final[str] = "ETRACE_FORMAT"
PATH_PREFIX_ENV: Final[str] = "ETRACE_PATH_PREFIX"

# settings field -> environment variable
ENV_FIELD_MAP: Final[dict] = {
    "format": FORMAT_ENV,
    "path_prefix": PATH_PREFIX_ENV,
}

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_PATH_PREFIX",
    "CONFIG_FILE_ENV",
    "FORMAT_ENV",
    "PATH_PREFIX_ENV",
    "ENV_FIELD_MAP",
]
