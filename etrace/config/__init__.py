"""Configuration layer for the default trace context.

Goals
-----
* Centralize defaults (rendering format, path prefix).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by ETRACE_CONFIG_FILE
    3. Environment variables (ETRACE_FORMAT, ETRACE_PATH_PREFIX)
    4. In-code overrides passed to the helper
* Read nothing at import time; applications opt in by calling
  ``configure_from_env()`` during start-up.

External Config File (Optional)
-------------------------------
Settings live under an ``etrace`` section:

```
etrace:
  format: brief
  path_prefix: services/
```

Public API
----------
* get_trace_settings(overrides: dict | None = None) -> TraceSettings
* configure_from_env(context=None, overrides=None) -> TraceSettings
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.context import TraceContext, get_context
from ..base.paths import make_path_cleaner
from .defaults import CONFIG_FILE_ENV, ENV_FIELD_MAP
from .settings import TraceSettings

SECTION = "etrace"


def _load_external_config() -> Dict[str, Any]:
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        return {}
    section = data.get(SECTION)
    return section if isinstance(section, dict) else {}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None:
            out[field] = val
    return out


def get_trace_settings(overrides: Optional[Dict[str, Any]] = None) -> TraceSettings:
    """Return merged, validated settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides

    Raises:
        pydantic.ValidationError: If a merged value is invalid (e.g. unknown format).
        yaml.YAMLError: If the external config file is neither JSON nor YAML.
    """
    cfg: Dict[str, Any] = {}
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return TraceSettings(**cfg)


def configure_from_env(
    context: Optional[TraceContext] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> TraceSettings:
    """Apply merged settings to ``context`` (default: the process context)."""
    settings = get_trace_settings(overrides)
    target = context or get_context()
    target.update(
        default_format=settings.format,
        clean_path=make_path_cleaner(settings.path_prefix),
    )
    return settings


__all__ = [
    "TraceSettings",
    "get_trace_settings",
    "configure_from_env",
]
