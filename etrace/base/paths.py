"""Path cleaning applied to call-site files before they are stored.

The default cleaner, :func:`remove_sys_path`, makes a path relative to the
longest ``sys.path`` entry containing it, so installed packages and project
sources both show up as import-style paths (``etrace/base/paths.py``)
instead of machine-specific absolute ones.

To strip an additional prefix, configure a cleaner at start-up:

    etrace.configure(clean_path=make_path_cleaner("services/"))
"""
from __future__ import annotations

import os
import sys
from typing import Callable, Iterable, Optional

PathCleaner = Callable[[str], str]


def _roots(entries: Iterable[str]) -> list[str]:
    roots = []
    for entry in entries:
        if not isinstance(entry, str):
            continue
        root = os.path.abspath(entry or os.curdir)
        roots.append(root.rstrip(os.sep) + os.sep)
    return sorted(set(roots), key=len, reverse=True)


def remove_sys_path(path: str, entries: Optional[Iterable[str]] = None) -> str:
    """Return ``path`` relative to the longest matching import root.

    Paths outside every root, and pseudo-paths such as ``<stdin>``, are
    returned unchanged.
    """
    if not path or path.startswith("<"):
        return path
    for root in _roots(sys.path if entries is None else entries):
        if path.startswith(root):
            return path[len(root):].replace(os.sep, "/")
    return path


def make_path_cleaner(prefix: str = "", base: Optional[PathCleaner] = None) -> PathCleaner:
    """Build a cleaner applying ``base`` (default :func:`remove_sys_path`) then dropping ``prefix``."""
    first = base or remove_sys_path

    def clean(path: str) -> str:
        cleaned = first(path)
        if prefix and cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]
        return cleaned

    return clean


__all__ = ["PathCleaner", "remove_sys_path", "make_path_cleaner"]
