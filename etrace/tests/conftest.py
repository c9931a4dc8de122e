"""Pytest configuration for the etrace test suite.

Provides a deterministic call-site provider and a context built around it, and
restores the process default context after every test so that tests calling
``etrace.configure`` cannot leak settings into each other.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import pytest

from etrace.base.callsite import CallSite
from etrace.base.context import TraceContext, get_context


class FakeCallSiteProvider:
    """Return ``file``/``function`` with a line number increasing per capture."""

    def __init__(self, file: str = "app/service.py", function: str = "Service.run", first_line: int = 10) -> None:
        self.file = file
        self.function = function
        self.next_line = first_line
        self.skips: List[int] = []

    def capture(self, skip: int) -> Optional[CallSite]:
        self.skips.append(skip)
        site = CallSite(file=self.file, line=self.next_line, function=self.function)
        self.next_line += 1
        return site


class UnavailableCallSiteProvider:
    """Simulate an interpreter without stack introspection."""

    def capture(self, skip: int) -> Optional[CallSite]:
        return None


@pytest.fixture()
def fake_provider() -> FakeCallSiteProvider:
    return FakeCallSiteProvider()


@pytest.fixture()
def ctx(fake_provider: FakeCallSiteProvider) -> TraceContext:
    """Context with deterministic call sites and no path cleaning."""
    return TraceContext(call_site_provider=fake_provider, clean_path=None)


@pytest.fixture()
def bare_ctx() -> TraceContext:
    """Context whose call-site capture always fails."""
    return TraceContext(call_site_provider=UnavailableCallSiteProvider())


@pytest.fixture(autouse=True)
def restore_default_context() -> Iterator[None]:
    default = get_context()
    saved = (default.clean_path, default.default_format, default.call_site_provider)
    yield
    default.clean_path, default.default_format, default.call_site_provider = saved


@pytest.fixture()
def debug_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Enable debug-level etrace events for the duration of a test."""
    monkeypatch.setenv("ETRACE_LOG_LEVEL", "DEBUG")
    yield
    logging.getLogger("etrace").setLevel(logging.INFO)
    for handler in logging.getLogger("etrace").handlers:
        handler.setLevel(logging.INFO)
