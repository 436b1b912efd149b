"""Shared fixtures for the datekit test suite."""

from __future__ import annotations

import os
from datetime import datetime, timezone

import pytest

from datekit.core.clock import SimClock
from datekit.core.context import CalendarContext, _reset_default_context


@pytest.fixture(autouse=True)
def _isolated_default_context(monkeypatch):
    """Each test starts without a default context and without DATEKIT_ env."""
    for key in list(os.environ):
        if key.startswith("DATEKIT_"):
            monkeypatch.delenv(key)
    _reset_default_context()
    yield
    _reset_default_context()


# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def utc() -> CalendarContext:
    """Gregorian/UTC, ISO week rules."""
    return CalendarContext(timezone="UTC")


@pytest.fixture
def us_context() -> CalendarContext:
    """Sunday-first weeks, week 1 contains Jan 1 (US convention)."""
    return CalendarContext(
        timezone="America/New_York", first_weekday=6, min_days_in_first_week=1
    )


@pytest.fixture
def new_york() -> CalendarContext:
    return CalendarContext(timezone="America/New_York")


# ---------------------------------------------------------------------------
# Instants and clocks
# ---------------------------------------------------------------------------

@pytest.fixture
def reference() -> datetime:
    """2020-11-24 05:30:30 UTC (a Tuesday)."""
    return datetime(2020, 11, 24, 5, 30, 30, tzinfo=timezone.utc)


@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock pinned at 2020-11-24 12:00 UTC."""
    return SimClock(start=datetime(2020, 11, 24, 12, 0, tzinfo=timezone.utc))
