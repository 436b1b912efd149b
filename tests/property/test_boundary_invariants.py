"""Property tests for calendar boundaries.

Uses hypothesis to verify, for whole-second instants:
- beginning(d, u) <= d <= end(d, u)
- both boundaries fall in the same bucket as d
- boundaries are idempotent and pure
"""

from datetime import datetime, timezone

from hypothesis import given, settings, strategies as st

from datekit.core.context import CalendarContext
from datekit.core.enums import CalendarUnit
from datekit.dates.boundaries import beginning, end
from datekit.dates.components import is_same

# Zones with whole-hour DST shifts (or none)
TIMEZONES = ["UTC", "America/New_York", "Europe/Paris", "Asia/Kolkata", "Asia/Tokyo"]
BOUNDED_UNITS = [u for u in CalendarUnit if u != CalendarUnit.NANOSECOND]

instants = st.datetimes(
    min_value=datetime(1900, 1, 1),
    max_value=datetime(2100, 12, 31),
    timezones=st.just(timezone.utc),
).map(lambda d: d.replace(microsecond=0))

contexts = st.builds(
    CalendarContext,
    timezone=st.sampled_from(TIMEZONES),
    first_weekday=st.integers(min_value=0, max_value=6),
    min_days_in_first_week=st.integers(min_value=1, max_value=7),
)


@given(d=instants, unit=st.sampled_from(BOUNDED_UNITS), ctx=contexts)
@settings(max_examples=300)
def test_boundaries_sandwich_instant(d, unit, ctx):
    """beginning <= d <= end for every unit with a boundary."""
    first = beginning(d, unit, ctx)
    last = end(d, unit, ctx)
    assert first is not None and last is not None
    assert first <= d <= last, f"{first} <= {d} <= {last} ({unit.value}, {ctx})"


@given(
    d=instants,
    unit=st.sampled_from([u for u in BOUNDED_UNITS if u != CalendarUnit.WEEK_OF_MONTH]),
    ctx=contexts,
)
@settings(max_examples=300)
def test_boundaries_share_bucket(d, unit, ctx):
    """Both boundaries belong to the same unit bucket as d."""
    assert is_same(beginning(d, unit, ctx), d, unit, ctx)
    assert is_same(end(d, unit, ctx), d, unit, ctx)


@given(d=instants, unit=st.sampled_from(BOUNDED_UNITS), ctx=contexts)
def test_beginning_is_idempotent(d, unit, ctx):
    first = beginning(d, unit, ctx)
    assert beginning(first, unit, ctx) == first


@given(d=instants, unit=st.sampled_from(BOUNDED_UNITS), ctx=contexts)
def test_boundaries_are_pure(d, unit, ctx):
    assert beginning(d, unit, ctx) == beginning(d, unit, ctx)
    assert end(d, unit, ctx) == end(d, unit, ctx)


@given(d=instants, ctx=contexts)
def test_nanosecond_has_no_boundary(d, ctx):
    assert beginning(d, CalendarUnit.NANOSECOND, ctx) is None
    assert end(d, CalendarUnit.NANOSECOND, ctx) is None
