"""Test now-relative and calendar predicates with a pinned clock."""

from datetime import datetime, timezone

import pytest

from datekit.core.clock import SimClock
from datekit.core.context import CalendarContext
from datekit.core.enums import CalendarUnit
from datekit.core.errors import InvalidInstantError
from datekit.dates import predicates as p

U = CalendarUnit


def utc_dt(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestIsBetween:
    def test_inside(self, reference):
        assert p.is_between(reference, utc_dt(2020, 1, 1), utc_dt(2021, 1, 1))

    def test_endpoints_inclusive(self, reference):
        assert p.is_between(reference, reference, utc_dt(2021, 1, 1))
        assert p.is_between(reference, utc_dt(2020, 1, 1), reference)

    def test_outside(self, reference):
        assert not p.is_between(reference, utc_dt(2021, 1, 1), utc_dt(2022, 1, 1))

    def test_argument_order_does_not_matter(self, reference):
        lo, hi = utc_dt(2020, 1, 1), utc_dt(2021, 1, 1)
        assert p.is_between(reference, hi, lo) == p.is_between(reference, lo, hi)

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_naive_argument_rejected(self, reference, position):
        args = [reference, utc_dt(2020, 1, 1), utc_dt(2021, 1, 1)]
        args[position] = args[position].replace(tzinfo=None)
        with pytest.raises(InvalidInstantError):
            p.is_between(*args)


class TestPastFuture:
    def test_past(self, reference, sim_clock):
        assert p.is_in_past(reference, sim_clock)
        assert not p.is_in_future(reference, sim_clock)

    def test_future(self, sim_clock):
        later = utc_dt(2020, 11, 24, 12, 0, 1)
        assert p.is_in_future(later, sim_clock)
        assert not p.is_in_past(later, sim_clock)

    def test_now_is_neither(self, sim_clock):
        now = sim_clock.now()
        assert not p.is_in_past(now, sim_clock)
        assert not p.is_in_future(now, sim_clock)

    def test_wall_clock_default(self):
        assert p.is_in_past(utc_dt(2000, 1, 1))
        assert p.is_in_future(utc_dt(9999, 1, 1))


class TestRelativeDays:
    def test_today(self, reference, utc, sim_clock):
        assert p.is_in_today(reference, utc, sim_clock)
        assert not p.is_in_yesterday(reference, utc, sim_clock)
        assert not p.is_in_tomorrow(reference, utc, sim_clock)

    def test_yesterday(self, utc, sim_clock):
        assert p.is_in_yesterday(utc_dt(2020, 11, 23, 23, 59, 59), utc, sim_clock)

    def test_tomorrow(self, utc, sim_clock):
        assert p.is_in_tomorrow(utc_dt(2020, 11, 25), utc, sim_clock)

    def test_days_follow_context_timezone(self, utc, new_york, sim_clock):
        late_evening_ny = utc_dt(2020, 11, 24, 3)  # Nov 23, 22:00 EST
        assert p.is_in_today(late_evening_ny, utc, sim_clock)
        assert p.is_in_yesterday(late_evening_ny, new_york, sim_clock)

    def test_month_boundary(self, utc):
        clock = SimClock(start=utc_dt(2021, 3, 1, 8))
        assert p.is_in_yesterday(utc_dt(2021, 2, 28, 8), utc, clock)


class TestIsInCurrent:
    @pytest.mark.parametrize(
        "unit,expected",
        [
            (U.SECOND, False),
            (U.HOUR, False),
            (U.DAY, True),
            (U.WEEK_OF_YEAR, True),
            (U.WEEK_OF_MONTH, True),
            (U.MONTH, True),
            (U.YEAR, True),
        ],
    )
    def test_reference_against_noon(self, reference, utc, sim_clock, unit, expected):
        assert p.is_in_current(reference, unit, utc, sim_clock) is expected

    def test_next_week_same_month(self, utc, sim_clock):
        next_monday = utc_dt(2020, 11, 30)
        assert not p.is_in_current(next_monday, U.WEEK_OF_YEAR, utc, sim_clock)
        assert p.is_in_current(next_monday, U.MONTH, utc, sim_clock)

    def test_exact_instant(self, utc, sim_clock):
        assert p.is_in_current(sim_clock.now(), U.NANOSECOND, utc, sim_clock)


class TestWeekend:
    def test_saturday(self, utc):
        assert p.is_in_weekend(utc_dt(2020, 11, 28, 12), utc)
        assert not p.is_workday(utc_dt(2020, 11, 28, 12), utc)

    def test_tuesday(self, reference, utc):
        assert p.is_workday(reference, utc)
        assert not p.is_in_weekend(reference, utc)

    def test_weekend_follows_timezone(self, utc, new_york):
        d = utc_dt(2020, 11, 28, 2)  # Friday 21:00 in New York
        assert p.is_in_weekend(d, utc)
        assert p.is_workday(d, new_york)

    def test_custom_weekend(self):
        ctx = CalendarContext(weekend_days=frozenset({4, 5}))
        friday = utc_dt(2020, 11, 27, 12)
        sunday = utc_dt(2020, 11, 29, 12)
        assert p.is_in_weekend(friday, ctx)
        assert p.is_workday(sunday, ctx)
