"""Shift an instant by calendar units, or overwrite one of its fields.

Sub-day units (nanosecond .. hour) move along absolute time. Day, week,
month and year move the wall clock in the context timezone; month and year
clamp the day to the length of the target month (Jan 31 + 1 month is the
last day of February).

Nothing here raises for bad values. ``try_add`` / ``try_change`` return an
``Outcome`` telling a computed result apart from an unchanged one and why;
``add`` / ``change`` unwrap it, falling back to the input instant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from datekit.core.context import CalendarContext, resolve_context
from datekit.core.enums import CalendarField, CalendarUnit, OutcomeStatus, UnchangedReason

from .components import (
    _week_of_month,
    days_in_month,
    ensure_instant,
    fields_of,
    localize,
    weeks_in_year,
)

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000

# Field read to compute "current value" for change().
_UNIT_FIELD: dict[CalendarUnit, CalendarField] = {
    CalendarUnit.NANOSECOND: CalendarField.NANOSECOND,
    CalendarUnit.SECOND: CalendarField.SECOND,
    CalendarUnit.MINUTE: CalendarField.MINUTE,
    CalendarUnit.HOUR: CalendarField.HOUR,
    CalendarUnit.DAY: CalendarField.DAY,
    CalendarUnit.WEEK_OF_YEAR: CalendarField.WEEK_OF_YEAR,
    CalendarUnit.WEEK_OF_MONTH: CalendarField.WEEK_OF_MONTH,
    CalendarUnit.MONTH: CalendarField.MONTH,
    CalendarUnit.YEAR: CalendarField.YEAR,
}


@dataclass(frozen=True)
class Outcome:
    """Result of an add/change attempt.

    ``value`` is always usable: on ``UNCHANGED`` it is the input instant.
    A ``COMPUTED`` outcome may still equal the input (e.g. adding 0).
    """

    value: datetime
    status: OutcomeStatus
    reason: UnchangedReason | None = None

    @classmethod
    def computed(cls, value: datetime) -> Outcome:
        return cls(value=value, status=OutcomeStatus.COMPUTED)

    @classmethod
    def unchanged(cls, value: datetime, reason: UnchangedReason) -> Outcome:
        return cls(value=value, status=OutcomeStatus.UNCHANGED, reason=reason)

    @property
    def is_computed(self) -> bool:
        return self.status == OutcomeStatus.COMPUTED


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

def _elapsed(instant: datetime, delta: timedelta) -> datetime:
    # Aware + timedelta is wall-clock arithmetic; go through UTC for elapsed time.
    return (instant.astimezone(timezone.utc) + delta).astimezone(instant.tzinfo)


def _shift_months(local: datetime, months: int) -> datetime:
    y, m = divmod(local.year * 12 + (local.month - 1) + months, 12)
    m += 1
    if not 1 <= y <= 9999:
        raise OverflowError(f"year {y} is out of range")
    return local.replace(year=y, month=m, day=min(local.day, days_in_month(y, m)))


def _shift(instant: datetime, unit: CalendarUnit, delta: int, ctx: CalendarContext) -> datetime:
    if unit == CalendarUnit.NANOSECOND:
        return _elapsed(instant, timedelta(microseconds=delta // 1000))
    if unit == CalendarUnit.SECOND:
        return _elapsed(instant, timedelta(seconds=delta))
    if unit == CalendarUnit.MINUTE:
        return _elapsed(instant, timedelta(minutes=delta))
    if unit == CalendarUnit.HOUR:
        return _elapsed(instant, timedelta(hours=delta))

    local = localize(instant, ctx)
    if unit == CalendarUnit.DAY:
        shifted = local + timedelta(days=delta)
    elif unit in (CalendarUnit.WEEK_OF_YEAR, CalendarUnit.WEEK_OF_MONTH):
        shifted = local + timedelta(days=7 * delta)
    elif unit == CalendarUnit.MONTH:
        shifted = _shift_months(local, delta)
    elif unit == CalendarUnit.YEAR:
        shifted = _shift_months(local, 12 * delta)
    else:
        raise ValueError(f"Unknown calendar unit: {unit!r}")
    # Keep the source's DST fold: a repeated hour maps to the same occurrence.
    return shifted.replace(fold=local.fold).astimezone(instant.tzinfo)


def try_add(
    instant: datetime,
    unit: CalendarUnit,
    delta: int,
    context: CalendarContext | None = None,
) -> Outcome:
    """Shift ``instant`` by ``delta`` units of calendar-correct arithmetic."""
    ensure_instant(instant)
    ctx = resolve_context(context)
    unit = CalendarUnit(unit)
    try:
        return Outcome.computed(_shift(instant, unit, delta, ctx))
    except (OverflowError, ValueError) as exc:
        logger.debug(
            "add(%s, %+d) overflowed for %s: %s", unit.value, delta, instant, exc
        )
        return Outcome.unchanged(instant, UnchangedReason.OVERFLOW)


def add(
    instant: datetime,
    unit: CalendarUnit,
    delta: int,
    context: CalendarContext | None = None,
) -> datetime:
    """Like ``try_add`` but returns the instant (input on overflow)."""
    return try_add(instant, unit, delta, context).value


# ---------------------------------------------------------------------------
# change
# ---------------------------------------------------------------------------

def legal_range(
    instant: datetime,
    unit: CalendarUnit,
    context: CalendarContext | None = None,
) -> range:
    """Values ``unit`` may take at the instant's position in its parent unit."""
    ctx = resolve_context(context)
    unit = CalendarUnit(unit)
    if unit == CalendarUnit.NANOSECOND:
        return range(0, NANOSECONDS_PER_SECOND)
    if unit in (CalendarUnit.SECOND, CalendarUnit.MINUTE):
        return range(0, 60)
    if unit == CalendarUnit.HOUR:
        return range(0, 24)
    if unit == CalendarUnit.MONTH:
        return range(1, 13)
    if unit == CalendarUnit.YEAR:
        return range(1, 10000)

    local = localize(instant, ctx)
    if unit == CalendarUnit.DAY:
        return range(1, days_in_month(local.year, local.month) + 1)
    if unit == CalendarUnit.WEEK_OF_YEAR:
        wy = fields_of(instant, [CalendarField.YEAR_FOR_WEEK_OF_YEAR], ctx)
        return range(1, weeks_in_year(wy[CalendarField.YEAR_FOR_WEEK_OF_YEAR], ctx) + 1)
    if unit == CalendarUnit.WEEK_OF_MONTH:
        first = local.date().replace(day=1)
        last = first.replace(day=days_in_month(local.year, local.month))
        return range(_week_of_month(first, ctx), _week_of_month(last, ctx) + 1)
    raise ValueError(f"Unknown calendar unit: {unit!r}")


def try_change(
    instant: datetime,
    unit: CalendarUnit,
    value: int,
    context: CalendarContext | None = None,
) -> Outcome:
    """Overwrite one field of ``instant``; finer fields are kept.

    Out-of-range values (and non-positive years) leave the instant
    unchanged with reason ``OUT_OF_RANGE``.
    """
    ensure_instant(instant)
    ctx = resolve_context(context)
    unit = CalendarUnit(unit)

    if unit == CalendarUnit.YEAR:
        allowed = value > 0
    else:
        allowed = value in legal_range(instant, unit, ctx)
    if not allowed:
        logger.debug("change(%s=%d) rejected for %s: out of range", unit.value, value, instant)
        return Outcome.unchanged(instant, UnchangedReason.OUT_OF_RANGE)

    field = _UNIT_FIELD[unit]
    current = fields_of(instant, [field], ctx)[field]
    return try_add(instant, unit, value - current, ctx)


def change(
    instant: datetime,
    unit: CalendarUnit,
    value: int,
    context: CalendarContext | None = None,
) -> datetime:
    """Like ``try_change`` but returns the instant (input when rejected)."""
    return try_change(instant, unit, value, context).value
