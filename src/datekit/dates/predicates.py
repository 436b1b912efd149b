"""Boolean checks on instants.

Anything relative to "now" reads it from an ``IClock`` (``WallClock`` by
default), so tests can pin time with ``SimClock``.
"""

from __future__ import annotations

from datetime import datetime

from datekit.core.clock import IClock, WallClock
from datekit.core.context import CalendarContext, resolve_context
from datekit.core.enums import CalendarUnit

from .arithmetic import add
from .components import ensure_instant, is_same, weekday


def _now(clock: IClock | None) -> datetime:
    return (clock or WallClock()).now()


def is_between(instant: datetime, a: datetime, b: datetime) -> bool:
    """True if ``instant`` is in the closed interval spanned by ``a`` and ``b``."""
    for value in (instant, a, b):
        ensure_instant(value)
    return min(a, b) <= instant <= max(a, b)


def is_in_current(
    instant: datetime,
    unit: CalendarUnit,
    context: CalendarContext | None = None,
    clock: IClock | None = None,
) -> bool:
    """True if ``instant`` and now share the same ``unit`` bucket."""
    return is_same(instant, _now(clock), unit, context)


def is_in_past(instant: datetime, clock: IClock | None = None) -> bool:
    return ensure_instant(instant) < _now(clock)


def is_in_future(instant: datetime, clock: IClock | None = None) -> bool:
    return ensure_instant(instant) > _now(clock)


def _is_day_offset(
    instant: datetime,
    days: int,
    context: CalendarContext | None,
    clock: IClock | None,
) -> bool:
    ctx = resolve_context(context)
    reference = add(_now(clock), CalendarUnit.DAY, days, ctx)
    return is_same(instant, reference, CalendarUnit.DAY, ctx)


def is_in_today(
    instant: datetime,
    context: CalendarContext | None = None,
    clock: IClock | None = None,
) -> bool:
    return _is_day_offset(instant, 0, context, clock)


def is_in_yesterday(
    instant: datetime,
    context: CalendarContext | None = None,
    clock: IClock | None = None,
) -> bool:
    return _is_day_offset(instant, -1, context, clock)


def is_in_tomorrow(
    instant: datetime,
    context: CalendarContext | None = None,
    clock: IClock | None = None,
) -> bool:
    return _is_day_offset(instant, 1, context, clock)


def is_in_weekend(instant: datetime, context: CalendarContext | None = None) -> bool:
    ctx = resolve_context(context)
    return weekday(instant, ctx) in ctx.weekend_days


def is_workday(instant: datetime, context: CalendarContext | None = None) -> bool:
    return not is_in_weekend(instant, context)
