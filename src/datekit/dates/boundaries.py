"""First and last instant of the calendar unit containing an instant.

``beginning`` truncates: it rebuilds the instant from the fields a unit
preserves, zeroing everything finer. ``end`` is the beginning of the next
bucket minus one second, so it is the last whole second of the unit.

Both week units resolve through (year_for_week_of_year, week_of_year); a
week_of_month boundary is the surrounding week, not clipped to the month.
Units without a boundary (nanosecond) give ``None``, as does ``end`` of
a unit whose successor lies past year 9999.
"""

from __future__ import annotations

import logging
from datetime import datetime

from datekit.core.context import CalendarContext, resolve_context
from datekit.core.enums import CalendarField, CalendarUnit

from .arithmetic import add, try_add
from .components import compose, ensure_instant, fields_of, truncate

F = CalendarField

PRESERVED_FIELDS: dict[CalendarUnit, tuple[CalendarField, ...]] = {
    CalendarUnit.SECOND: (F.YEAR, F.MONTH, F.DAY, F.HOUR, F.MINUTE, F.SECOND),
    CalendarUnit.MINUTE: (F.YEAR, F.MONTH, F.DAY, F.HOUR, F.MINUTE),
    CalendarUnit.HOUR: (F.YEAR, F.MONTH, F.DAY, F.HOUR),
    CalendarUnit.WEEK_OF_YEAR: (F.YEAR_FOR_WEEK_OF_YEAR, F.WEEK_OF_YEAR),
    CalendarUnit.WEEK_OF_MONTH: (F.YEAR_FOR_WEEK_OF_YEAR, F.WEEK_OF_YEAR),
    CalendarUnit.MONTH: (F.YEAR, F.MONTH),
    CalendarUnit.YEAR: (F.YEAR,),
}

WEEK_UNITS = frozenset({CalendarUnit.WEEK_OF_YEAR, CalendarUnit.WEEK_OF_MONTH})

logger = logging.getLogger(__name__)


def start_of_day(instant: datetime, context: CalendarContext | None = None) -> datetime:
    """Midnight (or the first existing time after it) of the instant's local day."""
    ctx = resolve_context(context)
    ymd = fields_of(ensure_instant(instant), (F.YEAR, F.MONTH, F.DAY), ctx)
    return compose(ymd, ctx).astimezone(instant.tzinfo)


def beginning(
    instant: datetime,
    unit: CalendarUnit,
    context: CalendarContext | None = None,
) -> datetime | None:
    ctx = resolve_context(context)
    unit = CalendarUnit(unit)
    if unit == CalendarUnit.DAY:
        return start_of_day(instant, ctx)
    fields = PRESERVED_FIELDS.get(unit)
    if fields is None:
        return None
    return truncate(instant, fields, ctx)


def end(
    instant: datetime,
    unit: CalendarUnit,
    context: CalendarContext | None = None,
) -> datetime | None:
    """Last whole second of the unit containing ``instant``.

    ``None`` when the unit has no boundary, or when the start of the next
    bucket cannot be represented (the last unit before year 10000).
    """
    ctx = resolve_context(context)
    unit = CalendarUnit(unit)
    if unit == CalendarUnit.DAY:
        shifted = try_add(instant, CalendarUnit.DAY, 1, ctx)
    elif unit in WEEK_UNITS:
        # Re-truncate below: a week starting inside a DST gap begins after local midnight.
        week_start = truncate(instant, PRESERVED_FIELDS[unit], ctx)
        shifted = try_add(week_start, CalendarUnit.DAY, 7, ctx)
    elif unit in PRESERVED_FIELDS:
        shifted = try_add(instant, unit, 1, ctx)
    else:
        return None
    if not shifted.is_computed:
        logger.debug("No end of %s for %s: next %s overflows", unit.value, instant, unit.value)
        return None
    if unit == CalendarUnit.DAY:
        next_start = start_of_day(shifted.value, ctx)
    else:
        next_start = truncate(shifted.value, PRESERVED_FIELDS[unit], ctx)
    return add(next_start, CalendarUnit.SECOND, -1, ctx)


def bounds(
    instant: datetime,
    unit: CalendarUnit,
    context: CalendarContext | None = None,
) -> tuple[datetime, datetime] | None:
    """(beginning, end) of the unit, or None when either side is missing."""
    first = beginning(instant, unit, context)
    last = end(instant, unit, context)
    if first is None or last is None:
        return None
    return first, last
