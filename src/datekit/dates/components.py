"""Read calendar fields of an instant, and rebuild instants from fields.

Every projection converts the instant into the context's timezone first.
Week numbering follows the context: weeks start on ``first_weekday`` and
week 1 of a year (or month) is the first week with at least
``min_days_in_first_week`` days inside it.

Week arithmetic is done on proleptic Gregorian ordinals (day 1 is
0001-01-01, a Monday) so it stays defined at the edges of the datetime range.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Mapping
from datetime import date, datetime

from datekit.core.context import CalendarContext, resolve_context
from datekit.core.enums import CalendarField, CalendarUnit
from datekit.core.errors import InvalidInstantError

F = CalendarField

# Fields compared by is_same() for each granularity.
GRANULARITY_FIELDS: dict[CalendarUnit, tuple[CalendarField, ...]] = {
    CalendarUnit.NANOSECOND: (F.YEAR, F.MONTH, F.DAY, F.HOUR, F.MINUTE, F.SECOND, F.NANOSECOND),
    CalendarUnit.SECOND: (F.YEAR, F.MONTH, F.DAY, F.HOUR, F.MINUTE, F.SECOND),
    CalendarUnit.MINUTE: (F.YEAR, F.MONTH, F.DAY, F.HOUR, F.MINUTE),
    CalendarUnit.HOUR: (F.YEAR, F.MONTH, F.DAY, F.HOUR),
    CalendarUnit.DAY: (F.YEAR, F.MONTH, F.DAY),
    CalendarUnit.WEEK_OF_YEAR: (F.YEAR_FOR_WEEK_OF_YEAR, F.WEEK_OF_YEAR),
    CalendarUnit.WEEK_OF_MONTH: (F.YEAR, F.MONTH, F.WEEK_OF_MONTH),
    CalendarUnit.MONTH: (F.YEAR, F.MONTH),
    CalendarUnit.YEAR: (F.YEAR,),
}


def ensure_instant(instant: datetime) -> datetime:
    if not isinstance(instant, datetime):
        raise InvalidInstantError(instant, "expected a datetime")
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidInstantError(instant, "naive datetimes have no absolute time")
    return instant


def localize(instant: datetime, context: CalendarContext | None = None) -> datetime:
    """The instant as wall-clock time in the context's timezone."""
    ctx = resolve_context(context)
    return ensure_instant(instant).astimezone(ctx.zone)


# ---------------------------------------------------------------------------
# Week numbering on ordinals
# ---------------------------------------------------------------------------

def _jan1_ordinal(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + 1


def _weekday_of(ordinal: int) -> int:
    return (ordinal + 6) % 7


def _week_start(ordinal: int, ctx: CalendarContext) -> int:
    return ordinal - (_weekday_of(ordinal) - ctx.first_weekday) % 7


def _first_week_start(period_start: int, ctx: CalendarContext) -> int:
    """Ordinal of the first day of week 1 of a period starting at ``period_start``."""
    start = _week_start(period_start, ctx)
    if 7 - (period_start - start) >= ctx.min_days_in_first_week:
        return start
    return start + 7


def _week_of_year(local: date, ctx: CalendarContext) -> tuple[int, int]:
    start = _week_start(local.toordinal(), ctx)
    for year in (local.year + 1, local.year, local.year - 1):
        first = _first_week_start(_jan1_ordinal(year), ctx)
        if start >= first:
            return year, (start - first) // 7 + 1
    raise AssertionError("unreachable: week precedes two first weeks")


def _week_of_month(local: date, ctx: CalendarContext) -> int:
    ordinal = local.toordinal()
    first = _first_week_start(ordinal - (local.day - 1), ctx)
    return (_week_start(ordinal, ctx) - first) // 7 + 1


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def weeks_in_year(year: int, context: CalendarContext | None = None) -> int:
    """Number of weeks whose year-for-week-of-year is ``year``."""
    ctx = resolve_context(context)
    this = _first_week_start(_jan1_ordinal(year), ctx)
    following = _first_week_start(_jan1_ordinal(year + 1), ctx)
    return (following - this) // 7


# ---------------------------------------------------------------------------
# Projections
# ---------------------------------------------------------------------------

def _project(local: datetime, field: CalendarField, ctx: CalendarContext) -> int:
    if field == F.YEAR:
        return local.year
    if field == F.MONTH:
        return local.month
    if field == F.DAY:
        return local.day
    if field == F.HOUR:
        return local.hour
    if field == F.MINUTE:
        return local.minute
    if field == F.SECOND:
        return local.second
    if field == F.NANOSECOND:
        return local.microsecond * 1000
    if field == F.WEEKDAY:
        return local.weekday()
    if field == F.WEEK_OF_YEAR:
        return _week_of_year(local.date(), ctx)[1]
    if field == F.YEAR_FOR_WEEK_OF_YEAR:
        return _week_of_year(local.date(), ctx)[0]
    if field == F.WEEK_OF_MONTH:
        return _week_of_month(local.date(), ctx)
    raise ValueError(f"Unknown calendar field: {field!r}")


def component(
    instant: datetime,
    field: CalendarField,
    context: CalendarContext | None = None,
) -> int:
    ctx = resolve_context(context)
    return _project(localize(instant, ctx), CalendarField(field), ctx)


def fields_of(
    instant: datetime,
    fields: Iterable[CalendarField],
    context: CalendarContext | None = None,
) -> dict[CalendarField, int]:
    """Project several fields at once (one timezone conversion)."""
    ctx = resolve_context(context)
    local = localize(instant, ctx)
    return {CalendarField(f): _project(local, CalendarField(f), ctx) for f in fields}


def year(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.YEAR, context)


def month(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.MONTH, context)


def day(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.DAY, context)


def hour(instant: datetime, context: CalendarContext | None = None) -> int:
    """Hour of day, 24-hour clock."""
    return component(instant, F.HOUR, context)


def minute(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.MINUTE, context)


def second(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.SECOND, context)


def nanosecond(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.NANOSECOND, context)


def weekday(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.WEEKDAY, context)


def week_of_year(instant: datetime, context: CalendarContext | None = None) -> int:
    return component(instant, F.WEEK_OF_YEAR, context)


def year_for_week_of_year(
    instant: datetime, context: CalendarContext | None = None
) -> int:
    return component(instant, F.YEAR_FOR_WEEK_OF_YEAR, context)


def week_of_month(instant: datetime, context: CalendarContext | None = None) -> int:
    """Week within the month; 0 for a leading week too short to count as week 1."""
    return component(instant, F.WEEK_OF_MONTH, context)


# ---------------------------------------------------------------------------
# Reconstruction
# ---------------------------------------------------------------------------

def compose(
    fields: Mapping[CalendarField, int],
    context: CalendarContext | None = None,
    *,
    fold: int = 0,
) -> datetime:
    """Build an instant in the context timezone from a subset of fields.

    Missing fields take their minimum value, so composing from a prefix of
    an instant's fields truncates it. ``year_for_week_of_year`` (with
    ``week_of_year``) takes precedence over year/month/day.

    Raises ValueError / OverflowError when the fields are not representable.
    """
    ctx = resolve_context(context)
    fields = {CalendarField(k): v for k, v in fields.items()}

    if F.YEAR_FOR_WEEK_OF_YEAR in fields:
        first = _first_week_start(_jan1_ordinal(fields[F.YEAR_FOR_WEEK_OF_YEAR]), ctx)
        d = date.fromordinal(first + (fields.get(F.WEEK_OF_YEAR, 1) - 1) * 7)
    else:
        d = date(fields.get(F.YEAR, 1), fields.get(F.MONTH, 1), fields.get(F.DAY, 1))

    return datetime(
        d.year,
        d.month,
        d.day,
        fields.get(F.HOUR, 0),
        fields.get(F.MINUTE, 0),
        fields.get(F.SECOND, 0),
        fields.get(F.NANOSECOND, 0) // 1000,
        tzinfo=ctx.zone,
        fold=fold,
    )


def truncate(
    instant: datetime,
    fields: Iterable[CalendarField],
    context: CalendarContext | None = None,
) -> datetime:
    """Keep only ``fields`` of ``instant``; every finer field is zeroed.

    The result is expressed in the input's tzinfo. When the hour survives,
    the wall-clock fold is kept so truncation inside a repeated DST hour
    stays within that hour.
    """
    ctx = resolve_context(context)
    fields = tuple(CalendarField(f) for f in fields)
    local = localize(instant, ctx)
    values = {f: _project(local, f, ctx) for f in fields}
    fold = local.fold if F.HOUR in fields else 0
    return compose(values, ctx, fold=fold).astimezone(instant.tzinfo)


def is_same(
    a: datetime,
    b: datetime,
    granularity: CalendarUnit,
    context: CalendarContext | None = None,
) -> bool:
    """True when ``a`` and ``b`` fall in the same bucket of ``granularity``."""
    granularity = CalendarUnit(granularity)
    if granularity == CalendarUnit.NANOSECOND:
        return ensure_instant(a) == ensure_instant(b)
    ctx = resolve_context(context)
    fields = GRANULARITY_FIELDS[granularity]
    return fields_of(a, fields, ctx) == fields_of(b, fields, ctx)
