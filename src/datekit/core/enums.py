"""Enumerations used across datekit."""

from enum import Enum


class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    ISO8601 = "iso8601"  # Gregorian with Monday-first, 4-day first week


class CalendarUnit(str, Enum):
    """Granularity for add/change and boundary queries."""

    NANOSECOND = "nanosecond"  # add/change only, no boundary
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    MONTH = "month"
    YEAR = "year"


class CalendarField(str, Enum):
    """A single readable field of an instant."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    NANOSECOND = "nanosecond"
    WEEKDAY = "weekday"  # 0=Monday .. 6=Sunday
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    YEAR_FOR_WEEK_OF_YEAR = "year_for_week_of_year"


class OutcomeStatus(str, Enum):
    COMPUTED = "computed"
    UNCHANGED = "unchanged"


class UnchangedReason(str, Enum):
    OVERFLOW = "overflow"  # Result not representable
    OUT_OF_RANGE = "out_of_range"  # Requested value outside the legal range
