"""Calendar-relative date arithmetic and boundaries.

Usage:
    from datekit.dates import CalendarUnit, beginning, end, add, change

    d = datetime(2020, 11, 24, 5, 30, 30, tzinfo=timezone.utc)
    end(d, CalendarUnit.MONTH)        # 2020-11-30 23:59:59+00:00
    change(d, CalendarUnit.YEAR, 2019)
    add(d, CalendarUnit.MONTH, -1)

Every function takes an optional ``CalendarContext``; omitted, the
process-wide default is used (see ``datekit.core.context``).
"""

from __future__ import annotations

from datekit.core.enums import (
    CalendarField,
    CalendarSystem,
    CalendarUnit,
    OutcomeStatus,
    UnchangedReason,
)

from .arithmetic import Outcome, add, change, legal_range, try_add, try_change
from .boundaries import PRESERVED_FIELDS, beginning, bounds, end, start_of_day
from .components import (
    component,
    compose,
    day,
    days_in_month,
    fields_of,
    hour,
    is_same,
    minute,
    month,
    nanosecond,
    second,
    truncate,
    week_of_month,
    week_of_year,
    weekday,
    weeks_in_year,
    year,
    year_for_week_of_year,
)
from .formatting import from_timestamp, to_string
from .predicates import (
    is_between,
    is_in_current,
    is_in_future,
    is_in_past,
    is_in_today,
    is_in_tomorrow,
    is_in_weekend,
    is_in_yesterday,
    is_workday,
)

__all__ = [
    # Enums
    "CalendarField",
    "CalendarSystem",
    "CalendarUnit",
    "OutcomeStatus",
    "UnchangedReason",
    # Components
    "component",
    "fields_of",
    "compose",
    "truncate",
    "is_same",
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "nanosecond",
    "weekday",
    "week_of_year",
    "week_of_month",
    "year_for_week_of_year",
    "days_in_month",
    "weeks_in_year",
    # Arithmetic
    "Outcome",
    "add",
    "try_add",
    "change",
    "try_change",
    "legal_range",
    # Boundaries
    "PRESERVED_FIELDS",
    "beginning",
    "end",
    "bounds",
    "start_of_day",
    # Predicates
    "is_between",
    "is_in_current",
    "is_in_past",
    "is_in_future",
    "is_in_today",
    "is_in_yesterday",
    "is_in_tomorrow",
    "is_in_weekend",
    "is_workday",
    # Formatting
    "to_string",
    "from_timestamp",
]
