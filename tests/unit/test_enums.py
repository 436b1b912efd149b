"""Test all enums have expected members."""

from datekit.core.enums import (
    CalendarField,
    CalendarSystem,
    CalendarUnit,
    OutcomeStatus,
    UnchangedReason,
)


class TestCalendarUnit:
    def test_members(self):
        assert [u.value for u in CalendarUnit] == [
            "nanosecond",
            "second",
            "minute",
            "hour",
            "day",
            "week_of_year",
            "week_of_month",
            "month",
            "year",
        ]

    def test_lookup_by_value(self):
        assert CalendarUnit("month") is CalendarUnit.MONTH


class TestCalendarField:
    def test_week_fields_present(self):
        assert CalendarField.YEAR_FOR_WEEK_OF_YEAR.value == "year_for_week_of_year"
        assert CalendarField.WEEK_OF_YEAR.value == "week_of_year"
        assert CalendarField.WEEK_OF_MONTH.value == "week_of_month"


class TestCalendarSystem:
    def test_members(self):
        assert set(CalendarSystem) == {CalendarSystem.GREGORIAN, CalendarSystem.ISO8601}


class TestOutcomeEnums:
    def test_status_values(self):
        assert OutcomeStatus.COMPUTED.value == "computed"
        assert OutcomeStatus.UNCHANGED.value == "unchanged"

    def test_reason_values(self):
        assert {r.value for r in UnchangedReason} == {"overflow", "out_of_range"}
