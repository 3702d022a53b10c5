from datetime import date, datetime

import pytest

from src.attendance_payroll.attendance_payroll.core.exceptions import ValidationError
from src.attendance_payroll.attendance_payroll.workcalendar.working_days import (
    MonthCalendar,
    get_month_details,
    get_upcoming_months_working_days,
    get_working_days_in_month,
    is_holiday,
    is_weekend,
    month_bounds,
    normalize_day_name,
)


def test_is_weekend_defaults_to_sunday():
    assert is_weekend(date(2025, 4, 6))
    assert not is_weekend(date(2025, 4, 5))
    assert is_weekend(date(2025, 4, 5), ["Saturday", "Sunday"])


def test_weekend_names_are_case_insensitive():
    assert is_weekend(date(2025, 4, 5), ["SATURDAY"])
    assert normalize_day_name("sun") == "Sunday"
    with pytest.raises(ValidationError):
        normalize_day_name("Funday")


def test_holiday_match_ignores_time_component():
    holidays = [datetime(2025, 4, 15, 0, 0)]
    assert is_holiday(date(2025, 4, 15), holidays)
    assert not is_holiday(date(2026, 4, 15), holidays)


def test_working_days_sunday_only():
    assert get_working_days_in_month(2025, 4) == 26
    # February 2024 is a leap month with 4 Sundays
    assert get_working_days_in_month(2024, 2) == 25


def test_working_days_with_holidays_and_two_day_weekend():
    holidays = [date(2025, 4, 15), date(2025, 4, 20), date(2025, 5, 1)]

    # The Sunday holiday and the May holiday do not change the April count
    assert get_working_days_in_month(2025, 4, ["Sunday"], holidays) == 25
    assert get_working_days_in_month(2025, 4, ["Saturday", "Sunday"], holidays) == 21


def test_month_details():
    details = get_month_details(2024, 2)

    assert details.month_name == "February"
    assert details.year == 2024
    assert details.total_days == 29
    assert details.working_days is None

    with_days = get_month_details(2025, 4, ["Sunday"], [date(2025, 4, 15)])
    assert with_days.working_days == 25
    assert with_days.weekend_day_count == 4


def test_month_bounds():
    assert month_bounds(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))


def test_upcoming_months_roll_over_year():
    months = get_upcoming_months_working_days(3, today=date(2025, 11, 20))

    assert [(m.year, m.month) for m in months] == [(2025, 11), (2025, 12), (2026, 1)]
    assert all(m.working_days is not None for m in months)


def test_month_calendar_keeps_only_holidays_of_the_month():
    cal = MonthCalendar.build(2025, 4, ["Sunday"], [date(2025, 4, 15), date(2025, 3, 31)])

    assert cal.holidays == frozenset({date(2025, 4, 15)})
    assert cal.first_day == date(2025, 4, 1)
    assert cal.last_day == date(2025, 4, 30)
    assert len(cal.days) == 30
    assert cal.working_days == 25
