from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Union

from ..common.datetime_utils import parse_hhmm
from ..core.exceptions import ConfigurationError

TimeLike = Union[str, time]


@dataclass(frozen=True)
class SalaryRates:
    daily_rate: float
    hourly_rate: float
    minute_rate: float


def calculate_working_hours(start: TimeLike, end: TimeLike) -> float:
    """Hours between two times of day on a common date, never negative."""
    anchor = date(2000, 1, 1)
    start_dt = datetime.combine(anchor, parse_hhmm(start))
    end_dt = datetime.combine(anchor, parse_hhmm(end))
    return max(0.0, (end_dt - start_dt).total_seconds() / 3600)


def calculate_rates(base_salary: float, working_days: int, daily_hours: float) -> SalaryRates:
    if working_days <= 0:
        raise ConfigurationError(
            f"Cannot derive pay rates: month has {working_days} working days"
        )
    if daily_hours <= 0:
        raise ConfigurationError(
            f"Cannot derive pay rates: daily working hours is {daily_hours}"
        )

    daily_rate = base_salary / working_days
    hourly_rate = daily_rate / daily_hours
    minute_rate = hourly_rate / 60
    return SalaryRates(daily_rate=daily_rate, hourly_rate=hourly_rate, minute_rate=minute_rate)


def calculate_late_deduction(late_minutes: int, grace_minutes: int, minute_rate: float) -> float:
    if late_minutes <= grace_minutes:
        return 0.0
    return (late_minutes - grace_minutes) * minute_rate


def calculate_leave_deduction(leave_days: int, daily_rate: float) -> float:
    return leave_days * daily_rate


def format_minutes_to_time(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
