from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple, Union

from ..common.datetime_utils import as_date
from ..core.constants import DAY_NAMES, DEFAULT_UPCOMING_MONTHS, DEFAULT_WEEKEND_DAYS
from ..core.exceptions import ValidationError

HolidayLike = Union[date, datetime]

_DAY_LOOKUP = {name.lower(): name for name in DAY_NAMES}
_DAY_LOOKUP.update({name[:3].lower(): name for name in DAY_NAMES})


@dataclass(frozen=True)
class MonthDetails:
    year: int
    month: int
    month_name: str
    total_days: int
    working_days: Optional[int] = None
    weekend_day_count: Optional[int] = None


def normalize_day_name(name: str) -> str:
    """Map ``"SUNDAY"``, ``"sunday"`` or ``"Sun"`` to ``"Sunday"``."""
    key = (name or "").strip().lower()
    try:
        return _DAY_LOOKUP[key]
    except KeyError:
        raise ValidationError(f"Unknown weekday name: {name!r}")


def normalize_weekend_days(names: Iterable[str]) -> Tuple[str, ...]:
    out: list[str] = []
    for name in names:
        canonical = normalize_day_name(name)
        if canonical not in out:
            out.append(canonical)
    return tuple(out)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of the month (both inclusive)."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def iter_month_days(year: int, month: int) -> Iterable[date]:
    first, last = month_bounds(year, month)
    day = first
    while day <= last:
        yield day
        day += timedelta(days=1)


def is_weekend(day: HolidayLike, weekend_days: Sequence[str] = DEFAULT_WEEKEND_DAYS) -> bool:
    day_name = DAY_NAMES[as_date(day).weekday()]
    return day_name in normalize_weekend_days(weekend_days)


def is_holiday(day: HolidayLike, holidays: Iterable[HolidayLike]) -> bool:
    """Match on (day, month, year); any time component is ignored."""
    target = as_date(day)
    return any(as_date(h) == target for h in holidays)


def get_working_days_in_month(
    year: int,
    month: int,
    weekend_days: Sequence[str] = DEFAULT_WEEKEND_DAYS,
    holidays: Iterable[HolidayLike] = (),
) -> int:
    """Count days that are neither weekend nor holiday.

    Zero is a valid answer for a pathological configuration; callers deriving
    pay rates must guard against it.
    """
    return MonthCalendar.build(year, month, weekend_days, holidays).working_days


def get_month_details(
    year: int,
    month: int,
    weekend_days: Optional[Sequence[str]] = None,
    holidays: Iterable[HolidayLike] = (),
) -> MonthDetails:
    details = MonthDetails(
        year=year,
        month=month,
        month_name=calendar.month_name[month],
        total_days=days_in_month(year, month),
    )
    if weekend_days is None:
        return details

    cal = MonthCalendar.build(year, month, weekend_days, holidays)
    return MonthDetails(
        year=details.year,
        month=details.month,
        month_name=details.month_name,
        total_days=details.total_days,
        working_days=cal.working_days,
        weekend_day_count=cal.weekend_day_count,
    )


def get_upcoming_months_working_days(
    count: int = DEFAULT_UPCOMING_MONTHS,
    *,
    today: Optional[date] = None,
    weekend_days: Sequence[str] = DEFAULT_WEEKEND_DAYS,
    holidays: Iterable[HolidayLike] = (),
) -> list[MonthDetails]:
    """Month details for the current month and the ``count - 1`` following ones."""
    today = today or date.today()
    holidays = list(holidays)

    months: list[MonthDetails] = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append(get_month_details(year, month, weekend_days, holidays))
        month += 1
        if month > 12:
            month = 1
            year += 1
    return months


@dataclass(frozen=True)
class MonthCalendar:
    """Weekend/holiday classification for one calendar month.

    Built once per month and shared across every employee of a payroll run.
    """

    year: int
    month: int
    days: Tuple[date, ...]
    weekend_days: Tuple[str, ...]
    holidays: FrozenSet[date]
    working_days: int

    @classmethod
    def build(
        cls,
        year: int,
        month: int,
        weekend_days: Sequence[str] = DEFAULT_WEEKEND_DAYS,
        holidays: Iterable[HolidayLike] = (),
    ) -> "MonthCalendar":
        weekend = normalize_weekend_days(weekend_days)
        days = tuple(iter_month_days(year, month))
        in_month = frozenset(
            d for d in (as_date(h) for h in holidays) if d.year == year and d.month == month
        )
        working = sum(1 for d in days if DAY_NAMES[d.weekday()] not in weekend and d not in in_month)
        return cls(
            year=year,
            month=month,
            days=days,
            weekend_days=weekend,
            holidays=in_month,
            working_days=working,
        )

    @property
    def first_day(self) -> date:
        return self.days[0]

    @property
    def last_day(self) -> date:
        return self.days[-1]

    @property
    def weekend_day_count(self) -> int:
        return sum(1 for d in self.days if self.is_weekend(d))

    def is_weekend(self, day: date) -> bool:
        return DAY_NAMES[day.weekday()] in self.weekend_days

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays
