from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional, Tuple, Union

from ..common.datetime_utils import as_date, parse_hhmm
from ..core.constants import DEFAULT_WEEKEND_DAYS
from ..core.exceptions import ConfigurationError
from ..payroll.rates import calculate_working_hours


@dataclass(frozen=True)
class SystemSettings:
    """Deployment-wide working hours and holiday calendar (singleton row)."""

    working_hours_start: Union[time, str]
    working_hours_end: Union[time, str]
    holiday_dates: Tuple[date, ...] = ()
    weekend_days: Tuple[str, ...] = DEFAULT_WEEKEND_DAYS
    late_threshold: Optional[int] = None
    company_name: Optional[str] = None

    def __post_init__(self):
        # "HH:MM" strings are accepted as stored by the settings form
        object.__setattr__(self, "working_hours_start", parse_hhmm(self.working_hours_start))
        object.__setattr__(self, "working_hours_end", parse_hhmm(self.working_hours_end))
        object.__setattr__(self, "holiday_dates", tuple(as_date(h) for h in self.holiday_dates))

        if not self.working_hours_start < self.working_hours_end:
            raise ConfigurationError(
                "Working hours start "
                f"{self.working_hours_start:%H:%M} must be before end {self.working_hours_end:%H:%M}"
            )

    @property
    def daily_hours(self) -> float:
        return calculate_working_hours(self.working_hours_start, self.working_hours_end)
