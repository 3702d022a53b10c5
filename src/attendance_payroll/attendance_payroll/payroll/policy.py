from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.constants import DEFAULT_DAILY_HOURS, DEFAULT_LATE_GRACE_MINUTES
from ..settings.model import SystemSettings
from ..workcalendar.working_days import normalize_weekend_days


@dataclass(frozen=True)
class PayrollPolicy:
    """Knobs for the deduction model.

    - ``daily_hours``: hours used to derive hourly/minute rates. ``None`` takes
      the span between the configured working hours instead of a fixed value.
    - ``weekend_days``: ``None`` uses the weekend list stored in settings. The
      same set drives both the working-day count and the day loop.
    - ``holidays_break_leave_streak``: when False a holiday is skipped without
      touching the consecutive-leave streak, so leave on both sides of a
      holiday counts as one streak.
    - ``late_grace_minutes``: late minutes forgiven before deduction.
    """

    daily_hours: Optional[float] = DEFAULT_DAILY_HOURS
    weekend_days: Optional[Tuple[str, ...]] = None
    holidays_break_leave_streak: bool = False
    late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES

    def resolve_daily_hours(self, settings: SystemSettings) -> float:
        if self.daily_hours is None:
            return settings.daily_hours
        return float(self.daily_hours)

    def resolve_weekend_days(self, settings: SystemSettings) -> Tuple[str, ...]:
        if self.weekend_days is None:
            return normalize_weekend_days(settings.weekend_days)
        return normalize_weekend_days(self.weekend_days)

    @classmethod
    def from_config(cls, settings_module) -> "PayrollPolicy":
        """Build from ``PAYROLL_*`` attributes of a ``config.*`` module."""
        daily_hours = getattr(settings_module, "PAYROLL_DAILY_HOURS", DEFAULT_DAILY_HOURS)
        weekend_days = getattr(settings_module, "PAYROLL_WEEKEND_DAYS", None)
        return cls(
            daily_hours=float(daily_hours) if daily_hours is not None else None,
            weekend_days=tuple(weekend_days) if weekend_days else None,
            holidays_break_leave_streak=bool(getattr(settings_module, "PAYROLL_HOLIDAYS_BREAK_LEAVE_STREAK", False)),
            late_grace_minutes=int(getattr(settings_module, "PAYROLL_LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
        )
