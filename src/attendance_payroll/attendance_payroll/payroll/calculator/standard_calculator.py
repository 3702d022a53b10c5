from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import as_date
from ...core.enums import AttendanceStatus
from ...leaves.model import LeaveRequest
from ...settings.model import SystemSettings
from ...workcalendar.working_days import MonthCalendar
from ..model import SalaryCalculation
from ..policy import PayrollPolicy
from ..rates import calculate_late_deduction, calculate_leave_deduction, calculate_rates
from .base import SalaryCalculator


@dataclass
class _Tally:
    present_days: int = 0
    absent_days: int = 0
    leave_days: int = 0
    late_count: int = 0
    total_late_minutes: int = 0
    streak: int = 0
    max_streak: int = 0

    def extend_streak(self) -> None:
        self.streak += 1
        self.max_streak = max(self.max_streak, self.streak)

    def reset_streak(self) -> None:
        self.streak = 0


def late_minutes(record: AttendanceRecord, expected_start: datetime) -> int:
    """Whole minutes between expected start and check-in, floored, never negative."""
    check_in = record.check_in_time
    if check_in is None:
        return 0
    if check_in.tzinfo is not None and expected_start.tzinfo is None:
        expected_start = expected_start.replace(tzinfo=check_in.tzinfo)
    return max(0, int((check_in - expected_start).total_seconds() // 60))


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: classify each day of the month, then deduct.

    Per day, first match wins:
    weekend (leave extends the streak, otherwise resets it) -> holiday (skipped)
    -> attendance record (ABSENT or present, late minutes charged) -> approved
    leave (extends the streak) -> absent.

    Leave is deducted as ``max_streak * daily_rate`` once any streak reaches two
    days, which charges a bridged weekend day; otherwise ``leave_days * daily_rate``.
    """

    def calculate(
        self,
        *,
        calendar: MonthCalendar,
        settings: SystemSettings,
        attendance: Sequence[AttendanceRecord],
        leaves: Sequence[LeaveRequest],
        base_salary: float,
        policy: PayrollPolicy,
    ) -> SalaryCalculation:
        rates = calculate_rates(base_salary, calendar.working_days, policy.resolve_daily_hours(settings))

        by_date: dict[date, AttendanceRecord] = {}
        for rec in attendance:
            by_date.setdefault(as_date(rec.work_date), rec)

        tally = _Tally()
        for day in calendar.days:
            self._classify_day(
                tally,
                day=day,
                record=by_date.get(day),
                on_leave=any(lv.covers(day) for lv in leaves),
                calendar=calendar,
                settings=settings,
                policy=policy,
            )

        late_deductions = calculate_late_deduction(tally.total_late_minutes, policy.late_grace_minutes, rates.minute_rate)
        absent_deductions = tally.absent_days * rates.daily_rate
        charged_leave_days = tally.max_streak if tally.max_streak >= 2 else tally.leave_days
        leave_deductions = calculate_leave_deduction(charged_leave_days, rates.daily_rate)

        total_deductions = late_deductions + leave_deductions + absent_deductions
        total_salary = max(0.0, base_salary - total_deductions)

        return SalaryCalculation(
            base_salary=base_salary,
            working_days=calendar.working_days,
            present_days=tally.present_days,
            absent_days=tally.absent_days,
            leave_days=tally.leave_days,
            late_count=tally.late_count,
            total_late_minutes=tally.total_late_minutes,
            late_deductions=late_deductions,
            leave_deductions=leave_deductions,
            absent_deductions=absent_deductions,
            total_deductions=total_deductions,
            total_salary=total_salary,
            hourly_rate=rates.hourly_rate,
            daily_rate=rates.daily_rate,
            minute_rate=rates.minute_rate,
            consecutive_leave_days=tally.max_streak,
        )

    @staticmethod
    def _classify_day(
        tally: _Tally,
        *,
        day: date,
        record: Optional[AttendanceRecord],
        on_leave: bool,
        calendar: MonthCalendar,
        settings: SystemSettings,
        policy: PayrollPolicy,
    ) -> None:
        if calendar.is_weekend(day):
            if on_leave:
                tally.extend_streak()
            else:
                tally.reset_streak()
            return

        if calendar.is_holiday(day):
            if policy.holidays_break_leave_streak:
                tally.reset_streak()
            return

        if record is not None:
            tally.reset_streak()
            if record.status == AttendanceStatus.ABSENT:
                tally.absent_days += 1
                return

            tally.present_days += 1
            if record.is_late:
                tally.late_count += 1
                expected = datetime.combine(day, settings.working_hours_start)
                tally.total_late_minutes += late_minutes(record, expected)
            return

        if on_leave:
            tally.leave_days += 1
            tally.extend_streak()
            return

        tally.absent_days += 1
        tally.reset_streak()
