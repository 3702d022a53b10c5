from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import ConfigurationError
from ..leaves.repository import LeaveRepository
from ..settings.model import SystemSettings
from ..settings.repository import SettingsRepository
from ..workcalendar.working_days import (
    MonthCalendar,
    MonthDetails,
    get_month_details,
    get_upcoming_months_working_days,
)
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryCalculation, SalaryRecord
from .policy import PayrollPolicy
from .rates import format_minutes_to_time
from .repository import SalaryRecordRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        settings: SettingsRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
        policy: Optional[PayrollPolicy] = None,
        salary_records: Optional[SalaryRecordRepository] = None,
    ):
        self._settings = settings
        self._attendance = attendance
        self._leaves = leaves
        self._calculator = calculator or StandardSalaryCalculator()
        self._policy = policy or PayrollPolicy()
        self._salary_records = salary_records

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def _load_settings(self) -> SystemSettings:
        settings = self._settings.get()
        if settings is None:
            raise ConfigurationError("System settings not found")
        return settings

    def _month_calendar(self, settings: SystemSettings, *, month: int, year: int) -> MonthCalendar:
        return MonthCalendar.build(
            year,
            month,
            self._policy.resolve_weekend_days(settings),
            settings.holiday_dates,
        )

    def _calculate(
        self,
        *,
        settings: SystemSettings,
        calendar: MonthCalendar,
        employee_id: str,
        base_salary: float,
    ) -> SalaryCalculation:
        attendance = self._attendance.list_for_user_between(employee_id, calendar.first_day, calendar.last_day)
        leaves = self._leaves.list_approved_overlapping(employee_id, calendar.first_day, calendar.last_day)

        calculation = self._calculator.calculate(
            calendar=calendar,
            settings=settings,
            attendance=attendance,
            leaves=leaves,
            base_salary=base_salary,
            policy=self._policy,
        )
        logger.info(
            "Salary for employee %s %04d-%02d: late=%s base=%.2f deductions=%.2f total=%.2f",
            employee_id,
            calendar.year,
            calendar.month,
            format_minutes_to_time(calculation.total_late_minutes),
            calculation.base_salary,
            calculation.total_deductions,
            calculation.total_salary,
        )
        return calculation

    def calculate_salary(self, employee_id: str, month: int, year: int, base_salary: float) -> SalaryCalculation:
        """Attendance classification and salary for one employee and month.

        Reads a snapshot of settings, attendance and approved leave; repeated
        calls over unchanged data give identical results.
        """
        settings = self._load_settings()
        calendar = self._month_calendar(settings, month=month, year=year)
        return self._calculate(
            settings=settings,
            calendar=calendar,
            employee_id=employee_id,
            base_salary=base_salary,
        )

    def run_monthly_payroll(
        self,
        month: int,
        year: int,
        base_salaries: Mapping[str, float],
    ) -> dict[str, SalaryCalculation]:
        """Calculate every employee of ``base_salaries`` for one month.

        Settings and the month calendar are loaded once for the whole run.
        """
        settings = self._load_settings()
        calendar = self._month_calendar(settings, month=month, year=year)

        results: dict[str, SalaryCalculation] = {}
        for employee_id, base_salary in base_salaries.items():
            try:
                results[employee_id] = self._calculate(
                    settings=settings,
                    calendar=calendar,
                    employee_id=employee_id,
                    base_salary=base_salary,
                )
            except Exception:
                logger.error(
                    "Payroll run %04d-%02d failed for employee %s", year, month, employee_id, exc_info=True
                )
                raise
        logger.info("Payroll run %04d-%02d finished for %d employees", year, month, len(results))
        return results

    def _require_salary_records(self) -> SalaryRecordRepository:
        if self._salary_records is None:
            raise ConfigurationError("No salary record repository configured")
        return self._salary_records

    def save_salary_record(
        self,
        employee_id: str,
        month: int,
        year: int,
        calculation: SalaryCalculation,
    ) -> SalaryRecord:
        records = self._require_salary_records()
        record = SalaryRecord.from_calculation(user_id=employee_id, month=month, year=year, calculation=calculation)
        saved = records.upsert(record)
        logger.info("Salary record saved for employee %s %04d-%02d", employee_id, year, month)
        return saved

    def get_salary_record(self, employee_id: str, month: int, year: int) -> Optional[SalaryRecord]:
        return self._require_salary_records().get(user_id=employee_id, month=month, year=year)

    def list_salary_records(self, month: int, year: int) -> list[SalaryRecord]:
        """Saved salary records of every employee for one month."""
        records = self._require_salary_records().list_for_month(month=month, year=year)
        logger.debug("Loaded %d salary records for %04d-%02d", len(records), year, month)
        return records

    def get_month_details(self, month: int, year: int) -> MonthDetails:
        """Month details with working days under the current settings and policy."""
        settings = self._load_settings()
        return get_month_details(
            year,
            month,
            self._policy.resolve_weekend_days(settings),
            settings.holiday_dates,
        )

    def get_upcoming_months(self, count: int, *, today: Optional[date] = None) -> list[MonthDetails]:
        settings = self._load_settings()
        return get_upcoming_months_working_days(
            count,
            today=today,
            weekend_days=self._policy.resolve_weekend_days(settings),
            holidays=settings.holiday_dates,
        )
