from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...leaves.model import LeaveRequest
from ...settings.model import SystemSettings
from ...workcalendar.working_days import MonthCalendar
from ..model import SalaryCalculation
from ..policy import PayrollPolicy


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
