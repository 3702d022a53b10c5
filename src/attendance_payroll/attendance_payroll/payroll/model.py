from __future__ import annotations

from dataclasses import asdict, dataclass


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True)
class SalaryCalculation:
    """Derived monthly salary breakdown for one employee (never persisted as-is)."""

    base_salary: float
    working_days: int
    present_days: int
    absent_days: int
    leave_days: int
    late_count: int
    total_late_minutes: int
    late_deductions: float
    leave_deductions: float
    absent_deductions: float
    total_deductions: float
    total_salary: float
    hourly_rate: float
    daily_rate: float
    minute_rate: float
    consecutive_leave_days: int

    def to_dict(self) -> dict:
        """camelCase keys, the shape API consumers expect."""
        return {_camel(k): v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class SalaryRecord:
    """Persisted salary for (user_id, month, year); unique on that triple."""

    user_id: str
    month: int
    year: int
    base_salary: float
    working_days: int
    present_days: int
    absent_days: int
    leave_days: int
    late_count: int
    total_late_minutes: int
    late_deductions: float
    leave_deductions: float
    absent_deductions: float
    total_salary: float

    @classmethod
    def from_calculation(cls, *, user_id: str, month: int, year: int, calculation: SalaryCalculation) -> "SalaryRecord":
        return cls(
            user_id=user_id,
            month=int(month),
            year=int(year),
            base_salary=calculation.base_salary,
            working_days=calculation.working_days,
            present_days=calculation.present_days,
            absent_days=calculation.absent_days,
            leave_days=calculation.leave_days,
            late_count=calculation.late_count,
            total_late_minutes=calculation.total_late_minutes,
            late_deductions=calculation.late_deductions,
            leave_deductions=calculation.leave_deductions,
            absent_deductions=calculation.absent_deductions,
            total_salary=calculation.total_salary,
        )

    def to_dict(self) -> dict:
        return {_camel(k): v for k, v in asdict(self).items()}
