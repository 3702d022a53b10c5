from __future__ import annotations

from datetime import time
from types import SimpleNamespace

import pytest

from src.attendance_payroll.attendance_payroll import main as cli
from src.attendance_payroll.attendance_payroll.payroll.service import PayrollService
from src.attendance_payroll.attendance_payroll.settings.model import SystemSettings


class StaticSettings:
    def get(self):
        return SystemSettings(working_hours_start=time(9, 0), working_hours_end=time(17, 0))


class NoAttendance:
    def list_for_user_between(self, user_id, start_date, end_date):
        return []


class NoLeaves:
    def list_approved_overlapping(self, user_id, start_date, end_date):
        return []


class InMemorySalaryRecords:
    def __init__(self):
        self.rows = {}

    def upsert(self, record):
        self.rows[(record.user_id, record.month, record.year)] = record
        return record

    def get(self, *, user_id, month, year):
        return self.rows.get((user_id, month, year))

    def list_for_month(self, *, month, year):
        return [r for (_, m, y), r in self.rows.items() if m == month and y == year]


@pytest.fixture
def fake_container(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    captured = {"salary_records": InMemorySalaryRecords()}

    def build(*, db_config, policy=None):
        captured["policy"] = policy
        svc = PayrollService(
            StaticSettings(),
            NoAttendance(),
            NoLeaves(),
            policy=policy,
            salary_records=captured["salary_records"],
        )
        return SimpleNamespace(payroll_service=svc)

    monkeypatch.setattr(cli, "build_container", build)
    return captured


def test_working_days_command(fake_container):
    result = cli.run(["working-days", "--month", "4", "--year", "2025"])

    assert result["working_days"] == 26
    assert result["month_name"] == "April"
    assert fake_container["policy"].weekend_days == ("Sunday",)


def test_calculate_command_returns_camel_case_payload(fake_container):
    result = cli.run(["calculate", "--employee", "emp-1", "--month", "4", "--year", "2025", "--base-salary", "2600"])

    assert result["calculation"]["absentDays"] == 26
    assert result["calculation"]["dailyRate"] == pytest.approx(100)


def test_invalid_month_exits_with_message(fake_container):
    with pytest.raises(SystemExit, match="Month must be between 1 and 12"):
        cli.main(["working-days", "--month", "13", "--year", "2025"])


def test_upcoming_command_lists_months(fake_container):
    result = cli.run(["upcoming", "--count", "2"])

    assert len(result["months"]) == 2
    assert all(m["working_days"] is not None for m in result["months"])


def test_salary_records_command_lists_saved_month(fake_container):
    for employee in ("emp-1", "emp-2"):
        cli.run(
            ["calculate", "--employee", employee, "--month", "4", "--year", "2025", "--base-salary", "2600", "--save"]
        )

    result = cli.run(["salary-records", "--month", "4", "--year", "2025"])

    assert sorted(r["userId"] for r in result["salaryRecords"]) == ["emp-1", "emp-2"]
    assert all(r["workingDays"] == 26 for r in result["salaryRecords"])
    assert cli.run(["salary-records", "--month", "5", "--year", "2025"]) == {"salaryRecords": []}


def test_salary_records_command_filters_by_employee(fake_container):
    cli.run(["calculate", "--employee", "emp-1", "--month", "4", "--year", "2025", "--base-salary", "2600", "--save"])

    found = cli.run(["salary-records", "--month", "4", "--year", "2025", "--employee", "emp-1"])
    missing = cli.run(["salary-records", "--month", "4", "--year", "2025", "--employee", "emp-9"])

    assert [r["totalSalary"] for r in found["salaryRecords"]] == [0]
    assert missing == {"salaryRecords": []}
