from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .payroll.mysql_salary_record_repository import MySQLSalaryRecordRepository
from .payroll.policy import PayrollPolicy
from .payroll.service import PayrollService
from .settings.mysql_settings_repository import MySQLSettingsRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    settings_repo: MySQLSettingsRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    salary_records_repo: MySQLSalaryRecordRepository

    payroll_service: PayrollService


def build_container(*, db_config: dict, policy: Optional[PayrollPolicy] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    settings_repo = MySQLSettingsRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    salary_records_repo = MySQLSalaryRecordRepository(conn)

    payroll_service = PayrollService(
        settings_repo,
        attendance_repo,
        leaves_repo,
        policy=policy,
        salary_records=salary_records_repo,
    )

    return Container(
        conn=conn,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        salary_records_repo=salary_records_repo,
        payroll_service=payroll_service,
    )
