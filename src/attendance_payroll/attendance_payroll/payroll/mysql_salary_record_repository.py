from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SalaryRecord
from .repository import SalaryRecordRepository

_COLUMNS = (
    "user_id",
    "month",
    "year",
    "base_salary",
    "working_days",
    "present_days",
    "absent_days",
    "leave_days",
    "late_count",
    "total_late_minutes",
    "late_deductions",
    "leave_deductions",
    "absent_deductions",
    "total_salary",
)


def _row_to_record(r: dict) -> SalaryRecord:
    return SalaryRecord(
        user_id=str(r["user_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        base_salary=float(r["base_salary"]),
        working_days=int(r["working_days"]),
        present_days=int(r["present_days"]),
        absent_days=int(r["absent_days"]),
        leave_days=int(r["leave_days"]),
        late_count=int(r["late_count"]),
        total_late_minutes=int(r["total_late_minutes"]),
        late_deductions=float(r["late_deductions"]),
        leave_deductions=float(r["leave_deductions"]),
        absent_deductions=float(r["absent_deductions"]),
        total_salary=float(r["total_salary"]),
    )


class MySQLSalaryRecordRepository(SalaryRecordRepository):
    """salary_records has a UNIQUE KEY on (user_id, month, year)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, record: SalaryRecord) -> SalaryRecord:
        columns = ", ".join(_COLUMNS)
        placeholders = ", ".join(["%s"] * len(_COLUMNS))
        updates = ", ".join(f"{c}=VALUES({c})" for c in _COLUMNS[3:])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO salary_records({columns})
                VALUES({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                tuple(getattr(record, c) for c in _COLUMNS),
            )
        return record

    def get(self, *, user_id: str, month: int, year: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {", ".join(_COLUMNS)}
                FROM salary_records
                WHERE user_id=%s AND month=%s AND year=%s
                """,
                (user_id, int(month), int(year)),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_month(self, *, month: int, year: int) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {", ".join(_COLUMNS)}
                FROM salary_records
                WHERE month=%s AND year=%s
                ORDER BY user_id
                """,
                (int(month), int(year)),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
