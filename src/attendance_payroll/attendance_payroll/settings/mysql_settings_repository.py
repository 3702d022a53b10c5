from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_WEEKEND_DAYS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from .model import SystemSettings
from .repository import SettingsRepository


def _split_weekend_days(value: Optional[str]) -> tuple[str, ...]:
    # Stored as a comma separated list, e.g. "SATURDAY,SUNDAY".
    names = tuple(part.strip() for part in (value or "").split(",") if part.strip())
    return names or DEFAULT_WEEKEND_DAYS


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SystemSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT settings_id, working_hours_start, working_hours_end, weekend_days,
                       late_threshold, company_name
                FROM system_settings
                ORDER BY settings_id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return None

            cur.execute("SELECT holiday_date FROM holidays ORDER BY holiday_date")
            holidays = tuple(normalize_mysql_date(h["holiday_date"]) for h in fetchall(cur))

            late_threshold = r.get("late_threshold")
            return SystemSettings(
                working_hours_start=normalize_mysql_time(r["working_hours_start"]),
                working_hours_end=normalize_mysql_time(r["working_hours_end"]),
                holiday_dates=holidays,
                weekend_days=_split_weekend_days(r.get("weekend_days")),
                late_threshold=int(late_threshold) if late_threshold is not None else None,
                company_name=r.get("company_name"),
            )
