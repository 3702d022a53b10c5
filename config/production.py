import os

from config import env_list, env_optional_float

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEBUG = bool(int(os.getenv("DEBUG", "0")))

PAYROLL_DAILY_HOURS = env_optional_float("PAYROLL_DAILY_HOURS", "8")
PAYROLL_WEEKEND_DAYS = env_list("PAYROLL_WEEKEND_DAYS")
PAYROLL_HOLIDAYS_BREAK_LEAVE_STREAK = bool(int(os.getenv("PAYROLL_HOLIDAYS_BREAK_LEAVE_STREAK", "0")))
PAYROLL_LATE_GRACE_MINUTES = int(os.getenv("PAYROLL_LATE_GRACE_MINUTES", "0"))
