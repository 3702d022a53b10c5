import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test_db"),
}

DEBUG = False
TESTING = True

PAYROLL_DAILY_HOURS = 8
PAYROLL_WEEKEND_DAYS = ("Sunday",)
PAYROLL_HOLIDAYS_BREAK_LEAVE_STREAK = False
PAYROLL_LATE_GRACE_MINUTES = 0
