"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DEFAULT_WEEKEND_DAYS = ("Sunday",)
DEFAULT_DAILY_HOURS = 8
DEFAULT_LATE_GRACE_MINUTES = 0
DEFAULT_UPCOMING_MONTHS = 6
