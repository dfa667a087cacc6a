"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ACADEMIC_YEAR = "2024-2025"
DEFAULT_COURSE_CREDITS = 4
DEFAULT_DASHBOARD_DEPARTMENT = "MCA"
DEFAULT_QUERY_STALE_SECONDS = 5 * 60
DEFAULT_QUERY_MAX_RETRIES = 2
NON_RETRYABLE_STATUSES = frozenset({401, 403, 404})
RECENT_ATTENDANCE_LIMIT = 5
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
