"""
Time Utilities - Centralized "now" and "today" handling
All dates are calendar days in the server's local time zone
"""
from datetime import datetime

from habit_tracker.core.constants import DATE_FORMAT


def get_local_now() -> datetime:
    """
    Get current datetime in the server's local time zone

    Returns:
        Naive datetime object for the current local time
    """
    return datetime.now()


def get_local_today_str() -> str:
    """
    Get today's local date as a YYYY-MM-DD string

    Returns:
        Date string used for habit progress entries
    """
    return get_local_now().strftime(DATE_FORMAT)


def parse_progress_date(value: str) -> datetime:
    """
    Parse a progress entry into local midnight of that day

    Args:
        value: Date string in YYYY-MM-DD format

    Returns:
        Naive datetime at 00:00 of the given day
    """
    return datetime.strptime(value, DATE_FORMAT)
