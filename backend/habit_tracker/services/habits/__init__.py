"""
Habits module - Core habit management functionality
"""
from . import repository
from . import service
from . import reminders

# Export commonly used functions for convenience
from .repository import HabitRepository

from .service import (
    add_habit,
    complete_habit,
    get_all_habits,
    get_weekly_report,
    count_weekly_completions
)

from .reminders import get_incomplete_habits

__all__ = [
    # Modules
    'repository',
    'service',
    'reminders',

    # Store
    'HabitRepository',

    # Service functions
    'add_habit',
    'complete_habit',
    'get_all_habits',
    'get_weekly_report',
    'count_weekly_completions',

    # Reminder functions
    'get_incomplete_habits'
]
