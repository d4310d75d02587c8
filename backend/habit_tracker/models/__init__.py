"""
Pydantic models for the application
"""
from habit_tracker.models.habit import (
    Habit,
    AddHabitRequest,
    WeeklyReportEntry
)

__all__ = [
    "Habit",
    "AddHabitRequest",
    "WeeklyReportEntry"
]
