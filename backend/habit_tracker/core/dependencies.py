"""
Dependency injection for shared resources
"""
from habit_tracker.services.habits.repository import HabitRepository


def get_habit_repository() -> HabitRepository:
    """Get the process-wide habit store"""
    return habit_repository


# Create singleton instance for internal use
habit_repository = HabitRepository()
