"""
Habits Service - Business logic for habit management
Handles creating, completing, listing, and reporting on habits
"""
from datetime import timedelta
from typing import Any, Dict, List, Union
import logging

from habit_tracker.core.constants import (
    REPORT_WINDOW_DAYS,
    MISSING_HABIT_FIELDS_MESSAGE,
    HABIT_NOT_FOUND_MESSAGE
)
from habit_tracker.core.exceptions import HabitNotFoundError, InvalidHabitDataError
from habit_tracker.models.habit import Habit, WeeklyReportEntry
from habit_tracker.utils.timezone import get_local_now, get_local_today_str, parse_progress_date
from .repository import HabitRepository

logger = logging.getLogger(__name__)


def _serialize(habit: Habit) -> Dict[str, Any]:
    return habit.model_dump(by_alias=True)


def parse_habit_id(raw_id: Union[str, int]) -> int:
    """
    Convert a path segment into a habit ID

    Raises:
        HabitNotFoundError: If the value is not an integer, since no habit can match it
    """
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        raise HabitNotFoundError(HABIT_NOT_FOUND_MESSAGE)


def add_habit(repository: HabitRepository, name: Any, daily_goal: Any) -> Dict[str, Any]:
    """
    Add a new habit

    Args:
        repository: Habit store
        name: Habit name
        daily_goal: Daily goal, kept opaque

    Returns:
        Dict with status and created habit data

    Raises:
        InvalidHabitDataError: If name or daily goal is missing or empty
    """
    if not name or not daily_goal:
        raise InvalidHabitDataError(MISSING_HABIT_FIELDS_MESSAGE)

    habit = repository.create_habit(name, daily_goal)
    logger.info(f"Habit '{habit.name}' created with id {habit.id}")

    return {
        "status": "success",
        "data": _serialize(habit)
    }


def complete_habit(repository: HabitRepository, habit_id: Union[str, int]) -> Dict[str, Any]:
    """
    Mark a habit as complete for today

    Repeated calls on the same local calendar day leave a single entry.

    Args:
        repository: Habit store
        habit_id: The habit ID, as an int or raw path segment

    Returns:
        Dict with status and updated habit data

    Raises:
        HabitNotFoundError: If no habit has this ID
    """
    habit_id = parse_habit_id(habit_id)
    today = get_local_today_str()

    try:
        habit = repository.add_completion(habit_id, today)
    except HabitNotFoundError:
        logger.warning(f"Cannot complete habit {habit_id}: not found")
        raise HabitNotFoundError(HABIT_NOT_FOUND_MESSAGE)

    logger.info(f"Habit '{habit.name}' marked complete for {today}")

    return {
        "status": "success",
        "data": _serialize(habit)
    }


def get_all_habits(repository: HabitRepository) -> Dict[str, Any]:
    """
    Get all habits with their progress

    Returns:
        Dict with status and list of habits in creation order
    """
    return {
        "status": "success",
        "data": [_serialize(habit) for habit in repository.get_all_habits()]
    }


def count_weekly_completions(progress: List[str], now=None) -> int:
    """
    Count progress dates falling within the trailing week

    The window is [now - 7 days, now] measured from the exact current time,
    not from midnight. A date string stands for midnight of that day.

    Args:
        progress: Completion dates in YYYY-MM-DD format
        now: Reference time, defaults to the current local time

    Returns:
        Number of dates inside the window
    """
    if now is None:
        now = get_local_now()
    one_week_ago = now - timedelta(days=REPORT_WINDOW_DAYS)

    return sum(
        1 for entry in progress
        if one_week_ago <= parse_progress_date(entry) <= now
    )


def get_weekly_report(repository: HabitRepository) -> Dict[str, Any]:
    """
    Summarize each habit's completions over the trailing week

    Returns:
        Dict with status and one {name, weeklyCompletion, dailyGoal} entry per habit
    """
    now = get_local_now()

    report = [
        WeeklyReportEntry(
            name=habit.name,
            weekly_completion=count_weekly_completions(habit.progress, now),
            daily_goal=habit.daily_goal
        ).model_dump(by_alias=True)
        for habit in repository.get_all_habits()
    ]

    return {
        "status": "success",
        "data": report
    }
