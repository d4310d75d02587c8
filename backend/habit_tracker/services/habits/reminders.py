"""
Habit reminder checks
Finds habits that still need to be done today
"""
from typing import List
import logging

from habit_tracker.models.habit import Habit
from habit_tracker.utils.timezone import get_local_today_str
from .repository import HabitRepository

logger = logging.getLogger(__name__)


def get_incomplete_habits(repository: HabitRepository) -> List[Habit]:
    """
    Get habits not yet marked complete today

    Args:
        repository: Habit store

    Returns:
        Habits whose progress lacks today's date, in creation order
    """
    today = get_local_today_str()

    incomplete = [habit for habit in repository.get_all_habits() if today not in habit.progress]
    logger.debug(f"{len(incomplete)} habit(s) incomplete for {today}")

    return incomplete
