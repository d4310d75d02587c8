"""
Habits Repository - In-memory storage for habits and their progress
Nothing is persisted; the collection lives as long as the process
"""
from threading import Lock
from typing import Any, Dict, List, Optional
import logging

from habit_tracker.core.exceptions import HabitNotFoundError
from habit_tracker.models.habit import Habit

logger = logging.getLogger(__name__)


class HabitRepository:
    """
    Process-wide habit store

    Habits keep insertion order and are indexed by id. Every method takes the
    lock and hands back copies, so callers never share a record with the
    request thread pool or the scheduler thread.
    """

    def __init__(self):
        self._habits: List[Habit] = []
        self._index: Dict[int, Habit] = {}
        self._lock = Lock()

    # ========================================================================
    # HABITS
    # ========================================================================

    def create_habit(self, name: str, daily_goal: Any) -> Habit:
        """
        Create a new habit with empty progress

        Args:
            name: Habit name
            daily_goal: Daily goal, stored as given

        Returns:
            Created habit
        """
        with self._lock:
            habit = Habit(id=len(self._habits) + 1, name=name, daily_goal=daily_goal)
            self._habits.append(habit)
            self._index[habit.id] = habit
            return habit.model_copy(deep=True)

    def get_habit_by_id(self, habit_id: int) -> Optional[Habit]:
        """
        Get a single habit by ID

        Args:
            habit_id: The habit ID

        Returns:
            Habit or None if not found
        """
        with self._lock:
            habit = self._index.get(habit_id)
            return habit.model_copy(deep=True) if habit else None

    def get_all_habits(self) -> List[Habit]:
        """Get all habits in the order they were created"""
        with self._lock:
            return [habit.model_copy(deep=True) for habit in self._habits]

    def count(self) -> int:
        with self._lock:
            return len(self._habits)

    def clear(self) -> None:
        """Drop every habit"""
        with self._lock:
            self._habits.clear()
            self._index.clear()

    # ========================================================================
    # PROGRESS
    # ========================================================================

    def add_completion(self, habit_id: int, date_str: str) -> Habit:
        """
        Record a completion date for a habit, once per date

        Args:
            habit_id: The habit ID
            date_str: Date in YYYY-MM-DD format

        Returns:
            Updated habit

        Raises:
            HabitNotFoundError: If no habit has this ID
        """
        with self._lock:
            habit = self._index.get(habit_id)
            if habit is None:
                raise HabitNotFoundError(f"Habit {habit_id} does not exist")

            if date_str not in habit.progress:
                habit.progress.append(date_str)
            else:
                logger.debug(f"Habit {habit_id} already completed on {date_str}")

            return habit.model_copy(deep=True)
