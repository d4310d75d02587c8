"""
Scheduler Job Definitions
Contains the scheduled job functions for habit reminders
"""
import logging
from typing import Optional

from habit_tracker.services.habits import reminders as reminders_service
from habit_tracker.services.habits.repository import HabitRepository
from habit_tracker.services.notifications.service import NotificationService

logger = logging.getLogger(__name__)


def send_daily_reminder(repository: HabitRepository,
                        notification_service: Optional[NotificationService] = None):
    """
    Remind about habits not yet completed today
    Called once a day by the scheduler; nothing consumes the result
    """
    try:
        logger.info("[SCHEDULER] Checking for incomplete habits...")

        if notification_service is None:
            notification_service = NotificationService()

        incomplete = reminders_service.get_incomplete_habits(repository)

        if incomplete:
            logger.info(f"[SCHEDULER] Found {len(incomplete)} incomplete habit(s)")
        else:
            logger.info("[SCHEDULER] All habits completed for today")

        notification_service.send_daily_reminder([habit.name for habit in incomplete])

    except Exception as e:
        logger.error(f"[SCHEDULER] Error in send_daily_reminder: {e}", exc_info=True)
