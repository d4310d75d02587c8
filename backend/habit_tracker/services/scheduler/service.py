"""
Scheduler Service - Background scheduler lifecycle management
Handles starting, stopping, and configuring the APScheduler instance
"""
import logging
from typing import Optional
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from habit_tracker.core.config import settings
from habit_tracker.core.constants import DAILY_REMINDER_JOB_ID
from habit_tracker.core.exceptions import SchedulerError
from habit_tracker.services.habits.repository import HabitRepository
from .jobs import send_daily_reminder

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler: Optional[BackgroundScheduler] = None


def start_scheduler(repository: HabitRepository,
                    hour: Optional[int] = None,
                    minute: Optional[int] = None):
    """
    Start the background scheduler
    Runs the daily reminder at a fixed local time (configured in settings)

    Raises:
        SchedulerError: If the reminder time is invalid
    """
    global scheduler

    if scheduler is not None:
        logger.warning("Scheduler already running")
        return

    hour = settings.REMINDER_HOUR if hour is None else hour
    minute = settings.REMINDER_MINUTE if minute is None else minute

    try:
        trigger = CronTrigger(hour=hour, minute=minute)
    except ValueError as e:
        raise SchedulerError(f"Invalid reminder time {hour}:{minute}: {e}")

    scheduler = BackgroundScheduler()

    scheduler.add_job(
        func=send_daily_reminder,
        trigger=trigger,
        args=[repository],
        id=DAILY_REMINDER_JOB_ID,
        name='Remind about incomplete habits',
        replace_existing=True
    )

    scheduler.start()
    logger.info(f"Scheduler started - daily reminder at {hour:02d}:{minute:02d}")


def stop_scheduler():
    """Stop the background scheduler"""
    global scheduler

    if scheduler is not None:
        scheduler.shutdown()
        scheduler = None
        logger.info("Scheduler stopped")


def get_scheduler() -> Optional[BackgroundScheduler]:
    """Get the running scheduler, if any"""
    return scheduler
