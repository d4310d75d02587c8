"""
Notifications Service - Message formatting and delivery
Centralizes all notification message templates and sending logic
"""
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

def format_daily_reminder(habit_names: List[str]) -> str:
    """
    Format the daily reminder listing habits still to do

    Args:
        habit_names: Names of habits not completed today

    Returns:
        Formatted reminder message, one habit per line
    """
    lines = ["Reminder: Complete your habits for today!"]
    lines.extend(f"- {name}" for name in habit_names)
    return "\n".join(lines)


def format_all_complete() -> str:
    """Format the message sent when nothing is left to do today"""
    return "Great job! All habits completed for today!"


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

def log_notification(message: str) -> bool:
    """
    Deliver a notification by writing it to the application log

    Args:
        message: The message to deliver

    Returns:
        Always True
    """
    for line in message.splitlines():
        logger.info(line)
    return True


class NotificationService:
    """
    Service for sending notifications via a delivery callback
    """

    def __init__(self, send_callback: Optional[Callable[[str], bool]] = log_notification):
        """
        Initialize notification service

        Args:
            send_callback: Callback used to deliver messages, defaults to the log
                          Should have signature: callback(message: str) -> bool
        """
        self.send_callback = send_callback

    def send_notification(self, message: str) -> bool:
        """
        Send a notification message

        Args:
            message: The message to send

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.warning("No send callback configured - notification not sent")
            logger.info(f"Would have sent: {message}")
            return False

        try:
            result = self.send_callback(message)
            if not result:
                logger.warning("Notification send callback returned False")
            return result
        except Exception as e:
            logger.error(f"Failed to send notification: {e}")
            return False

    def send_daily_reminder(self, habit_names: List[str]) -> bool:
        """
        Send the daily reminder, or the all-complete notice when nothing is pending

        Args:
            habit_names: Names of habits not completed today

        Returns:
            True if sent successfully, False otherwise
        """
        if habit_names:
            message = format_daily_reminder(habit_names)
        else:
            message = format_all_complete()

        return self.send_notification(message)
