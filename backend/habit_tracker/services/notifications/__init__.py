"""
Notifications module
Message formatting and delivery for habit reminders
"""
from .service import (
    NotificationService,
    format_daily_reminder,
    format_all_complete,
    log_notification
)

__all__ = [
    'NotificationService',
    'format_daily_reminder',
    'format_all_complete',
    'log_notification'
]
