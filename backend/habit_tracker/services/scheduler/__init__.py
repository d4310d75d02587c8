"""
Scheduler module
Background job scheduling for daily reminders
"""
from .service import start_scheduler, stop_scheduler, get_scheduler
from . import jobs

__all__ = ['start_scheduler', 'stop_scheduler', 'get_scheduler', 'jobs']
