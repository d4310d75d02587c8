"""
Custom Exceptions - Application-specific error types
"""


class HabitTrackerException(Exception):
    """Base exception for all habit tracker errors"""
    pass


class HabitNotFoundError(HabitTrackerException):
    """Raised when a habit cannot be found"""
    pass


class InvalidHabitDataError(HabitTrackerException):
    """Raised when habit data validation fails"""
    pass


class SchedulerError(HabitTrackerException):
    """Raised when scheduler operations fail"""
    pass
