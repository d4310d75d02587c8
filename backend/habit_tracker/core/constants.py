"""
Application constants
"""

# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Dates are stored as calendar days in server local time
DATE_FORMAT = "%Y-%m-%d"

# Weekly report covers the trailing N days from the moment of the request
REPORT_WINDOW_DAYS = 7

# Daily reminder fires at 08:00 local time
DAILY_REMINDER_HOUR = 8
DAILY_REMINDER_MINUTE = 0
DAILY_REMINDER_JOB_ID = "daily_reminder"

# Response messages
MISSING_HABIT_FIELDS_MESSAGE = "Name and daily goal are required."
HABIT_NOT_FOUND_MESSAGE = "Habit not found."
INVALID_REQUEST_MESSAGE = "Invalid request body."
