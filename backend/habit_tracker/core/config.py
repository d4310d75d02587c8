"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

from habit_tracker.core.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DAILY_REMINDER_HOUR,
    DAILY_REMINDER_MINUTE
)

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    # Server
    HOST: str = os.getenv("HOST", DEFAULT_HOST)
    PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))

    # Daily reminder (server local time)
    REMINDER_HOUR: int = int(os.getenv("REMINDER_HOUR", str(DAILY_REMINDER_HOUR)))
    REMINDER_MINUTE: int = int(os.getenv("REMINDER_MINUTE", str(DAILY_REMINDER_MINUTE)))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Create a global settings instance
settings = Settings()
