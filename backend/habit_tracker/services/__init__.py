"""
Business logic services
"""
from . import habits
from . import scheduler
from . import notifications

__all__ = [
    'habits',
    'scheduler',
    'notifications'
]
