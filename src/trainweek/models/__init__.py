"""Data models for trainweek."""

from .user import User, UserRole, UserStats, UserStatus
from .workout_day import WorkoutDay, WorkoutType, day_name, format_duration, intensity_name

__all__ = [
    "day_name",
    "format_duration",
    "intensity_name",
    "User",
    "UserRole",
    "UserStats",
    "UserStatus",
    "WorkoutDay",
    "WorkoutType",
]
