"""Database layer for trainweek."""

from .base import (
    DuplicateRecordError,
    UserRepository,
    WorkoutDayRepository,
)
from .engine import get_db_path, init_db
from .filters import Filter, FilterBuilder
from .memory import InMemoryUserRepository, InMemoryWorkoutDayRepository
from .repositories import SQLiteUserRepository, SQLiteWorkoutDayRepository

__all__ = [
    "DuplicateRecordError",
    "Filter",
    "FilterBuilder",
    "get_db_path",
    "InMemoryUserRepository",
    "InMemoryWorkoutDayRepository",
    "init_db",
    "SQLiteUserRepository",
    "SQLiteWorkoutDayRepository",
    "UserRepository",
    "WorkoutDayRepository",
]
