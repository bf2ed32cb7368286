"""Validation schemas for trainweek."""

from .common import MessageResponse, validation_messages
from .user import UserCreate, UserResponse, UserSearch, UserUpdate
from .workout_day import (
    WorkoutDayCreate,
    WorkoutDayResponse,
    WorkoutDaySearch,
    WorkoutDayUpdate,
)

__all__ = [
    "MessageResponse",
    "UserCreate",
    "UserResponse",
    "UserSearch",
    "UserUpdate",
    "validation_messages",
    "WorkoutDayCreate",
    "WorkoutDayResponse",
    "WorkoutDaySearch",
    "WorkoutDayUpdate",
]
