"""Business services for trainweek."""

from .users import UsersService
from .workout_days import WorkoutDaysService

__all__ = ["UsersService", "WorkoutDaysService"]
