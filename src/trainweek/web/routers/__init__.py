"""API routers."""

from . import users, workout_days

__all__ = ["users", "workout_days"]
