"""CLI commands for trainweek."""

from .init import init
from .serve import serve
from .users import users
from .workouts import workouts

__all__ = [
    "init",
    "serve",
    "users",
    "workouts",
]
