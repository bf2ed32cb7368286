"""Demo data utilities."""

from .seed import DEMO_USERS, DEMO_WORKOUT_DAYS, seed_demo_data

__all__ = ["DEMO_USERS", "DEMO_WORKOUT_DAYS", "seed_demo_data"]
