"""Workout day data models."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from .user import utcnow

DAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}
INVALID_DAY = "Invalid day"

INTENSITY_NAMES = {
    1: "Low",
    2: "Moderate",
    3: "High",
    4: "Very high",
    5: "Extreme",
}
INVALID_INTENSITY = "Invalid intensity"

DEFAULT_INTENSITY = 3
LONG_WORKOUT_MINUTES = 90


class WorkoutType(str, Enum):
    """Closed set of workout categories."""

    FORCE = "Force"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    FUNCTIONAL = "Functional"
    MIXED = "Mixed"


def day_name(day_of_week: int) -> str:
    """Map 1..7 to Monday..Sunday; anything else is ``INVALID_DAY``."""
    return DAY_NAMES.get(day_of_week, INVALID_DAY)


def intensity_name(level: int) -> str:
    return INTENSITY_NAMES.get(level, INVALID_INTENSITY)


def format_duration(minutes: int) -> str:
    """Render minutes as ``1h 30m``, ``2h`` or ``45m``."""
    hours, rest = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {rest}m" if rest > 0 else f"{hours}h"
    return f"{rest}m"


@dataclass(frozen=True)
class WorkoutDay:
    """A recurring weekly training session owned by one user."""

    name: str
    day_of_week: int  # 1 = Monday ... 7 = Sunday
    duration_minutes: int
    user_id: int
    description: str | None = None
    intensity_level: int = DEFAULT_INTENSITY
    workout_type: WorkoutType = WorkoutType.FORCE
    is_active: bool = True
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def day_name(self) -> str:
        return day_name(self.day_of_week)

    @property
    def intensity_name(self) -> str:
        return intensity_name(self.intensity_level)

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_minutes)

    @property
    def is_long_workout(self) -> bool:
        return self.duration_minutes > LONG_WORKOUT_MINUTES


def touch(workout_day: WorkoutDay) -> WorkoutDay:
    return replace(workout_day, updated_at=utcnow())


def activate(workout_day: WorkoutDay) -> WorkoutDay:
    return replace(workout_day, is_active=True, updated_at=utcnow())


def deactivate(workout_day: WorkoutDay) -> WorkoutDay:
    return replace(workout_day, is_active=False, updated_at=utcnow())
