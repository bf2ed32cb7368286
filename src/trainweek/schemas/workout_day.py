"""Request and response schemas for workout days."""

from datetime import datetime

from pydantic import Field

from ..errors import MAX_ID
from ..models.workout_day import WorkoutDay, WorkoutType
from .common import CamelModel, Flag, Name


class WorkoutDayCreate(CamelModel):
    """Body of ``POST /workout-days``."""

    name: Name
    description: str | None = None
    day_of_week: int = Field(..., ge=1, le=7, strict=True)
    duration_minutes: int = Field(..., ge=1, le=300, strict=True)
    intensity_level: int | None = Field(None, ge=1, le=5, strict=True)
    workout_type: WorkoutType | None = None
    user_id: int = Field(..., ge=1, le=MAX_ID, strict=True)


class WorkoutDayUpdate(CamelModel):
    """Body of ``PUT /workout-days/{id}``; every field is optional."""

    name: Name | None = None
    description: str | None = None
    day_of_week: int | None = Field(None, ge=1, le=7, strict=True)
    duration_minutes: int | None = Field(None, ge=1, le=300, strict=True)
    intensity_level: int | None = Field(None, ge=1, le=5, strict=True)
    workout_type: WorkoutType | None = None
    is_active: Flag | None = None


class WorkoutDaySearch(CamelModel):
    """Query string of ``GET /workout-days/search``.

    Numbers arrive as strings and are coerced; ``isActive`` accepts
    ``true``/``false``.
    """

    name: str | None = Field(None, max_length=100)
    day_of_week: int | None = Field(None, ge=1, le=7)
    duration_minutes: int | None = Field(None, ge=1, le=300)
    intensity_level: int | None = Field(None, ge=1, le=5)
    workout_type: WorkoutType | None = None
    is_active: Flag | None = None
    user_id: int | None = Field(None, ge=1, le=MAX_ID)


class WorkoutDayResponse(CamelModel):
    """Workout day as rendered to clients."""

    id: int
    name: str
    description: str | None = None
    day_of_week: int
    day_name: str
    duration_minutes: int
    formatted_duration: str
    intensity_level: int
    intensity_name: str
    workout_type: WorkoutType
    is_active: bool
    user_id: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, workout_day: WorkoutDay) -> "WorkoutDayResponse":
        return cls(
            id=workout_day.id,
            name=workout_day.name,
            description=workout_day.description,
            day_of_week=workout_day.day_of_week,
            day_name=workout_day.day_name,
            duration_minutes=workout_day.duration_minutes,
            formatted_duration=workout_day.formatted_duration,
            intensity_level=workout_day.intensity_level,
            intensity_name=workout_day.intensity_name,
            workout_type=workout_day.workout_type,
            is_active=workout_day.is_active,
            user_id=workout_day.user_id,
            created_at=workout_day.created_at,
            updated_at=workout_day.updated_at,
        )
