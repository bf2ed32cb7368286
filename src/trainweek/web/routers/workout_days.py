"""Workout day routes."""

from fastapi import APIRouter, Depends, Query, status

from ...schemas.common import MessageResponse
from ...schemas.workout_day import (
    WorkoutDayCreate,
    WorkoutDayResponse,
    WorkoutDaySearch,
    WorkoutDayUpdate,
)
from ...services import WorkoutDaysService
from ..deps import get_workout_days_service, parse_query

router = APIRouter(prefix="/workout-days", tags=["workout-days"])


@router.get("", response_model=list[WorkoutDayResponse])
async def list_workout_days(
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """All active workout days."""
    workout_days = await service.list_active()
    return [WorkoutDayResponse.from_model(w) for w in workout_days]


@router.get("/user/{user_id}", response_model=list[WorkoutDayResponse])
async def list_user_workout_days(
    user_id: str,
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """A user's active weekly plan."""
    workout_days = await service.list_by_user(user_id)
    return [WorkoutDayResponse.from_model(w) for w in workout_days]


@router.get("/search", response_model=list[WorkoutDayResponse])
async def search_workout_days(
    name: str | None = None,
    day_of_week: str | None = Query(None, alias="dayOfWeek"),
    duration_minutes: str | None = Query(None, alias="durationMinutes"),
    intensity_level: str | None = Query(None, alias="intensityLevel"),
    workout_type: str | None = Query(None, alias="workoutType"),
    is_active: str | None = Query(None, alias="isActive"),
    user_id: str | None = Query(None, alias="userId"),
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """Search workout days; numeric and boolean filters are coerced from strings."""
    filters = parse_query(
        WorkoutDaySearch,
        name=name,
        dayOfWeek=day_of_week,
        durationMinutes=duration_minutes,
        intensityLevel=intensity_level,
        workoutType=workout_type,
        isActive=is_active,
        userId=user_id,
    )
    workout_days = await service.search(filters)
    return [WorkoutDayResponse.from_model(w) for w in workout_days]


@router.post("", response_model=WorkoutDayResponse, status_code=status.HTTP_201_CREATED)
async def create_workout_day(
    payload: WorkoutDayCreate,
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """Schedule a workout on a free weekday."""
    workout_day = await service.create(payload)
    return WorkoutDayResponse.from_model(workout_day)


@router.put("/{workout_day_id}", response_model=WorkoutDayResponse)
async def update_workout_day(
    workout_day_id: str,
    payload: WorkoutDayUpdate,
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """Partially update a workout day."""
    workout_day = await service.update(workout_day_id, payload)
    return WorkoutDayResponse.from_model(workout_day)


@router.delete("/{workout_day_id}", response_model=MessageResponse)
async def delete_workout_day(
    workout_day_id: str,
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """Soft delete a workout day."""
    workout_day = await service.remove(workout_day_id)
    return MessageResponse(message=f'Workout day "{workout_day.name}" deleted successfully')


@router.get("/{workout_day_id}", response_model=WorkoutDayResponse)
async def get_workout_day(
    workout_day_id: str,
    service: WorkoutDaysService = Depends(get_workout_days_service),
):
    """Get a workout day by ID."""
    workout_day = await service.get(workout_day_id)
    return WorkoutDayResponse.from_model(workout_day)
