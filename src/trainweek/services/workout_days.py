"""Workout day business rules.

A user may hold at most one active workout per weekday. The owner must exist
and be active when a workout is created or moved to another day.
"""

from dataclasses import replace

from loguru import logger

from ..db.base import DuplicateRecordError, UserRepository, WorkoutDayRepository
from ..db.filters import FilterBuilder
from ..errors import ConflictError, NotFoundError, parse_id
from ..models import workout_day as workout_day_model
from ..models.workout_day import DEFAULT_INTENSITY, WorkoutDay, WorkoutType, day_name
from ..models.user import utcnow
from ..schemas.workout_day import WorkoutDayCreate, WorkoutDaySearch, WorkoutDayUpdate

NULLABLE_FIELDS = {"description"}


class WorkoutDaysService:
    """Operations behind the ``/workout-days`` resource."""

    def __init__(self, workout_days: WorkoutDayRepository, users: UserRepository):
        self.workout_days = workout_days
        self.users = users

    async def list_active(self) -> list[WorkoutDay]:
        """Active workouts for every user, by weekday."""
        return await self.workout_days.list_active()

    async def list_by_user(self, user_id: int | str) -> list[WorkoutDay]:
        """A user's active weekly plan. The user must exist and be active."""
        user_id = parse_id(user_id, "User ID")
        await self._require_active_user(user_id)
        workout_days = await self.workout_days.list_active_by_user(user_id)
        logger.debug(f"User {user_id} has {len(workout_days)} active workout days")
        return workout_days

    async def search(self, filters: WorkoutDaySearch | None = None) -> list[WorkoutDay]:
        """Filter workouts; name matches substrings, everything else exactly.

        Without an ``is_active`` filter only active workouts are returned.
        """
        filters = filters or WorkoutDaySearch()
        is_active = True if filters.is_active is None else filters.is_active
        criteria = (
            FilterBuilder()
            .contains("name", filters.name)
            .equals("day_of_week", filters.day_of_week)
            .equals("duration_minutes", filters.duration_minutes)
            .equals("intensity_level", filters.intensity_level)
            .equals("workout_type", filters.workout_type)
            .equals("is_active", is_active)
            .equals("user_id", filters.user_id)
            .build()
        )
        workout_days = await self.workout_days.search(criteria)
        logger.debug(
            f"Workout day search on {sorted(criteria.columns())} matched {len(workout_days)}"
        )
        return workout_days

    async def get(self, workout_day_id: int | str) -> WorkoutDay:
        return await self._get_or_404(parse_id(workout_day_id))

    async def create(self, payload: WorkoutDayCreate) -> WorkoutDay:
        """Schedule a workout on a free weekday of an active user."""
        await self._require_active_user(payload.user_id)
        await self._require_free_day(payload.user_id, payload.day_of_week)

        workout_day = WorkoutDay(
            name=payload.name.strip(),
            description=payload.description.strip() if payload.description else None,
            day_of_week=payload.day_of_week,
            duration_minutes=payload.duration_minutes,
            intensity_level=payload.intensity_level or DEFAULT_INTENSITY,
            workout_type=payload.workout_type or WorkoutType.FORCE,
            is_active=True,
            user_id=payload.user_id,
        )
        try:
            created = await self.workout_days.create(workout_day)
        except DuplicateRecordError:
            raise ConflictError(self._occupied_message(payload.day_of_week)) from None

        logger.info(
            f"Created workout day {created.id} for user {created.user_id} on {created.day_name}"
        )
        return created

    async def update(self, workout_day_id: int | str, payload: WorkoutDayUpdate) -> WorkoutDay:
        """Apply a partial update.

        Moving to another weekday re-checks the owner and the weekday conflict,
        ignoring the record being updated.
        """
        workout_day_id = parse_id(workout_day_id)
        workout_day = await self._get_or_404(workout_day_id)

        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        if changes.get("description") is not None:
            changes["description"] = changes["description"].strip()

        new_day = changes.get("day_of_week")
        if new_day is not None and new_day != workout_day.day_of_week:
            await self._require_active_user(workout_day.user_id)
            await self._require_free_day(
                workout_day.user_id, new_day, exclude_id=workout_day_id
            )

        updated = replace(workout_day, **changes, updated_at=utcnow())
        try:
            updated = await self.workout_days.update(updated)
        except DuplicateRecordError:
            raise ConflictError(self._occupied_message(updated.day_of_week)) from None

        logger.info(f"Updated workout day {workout_day_id}: {sorted(changes)}")
        return updated

    async def remove(self, workout_day_id: int | str) -> WorkoutDay:
        """Soft delete: clear the active flag."""
        workout_day_id = parse_id(workout_day_id)
        workout_day = await self._get_or_404(workout_day_id)

        if not workout_day.is_active:
            logger.warning(f"Workout day {workout_day_id} already inactive")
            raise ConflictError(f"Workout day with ID {workout_day_id} is already inactive")

        removed = await self.workout_days.update(workout_day_model.deactivate(workout_day))
        logger.info(f"Deactivated workout day {workout_day_id}")
        return removed

    async def _get_or_404(self, workout_day_id: int) -> WorkoutDay:
        workout_day = await self.workout_days.get(workout_day_id)
        if workout_day is None:
            raise NotFoundError(f"Workout day with ID {workout_day_id} not found")
        return workout_day

    async def _require_active_user(self, user_id: int) -> None:
        user = await self.users.get(user_id)
        if user is None or not user.is_active:
            logger.warning(f"User {user_id} missing or inactive")
            raise NotFoundError(f"User with ID {user_id} not found or not active")

    async def _require_free_day(
        self, user_id: int, day_of_week: int, exclude_id: int | None = None
    ) -> None:
        existing = await self.workout_days.find_active_on_day(
            user_id, day_of_week, exclude_id=exclude_id
        )
        if existing is not None:
            logger.warning(
                f"User {user_id} already has workout {existing.id} on {day_name(day_of_week)}"
            )
            raise ConflictError(self._occupied_message(day_of_week))

    @staticmethod
    def _occupied_message(day_of_week: int) -> str:
        return f"An active workout already exists for {day_name(day_of_week)}"
