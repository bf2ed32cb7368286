"""In-memory repositories.

Drop-in replacements for the SQLite repositories, used for tests and for
``storage = "memory"``. They enforce the same uniqueness rules as the SQLite
schema so services behave identically on both backends.
"""

from dataclasses import replace
from itertools import count

from ..models.user import User, UserStatus
from ..models.workout_day import WorkoutDay
from .base import ACTIVE_DAY_CONSTRAINT, EMAIL_CONSTRAINT, DuplicateRecordError
from .filters import Filter


class InMemoryUserRepository:
    """Users held in a dict keyed by id."""

    def __init__(self):
        self._rows: dict[int, User] = {}
        self._ids = count(1)

    async def get(self, user_id: int) -> User | None:
        return self._rows.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        for user in self._rows.values():
            if user.email == email:
                return user
        return None

    async def list_active(self) -> list[User]:
        active = [u for u in self._rows.values() if u.status == UserStatus.ACTIVE]
        return sorted(active, key=lambda u: u.id)

    async def search(self, criteria: Filter) -> list[User]:
        matches = [u for u in self._rows.values() if criteria.matches(u)]
        return sorted(matches, key=lambda u: (u.created_at, u.id), reverse=True)

    async def create(self, user: User) -> User:
        self._check_email(user)
        stored = replace(user, id=next(self._ids))
        self._rows[stored.id] = stored
        return stored

    async def update(self, user: User) -> User:
        if user.id is None:
            raise ValueError("User must have an ID to update")
        self._check_email(user)
        self._rows[user.id] = user
        return user

    async def count(self) -> int:
        return len(self._rows)

    def _check_email(self, user: User) -> None:
        for other in self._rows.values():
            if other.email == user.email and other.id != user.id:
                raise DuplicateRecordError(EMAIL_CONSTRAINT)


class InMemoryWorkoutDayRepository:
    """Workout days held in a dict keyed by id."""

    def __init__(self):
        self._rows: dict[int, WorkoutDay] = {}
        self._ids = count(1)

    async def get(self, workout_day_id: int) -> WorkoutDay | None:
        return self._rows.get(workout_day_id)

    async def list_active(self) -> list[WorkoutDay]:
        active = [w for w in self._rows.values() if w.is_active]
        return self._by_weekday(active)

    async def list_active_by_user(self, user_id: int) -> list[WorkoutDay]:
        rows = [w for w in self._rows.values() if w.is_active and w.user_id == user_id]
        return sorted(rows, key=lambda w: (w.day_of_week, w.id))

    async def find_active_on_day(
        self, user_id: int, day_of_week: int, exclude_id: int | None = None
    ) -> WorkoutDay | None:
        for workout_day in self._rows.values():
            if (
                workout_day.is_active
                and workout_day.user_id == user_id
                and workout_day.day_of_week == day_of_week
                and workout_day.id != exclude_id
            ):
                return workout_day
        return None

    async def search(self, criteria: Filter) -> list[WorkoutDay]:
        return self._by_weekday([w for w in self._rows.values() if criteria.matches(w)])

    async def create(self, workout_day: WorkoutDay) -> WorkoutDay:
        self._check_active_day(workout_day)
        stored = replace(workout_day, id=next(self._ids))
        self._rows[stored.id] = stored
        return stored

    async def update(self, workout_day: WorkoutDay) -> WorkoutDay:
        if workout_day.id is None:
            raise ValueError("Workout day must have an ID to update")
        self._check_active_day(workout_day)
        self._rows[workout_day.id] = workout_day
        return workout_day

    async def count(self) -> int:
        return len(self._rows)

    def _check_active_day(self, workout_day: WorkoutDay) -> None:
        if not workout_day.is_active:
            return
        for other in self._rows.values():
            if (
                other.is_active
                and other.id != workout_day.id
                and other.user_id == workout_day.user_id
                and other.day_of_week == workout_day.day_of_week
            ):
                raise DuplicateRecordError(ACTIVE_DAY_CONSTRAINT)

    @staticmethod
    def _by_weekday(rows: list[WorkoutDay]) -> list[WorkoutDay]:
        # day ascending, newest first within a day
        newest_first = sorted(rows, key=lambda w: (w.created_at, w.id), reverse=True)
        return sorted(newest_first, key=lambda w: w.day_of_week)
