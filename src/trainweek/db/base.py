"""Repository interfaces.

Services depend on these protocols only; the SQLite and in-memory
implementations are interchangeable.
"""

from typing import Protocol

from ..models.user import User
from ..models.workout_day import WorkoutDay
from .filters import Filter

EMAIL_CONSTRAINT = "users.email"
ACTIVE_DAY_CONSTRAINT = "workout_days.user_id_day_of_week"


class DuplicateRecordError(Exception):
    """A storage-level uniqueness constraint rejected a write."""

    def __init__(self, constraint: str, detail: str = ""):
        super().__init__(detail or f"Unique constraint violated: {constraint}")
        self.constraint = constraint


class UserRepository(Protocol):
    """Persistence operations for users. Records are never physically deleted."""

    async def get(self, user_id: int) -> User | None:
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Look up by already-normalised email."""
        ...

    async def list_active(self) -> list[User]:
        """Active users ordered by id ascending."""
        ...

    async def search(self, criteria: Filter) -> list[User]:
        """Matching users, most recently created first."""
        ...

    async def create(self, user: User) -> User:
        """Insert and return the record with its assigned id.

        Raises DuplicateRecordError when the email is taken.
        """
        ...

    async def update(self, user: User) -> User:
        """Overwrite the stored record with the same id.

        Raises DuplicateRecordError when the email is taken.
        """
        ...

    async def count(self) -> int:
        ...


class WorkoutDayRepository(Protocol):
    """Persistence operations for workout days."""

    async def get(self, workout_day_id: int) -> WorkoutDay | None:
        ...

    async def list_active(self) -> list[WorkoutDay]:
        """Active rows by weekday, newest first within a day."""
        ...

    async def list_active_by_user(self, user_id: int) -> list[WorkoutDay]:
        """A user's active rows ordered by weekday."""
        ...

    async def find_active_on_day(
        self, user_id: int, day_of_week: int, exclude_id: int | None = None
    ) -> WorkoutDay | None:
        """The active row occupying ``(user_id, day_of_week)``, if any."""
        ...

    async def search(self, criteria: Filter) -> list[WorkoutDay]:
        ...

    async def create(self, workout_day: WorkoutDay) -> WorkoutDay:
        """Insert and return the record with its assigned id.

        Raises DuplicateRecordError when the weekday is already occupied.
        """
        ...

    async def update(self, workout_day: WorkoutDay) -> WorkoutDay:
        ...

    async def count(self) -> int:
        ...
