"""SQLite data access layer for trainweek."""

import json
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.user import User, UserRole, UserStats, UserStatus
from ..models.workout_day import WorkoutDay, WorkoutType
from .base import ACTIVE_DAY_CONSTRAINT, EMAIL_CONSTRAINT, DuplicateRecordError
from .engine import connect, get_db_path
from .filters import Filter

USER_COLUMNS = (
    "name, email, role, status, age, avatar, bio, phone, location, "
    "specialties, stats, created_at, updated_at"
)
WORKOUT_DAY_COLUMNS = (
    "name, description, day_of_week, duration_minutes, intensity_level, "
    "workout_type, is_active, user_id, created_at, updated_at"
)


def _translate_integrity_error(exc: aiosqlite.IntegrityError) -> Exception:
    """Map SQLite uniqueness failures to DuplicateRecordError."""
    message = str(exc)
    if "UNIQUE" not in message:
        return exc
    if "users.email" in message:
        return DuplicateRecordError(EMAIL_CONSTRAINT, message)
    if "workout_days.user_id" in message:
        return DuplicateRecordError(ACTIVE_DAY_CONSTRAINT, message)
    return DuplicateRecordError(message, message)


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class SQLiteUserRepository:
    """Repository for users."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by normalised email."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def list_active(self) -> list[User]:
        """List active users by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM users WHERE status = ? ORDER BY id ASC",
                (UserStatus.ACTIVE.value,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_user(row) for row in rows]

    async def search(self, criteria: Filter) -> list[User]:
        """Search users, newest first."""
        where, params = criteria.where_clause()
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"SELECT * FROM users {where} ORDER BY created_at DESC, id DESC",
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_user(row) for row in rows]

    async def create(self, user: User) -> User:
        """Create a new user."""
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    f"INSERT INTO users ({USER_COLUMNS}) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    self._user_params(user),
                )
                await db.commit()
            except aiosqlite.IntegrityError as e:
                raise _translate_integrity_error(e) from e
            return replace(user, id=cursor.lastrowid)

    async def update(self, user: User) -> User:
        """Update an existing user."""
        if user.id is None:
            raise ValueError("User must have an ID to update")

        async with connect(self.db_path) as db:
            try:
                await db.execute(
                    """
                    UPDATE users SET
                        name = ?, email = ?, role = ?, status = ?, age = ?,
                        avatar = ?, bio = ?, phone = ?, location = ?,
                        specialties = ?, stats = ?, created_at = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (*self._user_params(user), user.id),
                )
                await db.commit()
            except aiosqlite.IntegrityError as e:
                raise _translate_integrity_error(e) from e
        return user

    async def count(self) -> int:
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM users")
            row = await cursor.fetchone()
            return row[0]

    @staticmethod
    def _user_params(user: User) -> tuple:
        return (
            user.name,
            user.email,
            user.role.value,
            user.status.value,
            user.age,
            user.avatar,
            user.bio,
            user.phone,
            user.location,
            json.dumps(user.specialties) if user.specialties is not None else None,
            json.dumps(user.stats.to_dict()) if user.stats is not None else None,
            user.created_at.isoformat(),
            user.updated_at.isoformat(),
        )

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            role=UserRole(row["role"]),
            status=UserStatus(row["status"]),
            age=row["age"],
            avatar=row["avatar"],
            bio=row["bio"],
            phone=row["phone"],
            location=row["location"],
            specialties=json.loads(row["specialties"]) if row["specialties"] else None,
            stats=UserStats.from_dict(json.loads(row["stats"])) if row["stats"] else None,
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class SQLiteWorkoutDayRepository:
    """Repository for workout days."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, workout_day_id: int) -> WorkoutDay | None:
        """Get a workout day by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM workout_days WHERE id = ?", (workout_day_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout_day(row)

    async def list_active(self) -> list[WorkoutDay]:
        """List active workout days across all users."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM workout_days
                WHERE is_active = 1
                ORDER BY day_of_week ASC, created_at DESC, id DESC
                """
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout_day(row) for row in rows]

    async def list_active_by_user(self, user_id: int) -> list[WorkoutDay]:
        """List a user's active workout days through the week."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT * FROM workout_days
                WHERE user_id = ? AND is_active = 1
                ORDER BY day_of_week ASC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout_day(row) for row in rows]

    async def find_active_on_day(
        self, user_id: int, day_of_week: int, exclude_id: int | None = None
    ) -> WorkoutDay | None:
        """Find the active workout occupying a user's weekday."""
        query = """
            SELECT * FROM workout_days
            WHERE user_id = ? AND day_of_week = ? AND is_active = 1
        """
        params: list = [user_id, day_of_week]
        if exclude_id is not None:
            query += " AND id != ?"
            params.append(exclude_id)

        async with connect(self.db_path) as db:
            cursor = await db.execute(query + " LIMIT 1", params)
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout_day(row)

    async def search(self, criteria: Filter) -> list[WorkoutDay]:
        """Search workout days by weekday, newest first within a day."""
        where, params = criteria.where_clause()
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"SELECT * FROM workout_days {where} "
                "ORDER BY day_of_week ASC, created_at DESC, id DESC",
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout_day(row) for row in rows]

    async def create(self, workout_day: WorkoutDay) -> WorkoutDay:
        """Create a new workout day."""
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    f"INSERT INTO workout_days ({WORKOUT_DAY_COLUMNS}) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    self._workout_day_params(workout_day),
                )
                await db.commit()
            except aiosqlite.IntegrityError as e:
                raise _translate_integrity_error(e) from e
            return replace(workout_day, id=cursor.lastrowid)

    async def update(self, workout_day: WorkoutDay) -> WorkoutDay:
        """Update an existing workout day."""
        if workout_day.id is None:
            raise ValueError("Workout day must have an ID to update")

        async with connect(self.db_path) as db:
            try:
                await db.execute(
                    """
                    UPDATE workout_days SET
                        name = ?, description = ?, day_of_week = ?,
                        duration_minutes = ?, intensity_level = ?, workout_type = ?,
                        is_active = ?, user_id = ?, created_at = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (*self._workout_day_params(workout_day), workout_day.id),
                )
                await db.commit()
            except aiosqlite.IntegrityError as e:
                raise _translate_integrity_error(e) from e
        return workout_day

    async def count(self) -> int:
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workout_days")
            row = await cursor.fetchone()
            return row[0]

    @staticmethod
    def _workout_day_params(workout_day: WorkoutDay) -> tuple:
        return (
            workout_day.name,
            workout_day.description,
            workout_day.day_of_week,
            workout_day.duration_minutes,
            workout_day.intensity_level,
            workout_day.workout_type.value,
            1 if workout_day.is_active else 0,
            workout_day.user_id,
            workout_day.created_at.isoformat(),
            workout_day.updated_at.isoformat(),
        )

    def _row_to_workout_day(self, row: aiosqlite.Row) -> WorkoutDay:
        """Convert a database row to a WorkoutDay."""
        return WorkoutDay(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            day_of_week=row["day_of_week"],
            duration_minutes=row["duration_minutes"],
            intensity_level=row["intensity_level"],
            workout_type=WorkoutType(row["workout_type"]),
            is_active=bool(row["is_active"]),
            user_id=row["user_id"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )
