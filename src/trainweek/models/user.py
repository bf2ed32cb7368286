"""User data models."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    """Role a user plays on the team."""

    ADMIN = "admin"
    TRAINER = "trainer"
    NUTRITIONIST = "nutritionist"
    USER = "user"
    GUEST = "guest"


class UserStatus(str, Enum):
    """Account status. Soft-deleted users are INACTIVE."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"
    BANNED = "banned"


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserStats:
    """Training statistics shown on the user profile."""

    total_workouts: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    total_calories_burned: int = 0
    average_workout_duration: int = 0  # minutes
    favorite_workout_type: str | None = None
    monthly_goal: int = 0
    monthly_progress: int = 0  # percent, 0-100

    def to_dict(self) -> dict:
        return {
            "total_workouts": self.total_workouts,
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "total_calories_burned": self.total_calories_burned,
            "average_workout_duration": self.average_workout_duration,
            "favorite_workout_type": self.favorite_workout_type,
            "monthly_goal": self.monthly_goal,
            "monthly_progress": self.monthly_progress,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserStats":
        return cls(
            total_workouts=data.get("total_workouts", 0),
            current_streak=data.get("current_streak", 0),
            longest_streak=data.get("longest_streak", 0),
            total_calories_burned=data.get("total_calories_burned", 0),
            average_workout_duration=data.get("average_workout_duration", 0),
            favorite_workout_type=data.get("favorite_workout_type"),
            monthly_goal=data.get("monthly_goal", 0),
            monthly_progress=data.get("monthly_progress", 0),
        )


@dataclass(frozen=True)
class User:
    """A registered user.

    Records are immutable; changes produce a new value via the transition
    functions below or ``dataclasses.replace``.
    """

    name: str
    email: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    age: int | None = None
    avatar: str | None = None
    bio: str | None = None
    phone: str | None = None
    location: str | None = None
    specialties: list[str] | None = None
    stats: UserStats | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def joined_date(self) -> str:
        """Creation time as an ISO-8601 string (``2024-01-15T10:30:00.000Z``)."""
        created = self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        created = created.astimezone(timezone.utc)
        return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @property
    def age_group(self) -> str | None:
        """Coarse age bracket, or None when the age is unknown."""
        if self.age is None:
            return None
        if self.age < 18:
            return "Minor"
        if self.age < 30:
            return "Young adult"
        if self.age < 50:
            return "Adult"
        if self.age < 65:
            return "Older adult"
        return "Senior"

    @property
    def display_name(self) -> str:
        """Name with every word capitalised."""
        return " ".join(word[:1].upper() + word[1:] for word in self.name.lower().split())


def normalize_email(email: str) -> str:
    """Canonical form used for storage and uniqueness checks."""
    return email.strip().lower()


def touch(user: User) -> User:
    """Return the user with a refreshed update timestamp."""
    return replace(user, updated_at=utcnow())


def with_status(user: User, status: UserStatus) -> User:
    """Return the user moved to ``status``; the timestamp is always refreshed."""
    return replace(user, status=status, updated_at=utcnow())


def activate(user: User) -> User:
    return with_status(user, UserStatus.ACTIVE)


def deactivate(user: User) -> User:
    return with_status(user, UserStatus.INACTIVE)


def suspend(user: User) -> User:
    return with_status(user, UserStatus.SUSPENDED)


def ban(user: User) -> User:
    return with_status(user, UserStatus.BANNED)
