"""Request and response schemas for users."""

from pydantic import Field

from ..models.user import User, UserRole, UserStats, UserStatus
from .common import EMAIL_PATTERN, URL_PATTERN, CamelModel, Name


class UserCreate(CamelModel):
    """Body of ``POST /users``."""

    name: Name
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    role: UserRole | None = None
    age: int | None = Field(None, ge=0, le=150, strict=True)
    avatar: str | None = Field(None, pattern=URL_PATTERN)
    bio: str | None = None
    phone: str | None = None
    location: str | None = None
    specialties: list[str] | None = None


class UserUpdate(CamelModel):
    """Body of ``PUT /users/{id}``; every field is optional."""

    name: Name | None = None
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    role: UserRole | None = None
    status: UserStatus | None = None
    age: int | None = Field(None, ge=0, le=150, strict=True)
    avatar: str | None = Field(None, pattern=URL_PATTERN)
    bio: str | None = None
    phone: str | None = None
    location: str | None = None
    specialties: list[str] | None = None


class UserSearch(CamelModel):
    """Query string of ``GET /users/search``."""

    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    role: UserRole | None = None
    status: UserStatus | None = None
    location: str | None = None


class UserStatsResponse(CamelModel):
    total_workouts: int
    current_streak: int
    longest_streak: int
    total_calories_burned: int
    average_workout_duration: int
    favorite_workout_type: str | None = None
    monthly_goal: int
    monthly_progress: int

    @classmethod
    def from_model(cls, stats: UserStats) -> "UserStatsResponse":
        return cls(**stats.to_dict())


class UserResponse(CamelModel):
    """User as rendered to clients."""

    id: int
    name: str
    email: str
    role: UserRole
    avatar: str | None = None
    status: UserStatus
    is_active: bool
    age: int | None = None
    joined_date: str
    bio: str | None = None
    phone: str | None = None
    location: str | None = None
    specialties: list[str] | None = None
    stats: UserStatsResponse | None = None

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            avatar=user.avatar,
            status=user.status,
            is_active=user.is_active,
            age=user.age,
            joined_date=user.joined_date,
            bio=user.bio,
            phone=user.phone,
            location=user.location,
            specialties=user.specialties,
            stats=UserStatsResponse.from_model(user.stats) if user.stats else None,
        )
