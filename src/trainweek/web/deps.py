"""FastAPI dependency providers.

Repositories are built once per app (see ``create_app``) and kept on
``app.state``; services are cheap and created per request.

Testing:
    app = create_app(Settings(storage="memory"))
    # or swap a provider
    app.dependency_overrides[get_users_service] = lambda: FakeUsersService()
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from ..db.base import UserRepository, WorkoutDayRepository
from ..errors import BadRequestError
from ..schemas.common import validation_messages
from ..services import UsersService, WorkoutDaysService

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_workout_day_repository(request: Request) -> WorkoutDayRepository:
    return request.app.state.workout_day_repository


def get_users_service(request: Request) -> UsersService:
    return UsersService(get_user_repository(request))


def get_workout_days_service(request: Request) -> WorkoutDaysService:
    return WorkoutDaysService(
        get_workout_day_repository(request),
        get_user_repository(request),
    )


def parse_query(model: type[ModelT], **params: str | None) -> ModelT:
    """Validate raw query parameters against a search schema.

    Missing parameters are dropped so schema defaults apply. Failures become
    a BadRequestError before any service code runs.
    """
    present = {key: value for key, value in params.items() if value is not None}
    try:
        return model.model_validate(present)
    except ValidationError as e:
        raise BadRequestError(validation_messages(e.errors())) from None
