"""User routes."""

from fastapi import APIRouter, Depends

from ...schemas.common import MessageResponse
from ...schemas.user import UserCreate, UserResponse, UserSearch, UserUpdate
from ...services import UsersService
from ..deps import get_users_service, parse_query

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UsersService = Depends(get_users_service)):
    """All active users."""
    users = await service.list_active()
    return [UserResponse.from_model(u) for u in users]


@router.get("/search", response_model=list[UserResponse])
async def search_users(
    name: str | None = None,
    email: str | None = None,
    role: str | None = None,
    status: str | None = None,
    location: str | None = None,
    service: UsersService = Depends(get_users_service),
):
    """Search users by partial name/email/location and exact role/status."""
    filters = parse_query(
        UserSearch,
        name=name,
        email=email,
        role=role,
        status=status,
        location=location,
    )
    users = await service.search(filters)
    return [UserResponse.from_model(u) for u in users]


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    payload: UserCreate,
    service: UsersService = Depends(get_users_service),
):
    """Register a new user."""
    user = await service.create(payload)
    return UserResponse.from_model(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    payload: UserUpdate,
    service: UsersService = Depends(get_users_service),
):
    """Partially update a user."""
    user = await service.update(user_id, payload)
    return UserResponse.from_model(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    service: UsersService = Depends(get_users_service),
):
    """Soft delete a user."""
    user = await service.remove(user_id)
    return MessageResponse(message=f"User {user.name} deleted successfully")


# Declared after the more specific GET routes
@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UsersService = Depends(get_users_service),
):
    """Get a user by ID."""
    user = await service.get(user_id)
    return UserResponse.from_model(user)
