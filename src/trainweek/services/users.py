"""User business rules: uniqueness, existence checks and soft deletes."""

from dataclasses import replace
from typing import Callable

from loguru import logger

from ..db.base import DuplicateRecordError, UserRepository
from ..db.filters import FilterBuilder
from ..errors import ConflictError, NotFoundError, parse_id
from ..models import user as user_model
from ..models.user import User, UserRole, UserStatus, normalize_email, utcnow
from ..schemas.user import UserCreate, UserSearch, UserUpdate

# Columns that may be cleared with an explicit null on update
NULLABLE_FIELDS = {"age", "avatar", "bio", "phone", "location", "specialties"}


class UsersService:
    """Operations behind the ``/users`` resource."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def list_active(self) -> list[User]:
        """All active users ordered by ID."""
        users = await self.users.list_active()
        logger.debug(f"Listed {len(users)} active users")
        return users

    async def search(self, filters: UserSearch | None = None) -> list[User]:
        """Filter users; text fields match substrings, role/status match exactly.

        Without a status filter only active users are returned.
        """
        filters = filters or UserSearch()
        criteria = (
            FilterBuilder()
            .contains("name", filters.name)
            .contains("email", filters.email)
            .equals("role", filters.role)
            .equals("status", filters.status or UserStatus.ACTIVE)
            .contains("location", filters.location)
            .build()
        )
        users = await self.users.search(criteria)
        logger.debug(f"User search on {sorted(criteria.columns())} matched {len(users)}")
        return users

    async def get(self, user_id: int | str) -> User:
        """Fetch one user; BadRequestError for bad IDs, NotFoundError if missing."""
        return await self._get_or_404(parse_id(user_id))

    async def create(self, payload: UserCreate) -> User:
        """Register a user. Emails are unique after trimming and lowercasing."""
        email = normalize_email(payload.email)
        if await self.users.get_by_email(email) is not None:
            logger.warning(f"Rejected user create: email {email} already registered")
            raise ConflictError(self._duplicate_email_message(email))

        user = User(
            name=payload.name.strip(),
            email=email,
            role=payload.role or UserRole.USER,
            status=UserStatus.ACTIVE,
            age=payload.age,
            avatar=payload.avatar,
            bio=payload.bio,
            phone=payload.phone,
            location=payload.location,
            specialties=payload.specialties,
        )
        try:
            created = await self.users.create(user)
        except DuplicateRecordError:
            raise ConflictError(self._duplicate_email_message(email)) from None

        logger.info(f"Created user {created.id} ({created.email})")
        return created

    async def update(self, user_id: int | str, payload: UserUpdate) -> User:
        """Apply a partial update; unsupplied fields are left untouched."""
        user_id = parse_id(user_id)
        user = await self._get_or_404(user_id)

        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            other = await self.users.get_by_email(changes["email"])
            if other is not None and other.id != user_id:
                logger.warning(f"Rejected update of user {user_id}: email in use by {other.id}")
                raise ConflictError(self._duplicate_email_message(changes["email"]))

        if "name" in changes:
            changes["name"] = changes["name"].strip()

        updated = replace(user, **changes, updated_at=utcnow())
        try:
            updated = await self.users.update(updated)
        except DuplicateRecordError:
            raise ConflictError(self._duplicate_email_message(updated.email)) from None

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return updated

    async def remove(self, user_id: int | str) -> User:
        """Soft delete: mark the user inactive."""
        user_id = parse_id(user_id)
        user = await self._get_or_404(user_id)

        if user.status == UserStatus.INACTIVE:
            logger.warning(f"User {user_id} already inactive")
            raise ConflictError(f"User with ID {user_id} is already inactive")

        removed = await self.users.update(user_model.deactivate(user))
        logger.info(f"Deactivated user {user_id}")
        return removed

    async def activate(self, user_id: int | str) -> User:
        return await self._transition(user_id, UserStatus.ACTIVE, user_model.activate)

    async def suspend(self, user_id: int | str) -> User:
        return await self._transition(user_id, UserStatus.SUSPENDED, user_model.suspend)

    async def ban(self, user_id: int | str) -> User:
        return await self._transition(user_id, UserStatus.BANNED, user_model.ban)

    async def _transition(
        self,
        user_id: int | str,
        target: UserStatus,
        apply: Callable[[User], User],
    ) -> User:
        user_id = parse_id(user_id)
        user = await self._get_or_404(user_id)
        if user.status == target:
            raise ConflictError(f"User with ID {user_id} is already {target.value}")

        changed = await self.users.update(apply(user))
        logger.info(f"User {user_id} status {user.status.value} -> {target.value}")
        return changed

    async def _get_or_404(self, user_id: int) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user

    @staticmethod
    def _duplicate_email_message(email: str) -> str:
        return f"A user with email {email} already exists"
