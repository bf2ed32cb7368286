"""Tests for the users service."""

import pytest

from trainweek.errors import BadRequestError, ConflictError, NotFoundError
from trainweek.models.user import UserRole, UserStatus
from trainweek.schemas import UserCreate, UserSearch, UserUpdate


def user_payload(email: str, name: str = "Test User", **extra) -> UserCreate:
    return UserCreate(name=name, email=email, **extra)


class TestCreate:
    """Tests for registering users."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_defaults(self, users_service, pedro):
        user = await users_service.create(pedro)

        assert user.id == 1
        assert user.name == "Pedro Silva"
        assert user.role == UserRole.USER
        assert user.status == UserStatus.ACTIVE
        assert user.is_active
        assert user.age == 32

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, users_service):
        user = await users_service.create(user_payload("  Pedro@Email.COM "))
        assert user.email == "pedro@email.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, users_service, pedro):
        await users_service.create(pedro)

        with pytest.raises(ConflictError, match="pedro@email.com already exists"):
            await users_service.create(user_payload("PEDRO@email.com", name="Another Pedro"))

    @pytest.mark.asyncio
    async def test_inactive_user_still_holds_email(self, users_service, pedro):
        user = await users_service.create(pedro)
        await users_service.remove(user.id)

        with pytest.raises(ConflictError):
            await users_service.create(pedro)

    @pytest.mark.asyncio
    async def test_storage_constraint_is_translated(self, users_service, pedro, monkeypatch):
        """A duplicate that slips past the lookup still becomes a conflict."""
        await users_service.create(pedro)

        async def no_match(email):
            return None

        monkeypatch.setattr(users_service.users, "get_by_email", no_match)
        with pytest.raises(ConflictError, match="already exists"):
            await users_service.create(pedro)


class TestRead:
    """Tests for listing and fetching users."""

    @pytest.mark.asyncio
    async def test_list_active_excludes_inactive(self, users_service):
        first = await users_service.create(user_payload("a@email.com"))
        second = await users_service.create(user_payload("b@email.com"))
        third = await users_service.create(user_payload("c@email.com"))
        await users_service.remove(second.id)

        users = await users_service.list_active()
        assert [u.id for u in users] == [first.id, third.id]

    @pytest.mark.asyncio
    async def test_get_accepts_string_ids(self, users_service, pedro):
        created = await users_service.create(pedro)
        assert (await users_service.get(str(created.id))).email == "pedro@email.com"

    @pytest.mark.asyncio
    async def test_get_missing(self, users_service):
        with pytest.raises(NotFoundError, match="User with ID 999 not found"):
            await users_service.get(999)

    @pytest.mark.asyncio
    async def test_get_invalid_id(self, users_service):
        with pytest.raises(BadRequestError, match="ID must be a valid integer"):
            await users_service.get("abc")

    @pytest.mark.asyncio
    async def test_get_returns_inactive_users(self, users_service, pedro):
        created = await users_service.create(pedro)
        await users_service.remove(created.id)
        assert (await users_service.get(created.id)).status == UserStatus.INACTIVE


class TestSearch:
    """Tests for filtered search."""

    @pytest.mark.asyncio
    async def test_without_filters_equals_list_active(self, users_service):
        await users_service.create(user_payload("a@email.com"))
        removed = await users_service.create(user_payload("b@email.com"))
        await users_service.remove(removed.id)

        found = await users_service.search()
        assert {u.id for u in found} == {u.id for u in await users_service.list_active()}

    @pytest.mark.asyncio
    async def test_partial_name_and_exact_role(self, users_service):
        await users_service.create(user_payload("ana@email.com", name="Ana García", role="trainer"))
        await users_service.create(user_payload("anabel@email.com", name="Anabel Ruiz"))
        await users_service.create(user_payload("carlos@email.com", name="Carlos López"))

        by_name = await users_service.search(UserSearch(name="ana"))
        assert {u.email for u in by_name} == {"ana@email.com", "anabel@email.com"}

        trainers = await users_service.search(UserSearch(name="ana", role="trainer"))
        assert [u.email for u in trainers] == ["ana@email.com"]

    @pytest.mark.asyncio
    async def test_status_filter_reaches_inactive_users(self, users_service):
        await users_service.create(user_payload("a@email.com"))
        removed = await users_service.create(user_payload("b@email.com"))
        await users_service.remove(removed.id)

        found = await users_service.search(UserSearch(status="inactive"))
        assert [u.id for u in found] == [removed.id]

    @pytest.mark.asyncio
    async def test_newest_first(self, users_service):
        first = await users_service.create(user_payload("a@email.com"))
        second = await users_service.create(user_payload("b@email.com"))

        found = await users_service.search()
        assert [u.id for u in found] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_location_substring(self, users_service):
        await users_service.create(user_payload("a@email.com", location="Madrid"))
        await users_service.create(user_payload("b@email.com"))

        found = await users_service.search(UserSearch(location="madr"))
        assert [u.email for u in found] == ["a@email.com"]


class TestUpdate:
    """Tests for partial updates."""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, users_service, pedro):
        created = await users_service.create(pedro)

        updated = await users_service.update(created.id, UserUpdate(name="Pedro Santos"))

        assert updated.name == "Pedro Santos"
        assert updated.email == created.email
        assert updated.age == created.age
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_same_email_is_allowed(self, users_service, pedro):
        created = await users_service.create(pedro)
        updated = await users_service.update(created.id, UserUpdate(email="PEDRO@email.com"))
        assert updated.email == "pedro@email.com"

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user(self, users_service, pedro):
        await users_service.create(pedro)
        other = await users_service.create(user_payload("ana@email.com"))

        with pytest.raises(ConflictError, match="pedro@email.com"):
            await users_service.update(other.id, UserUpdate(email="pedro@email.com"))

    @pytest.mark.asyncio
    async def test_explicit_null_clears_optional_fields(self, users_service, pedro):
        created = await users_service.create(pedro)

        updated = await users_service.update(created.id, UserUpdate(age=None))
        assert updated.age is None

    @pytest.mark.asyncio
    async def test_null_name_is_ignored(self, users_service, pedro):
        created = await users_service.create(pedro)
        updated = await users_service.update(created.id, UserUpdate(name=None))
        assert updated.name == "Pedro Silva"

    @pytest.mark.asyncio
    async def test_status_can_be_set(self, users_service, pedro):
        created = await users_service.create(pedro)
        updated = await users_service.update(created.id, UserUpdate(status="pending"))
        assert updated.status == UserStatus.PENDING
        assert not updated.is_active

    @pytest.mark.asyncio
    async def test_update_missing(self, users_service):
        with pytest.raises(NotFoundError):
            await users_service.update(42, UserUpdate(name="Ghost"))


class TestRemoveAndTransitions:
    """Tests for soft delete and explicit status changes."""

    @pytest.mark.asyncio
    async def test_remove_marks_inactive(self, users_service, pedro):
        created = await users_service.create(pedro)

        removed = await users_service.remove(created.id)

        assert removed.status == UserStatus.INACTIVE
        assert removed.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_remove_twice_conflicts(self, users_service, pedro):
        created = await users_service.create(pedro)
        await users_service.remove(created.id)

        with pytest.raises(ConflictError, match="already inactive"):
            await users_service.remove(created.id)

    @pytest.mark.asyncio
    async def test_remove_missing(self, users_service):
        with pytest.raises(NotFoundError):
            await users_service.remove(5)

    @pytest.mark.asyncio
    async def test_suspend_ban_activate(self, users_service, pedro):
        created = await users_service.create(pedro)

        assert (await users_service.suspend(created.id)).status == UserStatus.SUSPENDED
        assert (await users_service.ban(created.id)).status == UserStatus.BANNED
        assert (await users_service.activate(created.id)).status == UserStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_transition_to_current_status_conflicts(self, users_service, pedro):
        created = await users_service.create(pedro)

        with pytest.raises(ConflictError, match="already active"):
            await users_service.activate(created.id)
