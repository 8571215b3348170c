"""Tests for UserRepositorySQLAlchemy on in-memory SQLite."""

import pytest

from userhub.domain.user import (
    EmailAlreadyExistsError,
    PersistenceError,
    User,
    UserChanges,
)
from userhub.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy

from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def user_repo(sqlite_session):
    """Create UserRepository instance with the test session."""
    return UserRepositorySQLAlchemy(sqlite_session)


class TestSave:
    """Inserting and updating rows."""

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self, user_repo):
        saved = await user_repo.save(TestUserFactory.new_user())

        assert saved.id is not None
        assert saved.name == "John"
        assert saved.email == "john@example.com"
        assert saved.password == "secret"

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, user_repo):
        first = await user_repo.save(TestUserFactory.new_user())
        second = await user_repo.save(
            TestUserFactory.new_user(name="Jane", email="jane@example.com"),
        )

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_update_in_place(self, user_repo):
        """Saving a persisted user rewrites its row, not a new one."""
        saved = await user_repo.save(TestUserFactory.new_user())
        saved.apply_changes(
            UserChanges(name="New", email="new@example.com", password="x"),
        )

        updated = await user_repo.save(saved)

        assert updated.id == saved.id
        assert await user_repo.count() == 1
        found = await user_repo.find_by_id(saved.id)
        assert found.name == "New"
        assert found.email == "new@example.com"
        assert found.password == "x"

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, user_repo):
        """The unique index rejects a second row with the same email."""
        await user_repo.save(TestUserFactory.new_user())

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await user_repo.save(TestUserFactory.new_user(name="Jane"))

        assert exc_info.value.email == "john@example.com"

    @pytest.mark.asyncio
    async def test_missing_column_raises_persistence_error(self, user_repo):
        with pytest.raises(PersistenceError):
            await user_repo.save(TestUserFactory.new_user(name=None))

    @pytest.mark.asyncio
    async def test_timestamps_are_timezone_aware(self, user_repo):
        saved = await user_repo.save(TestUserFactory.new_user())

        found = await user_repo.find_by_id(saved.id)

        assert found.created_at.tzinfo is not None
        assert found.updated_at.tzinfo is not None


class TestFind:
    """Lookups by id and email."""

    @pytest.mark.asyncio
    async def test_find_by_id(self, user_repo):
        saved = await user_repo.save(TestUserFactory.new_user())

        found = await user_repo.find_by_id(saved.id)

        assert found is not None
        assert found == saved
        assert isinstance(found, User)

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, user_repo):
        assert await user_repo.find_by_id(999) is None

    @pytest.mark.asyncio
    async def test_find_by_email(self, user_repo):
        saved = await user_repo.save(TestUserFactory.new_user())

        found = await user_repo.find_by_email("john@example.com")

        assert found is not None
        assert found.id == saved.id

    @pytest.mark.asyncio
    async def test_find_by_email_is_exact(self, user_repo):
        """Emails are stored as given and matched exactly."""
        await user_repo.save(TestUserFactory.new_user())

        assert await user_repo.find_by_email("JOHN@example.com") is None

    @pytest.mark.asyncio
    async def test_find_by_email_none(self, user_repo):
        assert await user_repo.find_by_email(None) is None


class TestListAndCount:
    @pytest.mark.asyncio
    async def test_list_all_ordered_by_id(self, user_repo):
        john = await user_repo.save(TestUserFactory.new_user())
        jane = await user_repo.save(
            TestUserFactory.new_user(name="Jane", email="jane@example.com"),
        )

        users = await user_repo.list_all()

        assert [u.id for u in users] == [john.id, jane.id]
        assert await user_repo.count() == 2

    @pytest.mark.asyncio
    async def test_empty_store(self, user_repo):
        assert await user_repo.list_all() == []
        assert await user_repo.count() == 0


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_removes_row(self, user_repo):
        saved = await user_repo.save(TestUserFactory.new_user())

        await user_repo.delete(saved.id)

        assert await user_repo.find_by_id(saved.id) is None
        assert await user_repo.count() == 0

    @pytest.mark.asyncio
    async def test_delete_absent_id_is_noop(self, user_repo):
        await user_repo.save(TestUserFactory.new_user())

        await user_repo.delete(999)

        assert await user_repo.count() == 1
