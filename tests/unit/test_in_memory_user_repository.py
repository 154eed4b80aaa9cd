"""
Unit tests for InMemoryUserRepository.
"""
import asyncio

import pytest
from user_directory.core.exceptions import ConflictError
from user_directory.domain.models.user import User


def _make_user(email: str = "ada@example.com", full_name: str = "Ada") -> User:
    return User(
        id=None,
        full_name=full_name,
        email=email,
        hashed_password="$2b$04$hashed",
        dob="1990-01-01",
    )


class TestAdd:
    """Tests for InMemoryUserRepository.add"""

    @pytest.mark.asyncio
    async def test_assigns_sequential_ids(self, memory_repo):
        first = await memory_repo.add(_make_user("a@example.com"))
        second = await memory_repo.add(_make_user("b@example.com"))
        assert first.id == 1
        assert second.id == 2
        assert await memory_repo.count() == 2

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, memory_repo):
        await memory_repo.add(_make_user())
        with pytest.raises(ConflictError):
            await memory_repo.add(_make_user(full_name="Someone Else"))
        assert await memory_repo.count() == 1

    @pytest.mark.asyncio
    async def test_user_with_id_rejected(self, memory_repo):
        user = _make_user()
        user.id = 7
        with pytest.raises(ValueError):
            await memory_repo.add(user)

    @pytest.mark.asyncio
    async def test_concurrent_duplicates_store_one(self, memory_repo):
        results = await asyncio.gather(
            *(memory_repo.add(_make_user()) for _ in range(5)),
            return_exceptions=True,
        )
        stored = [r for r in results if isinstance(r, User)]
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        assert len(stored) == 1
        assert len(conflicts) == 4
        assert await memory_repo.count() == 1


class TestLookups:
    """Tests for find_by_email, find_by_id and list_all"""

    @pytest.mark.asyncio
    async def test_empty_repository(self, memory_repo):
        assert await memory_repo.list_all() == []
        assert await memory_repo.find_by_id(1) is None
        assert await memory_repo.find_by_email("ada@example.com") is None

    @pytest.mark.asyncio
    async def test_find_by_email_and_id(self, memory_repo):
        saved = await memory_repo.add(_make_user())
        assert (await memory_repo.find_by_email("ada@example.com")).id == saved.id
        assert (await memory_repo.find_by_id(saved.id)).email == "ada@example.com"
        assert await memory_repo.find_by_id(saved.id + 1) is None

    @pytest.mark.asyncio
    async def test_find_by_empty_email_returns_none(self, memory_repo):
        await memory_repo.add(_make_user())
        assert await memory_repo.find_by_email("") is None

    @pytest.mark.asyncio
    async def test_list_preserves_registration_order(self, memory_repo):
        for email in ("c@example.com", "a@example.com", "b@example.com"):
            await memory_repo.add(_make_user(email))
        users = await memory_repo.list_all()
        assert [u.email for u in users] == ["c@example.com", "a@example.com", "b@example.com"]

    @pytest.mark.asyncio
    async def test_returned_users_are_copies(self, memory_repo):
        await memory_repo.add(_make_user())
        users = await memory_repo.list_all()
        users[0].full_name = "Changed"
        assert (await memory_repo.find_by_id(1)).full_name == "Ada"
