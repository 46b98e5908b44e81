"""Unit tests for the in-memory transaction manager."""

import asyncio
from uuid import uuid4

import pytest

from sportalk.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryPostVersionRepository,
    InMemoryTransactionManager,
)
from sportalk.domain.value import UserId
from tests.conftest import make_post


class TestInMemoryTransactionManager:
    """Tests for InMemoryTransactionManager."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        """Writes inside a successful block should persist."""
        # Arrange
        posts = InMemoryPostRepository()
        manager = InMemoryTransactionManager([posts])
        post = make_post(UserId(uuid4()))

        # Act
        async with manager.transaction():
            await posts.save(post)

        # Assert
        assert await posts.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_failure_rolls_back_every_repository(self):
        """An exception should undo writes across all repositories."""
        # Arrange
        posts = InMemoryPostRepository()
        versions = InMemoryPostVersionRepository()
        manager = InMemoryTransactionManager([posts, versions])
        post = make_post(UserId(uuid4()))

        # Act
        with pytest.raises(RuntimeError):
            async with manager.transaction():
                await posts.save(post)
                raise RuntimeError("boom")

        # Assert
        assert await posts.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_nested_block_joins_outer(self):
        """A nested block inside the same task should not deadlock."""
        # Arrange
        posts = InMemoryPostRepository()
        manager = InMemoryTransactionManager([posts])
        post = make_post(UserId(uuid4()))

        # Act
        async with manager.transaction():
            async with manager.transaction():
                await posts.save(post)

        # Assert
        assert await posts.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_transactions_run_one_at_a_time(self):
        """Concurrent blocks should never interleave."""
        # Arrange
        manager = InMemoryTransactionManager([])
        active = 0
        overlaps = 0

        async def work():
            nonlocal active, overlaps
            async with manager.transaction():
                active += 1
                if active > 1:
                    overlaps += 1
                await asyncio.sleep(0)
                active -= 1

        # Act
        await asyncio.gather(*(work() for _ in range(5)))

        # Assert
        assert overlaps == 0
