"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from sportalk.domain.error import (
    InvalidRelationError,
    NotFoundError,
    PermissionDeniedError,
)
from sportalk.domain.repository import CommentRepository, UserRepository
from sportalk.domain.service import CommentService, PostService
from sportalk.domain.value import CommentId, PostId, PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup_post(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    author = await user_repo.save(make_user())
    post = await post_service.create_post(author.id, "Match thread", PostType.CHEERING)
    return author, post


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Commenting on a live post should store the comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _setup_post(unit_env)

        # Act
        comment = await comment_service.create_comment(author.id, post.id, "Nice")

        # Assert
        assert comment.post_id == post.id
        assert comment.parent_comment_id is None
        stored = await comment_service.get_comment_by_id(comment.id)
        assert stored.content == "Nice"

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_same_post(self, unit_env):
        """A reply on the parent's post should be listed under the parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _setup_post(unit_env)
        parent = await comment_service.create_comment(author.id, post.id, "Parent")

        # Act
        reply = await comment_service.create_comment(
            author.id, post.id, "Reply", parent_comment_id=parent.id
        )

        # Assert
        replies = await comment_service.list_replies(parent.id)
        assert [r.id for r in replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_reply_to_comment_of_other_post_rejected(self, unit_env):
        """A parent from another post should raise and write nothing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post_a = await _setup_post(unit_env)
        _, post_b = await _setup_post(unit_env)
        parent = await comment_service.create_comment(author.id, post_a.id, "On A")

        # Act & Assert
        with pytest.raises(InvalidRelationError):
            await comment_service.create_comment(
                author.id, post_b.id, "On B", parent_comment_id=parent.id
            )

        assert await comment_repo.find_by_post(post_b.id) == []

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises_not_found(self, unit_env):
        """An unknown parent comment should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _setup_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                author.id, post.id, "Orphan", parent_comment_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_raises_not_found(self, unit_env):
        """Commenting on an unknown post should raise NotFoundError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(user.id, PostId(uuid4()), "Hello?")

    @pytest.mark.asyncio
    async def test_comment_on_deleted_post_raises_not_found(self, unit_env):
        """A soft-deleted post no longer accepts comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        author, post = await _setup_post(unit_env)
        await post_service.remove_post(author.id, post.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(author.id, post.id, "Too late")


class TestMutateComment:
    """Tests for update_comment and remove_comment."""

    @pytest.mark.asyncio
    async def test_update_comment_by_author(self, unit_env):
        """The author may overwrite their comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _setup_post(unit_env)
        comment = await comment_service.create_comment(author.id, post.id, "Draft")

        # Act
        updated = await comment_service.update_comment(author.id, comment.id, "Final")

        # Assert
        assert updated.content == "Final"
        assert updated.created_at == comment.created_at

    @pytest.mark.asyncio
    async def test_update_comment_by_non_author_denied(self, unit_env):
        """Another user cannot edit the comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _setup_post(unit_env)
        stranger = await user_repo.save(make_user())
        comment = await comment_service.create_comment(author.id, post.id, "Mine")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await comment_service.update_comment(stranger.id, comment.id, "Yours")

        stored = await comment_service.get_comment_by_id(comment.id)
        assert stored.content == "Mine"

    @pytest.mark.asyncio
    async def test_remove_comment_keeps_replies(self, unit_env):
        """Removing a parent hides it while its replies stay readable."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author, post = await _setup_post(unit_env)
        parent = await comment_service.create_comment(author.id, post.id, "Parent")
        reply = await comment_service.create_comment(
            author.id, post.id, "Reply", parent_comment_id=parent.id
        )

        # Act
        await comment_service.remove_comment(author.id, parent.id)

        # Assert
        with pytest.raises(NotFoundError):
            await comment_service.get_comment_by_id(parent.id)
        listed = await comment_service.list_comments(post.id)
        assert [c.comment.id for c in listed] == [reply.id]
        assert await comment_repo.find_replies(parent.id) == [reply]

    @pytest.mark.asyncio
    async def test_remove_comment_by_non_author_denied(self, unit_env):
        """Another user cannot delete the comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _setup_post(unit_env)
        stranger = await user_repo.save(make_user())
        comment = await comment_service.create_comment(author.id, post.id, "Keep")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await comment_service.remove_comment(stranger.id, comment.id)
        assert await comment_service.get_comment_by_id(comment.id)

    @pytest.mark.asyncio
    async def test_list_comments_carries_authors(self, unit_env):
        """Listed comments should come with their authors loaded."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author, post = await _setup_post(unit_env)
        await comment_service.create_comment(author.id, post.id, "Hi")

        # Act
        listed = await comment_service.list_comments(post.id)

        # Assert
        assert len(listed) == 1
        assert listed[0].author.id == author.id
