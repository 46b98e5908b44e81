"""Unit tests for MediaService."""

from uuid import uuid4

import pytest

from sportalk.domain.error import (
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from sportalk.domain.repository import MediaRepository, UserRepository
from sportalk.domain.service import MediaService, PostService
from sportalk.domain.value import MediaId, MediaStatus, MediaType, PostType
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup_post(unit_env):
    user_repo = await unit_env.get(UserRepository)
    post_service = await unit_env.get(PostService)
    author = await user_repo.save(make_user())
    post = await post_service.create_post(author.id, "Goal clip", PostType.HIGHLIGHT)
    return author, post


class TestCreateMedia:
    """Tests for create_media method."""

    @pytest.mark.asyncio
    async def test_create_media_starts_uploading(self, unit_env):
        """New media should be UPLOADING with an empty url."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, post = await _setup_post(unit_env)

        # Act
        media = await media_service.create_media(author.id, post.id, MediaType.VIDEO)

        # Assert
        assert media.status == MediaStatus.UPLOADING
        assert media.url == ""
        assert media.post_id == post.id

    @pytest.mark.asyncio
    async def test_create_media_on_foreign_post_denied(self, unit_env):
        """Only the post's author may attach media."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        media_repo = await unit_env.get(MediaRepository)
        user_repo = await unit_env.get(UserRepository)
        _, post = await _setup_post(unit_env)
        stranger = await user_repo.save(make_user())

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await media_service.create_media(stranger.id, post.id, MediaType.IMAGE)
        assert await media_repo.find_by_post(post.id) == []


class TestUpdateMediaStatus:
    """Tests for update_media_status method."""

    @pytest.mark.asyncio
    async def test_complete_upload_records_url(self, unit_env):
        """Completing an upload should store the url."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, post = await _setup_post(unit_env)
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)

        # Act
        updated = await media_service.update_media_status(
            author.id, media.id, MediaStatus.COMPLETED, url="https://cdn/x.png"
        )

        # Assert
        assert updated.status == MediaStatus.COMPLETED
        assert updated.url == "https://cdn/x.png"

    @pytest.mark.asyncio
    async def test_failed_upload_ignores_url(self, unit_env):
        """A url sent with FAILED should not be stored."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, post = await _setup_post(unit_env)
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)

        # Act
        updated = await media_service.update_media_status(
            author.id, media.id, MediaStatus.FAILED, url="https://cdn/broken.png"
        )

        # Assert
        assert updated.status == MediaStatus.FAILED
        assert updated.url == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("terminal", [MediaStatus.COMPLETED, MediaStatus.FAILED])
    async def test_terminal_status_cannot_change(self, unit_env, terminal):
        """Once finished an upload cannot move again."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, post = await _setup_post(unit_env)
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)
        await media_service.update_media_status(author.id, media.id, terminal)

        # Act & Assert
        with pytest.raises(InvalidStatusTransitionError):
            await media_service.update_media_status(
                author.id, media.id, MediaStatus.UPLOADING
            )

    @pytest.mark.asyncio
    async def test_update_status_by_non_author_denied(self, unit_env):
        """Only the parent post's author may report upload progress."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _setup_post(unit_env)
        stranger = await user_repo.save(make_user())
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await media_service.update_media_status(
                stranger.id, media.id, MediaStatus.COMPLETED, url="https://evil"
            )

        listed = await media_service.list_media(post.id)
        assert listed[0].status == MediaStatus.UPLOADING

    @pytest.mark.asyncio
    async def test_update_missing_media_raises_not_found(self, unit_env):
        """Unknown media should raise NotFoundError."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, _ = await _setup_post(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await media_service.update_media_status(
                author.id, MediaId(uuid4()), MediaStatus.COMPLETED
            )


class TestRemoveMedia:
    """Tests for remove_media method."""

    @pytest.mark.asyncio
    async def test_remove_media_hides_it(self, unit_env):
        """Removed media should disappear from the post's list."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        author, post = await _setup_post(unit_env)
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)

        # Act
        await media_service.remove_media(author.id, media.id)

        # Assert
        assert await media_service.list_media(post.id) == []

    @pytest.mark.asyncio
    async def test_author_can_remove_media_of_deleted_post(self, unit_env):
        """Ownership still follows the author after the post is deleted."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        post_service = await unit_env.get(PostService)
        media_repo = await unit_env.get(MediaRepository)
        author, post = await _setup_post(unit_env)
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)
        await post_service.remove_post(author.id, post.id)

        # Act
        await media_service.remove_media(author.id, media.id)

        # Assert
        assert await media_repo.find_by_id(media.id) is None

    @pytest.mark.asyncio
    async def test_remove_media_by_non_author_denied(self, unit_env):
        """Another user cannot delete the media."""
        # Arrange
        media_service = await unit_env.get(MediaService)
        user_repo = await unit_env.get(UserRepository)
        author, post = await _setup_post(unit_env)
        stranger = await user_repo.save(make_user())
        media = await media_service.create_media(author.id, post.id, MediaType.IMAGE)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await media_service.remove_media(stranger.id, media.id)
        assert len(await media_service.list_media(post.id)) == 1
