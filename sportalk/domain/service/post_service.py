"""Post domain service.

Owns the post lifecycle and its append-only version history. Every content
mutation writes a PostVersion holding the content being replaced, inside
the same transaction as the mutation itself.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from sportalk.domain.error import ConflictError, NotFoundError
from sportalk.domain.model import Post, PostDetail, PostVersion
from sportalk.domain.model.post_version import DEFAULT_EDIT_REASON, INITIAL_EDIT_REASON
from sportalk.domain.repository import (
    CommentRepository,
    MediaRepository,
    PostRepository,
    PostVersionRepository,
    TransactionManager,
)
from sportalk.domain.value import PostId, PostSort, PostType, PostVersionId, UserId

from .authorization import check_ownership
from .base import Service
from .user_service import UserService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        post_version_repository: PostVersionRepository,
        comment_repository: CommentRepository,
        media_repository: MediaRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
        version_on_noop_update: bool = True,
        major_change_threshold: int = 100,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            post_version_repository: Post version repository
            comment_repository: Comment repository (eager loading)
            media_repository: Media repository (eager loading)
            user_service: User domain service (author loading)
            transaction_manager: Transaction boundary for multi-row writes
            version_on_noop_update: Append a version even when an update
                changes no field
            major_change_threshold: Absolute character difference above
                which a version is flagged as a major change
        """
        self.post_repository = post_repository
        self.post_version_repository = post_version_repository
        self.comment_repository = comment_repository
        self.media_repository = media_repository
        self.user_service = user_service
        self.transaction_manager = transaction_manager
        self.version_on_noop_update = version_on_noop_update
        self.major_change_threshold = major_change_threshold

    async def create_post(
        self, author_id: UserId, content: str, type: PostType
    ) -> Post:
        """Create a post together with its first version.

        Args:
            author_id: Author user ID
            content: Post content
            type: Post category

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), type=type.value
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                content=content,
                type=type,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )

            async with self.transaction_manager.transaction():
                saved = await self.post_repository.save(post)
                await self._append_version(
                    saved,
                    version=1,
                    edit_reason=INITIAL_EDIT_REASON,
                    new_content=saved.content,
                )

            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def update_post(
        self,
        principal_id: UserId,
        post_id: PostId,
        content: Optional[str] = None,
        type: Optional[PostType] = None,
        edit_reason: Optional[str] = None,
    ) -> Post:
        """Apply a partial update to a post and record the replaced content.

        The post row is locked for the whole transaction so concurrent
        updates to the same post get consecutive version numbers.

        Args:
            principal_id: User making the change (must be the author)
            post_id: Post ID
            content: New content, None to keep the current one
            type: New category, None to keep the current one
            edit_reason: Why the post changed, defaults to "Content updated"

        Returns:
            Updated post

        Raises:
            NotFoundError: If post not found or deleted
            PermissionDeniedError: If the principal is not the author
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            principal_id=str(principal_id),
        ):
            async with self.transaction_manager.transaction():
                post = await self.post_repository.find_by_id_for_update(post_id)
                if not post:
                    logfire.warn("Post not found for update", post_id=str(post_id))
                    raise NotFoundError("Post", str(post_id))

                check_ownership(principal_id, post.author_id, "post", post_id)

                changes: dict = {}
                if content is not None and content != post.content:
                    changes["content"] = content
                if type is not None and type != post.type:
                    changes["type"] = type

                if not changes and not self.version_on_noop_update:
                    logfire.info("Post update changed nothing", post_id=str(post_id))
                    return post

                next_version = (
                    await self.post_version_repository.max_version(post_id) + 1
                )
                version = await self._append_version(
                    post,
                    version=next_version,
                    edit_reason=edit_reason or DEFAULT_EDIT_REASON,
                    new_content=changes.get("content", post.content),
                )

                updated = post.model_copy(
                    update={**changes, "updated_at": datetime.now()}
                )
                saved = await self.post_repository.save(updated)

            logfire.info(
                "Post updated",
                post_id=str(post_id),
                version=version.version,
                changed_fields=sorted(changes),
                major_change=version.is_major_change,
            )
            return saved

    async def remove_post(self, principal_id: UserId, post_id: PostId) -> Post:
        """Soft-delete a post.

        Comments, media and versions are left untouched.

        Args:
            principal_id: User making the change (must be the author)
            post_id: Post ID

        Returns:
            The post as it was before deletion

        Raises:
            NotFoundError: If post not found or already deleted
            PermissionDeniedError: If the principal is not the author
        """
        with logfire.span(
            "post_service.remove_post",
            post_id=str(post_id),
            principal_id=str(principal_id),
        ):
            post = await self.get_post_by_id(post_id)
            check_ownership(principal_id, post.author_id, "post", post_id)

            await self.post_repository.soft_delete(post_id)
            logfire.info("Post removed", post_id=str(post_id))
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a non-deleted post.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If post not found or deleted
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def post_exists(self, post_id: PostId) -> bool:
        """Whether a non-deleted post exists."""
        return await self.post_repository.find_by_id(post_id) is not None

    async def get_post(self, post_id: PostId) -> PostDetail:
        """Get a post with author, comments, media and version history.

        Raises:
            NotFoundError: If post not found or deleted
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.get_post_by_id(post_id)
            details = await self._load_details([post])
            versions = await self.post_version_repository.find_by_post(post_id)
            return details[0].model_copy(update={"versions": versions})

    async def list_posts(
        self,
        take: int,
        skip: int,
        author_id: Optional[UserId] = None,
        search: Optional[str] = None,
        sort: PostSort = PostSort.NEWEST,
    ) -> list[PostDetail]:
        """List non-deleted posts with their relations.

        Args:
            take: Page size
            skip: Number of posts to skip
            author_id: Only list posts by this author
            search: Keyword the content must contain, case-insensitive
            sort: NEWEST for the feed, POPULAR for most viewed first

        Returns:
            Posts with author, comments and media loaded
        """
        search = search.strip() if search else None
        with logfire.span(
            "post_service.list_posts",
            take=take,
            skip=skip,
            author_id=str(author_id) if author_id else None,
            search=search,
            sort=sort.value,
        ):
            posts = await self.post_repository.find_all(
                author_id=author_id,
                limit=take,
                offset=skip,
                search=search or None,
                sort=sort,
            )
            details = await self._load_details(posts)
            logfire.info("Posts listed", count=len(details))
            return details

    async def get_post_versions(self, post_id: PostId) -> list[PostVersion]:
        """Version history of a post, oldest first.

        History stays readable after the post is soft-deleted.

        Raises:
            NotFoundError: If no post row exists
        """
        with logfire.span("post_service.get_post_versions", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id, include_deleted=True)
            if not post:
                logfire.warn("Post not found for versions", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return await self.post_version_repository.find_by_post(post_id)

    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment a post's view count.

        Raises:
            NotFoundError: If post not found or deleted
        """
        with logfire.span("post_service.increment_view_count", post_id=str(post_id)):
            if not await self.post_repository.increment_view_count(post_id):
                logfire.warn("Post not found for view", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

    async def _append_version(
        self, post: Post, version: int, edit_reason: str, new_content: str
    ) -> PostVersion:
        """Snapshot ``post.content`` as the given version number."""
        character_diff = len(post.content) - len(new_content)
        post_version = PostVersion(
            id=PostVersionId(uuid4()),
            post_id=post.id,
            author_id=post.author_id,
            version=version,
            content=post.content,
            edit_reason=edit_reason,
            character_diff=character_diff,
            is_major_change=abs(character_diff) > self.major_change_threshold,
            created_at=datetime.now(),
        )
        try:
            return await self.post_version_repository.save(post_version)
        except IntegrityError:
            logfire.error(
                "Duplicate post version", post_id=str(post.id), version=version
            )
            raise ConflictError(
                f"Version {version} of post {post.id} already exists"
            )

    async def _load_details(self, posts: list[Post]) -> list[PostDetail]:
        """Batch-load authors, comments and media for the given posts."""
        if not posts:
            return []

        post_ids = [post.id for post in posts]
        authors = await self.user_service.get_by_ids([p.author_id for p in posts])
        comments = await self.comment_repository.find_by_posts(post_ids)
        media = await self.media_repository.find_by_posts(post_ids)

        return [
            PostDetail(
                post=post,
                author=authors.get(post.author_id),
                comments=[c for c in comments if c.post_id == post.id],
                media=[m for m in media if m.post_id == post.id],
            )
            for post in posts
        ]
