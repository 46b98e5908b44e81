"""Application layer DI providers."""

from dishka import Scope, provide

from sportalk.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    RemoveCommentUseCase,
    UpdateCommentUseCase,
)
from sportalk.application.usecase.follow import (
    FollowUserUseCase,
    GetFollowCountsUseCase,
    GetFollowersUseCase,
    GetFollowingUseCase,
    UnfollowUserUseCase,
)
from sportalk.application.usecase.media import (
    CreateMediaUseCase,
    ListMediaUseCase,
    RemoveMediaUseCase,
    UpdateMediaStatusUseCase,
)
from sportalk.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    GetPostVersionsUseCase,
    IncrementViewCountUseCase,
    ListPostsUseCase,
    RemovePostUseCase,
    UpdatePostUseCase,
)
from sportalk.config import PaginationSettings
from sportalk.domain.service import (
    CommentService,
    FollowService,
    MediaService,
    PostService,
)
from sportalk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_remove_post_use_case(self, post_service: PostService) -> RemovePostUseCase:
        """Provide remove post use case."""
        return RemovePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, pagination: PaginationSettings
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, pagination=pagination)

    @provide
    def get_get_post_versions_use_case(
        self, post_service: PostService
    ) -> GetPostVersionsUseCase:
        """Provide get post versions use case."""
        return GetPostVersionsUseCase(post_service=post_service)

    @provide
    def get_increment_view_count_use_case(
        self, post_service: PostService
    ) -> IncrementViewCountUseCase:
        """Provide increment view count use case."""
        return IncrementViewCountUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_remove_comment_use_case(
        self, comment_service: CommentService
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    # Media use cases
    @provide
    def get_create_media_use_case(
        self, media_service: MediaService
    ) -> CreateMediaUseCase:
        """Provide create media use case."""
        return CreateMediaUseCase(media_service=media_service)

    @provide
    def get_update_media_status_use_case(
        self, media_service: MediaService
    ) -> UpdateMediaStatusUseCase:
        """Provide update media status use case."""
        return UpdateMediaStatusUseCase(media_service=media_service)

    @provide
    def get_remove_media_use_case(
        self, media_service: MediaService
    ) -> RemoveMediaUseCase:
        """Provide remove media use case."""
        return RemoveMediaUseCase(media_service=media_service)

    @provide
    def get_list_media_use_case(self, media_service: MediaService) -> ListMediaUseCase:
        """Provide list media use case."""
        return ListMediaUseCase(media_service=media_service)

    # Follow use cases
    @provide
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide
    def get_unfollow_user_use_case(
        self, follow_service: FollowService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follow_service=follow_service)

    @provide
    def get_get_followers_use_case(
        self, follow_service: FollowService
    ) -> GetFollowersUseCase:
        """Provide get followers use case."""
        return GetFollowersUseCase(follow_service=follow_service)

    @provide
    def get_get_following_use_case(
        self, follow_service: FollowService
    ) -> GetFollowingUseCase:
        """Provide get following use case."""
        return GetFollowingUseCase(follow_service=follow_service)

    @provide
    def get_get_follow_counts_use_case(
        self, follow_service: FollowService
    ) -> GetFollowCountsUseCase:
        """Provide get follow counts use case."""
        return GetFollowCountsUseCase(follow_service=follow_service)
