"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .get_post_versions import (
    GetPostVersionsRequest,
    GetPostVersionsResponse,
    GetPostVersionsUseCase,
)
from .increment_view_count import (
    IncrementViewCountRequest,
    IncrementViewCountResponse,
    IncrementViewCountUseCase,
)
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .remove_post import RemovePostRequest, RemovePostResponse, RemovePostUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "GetPostVersionsRequest",
    "GetPostVersionsResponse",
    "GetPostVersionsUseCase",
    "IncrementViewCountRequest",
    "IncrementViewCountResponse",
    "IncrementViewCountUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "RemovePostRequest",
    "RemovePostResponse",
    "RemovePostUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
