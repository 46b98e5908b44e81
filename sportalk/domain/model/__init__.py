"""Domain model entities for Sportalk."""

from sportalk.domain.model.comment import Comment, CommentWithAuthor
from sportalk.domain.model.follow import Follow, FollowCounts
from sportalk.domain.model.media import Media
from sportalk.domain.model.post import Post, PostDetail
from sportalk.domain.model.post_version import PostVersion
from sportalk.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "PostDetail",
    "PostVersion",
    "Comment",
    "CommentWithAuthor",
    "Media",
    "Follow",
    "FollowCounts",
]
