"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import logfire

from sportalk.config import AuthSettings
from sportalk.domain.model import Post, User
from sportalk.domain.value import Nickname, PostId, PostType, UserId

# Keep spans on the console, never ship test telemetry
logfire.configure(send_to_logfire=False, console=False)


def make_user(nickname: str | None = None, **overrides) -> User:
    """Build a user with unique defaults.

    Args:
        nickname: Nickname, derived from the generated ID when omitted
        **overrides: Any other User field

    Returns:
        User (not persisted)
    """
    user_id = overrides.pop("id", None) or UserId(uuid4())
    nickname = nickname or f"fan-{str(user_id)[:8]}"
    return User(
        id=user_id,
        nickname=Nickname(nickname),
        email=overrides.pop("email", f"{nickname}@example.com"),
        password_hash=overrides.pop("password_hash", "not-a-real-hash"),
        **overrides,
    )


def make_post(author_id: UserId, content: str = "Great match!", **overrides) -> Post:
    """Build a post without going through PostService (no version rows).

    Args:
        author_id: Author user ID
        content: Post content
        **overrides: Any other Post field

    Returns:
        Post (not persisted)
    """
    return Post(
        id=overrides.pop("id", None) or PostId(uuid4()),
        content=content,
        type=overrides.pop("type", PostType.ANALYSIS),
        author_id=author_id,
        **overrides,
    )


def make_token(
    user_id: UserId | str,
    settings: AuthSettings | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Sign a token the API accepts for ``user_id``.

    Args:
        user_id: Principal to encode
        settings: Auth settings, defaults to the environment's
        expires_in: Lifetime, negative for an already expired token

    Returns:
        Encoded JWT
    """
    settings = settings or AuthSettings()
    payload = {
        "user_id": str(user_id),
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(user_id: UserId | str) -> dict[str, str]:
    """Bearer header for ``user_id``."""
    return {"Authorization": f"Bearer {make_token(user_id)}"}
