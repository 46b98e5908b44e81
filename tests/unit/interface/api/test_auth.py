"""Unit tests for principal resolution."""

from datetime import timedelta
from uuid import uuid4

import pytest
from fastapi import HTTPException

from sportalk.config import AuthSettings
from sportalk.interface.api.auth import (
    extract_token,
    optional_principal,
    require_principal,
)
from tests.conftest import make_token


class TestExtractToken:
    """Tests for extract_token."""

    def test_prefers_bearer_header(self):
        assert extract_token("Bearer abc", "cookie") == "abc"

    def test_falls_back_to_cookie(self):
        assert extract_token(None, "cookie") == "cookie"
        assert extract_token("Basic xyz", "cookie") == "cookie"

    def test_nothing_sent(self):
        assert extract_token(None, None) is None


class TestRequirePrincipal:
    """Tests for require_principal."""

    def test_valid_token_returns_user_id(self):
        """A signed token should resolve to its user_id claim."""
        settings = AuthSettings()
        user_id = str(uuid4())

        principal = require_principal(
            f"Bearer {make_token(user_id, settings)}", None, settings
        )

        assert principal == user_id

    def test_missing_token_is_401(self):
        """No credentials should be rejected."""
        with pytest.raises(HTTPException) as exc_info:
            require_principal(None, None, AuthSettings())

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail["code"] == "unauthenticated"

    def test_expired_token_is_401(self):
        """Expired tokens should be rejected."""
        settings = AuthSettings()
        token = make_token(uuid4(), settings, expires_in=timedelta(minutes=-5))

        with pytest.raises(HTTPException) as exc_info:
            require_principal(None, token, settings)

        assert exc_info.value.status_code == 401

    def test_wrong_secret_is_401(self):
        """Tokens signed with another key should be rejected."""
        token = make_token(uuid4(), AuthSettings(jwt_secret="other-secret"))

        with pytest.raises(HTTPException):
            require_principal(f"Bearer {token}", None, AuthSettings())

    def test_optional_principal_ignores_bad_token(self):
        """Optional resolution should treat a bad token as anonymous."""
        assert optional_principal("Bearer garbage", None, AuthSettings()) is None
