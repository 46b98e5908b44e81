"""Unit tests for domain error to HTTP translation."""

import pytest

from sportalk.domain.error import (
    BadRequestError,
    ConflictError,
    InvalidRelationError,
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from sportalk.interface.error import domain_error_to_http, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (NotFoundError("Post", "1"), 404),
            (PermissionDeniedError("post", "1", "2"), 403),
            (InvalidRelationError("wrong post"), 422),
            (InvalidStatusTransitionError("1", "COMPLETED", "UPLOADING"), 409),
            (ConflictError("duplicate"), 409),
            (BadRequestError("self follow"), 400),
            (ValidationError("bad"), 422),
        ],
    )
    def test_maps_each_domain_error(self, error, expected):
        """Every domain error kind has a fixed status code."""
        assert status_for(error) == expected

    def test_http_detail_carries_code_and_message(self):
        """The response body should expose the error code and message."""
        exc = domain_error_to_http(NotFoundError("Post", "abc"), "Lookup failed")

        assert exc.status_code == 404
        assert exc.detail == {"code": "not_found", "message": "Post not found: abc"}
