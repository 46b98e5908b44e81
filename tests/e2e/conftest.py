"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from sportalk.domain.repository import UserRepository
from sportalk.interface.api.app import create_app
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    """Fresh all-mock container, shared by every request of one test."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client running the app on the container's event loop."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def seed_user(client, container):
    """Store a user the way the identity layer would at registration."""

    async def _save(nickname):
        repo = await container.get(UserRepository)
        return await repo.save(make_user(nickname))

    def _seed(nickname: str | None = None):
        return client.portal.call(_save, nickname)

    return _seed
