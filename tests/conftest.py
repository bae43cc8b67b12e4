"""Shared pytest fixtures for all tests."""

import pytest
from fastapi.testclient import TestClient

from fakes import (
    FakeClock,
    FakeDocumentCollection,
    FakeJobQueue,
    FakeKeyValueStore,
    FlakyBlobStore,
)
from files_manager.container import ServiceContainer
from files_manager.main import create_app


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Use the cheapest bcrypt cost so hashing does not dominate test time."""
    monkeypatch.setattr("files_manager.config.BCRYPT_ROUNDS", 4)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage_dir(tmp_path):
    """
    Blob directory for a test.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path string of a directory that does not exist yet
    """
    return str(tmp_path / "files")


@pytest.fixture
def container(clock, storage_dir):
    """
    Container wired to in-memory stores and a temporary blob directory.
    """
    return ServiceContainer(
        key_value_store=FakeKeyValueStore(clock),
        users=FakeDocumentCollection(),
        files=FakeDocumentCollection(),
        job_queue=FakeJobQueue(),
        blob_store=FlakyBlobStore(),
        storage_dir=storage_dir,
    )


@pytest.fixture
def user(container):
    """A registered user with password ``secret``."""
    return container.auth_service.register_user("bob@example.com", "secret")


@pytest.fixture
def other_user(container):
    return container.auth_service.register_user("eve@example.com", "hunter2")


@pytest.fixture
def client(container, monkeypatch):
    """
    Create FastAPI test client with the orphan sweeper disabled.
    """
    monkeypatch.setattr("files_manager.cleanup_task.ORPHAN_SWEEP_INTERVAL", 0)
    with TestClient(create_app(container)) as test_client:
        yield test_client
