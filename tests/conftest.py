import pytest
from fastapi.testclient import TestClient

from diary_api.main import create_app
from diary_api.api_v1.deps import get_repository
from tests.fakes import FakeDocumentRepository


@pytest.fixture
def repository():
    return FakeDocumentRepository()


@pytest.fixture
def app(repository):
    app = create_app()
    app.dependency_overrides[get_repository] = lambda: repository
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    # Not entered as a context manager, so the lifespan never opens a real database
    return TestClient(app)
