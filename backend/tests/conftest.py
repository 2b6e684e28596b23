import pytest
from fastapi.testclient import TestClient

from fakes import BrokenFirestore, FakeFirestore
from shopco.config import get_db
from shopco.main import app


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def test_client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_db] = lambda: BrokenFirestore()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
