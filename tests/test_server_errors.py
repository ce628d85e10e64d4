import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.dependencies.database import get_db
from app.services.category_services import CategoryService


class _UnavailableSession:
    """Session stand-in whose every statement fails as if the database were down."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is unavailable"))

    query = add = flush = refresh = commit = execute = _fail

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


@pytest.fixture
def broken_session():
    return _UnavailableSession()


@pytest.fixture
def broken_client(broken_session):
    from main import app

    def _override_get_db():
        yield broken_session

    app.dependency_overrides[get_db] = _override_get_db
    test_client = TestClient(app)
    yield test_client

    test_client.close()
    app.dependency_overrides.clear()


def test_failed_read_returns_500_with_correlation_id(broken_client):
    resp = broken_client.get("/api/categories", headers={"X-Correlation-ID": "read-1"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Something went wrong"}
    assert resp.headers["X-Correlation-ID"] == "read-1"


def test_failed_lookup_returns_500(broken_client):
    resp = broken_client.get("/api/item/search", params={"name": "tea"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Something went wrong"}
    assert "X-Correlation-ID" in resp.headers


def test_failed_write_returns_500_and_rolls_back(broken_client, broken_session):
    resp = broken_client.post("/api/category", json={
        "name": "Beverages",
        "image": "b.png",
        "description": "Drinks",
        "taxApplicable": False,
    })
    assert resp.status_code == 500
    assert resp.json() == {"message": "Something went wrong"}
    assert "X-Correlation-ID" in resp.headers
    assert broken_session.rolled_back


def test_service_without_repository_is_a_wiring_error():
    with pytest.raises(RuntimeError, match="category_repo is required for CategoryService"):
        CategoryService(correlation_id="wiring")
