import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path for 'app' imports
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.db import base as models_import  # noqa: F401 - ensure models are imported
from app.db.session import Database
from app.api.dependencies.database import get_db


@pytest.fixture
def database(tmp_path):
    # File-based SQLite so the app and the test share state across connections
    db = Database(f"sqlite:///{tmp_path / 'test_menu.db'}", create_tables=True)
    db.connect()
    yield db
    db.close()


@pytest.fixture
def client(database):
    from main import app

    def _override_get_db():
        yield from database.session_scope()

    app.dependency_overrides[get_db] = _override_get_db
    test_client = TestClient(app)
    yield test_client

    test_client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def category(client):
    resp = client.post("/api/category", json={
        "name": "Beverages",
        "image": "b.png",
        "description": "Drinks",
        "taxApplicable": True,
        "tax": 5,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def sub_category(client, category):
    resp = client.post("/api/subcategory", json={
        "name": "Hot",
        "image": "h.png",
        "description": "Hot drinks",
        "categoryId": category["id"],
    })
    assert resp.status_code == 200, resp.text
    return resp.json()
