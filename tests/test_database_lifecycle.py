import pytest
from fastapi.testclient import TestClient

from app.db.session import Database


def test_database_requires_connect():
    db = Database("sqlite:///:memory:")
    assert db.is_connected is False
    with pytest.raises(RuntimeError):
        db.session()


def test_app_connects_and_closes_database(tmp_path):
    from main import create_app

    database = Database(f"sqlite:///{tmp_path / 'lifecycle.db'}", create_tables=True)
    app = create_app(database)

    with TestClient(app) as client:
        assert database.is_connected is True
        resp = client.post("/api/category", json={
            "name": "Beverages",
            "image": "b.png",
            "description": "Drinks",
            "taxApplicable": False,
        })
        assert resp.status_code == 201, resp.text
        assert client.get("/api/categories").status_code == 200

    assert database.is_connected is False


def test_sqlite_connections_enforce_foreign_keys(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'fk.db'}")
    database.connect()
    try:
        with database.engine.connect() as conn:
            assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    finally:
        database.close()
