import os
import sys

from fastapi.testclient import TestClient

# Ensure project root on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def test_correlation_id_header_present_on_404():
    from main import app

    client = TestClient(app)

    resp = client.get("/this-path-does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}
    assert "X-Correlation-ID" in resp.headers

    client.close()


def test_incoming_correlation_id_is_echoed():
    from main import app

    client = TestClient(app)

    resp = client.get("/", headers={"X-Correlation-ID": "abc-123"})
    assert resp.status_code == 200
    assert resp.text == "Server is running!"
    assert resp.headers["X-Correlation-ID"] == "abc-123"

    client.close()
