"""Tests for the health check and the request log."""

import shutil
import sqlite3


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["data_available"] is True


def test_health_without_data_dir(client, data_paths):
    shutil.rmtree(data_paths.data_dir)
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["error"] == "Data directory not found"


def test_unknown_api_route(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def _logged(tmp_path):
    conn = sqlite3.connect(tmp_path / "db" / "requests.db")
    try:
        return conn.execute(
            "SELECT endpoint, method, query, status_code, error_code FROM api_requests ORDER BY id"
        ).fetchall()
    finally:
        conn.close()


def test_api_requests_are_logged(client, tmp_path):
    client.get("/health")
    client.get("/api/guides", params={"q": "vpn"})
    client.get("/api/guides/missing/content")

    assert _logged(tmp_path) == [
        ("/api/guides", "GET", "q=vpn", 200, None),
        ("/api/guides/missing/content", "GET", None, 404, "NOT_FOUND"),
    ]


def test_unwritable_request_log_does_not_fail_requests(client, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    client.app.state.request_log_db = blocker / "db" / "requests.db"

    response = client.get("/api/guides")
    assert response.status_code == 200
    assert response.json()["guides"] == []
