"""Tests for the health check endpoint."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_health_check(client, db):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert data["components"]["database"] == "healthy"
    assert data["service"]["name"] == "task-manager"


def test_health_check_database_down(client, db):
    with patch.object(
        db.session, "execute", side_effect=OperationalError("SELECT 1", {}, Exception("down"))
    ):
        response = client.get("/api/health")

    assert response.status_code == 503
    assert response.get_json()["components"]["database"] == "unhealthy"
