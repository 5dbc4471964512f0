"""Pytest fixtures for the task manager."""

import os

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from task_manager import create_app
    from task_manager.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from task_manager.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def task_payload():
    """Valid create/full-update request body."""
    return {
        "title": "Draft order",
        "description": "Prepare the draft order for the hearing",
        "status": "TODO",
        "dueDateTime": "2026-02-01T10:00:00",
    }
