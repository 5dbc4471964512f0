"""Tests for task schemas."""

from datetime import datetime

import pytest
from marshmallow import ValidationError

from task_manager.models import Task, TaskStatus
from task_manager.schemas import TaskRequestSchema, TaskSchema, TaskStatusUpdateSchema


class TestTaskRequestSchema:
    def test_load_valid(self):
        data = TaskRequestSchema().load(
            {
                "title": "Draft order",
                "description": "",
                "status": "IN_PROGRESS",
                "dueDateTime": "2026-02-01T10:00:00",
            }
        )

        assert data == {
            "title": "Draft order",
            "description": "",
            "status": TaskStatus.IN_PROGRESS,
            "due_date_time": datetime(2026, 2, 1, 10, 0, 0),
        }

    def test_description_defaults_to_none(self):
        data = TaskRequestSchema().load(
            {"title": "Draft order", "status": "TODO", "dueDateTime": "2026-02-01T10:00:00"}
        )
        assert data["description"] is None

    def test_null_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            TaskRequestSchema().load({"title": None, "status": None, "dueDateTime": None})

        assert exc_info.value.messages == {
            "title": ["Title is required"],
            "status": ["Status is required"],
            "dueDateTime": ["Due date is required"],
        }

    def test_title_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            TaskRequestSchema().load(
                {"title": "x" * 256, "status": "TODO", "dueDateTime": "2026-02-01T10:00:00"}
            )
        assert "title" in exc_info.value.messages

    def test_status_is_case_sensitive(self):
        with pytest.raises(ValidationError):
            TaskStatusUpdateSchema().load({"status": "completed"})


def test_task_view_fields():
    task = Task(
        id=3,
        title="Draft order",
        description=None,
        status=TaskStatus.COMPLETED,
        due_date_time=datetime(2026, 2, 1, 10, 0, 0),
        created_at=datetime(2026, 1, 1, 9, 0, 0),
        updated_at=datetime(2026, 1, 2, 9, 0, 0),
    )

    assert TaskSchema().dump(task) == {
        "id": 3,
        "title": "Draft order",
        "description": None,
        "status": "COMPLETED",
        "dueDateTime": "2026-02-01T10:00:00",
        "createdAt": "2026-01-01T09:00:00",
        "updatedAt": "2026-01-02T09:00:00",
    }
