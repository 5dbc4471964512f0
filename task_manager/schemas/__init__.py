"""Marshmallow schemas for serialization and validation."""

from task_manager.schemas.task import (
    TaskRequestSchema,
    TaskSchema,
    TaskStatusUpdateSchema,
)


__all__ = [
    "TaskSchema",
    "TaskRequestSchema",
    "TaskStatusUpdateSchema",
]
