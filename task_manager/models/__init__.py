"""Database models."""

from task_manager.models.task import Task, TaskStatus


__all__ = ["Task", "TaskStatus"]
