"""Service modules."""

from task_manager.services.task_service import TaskService


__all__ = ["TaskService"]
