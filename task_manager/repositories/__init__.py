"""Task store implementations."""

from task_manager.repositories.base import TaskRepository
from task_manager.repositories.task_repository import SqlAlchemyTaskRepository, utcnow


__all__ = ["TaskRepository", "SqlAlchemyTaskRepository", "utcnow"]
