"""Task lifecycle service.

The service is the only component that mutates tasks. It holds no state of
its own beyond the store it was built with, so every call is a function of
(store, request) and an in-memory store can replace the database in tests.
"""

import logging
from typing import Any

from task_manager.errors import TaskNotFoundError
from task_manager.models import Task, TaskStatus
from task_manager.repositories import TaskRepository
from task_manager.schemas import TaskSchema


logger = logging.getLogger(__name__)

TaskView = dict[str, Any]

_task_schema = TaskSchema()
_tasks_schema = TaskSchema(many=True)


class TaskService:
    """Business rules for creating, reading, updating and deleting tasks.

    Request data passed in is expected to have been loaded through
    ``TaskRequestSchema``; the service does not re-validate it.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def create_task(self, data: dict[str, Any]) -> TaskView:
        """Persist a new task.

        Args:
            data: Validated title, description, status and due_date_time.

        Returns:
            View of the stored task, including its id and timestamps.
        """
        task = Task()
        task.apply(data)
        with self.repository.unit_of_work():
            task = self.repository.insert(task)
            view = _task_schema.dump(task)
        logger.info("Task created: %s", view["id"])
        return view

    def get_task_by_id(self, task_id: int) -> TaskView:
        """Return one task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        return _task_schema.dump(self._get_or_raise(task_id))

    def get_all_tasks(self) -> list[TaskView]:
        """Return every task in store order; an empty store gives ``[]``."""
        return _tasks_schema.dump(self.repository.find_all())

    def update_task_status(self, task_id: int, status: TaskStatus) -> TaskView:
        """Replace only the status of a task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self.repository.unit_of_work():
            task = self._get_or_raise(task_id, for_update=True)
            previous = task.status
            task.status = status
            task = self.repository.save(task)
            view = _task_schema.dump(task)
        logger.info("Task %s status changed: %s -> %s", task_id, previous.name, status.name)
        return view

    def update_task(self, task_id: int, data: dict[str, Any]) -> TaskView:
        """Replace title, description, status and due date of a task.

        This is a full replace: an optional field missing from ``data`` is
        cleared rather than kept from the stored task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        with self.repository.unit_of_work():
            task = self._get_or_raise(task_id, for_update=True)
            task.apply(data)
            task = self.repository.save(task)
            view = _task_schema.dump(task)
        logger.info("Task updated: %s", task_id)
        return view

    def delete_task(self, task_id: int) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: If no task has this id; nothing is changed.
        """
        with self.repository.unit_of_work():
            if not self.repository.exists_by_id(task_id, for_update=True):
                raise TaskNotFoundError(task_id)
            self.repository.delete_by_id(task_id)
        logger.info("Task deleted: %s", task_id)

    def _get_or_raise(self, task_id: int, for_update: bool = False) -> Task:
        task = self.repository.find_by_id(task_id, for_update=for_update)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
