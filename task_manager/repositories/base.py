"""Task store port.

The service depends on this Protocol rather than on SQLAlchemy, so an
in-memory store can stand in for the database in tests.
"""

from contextlib import AbstractContextManager
from typing import Protocol

from task_manager.models import Task


class TaskRepository(Protocol):
    """Keyed, durable collection of tasks.

    The store owns id assignment and the ``created_at``/``updated_at``
    stamps. Check-then-mutate sequences must run inside ``unit_of_work()``
    so they commit or roll back as one unit.
    """

    def unit_of_work(self) -> AbstractContextManager[None]: ...

    def insert(self, task: Task) -> Task: ...

    def save(self, task: Task) -> Task: ...

    def find_by_id(self, task_id: int, for_update: bool = False) -> Task | None: ...

    def find_all(self) -> list[Task]: ...

    def exists_by_id(self, task_id: int, for_update: bool = False) -> bool: ...

    def delete_by_id(self, task_id: int) -> None: ...
