"""In-memory test doubles."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from itertools import count

from task_manager.models import Task
from task_manager.repositories import utcnow


_FIELDS = ("title", "description", "status", "due_date_time", "created_at", "updated_at")


class InMemoryTaskRepository:
    """Dict-backed TaskRepository.

    Ids come from a counter that is never rewound, so deleted ids are not
    reused. A failing unit of work restores the previous contents,
    including field values of tasks edited in place.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self.tasks: dict[int, Task] = {}
        self.clock = clock
        self.commits = 0
        self._ids = count(1)

    @contextmanager
    def unit_of_work(self) -> Iterator[None]:
        snapshot = {
            task_id: (task, {name: getattr(task, name) for name in _FIELDS})
            for task_id, task in self.tasks.items()
        }
        try:
            yield
        except Exception:
            # Undo in-place edits as well as inserts and deletes
            for task, values in snapshot.values():
                for name, value in values.items():
                    setattr(task, name, value)
            self.tasks = {task_id: task for task_id, (task, _) in snapshot.items()}
            raise
        self.commits += 1

    def insert(self, task: Task) -> Task:
        if task.id is not None:
            raise ValueError(f"Task {task.id} is already persisted")
        return self.save(task)

    def save(self, task: Task) -> Task:
        now = self.clock()
        if task.id is None:
            task.id = next(self._ids)
            task.created_at = now
            task.updated_at = now
        else:
            task.updated_at = max(now, task.updated_at)
        self.tasks[task.id] = task
        return task

    def find_by_id(self, task_id: int, for_update: bool = False) -> Task | None:
        return self.tasks.get(task_id)

    def find_all(self) -> list[Task]:
        return [self.tasks[task_id] for task_id in sorted(self.tasks)]

    def exists_by_id(self, task_id: int, for_update: bool = False) -> bool:
        return task_id in self.tasks

    def delete_by_id(self, task_id: int) -> None:
        self.tasks.pop(task_id, None)
