"""SQLAlchemy-backed task store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from task_manager.models import Task


logger = logging.getLogger(__name__)

# Ids are signed 64-bit; anything outside cannot be stored
MAX_TASK_ID = 2**63 - 1


def _in_id_range(task_id: int) -> bool:
    return 0 < task_id <= MAX_TASK_ID


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form tasks are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlAlchemyTaskRepository:
    """Task store on a SQLAlchemy session.

    Mutations are flushed, not committed; ``unit_of_work()`` owns the commit.
    Lookups made with ``for_update=True`` take a row lock on databases that
    support ``SELECT ... FOR UPDATE`` so an existence check stays valid until
    the unit of work ends.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def unit_of_work(self) -> Iterator[None]:
        try:
            yield
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

    def insert(self, task: Task) -> Task:
        if task.id is not None:
            raise ValueError(f"Task {task.id} is already persisted")
        return self.save(task)

    def save(self, task: Task) -> Task:
        now = utcnow()
        if task.id is None:
            task.created_at = now
            task.updated_at = now
            self._session.add(task)
        else:
            # Never move updated_at backwards, even if the clock does.
            task.updated_at = max(now, task.updated_at)
        self._session.flush()
        logger.debug("Task saved: %s", task.id)
        return task

    def find_by_id(self, task_id: int, for_update: bool = False) -> Task | None:
        if not _in_id_range(task_id):
            return None
        stmt = select(Task).where(Task.id == task_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self._session.execute(stmt).scalar_one_or_none()

    def find_all(self) -> list[Task]:
        return list(self._session.execute(select(Task).order_by(Task.id)).scalars())

    def exists_by_id(self, task_id: int, for_update: bool = False) -> bool:
        if not _in_id_range(task_id):
            return False
        stmt = select(Task.id).where(Task.id == task_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self._session.execute(stmt).scalar_one_or_none() is not None

    def delete_by_id(self, task_id: int) -> None:
        if not _in_id_range(task_id):
            return
        self._session.execute(delete(Task).where(Task.id == task_id))
        logger.debug("Task deleted: %s", task_id)
