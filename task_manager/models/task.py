"""Task model."""

import enum
from datetime import datetime

from sqlalchemy import BigInteger, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_manager.extensions import db


class TaskStatus(enum.Enum):
    """Lifecycle label of a task. Any member may follow any other."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Task(db.Model):
    """Caseworker task model.

    ``id``, ``created_at`` and ``updated_at`` are owned by the task store
    and are stamped explicitly on save rather than through column defaults.
    """

    __tablename__ = "tasks"
    # Deleted ids must never be handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    # 64-bit key; SQLite only autoincrements a plain INTEGER primary key
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(TaskStatus, name="task_status", native_enum=False, length=32), nullable=False
    )
    due_date_time: Mapped[datetime] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime] = mapped_column(nullable=False)

    def apply(self, data: dict) -> None:
        """Overwrite every client-editable field from validated request data.

        Optional fields missing from ``data`` are cleared, not preserved.

        Args:
            data: Loaded ``TaskRequestSchema`` payload.
        """
        self.title = data["title"]
        self.description = data.get("description")
        self.status = data["status"]
        self.due_date_time = data["due_date_time"]

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.status.name if self.status else None}>"
