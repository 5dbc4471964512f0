"""Task-related Marshmallow schemas."""

from datetime import timezone

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate

from task_manager.models import TaskStatus


def _not_blank(value: str) -> None:
    if not value or not value.strip():
        raise ValidationError("Title is required")


class TaskSchema(Schema):
    """Schema for the outbound task view."""

    id = fields.Int(dump_only=True)
    title = fields.Str()
    description = fields.Str(allow_none=True)
    status = fields.Enum(TaskStatus)
    due_date_time = fields.DateTime(data_key="dueDateTime", format="iso")
    created_at = fields.DateTime(data_key="createdAt", dump_only=True, format="iso")
    updated_at = fields.DateTime(data_key="updatedAt", dump_only=True, format="iso")


class TaskRequestSchema(Schema):
    """Schema for task creation and full-update validation."""

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(
        required=True,
        validate=[_not_blank, validate.Length(max=255)],
        error_messages={"required": "Title is required", "null": "Title is required"},
    )
    description = fields.Str(allow_none=True, load_default=None)
    status = fields.Enum(
        TaskStatus,
        required=True,
        error_messages={"required": "Status is required", "null": "Status is required"},
    )
    due_date_time = fields.NaiveDateTime(
        data_key="dueDateTime",
        required=True,
        timezone=timezone.utc,
        error_messages={"required": "Due date is required", "null": "Due date is required"},
    )


class TaskStatusUpdateSchema(Schema):
    """Schema for the status-only update."""

    class Meta:
        unknown = EXCLUDE

    status = fields.Enum(
        TaskStatus,
        required=True,
        error_messages={"required": "Status is required", "null": "Status is required"},
    )
