"""Task CRUD endpoints."""

import logging

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from task_manager.errors import validation_error_response
from task_manager.extensions import db
from task_manager.repositories import SqlAlchemyTaskRepository
from task_manager.schemas import TaskRequestSchema, TaskStatusUpdateSchema
from task_manager.services import TaskService
from task_manager.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

task_status_changes = meter.create_counter(
    name="tasks.status_changes",
    description="Task status updates",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def _task_service() -> TaskService:
    return TaskService(SqlAlchemyTaskRepository(db.session))


@tasks_bp.route("/", methods=["GET"], strict_slashes=False)
def list_tasks():
    """List all tasks.

    Returns:
        JSON array of task views, empty when there are no tasks.
    """
    return jsonify(_task_service().get_all_tasks())


@tasks_bp.route("/", methods=["POST"], strict_slashes=False)
def create_task():
    """Create a new task.

    Returns:
        JSON response with created task.
    """
    with tracer.start_as_current_span("task.create") as span:
        # Validate request data
        try:
            data = TaskRequestSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            span.set_attribute("task.validation", "failed")
            return validation_error_response(err.messages)

        task = _task_service().create_task(data)

        span.set_attribute("task.id", task["id"])
        tasks_created.add(1, {"status": task["status"]})

        return jsonify(task), 201


@tasks_bp.route("/<int:task_id>", methods=["GET"])
def get_task(task_id: int):
    """Get a single task by id.

    Args:
        task_id: Task id.

    Returns:
        JSON response with task data.
    """
    return jsonify(_task_service().get_task_by_id(task_id))


@tasks_bp.route("/<int:task_id>/status", methods=["PATCH"])
def update_task_status(task_id: int):
    """Change only the status of a task.

    Args:
        task_id: Task id.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.update_status") as span:
        span.set_attribute("task.id", task_id)

        try:
            data = TaskStatusUpdateSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            span.set_attribute("task.validation", "failed")
            return validation_error_response(err.messages)

        task = _task_service().update_task_status(task_id, data["status"])

        task_status_changes.add(1, {"status": task["status"]})

        return jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Replace every editable field of a task.

    Args:
        task_id: Task id.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)

        try:
            data = TaskRequestSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            span.set_attribute("task.validation", "failed")
            return validation_error_response(err.messages)

        task = _task_service().update_task(task_id, data)

        return jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int):
    """Delete a task.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)

        _task_service().delete_task(task_id)

        tasks_deleted.add(1)

        return "", 204
