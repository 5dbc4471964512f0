"""OpenAPI document for the task API, generated from the marshmallow schemas."""

from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from marshmallow import Schema, fields

from task_manager.schemas import TaskRequestSchema, TaskSchema, TaskStatusUpdateSchema


class ErrorSchema(Schema):
    """Error envelope returned for every failed request."""

    error = fields.Str(required=True)
    status = fields.Int(required=True)
    errors = fields.Dict(keys=fields.Str(), values=fields.List(fields.Str()))
    trace_id = fields.Str()


def _json(schema, description: str) -> dict:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


_NOT_FOUND = _json(ErrorSchema, "Task not found")
_INVALID = _json(ErrorSchema, "Invalid request data")

_TASK_ID = {
    "in": "path",
    "name": "task_id",
    "description": "Task id",
    "required": True,
    "schema": {"type": "integer", "format": "int64", "minimum": 1},
}


def build_spec(title: str, version: str) -> APISpec:
    """Describe the task endpoints.

    Args:
        title: API title, normally the service name.
        version: API version.

    Returns:
        Populated APISpec.
    """
    spec = APISpec(
        title=title,
        version=version,
        openapi_version="3.0.3",
        info={"description": "Manage caseworker tasks"},
        plugins=[MarshmallowPlugin()],
    )
    spec.tag({"name": "Task Management", "description": "APIs for managing caseworker tasks"})

    spec.components.schema("Task", schema=TaskSchema)
    spec.components.schema("TaskRequest", schema=TaskRequestSchema)
    spec.components.schema("TaskStatusUpdate", schema=TaskStatusUpdateSchema)
    spec.components.schema("Error", schema=ErrorSchema)

    tags = ["Task Management"]

    spec.path(
        path="/api/tasks",
        operations={
            "get": {
                "tags": tags,
                "summary": "Get all tasks",
                "operationId": "getAllTasks",
                "responses": {
                    "200": _json({"type": "array", "items": TaskSchema}, "Tasks retrieved"),
                },
            },
            "post": {
                "tags": tags,
                "summary": "Create a new task",
                "operationId": "createTask",
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": TaskRequestSchema}},
                },
                "responses": {
                    "201": _json(TaskSchema, "Task created"),
                    "400": _INVALID,
                },
            },
        },
    )

    spec.path(
        path="/api/tasks/{task_id}",
        parameters=[_TASK_ID],
        operations={
            "get": {
                "tags": tags,
                "summary": "Get task by id",
                "operationId": "getTaskById",
                "responses": {
                    "200": _json(TaskSchema, "Task found"),
                    "404": _NOT_FOUND,
                },
            },
            "put": {
                "tags": tags,
                "summary": "Replace every editable field of a task",
                "operationId": "updateTask",
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": TaskRequestSchema}},
                },
                "responses": {
                    "200": _json(TaskSchema, "Task updated"),
                    "400": _INVALID,
                    "404": _NOT_FOUND,
                },
            },
            "delete": {
                "tags": tags,
                "summary": "Delete a task",
                "operationId": "deleteTask",
                "responses": {
                    "204": {"description": "Task deleted"},
                    "404": _NOT_FOUND,
                },
            },
        },
    )

    spec.path(
        path="/api/tasks/{task_id}/status",
        parameters=[_TASK_ID],
        operations={
            "patch": {
                "tags": tags,
                "summary": "Update task status",
                "operationId": "updateTaskStatus",
                "requestBody": {
                    "required": True,
                    "content": {"application/json": {"schema": TaskStatusUpdateSchema}},
                },
                "responses": {
                    "200": _json(TaskSchema, "Task status updated"),
                    "400": _INVALID,
                    "404": _NOT_FOUND,
                },
            },
        },
    )

    return spec
