"""Error types and handlers with OpenTelemetry trace context."""

import logging

from flask import Flask, jsonify
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from task_manager.extensions import db


logger = logging.getLogger(__name__)


class TaskNotFoundError(Exception):
    """Raised when an operation addresses a task id that is not persisted."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found with id: {task_id}")


def error_response(message: str, status_code: int, **extra) -> tuple:
    """Create error response with trace context.

    Args:
        message: Error message.
        status_code: HTTP status code.
        **extra: Additional fields merged into the body.

    Returns:
        Tuple of (response, status_code).
    """
    response = {
        "error": message,
        "status": status_code,
        **extra,
    }

    # Add trace ID for debugging
    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        response["trace_id"] = format(span_context.trace_id, "032x")

    return jsonify(response), status_code


def validation_error_response(messages: dict) -> tuple:
    """Create a 400 response carrying per-field validation messages."""
    return error_response("Validation failed", 400, errors=messages)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(TaskNotFoundError)
    def task_not_found(error: TaskNotFoundError):
        logger.info("Task not found: %s", error.task_id)
        return error_response(str(error), 404)

    @app.errorhandler(SQLAlchemyError)
    def store_failure(error: SQLAlchemyError):
        db.session.rollback()
        logger.error("Task store failure", exc_info=error)
        return error_response("Internal server error", 500)

    @app.errorhandler(400)
    def bad_request(error):
        return error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        return error_response("Internal server error", 500)
