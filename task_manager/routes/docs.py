"""OpenAPI document endpoint."""

from flask import Blueprint, current_app, jsonify

from task_manager.openapi import build_spec


docs_bp = Blueprint("docs", __name__, url_prefix="/api")


@docs_bp.route("/openapi.json", methods=["GET"])
def openapi_document():
    """Serve the OpenAPI 3 description of the task endpoints."""
    spec = build_spec(
        title=current_app.config.get("SERVICE_NAME", "task-manager"),
        version=current_app.config.get("SERVICE_VERSION", "1.0.0"),
    )
    return jsonify(spec.to_dict())
