"""HTTP metrics middleware."""

import time

from flask import Flask, g, request

from task_manager.telemetry import get_meter


def register_metrics_middleware(app: Flask) -> None:
    """Register HTTP metrics middleware on Flask app.

    Requests to paths in TELEMETRY_EXCLUDED_PATHS are not recorded.

    Args:
        app: Flask application instance.
    """
    meter = get_meter(__name__)

    http_requests_total = meter.create_counter(
        name="http_requests_total",
        description="Total HTTP requests",
        unit="1",
    )

    http_request_duration = meter.create_histogram(
        name="http_request_duration_ms",
        description="HTTP request duration in milliseconds",
        unit="ms",
    )

    @app.before_request
    def before_request() -> None:
        g.request_start_time = time.perf_counter()

    excluded_paths = frozenset(app.config.get("TELEMETRY_EXCLUDED_PATHS", ()))

    @app.after_request
    def after_request(response):
        if request.path in excluded_paths:
            return response

        start_time = getattr(g, "request_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0

        # Route pattern keeps task ids out of metric labels
        route = request.url_rule.rule if request.url_rule else request.path

        attributes = {
            "method": request.method,
            "route": route,
            # Blueprint endpoint, e.g. "tasks.update_task_status"
            "operation": request.endpoint or "unmatched",
            "status": str(response.status_code),
        }

        http_requests_total.add(1, attributes)
        http_request_duration.record(duration_ms, attributes)

        return response
