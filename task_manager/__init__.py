"""Flask application factory with OpenTelemetry instrumentation."""

import logging
import os

from flask import Flask

from task_manager.extensions import cors, db, ma


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    if config_class is None:
        from task_manager.config import Config

        config_class = Config

    telemetry_enabled = not os.getenv("OTEL_SDK_DISABLED")

    # Initialize telemetry BEFORE creating Flask app
    if telemetry_enabled:
        from task_manager.telemetry import setup_telemetry

        setup_telemetry(
            service_name=config_class.SERVICE_NAME,
            service_version=config_class.SERVICE_VERSION,
            otlp_endpoint=config_class.OTLP_ENDPOINT,
        )

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Instrument Flask app (needed for Gunicorn worker forks)
    if telemetry_enabled:
        from task_manager.telemetry import instrument_flask_app

        instrument_flask_app(app)

    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, resources={r"/api/.*": {"origins": app.config["CORS_ORIGINS"]}})

    from task_manager.routes import docs_bp, health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(docs_bp)
    app.register_blueprint(tasks_bp)

    from task_manager.errors import register_error_handlers

    register_error_handlers(app)

    if telemetry_enabled:
        from task_manager.middleware import register_metrics_middleware
        from task_manager.telemetry import get_otel_log_handler

        register_metrics_middleware(app)

        # Attach OTel log handler after app setup
        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    _configure_logging()

    with app.app_context():
        db.create_all()

    return app


def _configure_logging() -> None:
    """Configure logging for the application."""
    # App loggers propagate to root, where the OTel handler is
    logging.getLogger("task_manager").setLevel(logging.DEBUG)
    logging.getLogger("task_manager").propagate = True

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
