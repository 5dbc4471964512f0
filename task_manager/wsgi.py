"""WSGI entry point, e.g. ``gunicorn task_manager.wsgi:app``."""

from task_manager import create_app


app = create_app()
