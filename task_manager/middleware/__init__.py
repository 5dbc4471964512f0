"""Middleware modules."""

from task_manager.middleware.metrics import register_metrics_middleware


__all__ = ["register_metrics_middleware"]
