"""Tests for the HTTP metrics middleware and error envelopes."""

from unittest.mock import MagicMock, patch

from task_manager.middleware import register_metrics_middleware


@patch("task_manager.middleware.metrics.get_meter")
def test_middleware_records_request_metrics(mock_get_meter, app, db):
    mock_counter = MagicMock()
    mock_histogram = MagicMock()
    mock_get_meter.return_value.create_counter.return_value = mock_counter
    mock_get_meter.return_value.create_histogram.return_value = mock_histogram

    register_metrics_middleware(app)
    response = app.test_client().get("/api/tasks/77")

    assert response.status_code == 404
    mock_counter.add.assert_called_once_with(
        1,
        {
            "method": "GET",
            "route": "/api/tasks/<int:task_id>",
            "operation": "tasks.get_task",
            "status": "404",
        },
    )
    duration, attributes = mock_histogram.record.call_args.args
    assert duration >= 0
    assert attributes["route"] == "/api/tasks/<int:task_id>"


@patch("task_manager.middleware.metrics.get_meter")
def test_middleware_skips_health_check(mock_get_meter, app, db):
    mock_counter = MagicMock()
    mock_get_meter.return_value.create_counter.return_value = mock_counter

    register_metrics_middleware(app)
    app.test_client().get("/api/health")

    mock_counter.add.assert_not_called()


def test_method_not_allowed_envelope(client, db):
    response = client.post("/api/tasks/1")

    assert response.status_code == 405
    assert response.get_json() == {"error": "Method not allowed", "status": 405}


@patch("task_manager.middleware.metrics.get_meter")
def test_middleware_skips_openapi_document(mock_get_meter, app, db):
    mock_counter = MagicMock()
    mock_get_meter.return_value.create_counter.return_value = mock_counter

    register_metrics_middleware(app)
    app.test_client().get("/api/openapi.json")

    mock_counter.add.assert_not_called()
