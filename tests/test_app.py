# tests/test_app.py
from datetime import datetime

from transittimetable.app import create_prediction_service


def test_create_prediction_service_reads_environment(monkeypatch, repository):
    monkeypatch.setenv("TIMETABLE_PREDICTIONS_PER_ROUTE", "4")
    monkeypatch.setenv("TIMETABLE_LOG_LEVEL", "debug")

    service = create_prediction_service(repository)

    assert service.default_predictions_per_route == 4
    assert service.schedule_table.stop_count == 3
    assert service.schedule_table.route_count == 2
    predictions = service.get_stop_predictions(1, request_time=datetime(2025, 1, 1, 12, 0))
    assert predictions[0].minutes_until_arrival == [15, 30, 45, 60]


def test_create_prediction_service_defaults(monkeypatch, repository):
    monkeypatch.delenv("TIMETABLE_PREDICTIONS_PER_ROUTE", raising=False)
    service = create_prediction_service(repository)
    assert service.default_predictions_per_route == 2
