# tests/test_stop_repository.py
import pytest
from pydantic import ValidationError

from transittimetable.model.stop import Stop
from transittimetable.repository.stop_repository import StopNotFoundError


def test_get_stops_keeps_catalog_order(repository):
    assert [s.id for s in repository.get_stops()] == [1, 2, 3]


def test_plan_filter(repository):
    assert [s.id for s in repository.get_stops(7)] == [1, 3]
    assert repository.get_stops(8) == []


def test_get_stop(repository):
    assert repository.get_stop(3).name == "Stop 3"
    with pytest.raises(StopNotFoundError):
        repository.get_stop(4)


def test_returned_lists_are_copies(repository):
    repository.get_routes().clear()
    repository.get_stops().clear()
    assert len(repository.get_routes()) == 2
    assert len(repository.get_stops()) == 3


def test_stops_are_immutable():
    stop = Stop(id=1, name="Main St")
    with pytest.raises(ValidationError):
        stop.name = "Other"


@pytest.mark.parametrize("stop_id", [0, -1])
def test_stop_ids_must_be_positive(stop_id):
    with pytest.raises(ValidationError):
        Stop(id=stop_id, name="Nowhere")
