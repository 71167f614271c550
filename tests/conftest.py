import pytest

from transittimetable.model.route import Route
from transittimetable.model.stop import Stop
from transittimetable.repository.stop_repository import InMemoryStopRepository


@pytest.fixture
def make_stops():
    def _make(*ids):
        return [Stop(id=i, name=f"Stop {i}") for i in ids]
    return _make


@pytest.fixture
def make_routes():
    def _make(*ids):
        return [Route(id=i, name=f"Route {i}") for i in ids]
    return _make


@pytest.fixture
def stops(make_stops):
    return make_stops(1, 2, 3)


@pytest.fixture
def routes(make_routes):
    return make_routes(1, 2)


@pytest.fixture
def repository(stops, routes):
    return InMemoryStopRepository(stops, routes, plans={7: [3, 1]})
