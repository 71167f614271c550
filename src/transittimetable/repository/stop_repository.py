import logging
from typing import Dict, Iterable, List, Optional, Protocol

from ..model.route import Route
from ..model.stop import Stop

logger = logging.getLogger(__name__)


class StopNotFoundError(LookupError):
    def __init__(self, stop_id: int):
        super().__init__(f"Stop {stop_id} not found")
        self.stop_id = stop_id


class StopRepository(Protocol):
    """Read-only access to the stop and route catalogs"""

    def get_stops(self, plan_id: Optional[int] = None) -> List[Stop]:
        ...

    def get_stop(self, stop_id: int) -> Stop:
        ...

    def get_routes(self) -> List[Route]:
        ...


class InMemoryStopRepository:
    def __init__(self, stops: Iterable[Stop], routes: Iterable[Route],
                 plans: Optional[Dict[int, Iterable[int]]] = None):
        """
        Hold stop and route catalogs in memory.

        :param stops: Stops in the order they should be enumerated
        :param routes: Routes in the order they should be enumerated
        :param plans: Plan id -> ids of the stops served by that plan
        """
        self._stops = list(stops)
        self._routes = list(routes)
        self._stops_by_id = {stop.id: stop for stop in self._stops}
        self._plans = {plan_id: set(stop_ids) for plan_id, stop_ids in (plans or {}).items()}

    def get_stops(self, plan_id: Optional[int] = None) -> List[Stop]:
        if plan_id is None:
            return list(self._stops)

        stop_ids = self._plans.get(plan_id)
        if stop_ids is None:
            logger.debug(f"Unknown plan {plan_id}, no stops returned")
            return []

        return [stop for stop in self._stops if stop.id in stop_ids]

    def get_stop(self, stop_id: int) -> Stop:
        stop = self._stops_by_id.get(stop_id)
        if stop is None:
            raise StopNotFoundError(stop_id)
        return stop

    def get_routes(self) -> List[Route]:
        return list(self._routes)
