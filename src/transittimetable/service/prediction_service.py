import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..model.arrival_prediction import ArrivalPrediction
from ..model.route import Route
from ..model.schedule_table import ScheduleTable
from ..model.stop import Stop
from ..model.stop_prediction import StopPrediction
from ..repository.stop_repository import StopRepository
from ..service.schedule_builder import build_schedule_table

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = 60
DEFAULT_PREDICTIONS_PER_ROUTE = 2


def minutes_until_arrival(scheduled_minute: int, current_minute: int) -> int:
    """Minutes from current_minute to the next occurrence of scheduled_minute."""
    # An arrival at the current minute has already left
    if scheduled_minute <= current_minute:
        scheduled_minute += MINUTES_PER_HOUR
    return scheduled_minute - current_minute


class PredictionService:
    def __init__(self, repository: StopRepository, schedule_table: Optional[ScheduleTable] = None,
                 default_predictions_per_route: int = DEFAULT_PREDICTIONS_PER_ROUTE):
        self.repository = repository
        self.default_predictions_per_route = default_predictions_per_route

        if schedule_table is None:
            schedule_table = build_schedule_table(repository.get_stops(), repository.get_routes())
        self.schedule_table = schedule_table

    def get_all_stops_info(self, plan_id: Optional[int] = None) -> List[Stop]:
        return self.repository.get_stops(plan_id)

    def get_stop_info(self, stop_id: int) -> Stop:
        return self.repository.get_stop(stop_id)

    def predict_for_stop(self, stop: Stop, routes: Iterable[Route], request_time: datetime,
                         predictions_per_route: int) -> List[ArrivalPrediction]:
        """
        Predict the next arrivals of each route at a stop.

        Only the minute of the hour is taken from request_time, the schedule
        repeats every hour.

        :param stop: Stop to predict for
        :param routes: Routes to include, predictions keep this order
        :param request_time: Moment the prediction is made for
        :param predictions_per_route: Maximum number of arrivals per route
        :return: One ArrivalPrediction per route
        """
        current_minute = request_time.minute
        count = max(predictions_per_route, 0)
        predictions = []

        for route in routes:
            etas = sorted(
                minutes_until_arrival(arrival, current_minute)
                for arrival in self.schedule_table.arrivals_for(stop.id, route.id)
            )
            logger.debug(f"Stop {stop.id} route {route.id} at minute {current_minute}: {etas}")

            predictions.append(ArrivalPrediction(route=route, minutes_until_arrival=etas[:count]))

        return predictions

    def predict_for_all_stops(self, routes: Iterable[Route], request_time: datetime,
                              predictions_per_route: int) -> List[StopPrediction]:
        routes = list(routes)
        stop_predictions = []

        for stop in self.get_all_stops_info():
            arrival_predictions = self.predict_for_stop(stop, routes, request_time, predictions_per_route)
            stop_predictions.append(StopPrediction(stop=stop, arrival_predictions=arrival_predictions))

        return stop_predictions

    def _resolve_request(self, predictions_per_route: Optional[int],
                         request_time: Optional[datetime]) -> tuple[int, datetime]:
        if predictions_per_route is None:
            predictions_per_route = self.default_predictions_per_route
        if request_time is None:
            request_time = datetime.now()
        return predictions_per_route, request_time

    def get_stop_predictions(self, stop_id: int, predictions_per_route: Optional[int] = None,
                             request_time: Optional[datetime] = None) -> List[ArrivalPrediction]:
        try:
            predictions_per_route, request_time = self._resolve_request(predictions_per_route, request_time)
            logger.info(f"Predicting {predictions_per_route} arrivals per route for stop {stop_id} "
                        f"at {request_time.isoformat()}")

            stop = self.get_stop_info(stop_id)
            routes = self.repository.get_routes()

            return self.predict_for_stop(stop, routes, request_time, predictions_per_route)

        except Exception as e:
            logger.error(f"Error calculating predictions for stop {stop_id}: {e}")
            raise

    def get_all_stop_predictions(self, predictions_per_route: Optional[int] = None,
                                 request_time: Optional[datetime] = None) -> List[StopPrediction]:
        try:
            predictions_per_route, request_time = self._resolve_request(predictions_per_route, request_time)
            logger.info(f"Predicting {predictions_per_route} arrivals per route for all stops "
                        f"at {request_time.isoformat()}")

            routes = self.repository.get_routes()

            return self.predict_for_all_stops(routes, request_time, predictions_per_route)

        except Exception as e:
            logger.error(f"Error calculating predictions for all stops: {e}")
            raise
