import logging
import os

from .repository.stop_repository import StopRepository
from .service.prediction_service import PredictionService, DEFAULT_PREDICTIONS_PER_ROUTE

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("TIMETABLE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_prediction_service(repository: StopRepository) -> PredictionService:
    """Wire logging, environment settings and the prediction service around a repository."""
    configure_logging()

    predictions_per_route = int(os.environ.get("TIMETABLE_PREDICTIONS_PER_ROUTE", DEFAULT_PREDICTIONS_PER_ROUTE))
    prediction_service = PredictionService(repository, default_predictions_per_route=predictions_per_route)

    logger.info(f"Prediction service ready ({prediction_service.schedule_table.stop_count} stops, "
                f"{prediction_service.schedule_table.route_count} routes, "
                f"{predictions_per_route} predictions per route)")

    return prediction_service
