from typing import List

from pydantic import BaseModel

from ..model.arrival_prediction import ArrivalPrediction
from ..model.stop import Stop


class StopPrediction(BaseModel):
    stop: Stop
    arrival_predictions: List[ArrivalPrediction]
