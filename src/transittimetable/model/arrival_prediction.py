from typing import List

from pydantic import BaseModel

from ..model.route import Route


class ArrivalPrediction(BaseModel):
    route: Route
    minutes_until_arrival: List[int]  # ascending, at most predictions_per_route items
