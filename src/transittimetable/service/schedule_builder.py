import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from ..model.route import Route
from ..model.schedule_table import ScheduleTable
from ..model.stop import Stop

logger = logging.getLogger(__name__)

BASE_ARRIVAL_MINUTES = (0, 15, 30, 45)
OFFSET_STEP_MINUTES = 2


class InvalidCatalogError(ValueError):
    """Raised when stop or route identifiers are not a contiguous 1-based sequence"""

    def __init__(self, catalog: str, message: str):
        super().__init__(f"Invalid {catalog} catalog: {message}")
        self.catalog = catalog


def _validate_identifiers(catalog: str, identifiers: Sequence[int]) -> None:
    """
    Check that sorted identifiers are exactly 1..len(identifiers).

    :param catalog: Catalog name used in the error message ("stop" or "route")
    :param identifiers: Identifiers sorted ascending
    :raises InvalidCatalogError: On non-positive, duplicate or missing identifiers
    """
    non_positive = [i for i in identifiers if i <= 0]
    if non_positive:
        raise InvalidCatalogError(catalog, f"non-positive identifiers {non_positive}")

    duplicates = sorted({i for i in identifiers if identifiers.count(i) > 1})
    if duplicates:
        raise InvalidCatalogError(catalog, f"duplicate identifiers {duplicates}")

    expected = list(range(1, len(identifiers) + 1))
    if list(identifiers) != expected:
        missing = sorted(set(expected) - set(identifiers))
        raise InvalidCatalogError(
            catalog,
            f"identifiers must run from 1 to {len(identifiers)} without gaps "
            f"(missing {missing}, got {list(identifiers)})"
        )


def scheduled_arrivals(stop_index: int, route_index: int) -> Tuple[int, ...]:
    """Arrival minutes for the stop/route at the given sorted positions."""
    offset = OFFSET_STEP_MINUTES * stop_index + OFFSET_STEP_MINUTES * route_index
    return tuple(base + offset for base in BASE_ARRIVAL_MINUTES)


def build_schedule_table(stops: Iterable[Stop], routes: Iterable[Route]) -> ScheduleTable:
    """
    Build the synthetic timetable for every stop/route combination.

    Each route arrives every 15 minutes, starting 2 minutes after the previous
    route and reaching each following stop 2 minutes later.

    :param stops: Full stop catalog, in any order
    :param routes: Full route catalog, in any order
    :return: Read-only schedule table keyed by (stop id, route id)
    """
    sorted_stops: List[Stop] = sorted(stops, key=lambda s: s.id)
    sorted_routes: List[Route] = sorted(routes, key=lambda r: r.id)

    _validate_identifiers("stop", [s.id for s in sorted_stops])
    _validate_identifiers("route", [r.id for r in sorted_routes])

    stop_indexes = {stop.id: i for i, stop in enumerate(sorted_stops)}
    route_indexes = {route.id: j for j, route in enumerate(sorted_routes)}

    entries: Dict[Tuple[int, int], Tuple[int, ...]] = {}
    for stop in sorted_stops:
        for route in sorted_routes:
            entries[(stop.id, route.id)] = scheduled_arrivals(stop_indexes[stop.id], route_indexes[route.id])

    logger.info(f"Built schedule table for {len(sorted_stops)} stops and {len(sorted_routes)} routes "
                f"({len(entries)} entries)")

    return ScheduleTable(entries=entries, stop_indexes=stop_indexes, route_indexes=route_indexes)
