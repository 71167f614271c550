from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


class ScheduleLookupError(LookupError):
    """Raised when a stop/route pair is not part of the built schedule"""

    def __init__(self, stop_id: int, route_id: int):
        super().__init__(f"No scheduled arrivals for stop {stop_id} on route {route_id}")
        self.stop_id = stop_id
        self.route_id = route_id


@dataclass(frozen=True)
class ScheduleTable:
    """Scheduled arrival minutes for every (stop id, route id) pair"""
    entries: Mapping[Tuple[int, int], Tuple[int, ...]]
    stop_indexes: Mapping[int, int]
    route_indexes: Mapping[int, int]

    def __post_init__(self):
        # Read-only views so the table cannot be altered after it is built
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(self, "stop_indexes", MappingProxyType(dict(self.stop_indexes)))
        object.__setattr__(self, "route_indexes", MappingProxyType(dict(self.route_indexes)))

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def stop_count(self) -> int:
        return len(self.stop_indexes)

    @property
    def route_count(self) -> int:
        return len(self.route_indexes)

    def stop_index(self, stop_id: int) -> int:
        return self.stop_indexes[stop_id]

    def route_index(self, route_id: int) -> int:
        return self.route_indexes[route_id]

    def arrivals_for(self, stop_id: int, route_id: int) -> Tuple[int, ...]:
        try:
            return self.entries[(stop_id, route_id)]
        except KeyError:
            raise ScheduleLookupError(stop_id, route_id) from None
