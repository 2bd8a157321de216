from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .interface import CarSnapshot
from .utils import count_matching_destinations, direction_between, floor_distance

logger = logging.getLogger(__name__)

DEFAULT_AFFINITY_THRESHOLD = 7


class NoEligibleCar(ValueError):
    """Raised when selection is attempted against an empty fleet."""


class LoadAffinitySelector:
    """Nearest car heading the rider's way, unless another is already full of riders to the same floor.

    The proximity pass looks only at cars heading in the requested direction.
    The load-affinity pass counts, per such car, the assigned trips ending at
    the requested destination; when the best count exceeds ``threshold`` that
    car wins even if it is further away, consolidating stops.
    """

    def __init__(self, threshold: int = DEFAULT_AFFINITY_THRESHOLD) -> None:
        self.threshold = threshold

    def select_car(
        self,
        cars: Iterable[CarSnapshot],
        origin: int,
        destination: int,
    ) -> int:
        fleet = sorted(cars, key=lambda c: c.car_id)
        if not fleet:
            raise NoEligibleCar("No cars available to serve the request")

        direction = direction_between(origin, destination)
        heading = [c for c in fleet if c.direction == direction]

        chosen = self._nearest(heading, origin)
        if chosen is None:
            chosen = self._nearest(fleet, origin)
            logger.debug(
                "No car heading %+d; falling back to nearest car %d for origin %d",
                direction,
                chosen.car_id,
                origin,
            )

        loaded, load = self._most_loaded(heading, destination)
        if loaded is not None and load > self.threshold:
            logger.debug(
                "Car %d carries %d riders to floor %d; overriding nearest car %d",
                loaded.car_id,
                load,
                destination,
                chosen.car_id,
            )
            chosen = loaded
        return chosen.car_id

    def _nearest(self, cars: List[CarSnapshot], origin: int) -> Optional[CarSnapshot]:
        best: Optional[CarSnapshot] = None
        for car in cars:
            if best is None or floor_distance(car.floor, origin) < floor_distance(best.floor, origin):
                best = car
        return best

    def _most_loaded(self, cars: List[CarSnapshot], destination: int):
        best: Optional[CarSnapshot] = None
        best_count = 0
        for car in cars:
            count = count_matching_destinations(car.destinations, destination)
            if count > best_count:
                best, best_count = car, count
        return best, best_count
