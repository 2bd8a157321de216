from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import selection
from selection import CarSelector, CarSnapshot, LoadAffinitySelector

from .car import Car
from .config import DispatchConfig
from .errors import InvalidCarId, InvalidConfiguration, InvalidFloor, NoEligibleCar
from .trip import Direction, RiderState, TraceEntry, Trip

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripView:
    rider_id: str
    origin: int
    destination: int
    state: RiderState


@dataclass(frozen=True)
class CarStatus:
    car_id: int
    floor: int
    direction: Direction
    trips: Tuple[TripView, ...]

    @property
    def idle(self) -> bool:
        return not self.trips


class Dispatcher:
    """Owns the fleet, assigns pickups to cars and drives them until every rider is delivered."""

    def __init__(
        self,
        num_cars: int,
        top_floor: int,
        config: Optional[DispatchConfig] = None,
        selector: Optional[CarSelector] = None,
    ) -> None:
        if num_cars < 1:
            raise InvalidConfiguration(f"A fleet needs at least one car, got {num_cars}")
        if top_floor < 0:
            raise InvalidConfiguration(f"Top floor must be non-negative, got {top_floor}")
        self.config = config or DispatchConfig()
        self.top_floor = top_floor
        self.selector = selector or LoadAffinitySelector(self.config.affinity_threshold)
        self.cars: List[Car] = [
            Car(i, top_floor, max_steps_factor=self.config.max_steps_factor) for i in range(num_cars)
        ]

    @property
    def num_cars(self) -> int:
        return len(self.cars)

    def car(self, car_id: int) -> Car:
        if not 0 <= car_id < len(self.cars):
            raise InvalidCarId(car_id, len(self.cars))
        return self.cars[car_id]

    def request_pickup(self, rider_id: str, origin: int, destination: int) -> int:
        """Assign a rider to a car and return the chosen car id."""
        for floor in (origin, destination):
            if not 0 <= floor <= self.top_floor:
                raise InvalidFloor(floor, self.top_floor)

        try:
            car_id = self.selector.select_car(self._snapshot_cars(), origin, destination)
        except selection.NoEligibleCar as exc:
            raise NoEligibleCar(str(exc)) from exc
        trip = Trip(rider_id=rider_id, origin=origin, destination=destination)
        self.car(car_id).assign(trip)
        logger.info(
            "Assigned %s (%d -> %d, %s) to car %d",
            rider_id,
            origin,
            destination,
            trip.direction.name,
            car_id,
        )
        return car_id

    def update(self, car_id: int, floor: int, direction: "Direction | str") -> None:
        self.car(car_id).force_reposition(floor, direction)
        logger.info("Car %d repositioned to floor %d heading %s", car_id, floor, self.car(car_id).heading.name)

    def run_all_to_quiescence(self) -> Dict[int, List[TraceEntry]]:
        for car in self.cars:
            car.run_to_quiescence()
        return self.trace()

    def trace(self) -> Dict[int, List[TraceEntry]]:
        return {car.car_id: list(car.trace) for car in self.cars}

    def status(self) -> List[CarStatus]:
        return [
            CarStatus(
                car_id=car.car_id,
                floor=car.position,
                direction=car.heading,
                trips=tuple(
                    TripView(t.rider_id, t.origin, t.destination, t.state) for t in car.active_trips
                ),
            )
            for car in self.cars
        ]

    def _snapshot_cars(self) -> List[CarSnapshot]:
        return [
            CarSnapshot(
                car_id=car.car_id,
                floor=car.position,
                direction=int(car.heading),
                destinations=tuple(t.destination for t in car.active_trips),
            )
            for car in self.cars
        ]
