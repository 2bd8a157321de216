from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .errors import InvalidFloor, SimulationDidNotConverge
from .trip import Direction, RiderState, TraceEntry, Trip

logger = logging.getLogger(__name__)


@dataclass
class Car:
    """One elevator car: its position, its assigned trips and the steps it performed."""

    car_id: int
    top_floor: int
    max_steps_factor: int = 4
    current_floor: int = field(default=0, init=False)
    direction: Direction = field(default=Direction.UP, init=False)
    trips: List[Trip] = field(default_factory=list, init=False)
    steps: List[TraceEntry] = field(default_factory=list, init=False)
    _recorded: Set[Tuple[str, str, int, int]] = field(default_factory=set, init=False, repr=False)

    @property
    def position(self) -> int:
        return self.current_floor

    @property
    def heading(self) -> Direction:
        return self.direction

    @property
    def active_trips(self) -> Tuple[Trip, ...]:
        return tuple(self.trips)

    @property
    def trace(self) -> Tuple[TraceEntry, ...]:
        return tuple(self.steps)

    def force_reposition(self, floor: int, direction: Direction) -> None:
        """Move the car without regard to its trips, like a technician's key switch."""
        if not 0 <= floor <= self.top_floor:
            raise InvalidFloor(floor, self.top_floor)
        self.current_floor = floor
        self.direction = Direction.parse(direction)

    def assign(self, trip: Trip) -> None:
        self.trips.append(trip)

    def step(self) -> None:
        """Serve the current floor, then move unless riders still need to get off here."""
        self._serve_floor()
        if self._clear_to_leave():
            self._advance()

    def run_to_quiescence(self) -> int:
        """Step until every assigned rider has been dropped off.

        The car parks on the floor where its last rider got off. Returns the
        number of cycles performed.
        """
        limit = self.max_steps_factor * (self.top_floor + 1) * max(1, len(self.trips))
        cycles = 0
        while self.trips:
            if cycles >= limit:
                raise SimulationDidNotConverge(self.car_id, cycles, len(self.trips))
            cycles += 1
            self._serve_floor()
            if self.trips and self._clear_to_leave():
                self._advance()
        logger.info("Car %d idle at floor %d after %d cycles", self.car_id, self.current_floor, cycles)
        return cycles

    def next_stop(self) -> int:
        """Pick the next floor to visit.

        Defaults to the adjacent floor along the heading. If a rider is waiting
        ahead, jump to the nearest such origin; if an aboard rider's destination
        comes first, stop there instead.
        """
        pickup: Optional[int] = None
        for trip in self.trips:
            if trip.state is not RiderState.WAITING:
                continue
            distance = self._ahead(trip.origin)
            if distance > 0 and (pickup is None or distance < self._ahead(pickup)):
                pickup = trip.origin

        dropoff: Optional[int] = None
        bound = self._ahead(pickup) if pickup is not None else None
        for trip in self.trips:
            if not trip.aboard:
                continue
            distance = self._ahead(trip.destination)
            if distance <= 0 or (bound is not None and distance >= bound):
                continue
            if dropoff is None or distance < self._ahead(dropoff):
                dropoff = trip.destination

        if dropoff is not None:
            return dropoff
        if pickup is not None:
            return pickup
        return self.current_floor + self.direction

    def _ahead(self, floor: int) -> int:
        return (floor - self.current_floor) * self.direction

    def _serve_floor(self) -> None:
        done: List[Trip] = []
        for trip in list(self.trips):
            if trip.origin == self.current_floor:
                trip.board()
            self._record(trip)

            if trip.destination == self.current_floor and trip.aboard:
                trip.disembark()
                self._record(trip)
                done.append(trip)
        if done:
            self.trips = [t for t in self.trips if all(t is not d for d in done)]

    def _clear_to_leave(self) -> bool:
        return not any(t.aboard and t.destination == self.current_floor for t in self.trips)

    def _advance(self) -> None:
        previous = self.current_floor
        if self.direction is Direction.UP and self.current_floor == self.top_floor:
            self.direction = Direction.DOWN
            self.current_floor = max(self.current_floor - 1, 0)
        elif self.direction is Direction.DOWN and self.current_floor == 0:
            self.direction = Direction.UP
            self.current_floor = min(self.current_floor + 1, self.top_floor)
        else:
            self.current_floor = self.next_stop()
        logger.debug(
            "Car %d moved %d -> %d heading %s", self.car_id, previous, self.current_floor, self.direction.name
        )

    def _record(self, trip: Trip) -> None:
        if trip.trace_key in self._recorded:
            return
        self._recorded.add(trip.trace_key)
        self.steps.append(TraceEntry.record(trip, self.current_floor, self.direction))
