from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Tuple

from selection.utils import direction_between

from .errors import InvalidTransition


class Direction(IntEnum):
    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, value: "str | int | Direction") -> "Direction":
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"Unknown direction {value!r}") from None
        return cls(value)


class RiderState(Enum):
    WAITING = "waiting"
    ABOARD = "boarding"
    DISEMBARKED = "disembarking"

    @property
    def action(self) -> str:
        """Label used in step lists."""
        return self.value


@dataclass
class Trip:
    """One rider's journey, owned by the car it was assigned to."""

    rider_id: str
    origin: int
    destination: int
    state: RiderState = RiderState.WAITING
    direction: Direction = field(init=False)

    def __post_init__(self) -> None:
        self.direction = Direction(direction_between(self.origin, self.destination))

    @property
    def aboard(self) -> bool:
        return self.state is RiderState.ABOARD

    @property
    def trace_key(self) -> Tuple[str, str, int, int]:
        return (self.rider_id, self.state.action, self.origin, self.destination)

    def board(self) -> None:
        if self.state is RiderState.DISEMBARKED:
            raise InvalidTransition(f"{self.rider_id} already left the car")
        self.state = RiderState.ABOARD

    def disembark(self) -> None:
        if self.state is not RiderState.ABOARD:
            raise InvalidTransition(
                f"{self.rider_id} cannot disembark while {self.state.action}"
            )
        self.state = RiderState.DISEMBARKED


@dataclass(frozen=True)
class TraceEntry:
    """A recorded step: what one rider did and where the car was at the time."""

    car_floor: int
    car_direction: Direction
    rider_id: str
    action: str
    origin: int
    destination: int

    @classmethod
    def record(cls, trip: Trip, car_floor: int, car_direction: Direction) -> "TraceEntry":
        return cls(
            car_floor=car_floor,
            car_direction=car_direction,
            rider_id=trip.rider_id,
            action=trip.state.action,
            origin=trip.origin,
            destination=trip.destination,
        )

    @property
    def key(self) -> Tuple[str, str, int, int]:
        return (self.rider_id, self.action, self.origin, self.destination)
