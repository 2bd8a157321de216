from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Tuple


@dataclass(frozen=True)
class CarSnapshot:
    """Lightweight view of a car for selection decisions."""

    car_id: int
    floor: int
    direction: int
    destinations: Tuple[int, ...]


class CarSelector(Protocol):
    """Strategy interface for choosing the car that serves a pickup."""

    def select_car(
        self,
        cars: Iterable[CarSnapshot],
        origin: int,
        destination: int,
    ) -> int:
        """
        Return the id of the car that should serve the request.

        Implementations must always pick a car when at least one is given.
        """
        ...
