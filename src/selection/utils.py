from __future__ import annotations

from typing import Iterable

UP = 1
DOWN = -1


def direction_between(origin: int, destination: int) -> int:
    """Return +1 when the trip goes up, -1 otherwise (equal floors count as down)."""
    return UP if destination > origin else DOWN


def floor_distance(floor: int, target: int) -> int:
    return abs(floor - target)


def count_matching_destinations(destinations: Iterable[int], destination: int) -> int:
    return sum(1 for d in destinations if d == destination)
