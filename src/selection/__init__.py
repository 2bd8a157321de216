from __future__ import annotations

from .affinity import DEFAULT_AFFINITY_THRESHOLD, LoadAffinitySelector, NoEligibleCar
from .interface import CarSelector, CarSnapshot

__all__ = [
    "CarSelector",
    "CarSnapshot",
    "DEFAULT_AFFINITY_THRESHOLD",
    "LoadAffinitySelector",
    "NoEligibleCar",
]
