"""Elevator dispatch simulation primitives."""

from .car import Car
from .config import DispatchConfig
from .dispatcher import CarStatus, Dispatcher, TripView
from .errors import (
    DispatchError,
    InvalidCarId,
    InvalidConfiguration,
    InvalidFloor,
    InvalidTransition,
    NoEligibleCar,
    SimulationDidNotConverge,
)
from .trip import Direction, RiderState, TraceEntry, Trip

__all__ = [
    "Car",
    "CarStatus",
    "Direction",
    "DispatchConfig",
    "DispatchError",
    "Dispatcher",
    "InvalidCarId",
    "InvalidConfiguration",
    "InvalidFloor",
    "InvalidTransition",
    "NoEligibleCar",
    "RiderState",
    "SimulationDidNotConverge",
    "TraceEntry",
    "Trip",
    "TripView",
]
