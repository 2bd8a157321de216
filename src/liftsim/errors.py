from __future__ import annotations

import selection


class DispatchError(ValueError):
    """Base class for rejected input and failed simulations."""


class InvalidConfiguration(DispatchError):
    pass


class InvalidFloor(DispatchError):
    def __init__(self, floor: int, top_floor: int) -> None:
        super().__init__(f"Floor {floor} is outside the building (0..{top_floor})")
        self.floor = floor
        self.top_floor = top_floor


class InvalidCarId(DispatchError):
    def __init__(self, car_id: int, num_cars: int) -> None:
        super().__init__(f"Unknown car {car_id}; fleet has cars 0..{num_cars - 1}")
        self.car_id = car_id


class InvalidTransition(DispatchError):
    pass


class NoEligibleCar(DispatchError, selection.NoEligibleCar):
    """Selection found no car; also catchable as the selection-layer error."""


class SimulationDidNotConverge(DispatchError):
    def __init__(self, car_id: int, steps: int, pending: int) -> None:
        super().__init__(
            f"Car {car_id} still had {pending} trip(s) after {steps} steps"
        )
        self.car_id = car_id
        self.steps = steps
        self.pending = pending


__all__ = [
    "DispatchError",
    "InvalidCarId",
    "InvalidConfiguration",
    "InvalidFloor",
    "InvalidTransition",
    "NoEligibleCar",
    "SimulationDidNotConverge",
]
