"""Scenario files: a fleet, optional car overrides and a list of pickups."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .config import DispatchConfig
from .dispatcher import Dispatcher
from .trip import Direction


class PickupRequest(BaseModel):
    rider_id: str
    origin: int = Field(ge=0)
    destination: int = Field(ge=0)


class CarUpdate(BaseModel):
    car_id: int = Field(ge=0)
    floor: int = Field(ge=0)
    direction: Direction = Direction.UP

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value: Any) -> Direction:
        return Direction.parse(value)


class ScenarioConfig(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    num_cars: int = Field(default=16, ge=1)
    top_floor: int = Field(default=10, ge=0)
    affinity_threshold: int = Field(default=7, ge=0)
    max_steps_factor: int = Field(default=4, ge=1)
    updates: List[CarUpdate] = []
    requests: List[PickupRequest] = []


def load_scenario(data: Dict[str, Any]) -> ScenarioConfig:
    return ScenarioConfig.model_validate(data)


def build_dispatcher(scenario: ScenarioConfig) -> Dispatcher:
    config = DispatchConfig(
        affinity_threshold=scenario.affinity_threshold,
        max_steps_factor=scenario.max_steps_factor,
    )
    dispatcher = Dispatcher(scenario.num_cars, scenario.top_floor, config=config)
    for update in scenario.updates:
        dispatcher.update(update.car_id, update.floor, update.direction)
    for request in scenario.requests:
        dispatcher.request_pickup(request.rider_id, request.origin, request.destination)
    return dispatcher
