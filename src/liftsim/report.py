from __future__ import annotations

from dataclasses import asdict
from typing import Dict, Iterable, List

from .dispatcher import CarStatus
from .trip import RiderState, TraceEntry


def render_status(statuses: Iterable[CarStatus], top_floor: int) -> str:
    statuses = list(statuses)
    lines = [
        f"Status: {len(statuses)} cars serving floors 0..{top_floor}",
    ]
    for status in statuses:
        if status.idle:
            lines.append(f"* Car {status.car_id} at floor {status.floor}, stopped.")
            continue
        lines.append(
            f"* Car {status.car_id} at floor {status.floor}, going {status.direction.name}, "
            f"{len(status.trips)} trip(s):"
        )
        for trip in status.trips:
            lines.append(
                f"  - {trip.rider_id} {trip.state.action} at floor {trip.origin}, "
                f"wants floor {trip.destination}."
            )
    return "\n".join(lines)


def render_entry(entry: TraceEntry) -> str:
    prefix = f"Floor {entry.car_floor}, going {entry.car_direction.name}."
    if entry.action == RiderState.DISEMBARKED.action:
        return f"{prefix} {entry.rider_id} is getting off at floor {entry.car_floor}."
    if entry.action == RiderState.ABOARD.action:
        return f"{prefix} {entry.rider_id} is getting on."
    return (
        f"{prefix} {entry.rider_id} called from floor {entry.origin} "
        f"for floor {entry.destination}, waiting."
    )


def render_trace(trace: Dict[int, List[TraceEntry]]) -> str:
    lines: List[str] = []
    for car_id, entries in trace.items():
        lines.append(f"Car {car_id} step list")
        lines.extend(render_entry(entry) for entry in entries)
    return "\n".join(lines)


def to_dict(statuses: Iterable[CarStatus], trace: Dict[int, List[TraceEntry]]) -> dict:
    return {
        "status": [
            {
                "car_id": s.car_id,
                "floor": s.floor,
                "direction": s.direction.name,
                "trips": [
                    {
                        "rider_id": t.rider_id,
                        "origin": t.origin,
                        "destination": t.destination,
                        "state": t.state.action,
                    }
                    for t in s.trips
                ],
            }
            for s in statuses
        ],
        "trace": {
            str(car_id): [dict(asdict(e), car_direction=e.car_direction.name) for e in entries]
            for car_id, entries in trace.items()
        },
    }
