from __future__ import annotations

from dataclasses import dataclass

from selection import DEFAULT_AFFINITY_THRESHOLD

from .errors import InvalidConfiguration


@dataclass
class DispatchConfig:
    """Tuning knobs for car selection and the per-car step bound."""

    affinity_threshold: int = DEFAULT_AFFINITY_THRESHOLD
    # cycles allowed per floor per pending trip before giving up
    max_steps_factor: int = 4

    def __post_init__(self) -> None:
        if self.affinity_threshold < 0:
            raise InvalidConfiguration(
                f"Affinity threshold must be non-negative, got {self.affinity_threshold}"
            )
        if self.max_steps_factor < 1:
            raise InvalidConfiguration(
                f"Step bound factor must be at least 1, got {self.max_steps_factor}"
            )
