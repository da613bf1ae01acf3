from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from containership_app.models.container import Container


@dataclass(slots=True, eq=False)
class ContainerShip:
    max_speed_knots: float = 0.0
    max_container_count: int = 0
    max_total_weight_t: float = 0.0
    name: str = ""

    # Load order; a container sits on at most one ship at a time.
    containers: List[Container] = field(default_factory=list)

    @property
    def container_count(self) -> int:
        return len(self.containers)
