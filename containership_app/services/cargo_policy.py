"""
Load and unload rules per container kind.

Each kind maps to a load policy and an unload policy in the tables at the
bottom of this module; load_cargo / unload_cargo dispatch through them.
"""

from __future__ import annotations

from typing import Callable, Dict

from containership_app.config.limits import (
    GAS_RESIDUAL_FRACTION,
    HAZARDOUS_LIQUID_FACTOR,
    LIQUID_SAFE_FILL_FRACTION,
)
from containership_app.errors import CargoOverflowError
from containership_app.models import Container, ContainerKind

LoadPolicy = Callable[[Container, float], None]
UnloadPolicy = Callable[[Container], None]


def _notify(container: Container) -> None:
    if container.notify_danger is not None:
        container.notify_danger(container.serial_number)


def _load_capped(container: Container, weight: float) -> None:
    """Add weight, refusing anything past max_load. State is untouched on failure."""
    if container.cargo_weight + weight > container.max_load:
        raise CargoOverflowError(f"Overfilling container {container.serial_number}")
    container.cargo_weight += weight


def _liquid_danger(container: Container, weight: float) -> bool:
    # Both thresholds use the cargo on board before this load.
    current = container.cargo_weight
    if container.is_hazardous:
        # Literal rule: current + weight > current * 0.5, i.e. weight > -current / 2.
        # Fires on any positive load; kept as-is.
        return current + weight > current * HAZARDOUS_LIQUID_FACTOR
    return current + weight > container.max_load * LIQUID_SAFE_FILL_FRACTION


def _load_liquid(container: Container, weight: float) -> None:
    # Warning only; the hard cap below still applies.
    if _liquid_danger(container, weight):
        _notify(container)
    _load_capped(container, weight)


def _load_gas(container: Container, weight: float) -> None:
    # Gas is never refused: an overfill is reported and the weight still goes in.
    if container.cargo_weight + weight > container.max_load:
        _notify(container)
    container.cargo_weight += weight


def _unload_empty(container: Container) -> None:
    container.cargo_weight = 0.0


def _unload_gas(container: Container) -> None:
    _unload_empty(container)
    container.cargo_weight = container.max_load * GAS_RESIDUAL_FRACTION


LOAD_POLICIES: Dict[ContainerKind, LoadPolicy] = {
    ContainerKind.GENERAL: _load_capped,
    ContainerKind.LIQUID: _load_liquid,
    ContainerKind.REFRIGERATED: _load_capped,
    ContainerKind.GAS: _load_gas,
}

UNLOAD_POLICIES: Dict[ContainerKind, UnloadPolicy] = {
    ContainerKind.GENERAL: _unload_empty,
    ContainerKind.LIQUID: _unload_empty,
    ContainerKind.REFRIGERATED: _unload_empty,
    ContainerKind.GAS: _unload_gas,
}


def load_cargo(container: Container, weight: float) -> None:
    LOAD_POLICIES[container.kind](container, weight)


def unload_cargo(container: Container) -> None:
    UNLOAD_POLICIES[container.kind](container)
