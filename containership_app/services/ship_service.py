"""
Ship-level rules: container count and total weight limits, plus the
load / unload / replace / move operations built on them.

replace_container and move_container are not transactional. If the final
load fails, the container taken off in the first step is not put back.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from containership_app.config.limits import TONS_TO_KG
from containership_app.errors import (
    CapacityExceededError,
    CargoError,
    ContainerNotFoundError,
    WeightExceededError,
)
from containership_app.models import Container, ContainerShip

_LOG = logging.getLogger(__name__)


def total_weight(containers: Iterable[Container]) -> float:
    """Sum of cargo plus tare over the given containers."""
    return sum(c.cargo_weight + c.container_weight for c in containers)


def load_container(ship: ContainerShip, container: Container) -> None:
    if len(ship.containers) >= ship.max_container_count:
        raise CapacityExceededError("Cannot load more containers. Maximum container count reached.")

    # Container masses are scaled by TONS_TO_KG, the ship limit is not.
    prospective = (total_weight(ship.containers) + container.gross_weight) * TONS_TO_KG
    if prospective > ship.max_total_weight_t:
        raise WeightExceededError("Cannot load container. Maximum total weight reached.")

    ship.containers.append(container)
    _LOG.debug("Loaded %s (%d/%d)", container.serial_number, len(ship.containers), ship.max_container_count)


def unload_container(ship: ContainerShip, container: Container) -> None:
    """Take a container off by identity. Unknown containers are ignored."""
    for i, c in enumerate(ship.containers):
        if c is container:
            del ship.containers[i]
            _LOG.debug("Unloaded %s", container.serial_number)
            return
    _LOG.debug("Container %s is not on board; nothing to unload", container.serial_number)


def find_container(ship: ContainerShip, serial_number: str) -> Optional[Container]:
    return next((c for c in ship.containers if c.serial_number == serial_number), None)


def replace_container(ship: ContainerShip, serial_number: str, new_container: Container) -> None:
    old = find_container(ship, serial_number)
    if old is None:
        raise ContainerNotFoundError("Container with specified serial number not found.")

    unload_container(ship, old)
    try:
        load_container(ship, new_container)
    except CargoError:
        _LOG.error(
            "Replacement %s rejected; %s was already taken off and is not restored",
            new_container.serial_number,
            serial_number,
        )
        raise


def move_container(ship: ContainerShip, container: Container, destination: ContainerShip) -> None:
    unload_container(ship, container)
    try:
        load_container(destination, container)
    except CargoError:
        _LOG.error(
            "Destination refused %s; it is no longer on either ship",
            container.serial_number,
        )
        raise
