"""
Container record, variant profiles and constructor functions.

Every container shares one record type; ``kind`` selects the loading policy
(see services.cargo_policy) and ``profile`` carries the variant fields.
Serial numbers come from a single process-wide generator shared by all kinds.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Union

from containership_app.config.limits import PRODUCT_TEMPERATURES, SERIAL_PREFIX, SERIAL_START
from containership_app.errors import UnknownProductError
from containership_app.services.hazard import notify_gas_danger, notify_liquid_danger

DangerNotifier = Callable[[str], None]


class ContainerKind(Enum):
    GENERAL = auto()
    LIQUID = auto()
    REFRIGERATED = auto()
    GAS = auto()


@dataclass(slots=True)
class LiquidProfile:
    is_hazardous: bool = False


@dataclass(slots=True)
class RefrigeratedProfile:
    product_type: str = ""
    required_temperature: float = 0.0
    # Set once at construction; nothing checks it against required_temperature.
    temperature: float = 0.0


@dataclass(slots=True)
class GasProfile:
    # Informational only.
    pressure: float = 0.0


ContainerProfile = Union[LiquidProfile, RefrigeratedProfile, GasProfile, None]


@dataclass(slots=True, eq=False)
class Container:
    """
    A cargo container. Compared by identity: two containers with equal fields
    are still different boxes on a ship.
    """

    serial_number: str
    max_load: float
    kind: ContainerKind = ContainerKind.GENERAL
    height: float = 0.0
    depth: float = 0.0
    container_weight: float = 0.0  # tare
    cargo_weight: float = 0.0
    profile: ContainerProfile = None
    notify_danger: DangerNotifier | None = None

    @property
    def is_hazardous(self) -> bool:
        return isinstance(self.profile, LiquidProfile) and self.profile.is_hazardous

    @property
    def gross_weight(self) -> float:
        """Cargo plus tare."""
        return self.cargo_weight + self.container_weight


class SerialNumberGenerator:
    """Hands out "KON-C-<n>" serial numbers from an increasing counter."""

    def __init__(self, prefix: str = SERIAL_PREFIX, start: int = SERIAL_START) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next_serial(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


# Shared by every container created without an explicit generator.
DEFAULT_SERIALS = SerialNumberGenerator()


def _new_container(
    max_load: float,
    kind: ContainerKind,
    serials: SerialNumberGenerator | None,
    height: float,
    depth: float,
    container_weight: float,
    profile: ContainerProfile = None,
    notifier: DangerNotifier | None = None,
) -> Container:
    generator = serials if serials is not None else DEFAULT_SERIALS
    return Container(
        serial_number=generator.next_serial(),
        max_load=max_load,
        kind=kind,
        height=height,
        depth=depth,
        container_weight=container_weight,
        profile=profile,
        notify_danger=notifier,
    )


def make_container(
    max_load: float,
    *,
    height: float = 0.0,
    depth: float = 0.0,
    container_weight: float = 0.0,
    serials: SerialNumberGenerator | None = None,
) -> Container:
    return _new_container(max_load, ContainerKind.GENERAL, serials, height, depth, container_weight)


def make_liquid_container(
    max_load: float,
    is_hazardous: bool,
    *,
    height: float = 0.0,
    depth: float = 0.0,
    container_weight: float = 0.0,
    serials: SerialNumberGenerator | None = None,
    notifier: DangerNotifier | None = None,
) -> Container:
    return _new_container(
        max_load,
        ContainerKind.LIQUID,
        serials,
        height,
        depth,
        container_weight,
        profile=LiquidProfile(is_hazardous=is_hazardous),
        notifier=notifier or notify_liquid_danger,
    )


def make_refrigerated_container(
    max_load: float,
    product_type: str,
    initial_temperature: float,
    *,
    height: float = 0.0,
    depth: float = 0.0,
    container_weight: float = 0.0,
    serials: SerialNumberGenerator | None = None,
) -> Container:
    """
    Build a refrigerated container for one of the products in
    PRODUCT_TEMPERATURES. Raises UnknownProductError otherwise, before a
    serial number is taken.
    """
    required = PRODUCT_TEMPERATURES.get(product_type)
    if required is None:
        raise UnknownProductError(f"Product {product_type} is not in the temperature table.")
    return _new_container(
        max_load,
        ContainerKind.REFRIGERATED,
        serials,
        height,
        depth,
        container_weight,
        profile=RefrigeratedProfile(
            product_type=product_type,
            required_temperature=required,
            temperature=initial_temperature,
        ),
    )


def make_gas_container(
    max_load: float,
    pressure: float,
    *,
    height: float = 0.0,
    depth: float = 0.0,
    container_weight: float = 0.0,
    serials: SerialNumberGenerator | None = None,
    notifier: DangerNotifier | None = None,
) -> Container:
    return _new_container(
        max_load,
        ContainerKind.GAS,
        serials,
        height,
        depth,
        container_weight,
        profile=GasProfile(pressure=pressure),
        notifier=notifier or notify_gas_danger,
    )
