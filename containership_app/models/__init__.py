"""
Domain models for the container ship demo.

These are plain dataclasses; loading rules live in containership_app.services.
"""

from containership_app.models.container import (
    DEFAULT_SERIALS,
    Container,
    ContainerKind,
    GasProfile,
    LiquidProfile,
    RefrigeratedProfile,
    SerialNumberGenerator,
    make_container,
    make_gas_container,
    make_liquid_container,
    make_refrigerated_container,
)
from containership_app.models.ship import ContainerShip

__all__ = [
    "DEFAULT_SERIALS",
    "Container",
    "ContainerKind",
    "GasProfile",
    "LiquidProfile",
    "RefrigeratedProfile",
    "SerialNumberGenerator",
    "make_container",
    "make_gas_container",
    "make_liquid_container",
    "make_refrigerated_container",
    "ContainerShip",
]
