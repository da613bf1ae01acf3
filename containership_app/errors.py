"""
Errors raised by container and ship operations.

Each error also derives from the closest built-in exception so callers that
only know about ``OverflowError`` or ``ValueError`` still catch them.
"""

from __future__ import annotations


class CargoError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CargoOverflowError(CargoError, OverflowError):
    """Load would take a container past its max load."""


class UnknownProductError(CargoError, ValueError):
    """Refrigerated product is missing from the temperature table."""


class ContainerNotFoundError(CargoError, ValueError):
    """No container with the given serial number is on board."""


class CapacityExceededError(CargoError):
    """Ship already carries its maximum number of containers."""


class WeightExceededError(CargoError):
    """Loading would exceed the ship's total weight limit."""
