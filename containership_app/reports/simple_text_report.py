"""
Simple text-based reports for containers and ships.
"""

from __future__ import annotations

import math

from containership_app.models import (
    Container,
    ContainerShip,
    GasProfile,
    LiquidProfile,
    RefrigeratedProfile,
)


def _fmt(value: float) -> str:
    """Full-precision number; whole values drop the trailing ".0"."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def _profile_suffix(container: Container) -> str:
    profile = container.profile
    if isinstance(profile, LiquidProfile):
        return f", Hazardous: {profile.is_hazardous}"
    if isinstance(profile, RefrigeratedProfile):
        return (
            f", Product Type: {profile.product_type}"
            f", Required Temperature: {_fmt(profile.required_temperature)}"
            f", Current Temperature: {_fmt(profile.temperature)}"
        )
    if isinstance(profile, GasProfile):
        return f", Pressure: {_fmt(profile.pressure)}"
    return ""


def build_container_info_text(container: Container) -> str:
    base = (
        f"Serial Number: {container.serial_number}"
        f", Height: {_fmt(container.height)}"
        f", Depth: {_fmt(container.depth)}"
        f", Cargo Weight: {_fmt(container.cargo_weight)}"
        f", Container Weight: {_fmt(container.container_weight)}"
        f", Max Load: {_fmt(container.max_load)}"
    )
    return base + _profile_suffix(container)


def build_ship_info_text(ship: ContainerShip) -> str:
    lines: list[str] = []
    if ship.name:
        lines.append(f"Ship: {ship.name}")
    lines.append(f"Max Speed: {_fmt(ship.max_speed_knots)} knots")
    lines.append(f"Max Container Count: {ship.max_container_count}")
    lines.append(f"Max Total Weight: {_fmt(ship.max_total_weight_t)} tons")
    lines.append(f"Number of Loaded Containers: {len(ship.containers)}")
    for container in ship.containers:
        lines.append(build_container_info_text(container))
    return "\n".join(lines)


def print_container_info(container: Container) -> None:
    print(build_container_info_text(container))


def print_ship_info(ship: ContainerShip) -> None:
    print(build_ship_info_text(ship))
