"""
Loading limits and lookup tables for containers and ships.

Thresholds are fractions of a container's max load unless noted. The ship
weight check compares container masses scaled by TONS_TO_KG against the
ship limit in tons; the factor is applied to the container side only.
"""

from __future__ import annotations

from typing import Dict

# Prefix of every container serial number ("KON-C-1", "KON-C-2", ...)
SERIAL_PREFIX = "KON-C-"

# First value handed out by a fresh serial number generator
SERIAL_START = 1

# Refrigerated cargo: product -> required temperature (deg C)
PRODUCT_TEMPERATURES: Dict[str, float] = {
    "Bananas": 4.0,
    "Fish": 6.0,
    "Eggs": 2.0,
}

# Hazardous liquid: warn when cargo + load exceeds this fraction of the current cargo
HAZARDOUS_LIQUID_FACTOR = 0.5

# Ordinary liquid: warn above 90% of max load
LIQUID_SAFE_FILL_FRACTION = 0.9

# Gas cannot be fully purged: 5% of max load stays after unloading
GAS_RESIDUAL_FRACTION = 0.05

# Container side of the ship weight check is multiplied by this
TONS_TO_KG = 1000.0
