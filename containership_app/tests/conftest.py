"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import ContainerShip, SerialNumberGenerator


@pytest.fixture
def serials():
    """A private serial generator so numbering starts at KON-C-1."""
    return SerialNumberGenerator()


@pytest.fixture
def notices():
    """Collects serial numbers passed to a danger notifier."""
    return []


@pytest.fixture
def sample_ship():
    return ContainerShip(max_speed_knots=20.0, max_container_count=10, max_total_weight_t=300.0)
