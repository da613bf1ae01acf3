"""
Hazard notifications raised while loading cargo.

A notifier takes the container serial number and reports the danger; it
never blocks the load and never raises.
"""

from __future__ import annotations

import logging

_LOG = logging.getLogger(__name__)


def notify_liquid_danger(serial_number: str) -> None:
    _LOG.warning("Dangerous situation in container %s", serial_number)


def notify_gas_danger(serial_number: str) -> None:
    _LOG.warning("Dangerous situation in gas container %s", serial_number)
