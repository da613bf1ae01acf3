"""
Demo entry point: builds a small fleet scenario and prints ship reports.
"""

import logging

from containership_app.config.settings import Settings, init_logging
from containership_app.models import (
    ContainerShip,
    make_gas_container,
    make_liquid_container,
    make_refrigerated_container,
)
from containership_app.reports import print_container_info, print_ship_info
from containership_app.services.ship_service import load_container, replace_container

_LOG = logging.getLogger(__name__)


def run_demo() -> ContainerShip:
    """Load three containers, report, then swap the refrigerated one out."""
    liquid = make_liquid_container(100, True)
    chilling = make_refrigerated_container(200, "Bananas", 5.0)
    gas = make_gas_container(150, 2.5)

    ship = ContainerShip(max_speed_knots=20, max_container_count=10, max_total_weight_t=300)

    load_container(ship, liquid)
    load_container(ship, chilling)
    load_container(ship, gas)

    print_ship_info(ship)

    print_container_info(chilling)

    new_chilling = make_refrigerated_container(180, "Fish", 4.5)
    replace_container(ship, chilling.serial_number, new_chilling)

    print_ship_info(ship)
    return ship


def main() -> None:
    """Bootstraps logging and runs the demo scenario."""
    settings = Settings.default()
    init_logging(settings)

    try:
        run_demo()
    except Exception as e:
        _LOG.exception("Demo aborted")
        print(f"An error occurred: {e}")


if __name__ == "__main__":
    # `python -m containership_app.main` from the project root
    main()
