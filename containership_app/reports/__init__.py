"""
Console reporting utilities for containers and ships.
"""

from containership_app.reports.simple_text_report import (
    build_container_info_text,
    build_ship_info_text,
    print_container_info,
    print_ship_info,
)

__all__ = [
    "build_container_info_text",
    "build_ship_info_text",
    "print_container_info",
    "print_ship_info",
]
