"""Tests for ship load, unload, replace and move operations."""

from __future__ import annotations

import pytest

from containership_app.errors import (
    CapacityExceededError,
    ContainerNotFoundError,
    WeightExceededError,
)
from containership_app.models import (
    ContainerShip,
    make_container,
    make_gas_container,
    make_liquid_container,
    make_refrigerated_container,
)
from containership_app.services.cargo_policy import load_cargo
from containership_app.services.ship_service import (
    find_container,
    load_container,
    move_container,
    replace_container,
    total_weight,
    unload_container,
)


class TestLoadContainer:
    def test_three_empty_containers(self, serials, sample_ship):
        load_container(sample_ship, make_liquid_container(100.0, True, serials=serials))
        load_container(sample_ship, make_refrigerated_container(200.0, "Bananas", 5.0, serials=serials))
        load_container(sample_ship, make_gas_container(150.0, 2.5, serials=serials))
        assert sample_ship.container_count == 3
        assert total_weight(sample_ship.containers) == 0.0

    def test_keeps_load_order(self, serials, sample_ship):
        boxes = [make_container(10.0, serials=serials) for _ in range(3)]
        for b in boxes:
            load_container(sample_ship, b)
        assert sample_ship.containers == boxes

    def test_capacity_exceeded(self, serials):
        ship = ContainerShip(max_speed_knots=10.0, max_container_count=1, max_total_weight_t=1000.0)
        first = make_container(10.0, serials=serials)
        load_container(ship, first)
        with pytest.raises(CapacityExceededError):
            load_container(ship, make_container(10.0, serials=serials))
        assert ship.containers == [first]

    def test_weight_scaled_by_1000(self, serials):
        ship = ContainerShip(max_speed_knots=10.0, max_container_count=5, max_total_weight_t=250.0)
        # 0.25 * 1000 == 250, not over the limit
        load_container(ship, make_container(1.0, container_weight=0.25, serials=serials))
        heavy = make_container(1.0, container_weight=0.125, serials=serials)
        with pytest.raises(WeightExceededError):
            load_container(ship, heavy)
        assert heavy not in ship.containers
        assert ship.container_count == 1

    def test_weight_counts_cargo(self, serials):
        ship = ContainerShip(max_speed_knots=10.0, max_container_count=5, max_total_weight_t=300.0)
        box = make_container(10.0, serials=serials)
        load_cargo(box, 0.5)
        with pytest.raises(WeightExceededError):
            load_container(ship, box)

    def test_capacity_checked_before_weight(self, serials):
        ship = ContainerShip(max_speed_knots=10.0, max_container_count=0, max_total_weight_t=0.0)
        with pytest.raises(CapacityExceededError):
            load_container(ship, make_container(1.0, container_weight=5.0, serials=serials))


class TestUnloadContainer:
    def test_removes_by_identity(self, serials, sample_ship):
        a = make_container(1.0, serials=serials)
        b = make_container(1.0, serials=serials)
        load_container(sample_ship, a)
        load_container(sample_ship, b)
        unload_container(sample_ship, a)
        assert sample_ship.containers == [b]

    def test_missing_is_noop(self, serials, sample_ship):
        a = make_container(1.0, serials=serials)
        load_container(sample_ship, a)
        unload_container(sample_ship, make_container(1.0, serials=serials))
        assert sample_ship.containers == [a]


class TestReplaceContainer:
    def test_replace_appends_new(self, serials, sample_ship):
        a = make_container(1.0, serials=serials)
        old = make_refrigerated_container(200.0, "Bananas", 5.0, serials=serials)
        c = make_container(1.0, serials=serials)
        for box in (a, old, c):
            load_container(sample_ship, box)
        new = make_refrigerated_container(180.0, "Fish", 4.5, serials=serials)
        replace_container(sample_ship, old.serial_number, new)
        assert sample_ship.containers == [a, c, new]

    def test_unknown_serial(self, serials, sample_ship):
        a = make_container(1.0, serials=serials)
        load_container(sample_ship, a)
        with pytest.raises(ContainerNotFoundError) as exc:
            replace_container(sample_ship, "KON-C-999", make_container(1.0, serials=serials))
        assert isinstance(exc.value, ValueError)
        assert sample_ship.containers == [a]

    def test_failed_load_does_not_restore_old(self, serials, caplog):
        ship = ContainerShip(max_speed_knots=10.0, max_container_count=2, max_total_weight_t=100.0)
        old = make_container(1.0, serials=serials)
        load_container(ship, old)
        heavy = make_container(1.0, container_weight=1.0, serials=serials)
        with pytest.raises(WeightExceededError):
            replace_container(ship, old.serial_number, heavy)
        assert ship.containers == []
        assert "not restored" in caplog.text


class TestMoveContainer:
    def test_move(self, serials, sample_ship):
        other = ContainerShip(max_speed_knots=15.0, max_container_count=5, max_total_weight_t=300.0)
        box = make_gas_container(150.0, 2.5, serials=serials)
        load_container(sample_ship, box)
        move_container(sample_ship, box, other)
        assert sample_ship.containers == []
        assert other.containers == [box]

    def test_failed_move_loses_container(self, serials, sample_ship):
        full = ContainerShip(max_speed_knots=15.0, max_container_count=0, max_total_weight_t=300.0)
        box = make_container(1.0, serials=serials)
        load_container(sample_ship, box)
        with pytest.raises(CapacityExceededError):
            move_container(sample_ship, box, full)
        assert box not in sample_ship.containers
        assert box not in full.containers


def test_find_container(serials, sample_ship):
    box = make_container(1.0, serials=serials)
    load_container(sample_ship, box)
    assert find_container(sample_ship, box.serial_number) is box
    assert find_container(sample_ship, "nope") is None
