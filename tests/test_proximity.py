import logging

import pytest

from routing.proximity import (
    proximity_score, get_warehouse_region, get_state_proximity, are_regions_adjacent,
)


@pytest.mark.parametrize(
    "state_code, home_region, expected",
    [
        ("CA", "Pacific", 0),
        ("HI", "Pacific", 0),
        ("OR", "Pacific", 1),       # Pacific Northwest
        ("CO", "Pacific", 1),       # Mountain
        ("TX", "Pacific", 2),
        ("GA", "Mid-Atlantic", 1),  # Southeast
        ("GA", "Great Lakes", 1),
        ("MA", "Mid-Atlantic", 1),  # New England
        ("MA", "Great Lakes", 2),
        ("ND", "Mountain", 1),      # Plains
        ("ZZ", "Pacific", 2),
        ("CA", "Atlantis", 2),
    ],
)
def test_proximity_score(state_code, home_region, expected):
    assert proximity_score(state_code, home_region) == expected


def test_regions_adjacent():
    assert are_regions_adjacent("Plains", "Mountain")
    assert not are_regions_adjacent("New England", "Pacific")
    assert not are_regions_adjacent("Atlantis", "Pacific")


def test_warehouse_region_from_address_state():
    assert get_warehouse_region({"id": "W1", "address": {"state": "WA"}}) == "Pacific Northwest"
    assert get_warehouse_region({"id": "W1", "address": {"state": " ca "}}) == "Pacific"


@pytest.mark.parametrize(
    "warehouse",
    [
        {"id": "W1", "name": "No address"},
        {"id": "W1", "name": "Blank state", "address": {"state": "  "}},
        {"id": "W1", "name": "Canada", "address": {"state": "Ontario"}},
        None,
    ],
)
def test_warehouse_region_defaults_to_mountain_with_warning(warehouse, caplog):
    with caplog.at_level(logging.WARNING, logger="routing.proximity"):
        assert get_warehouse_region(warehouse) == "Mountain"
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_state_proximity_categories():
    assert get_state_proximity("CA", "HI") == "same"
    assert get_state_proximity("CA", "OR") == "adjacent"
    assert get_state_proximity("CA", "NY") == "far"
    assert get_state_proximity("CA", "ON") == "unknown"
