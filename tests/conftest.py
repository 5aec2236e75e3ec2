import pytest

from routing.routing_config import RoutingConfig, make_assignment


WAREHOUSES = [
    {"id": "WH-NJ", "name": "Newark",      "address": {"state": "NJ", "city": "Newark"}},       # Mid-Atlantic
    {"id": "WH-IL", "name": "Chicago",     "address": {"state": "IL", "city": "Chicago"}},      # Great Lakes
    {"id": "WH-CA", "name": "Los Angeles", "address": {"state": "CA", "city": "Los Angeles"}},  # Pacific
    {"id": "WH-CO", "name": "Denver",      "address": {"state": "CO", "city": "Denver"}},       # Mountain
    {"id": "WH-TX", "name": "Dallas",      "address": {"state": "TX", "city": "Dallas"}},       # South Central
]


@pytest.fixture
def warehouses():
    return [dict(w, address=dict(w["address"])) for w in WAREHOUSES]


@pytest.fixture
def advanced_config():
    """Advanced routing: CA/OR/WA on WH-CA, TX/OK on WH-TX, NY/NJ on WH-NJ."""
    return RoutingConfig(
        mode="advanced",
        primary_warehouse_id="WH-NJ",
        fallback_warehouse_id="WH-TX",
        enable_region_routing=True,
        assignments=[
            make_assignment("a-nj", "WH-NJ", "Newark", priority=1, states=["NJ", "NY"]),
            make_assignment("a-ca", "WH-CA", "Los Angeles", priority=2, states=["CA", "OR", "WA"]),
            make_assignment("a-tx", "WH-TX", "Dallas", priority=3, states=["OK", "TX"]),
        ],
    )
