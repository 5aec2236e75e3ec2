import copy
import logging

import pytest

from routing.resolver import resolve_warehouse, is_resolved
from routing.routing_config import RoutingConfig, make_assignment


def test_no_config_is_unresolved(caplog):
    with caplog.at_level(logging.WARNING):
        result = resolve_warehouse("CA", "US", None)

    assert result == {"unresolved": True, "reason": "NO_CONFIG"}
    assert not is_resolved(result)


def test_simple_mode_ignores_assignments(advanced_config):
    config = advanced_config.copy()
    config.mode = "simple"
    config.primary_warehouse_id = "W1"

    result = resolve_warehouse("CA", "US", config)
    assert result == {"warehouse_id": "W1", "reason": "REGION_ROUTING_DISABLED"}


def test_region_routing_disabled_uses_primary(advanced_config):
    config = advanced_config.copy()
    config.enable_region_routing = False
    assert resolve_warehouse("CA", "US", config)["warehouse_id"] == "WH-NJ"


def test_no_assignments_uses_fallback_when_no_primary():
    config = RoutingConfig(mode="advanced", fallback_warehouse_id="WH-TX", enable_region_routing=True)
    assert resolve_warehouse("CA", "US", config)["warehouse_id"] == "WH-TX"


def test_simple_mode_without_any_default_is_unresolved():
    result = resolve_warehouse("CA", "US", RoutingConfig(mode="simple"))
    assert result == {"unresolved": True, "reason": "REGION_ROUTING_DISABLED"}


@pytest.mark.parametrize(
    "state, expected",
    [
        ("CA", "WH-CA"),
        ("california", "WH-CA"),
        ("wa", "WH-CA"),
        ("Texas", "WH-TX"),
        ("NY", "WH-NJ"),
    ],
)
def test_region_match(advanced_config, state, expected):
    result = resolve_warehouse(state, "US", advanced_config)
    assert result == {"warehouse_id": expected, "reason": "REGION_MATCH"}


def test_overlapping_assignments_pick_lowest_priority_value(advanced_config):
    config = advanced_config.copy()
    # WH-TX listed last but promoted above WH-CA for CA
    config.assignments[2]["regions"][0]["states"].append("CA")
    config.assignments[2]["priority"] = 0

    assert resolve_warehouse("CA", "US", config)["warehouse_id"] == "WH-TX"


def test_inactive_assignment_is_skipped(advanced_config):
    config = advanced_config.copy()
    config.assignments[1]["is_active"] = False

    result = resolve_warehouse("CA", "US", config)
    assert result == {"warehouse_id": "WH-NJ", "reason": "NO_REGION_MATCH"}


def test_country_must_match(advanced_config):
    assert resolve_warehouse("CA", "CA", advanced_config)["reason"] == "NO_REGION_MATCH"
    assert resolve_warehouse("CA", "us", advanced_config)["warehouse_id"] == "WH-CA"
    assert resolve_warehouse("CA", None, advanced_config)["warehouse_id"] == "WH-CA"


def test_fallback_chain_for_unmatched_state(advanced_config):
    config = advanced_config.copy()
    assert resolve_warehouse("ZZ", "US", config) == {"warehouse_id": "WH-NJ", "reason": "NO_REGION_MATCH"}

    config.primary_warehouse_id = None
    assert resolve_warehouse("ZZ", "US", config) == {"warehouse_id": "WH-TX", "reason": "NO_REGION_MATCH"}

    config.fallback_warehouse_id = None
    assert resolve_warehouse("ZZ", "US", config) == {"unresolved": True, "reason": "NO_REGION_MATCH"}


@pytest.mark.parametrize("state", ["", None, "   "])
def test_missing_shipping_state_uses_default(advanced_config, state):
    result = resolve_warehouse(state, "US", advanced_config)
    assert result == {"warehouse_id": "WH-NJ", "reason": "NO_SHIPPING_STATE"}


def test_accepts_persisted_document(advanced_config):
    document = advanced_config.to_dict()
    assert resolve_warehouse("OR", "US", document)["warehouse_id"] == "WH-CA"
    assert resolve_warehouse("OR", "US", {})["unresolved"] is True


def test_resolver_does_not_mutate_config(advanced_config):
    before = copy.deepcopy(advanced_config.to_dict())
    for state in ["CA", "ZZ", "", "texas"]:
        resolve_warehouse(state, "US", advanced_config)
    assert advanced_config.to_dict() == before


def test_unparseable_config_records_do_not_raise():
    config = RoutingConfig(
        mode="advanced",
        primary_warehouse_id="WH-1",
        enable_region_routing=True,
        assignments=[
            {"id": "broken", "warehouse_id": "WH-2"},
            make_assignment("ok", "WH-3", "Three", priority=1, states=["CA"]),
        ],
    )
    assert resolve_warehouse("CA", "US", config)["warehouse_id"] == "WH-3"
    assert resolve_warehouse("NV", "US", config)["warehouse_id"] == "WH-1"
