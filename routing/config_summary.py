# routing/config_summary.py
"""Predicates and one-line summaries of a store's routing config, for display."""

from typing import Optional

from routing.routing_config import RoutingConfig, assignment_states


def has_warehouses(config: Optional[RoutingConfig]) -> bool:
    """True when at least one warehouse is in routing (a primary alone does not count)."""
    return bool(config and config.assignments)


def has_region_routing(config: Optional[RoutingConfig]) -> bool:
    return bool(config and config.enable_region_routing and config.assignments)


def get_warehouse_config_summary(config: Optional[RoutingConfig]) -> str:
    if not config:
        return "No warehouses configured"

    if not has_region_routing(config):
        return "Default warehouse only"

    warehouses = len(config.assignments)
    states = sum(len(assignment_states(a)) for a in config.assignments)
    return (
        f"{warehouses} warehouse{'' if warehouses == 1 else 's'}, "
        f"{states} state{'' if states == 1 else 's'} assigned"
    )
