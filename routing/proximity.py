"""
Proximity Scorer
Coarse three-tier distance between a destination state and a warehouse's
home region, looked up from the region adjacency table:

  0 : same region
  1 : adjacent region
  2 : far (anything else, including unknown states)
"""

import logging
from typing import Optional

from config.us_regions import REGION_ADJACENCY, STATE_REGIONS
from config.routing_constants import (
    FALLBACK_HOME_REGION,
    SCORE_SAME_REGION, SCORE_ADJACENT_REGION, SCORE_FAR_REGION,
)

logger = logging.getLogger(__name__)


def get_warehouse_region(warehouse: Optional[dict]) -> str:
    """
    Derive a warehouse's home region from its address.state.

    Args:
        warehouse: warehouse record with address.state (2-letter code)

    Returns:
        Region name. Falls back to FALLBACK_HOME_REGION when the warehouse,
        its address or its state is missing or unrecognized.
    """
    warehouse = warehouse or {}
    address = warehouse.get("address") or {}
    state_code = str(address.get("state") or "").strip().upper()

    if not state_code:
        logger.warning(
            "Warehouse %r (%s) is missing address.state - defaulting to %s region",
            warehouse.get("name"), warehouse.get("id"), FALLBACK_HOME_REGION,
        )
        return FALLBACK_HOME_REGION

    region = STATE_REGIONS.get(state_code)
    if region is None:
        logger.warning(
            "Warehouse %r (%s) has unrecognized address.state %r - defaulting to %s region",
            warehouse.get("name"), warehouse.get("id"), state_code, FALLBACK_HOME_REGION,
        )
        return FALLBACK_HOME_REGION

    return region


def are_regions_adjacent(region1: str, region2: str) -> bool:
    return region2 in REGION_ADJACENCY.get(region1, [])


def proximity_score(state_code: str, home_region: str) -> int:
    """Score a state against a warehouse home region (lower = closer)."""
    state_region = STATE_REGIONS.get(state_code)

    if state_region is not None and state_region == home_region:
        return SCORE_SAME_REGION

    # Adjacency is read from the warehouse side of the table
    if state_region is not None and are_regions_adjacent(home_region, state_region):
        return SCORE_ADJACENT_REGION

    return SCORE_FAR_REGION


def get_state_proximity(state_code1: str, state_code2: str) -> str:
    """
    Distance category between two states:
    'same', 'adjacent', 'far', or 'unknown' when either state is unrecognized.
    """
    region1 = STATE_REGIONS.get(state_code1)
    region2 = STATE_REGIONS.get(state_code2)

    if region1 is None or region2 is None:
        return "unknown"
    if region1 == region2:
        return "same"
    if are_regions_adjacent(region1, region2):
        return "adjacent"
    return "far"
