"""
Manual Assignment Editor
Interactive edits to a routing config draft: move a state between warehouses,
add or remove a warehouse, switch routing mode, pick primary/fallback.

Every operation returns a new RoutingConfig and leaves its input untouched.
States are held by at most one assignment after any edit. The unassigned set
is computed from the assignments on demand, never stored.
"""

import logging
import time
from typing import List, Optional, Set

from config.us_regions import STATE_CODES
from config.routing_constants import (
    ROUTING_MODES, ADVANCED_ROUTING_MODE, ASSIGNMENT_ID_PREFIX,
)
from routing.routing_config import (
    RoutingConfig, assignment_states, make_assignment, make_region,
)
from routing.state_normalizer import normalize_state_code, is_valid_state_code

logger = logging.getLogger(__name__)


# ── Derived views ─────────────────────────────────────────────

def get_assigned_states(config: RoutingConfig) -> Set[str]:
    assigned = set()
    for assignment in config.assignments:
        assigned.update(assignment_states(assignment))
    return assigned


def get_unassigned_states(config: RoutingConfig) -> List[str]:
    """States held by no assignment, in table order."""
    assigned = get_assigned_states(config)
    return [code for code in STATE_CODES if code not in assigned]


# ── State moves ───────────────────────────────────────────────

def apply_move(
    config: RoutingConfig,
    state: str,
    target_warehouse_id: Optional[str]
) -> RoutingConfig:
    """
    Move a state to a warehouse, or to "unassigned" when target is None.

    The state is first removed from every assignment, then appended to the
    first region of the target warehouse's assignment.
    """
    draft = config.copy()
    state_code = normalize_state_code(state)

    if not is_valid_state_code(state_code):
        logger.warning("Ignoring move of unrecognized state %r", state)
        return draft

    for assignment in draft.assignments:
        for region in assignment.get("regions") or []:
            region["states"] = [s for s in region.get("states") or [] if s != state_code]

    if target_warehouse_id is None:
        return draft

    target = next(
        (a for a in draft.assignments if a.get("warehouse_id") == target_warehouse_id), None
    )
    if target is None:
        logger.warning(
            "No assignment for warehouse %s - %s left unassigned", target_warehouse_id, state_code
        )
        return draft

    if not target.get("regions"):
        target["regions"] = [make_region()]
    target["regions"][0]["states"].append(state_code)
    return draft


# ── Warehouses in routing ─────────────────────────────────────

def _new_assignment_id(warehouse_id: str) -> str:
    return f"{ASSIGNMENT_ID_PREFIX}-{warehouse_id}-{int(time.time() * 1000)}"


def add_warehouse(
    config: RoutingConfig,
    warehouse: dict,
    assignment_id: Optional[str] = None
) -> RoutingConfig:
    """
    Add a warehouse to routing with the next priority and no states.
    The first warehouse added also becomes the primary warehouse.
    """
    draft = config.copy()
    warehouse_id = (warehouse or {}).get("id")
    if not warehouse_id:
        logger.warning("Cannot add warehouse without an id: %r", warehouse)
        return draft

    if any(a.get("warehouse_id") == warehouse_id for a in draft.assignments):
        return draft

    is_first = len(draft.assignments) == 0
    draft.assignments.append(make_assignment(
        assignment_id=assignment_id or _new_assignment_id(warehouse_id),
        warehouse_id=warehouse_id,
        warehouse_name=warehouse.get("name", ""),
        priority=len(draft.assignments) + 1,
        states=[],
        is_active=True,
    ))
    if is_first:
        draft.primary_warehouse_id = warehouse_id
    return draft


def remove_warehouse(config: RoutingConfig, assignment_id: str) -> RoutingConfig:
    """Drop an assignment. Its states become unassigned until the planner runs again."""
    draft = config.copy()
    draft.assignments = [a for a in draft.assignments if a.get("id") != assignment_id]
    return draft


# ── Mode / primary / fallback ─────────────────────────────────

def set_routing_mode(config: RoutingConfig, mode: str) -> RoutingConfig:
    draft = config.copy()
    if mode not in ROUTING_MODES:
        logger.warning("Unknown routing mode %r - keeping %r", mode, draft.mode)
        return draft

    draft.mode = mode
    draft.enable_region_routing = mode == ADVANCED_ROUTING_MODE
    return draft


def set_primary_warehouse(config: RoutingConfig, warehouse_id: Optional[str]) -> RoutingConfig:
    draft = config.copy()
    draft.primary_warehouse_id = warehouse_id or None
    return draft


def set_fallback_warehouse(config: RoutingConfig, warehouse_id: Optional[str]) -> RoutingConfig:
    draft = config.copy()
    draft.fallback_warehouse_id = warehouse_id or None
    return draft
