"""
Auto-Assignment Planner
Partitions all 50 US states across the warehouses in a routing config so that
each state goes to exactly ONE warehouse, the closest by proximity score.

Selection per state:
  1. lowest proximity score (same region < adjacent region < far)
  2. lowest priority value (1 = highest priority)
  3. lowest warehouse_id, then earliest assignment in the list

The order is total, so the plan is deterministic and independent of the
order in which states are visited.
"""

import copy
import logging
from typing import Dict, List, Optional

import pandas as pd

from config.us_regions import STATE_CODES
from config.routing_constants import FALLBACK_HOME_REGION
from routing.proximity import get_warehouse_region, proximity_score
from routing.routing_config import RoutingConfig, assignment_states, make_region

logger = logging.getLogger(__name__)

SCORE_COLUMNS = [
    "state_code", "candidate", "assignment_id", "warehouse_id",
    "priority", "home_region", "score",
]


def _home_regions(assignments: List[dict], warehouses: List[dict]) -> Dict[int, str]:
    """Home region per active assignment, keyed by its position in the list."""
    directory = {w.get("id"): w for w in warehouses or [] if w}
    regions = {}

    for idx, assignment in enumerate(assignments):
        if not assignment.get("is_active", True):
            continue

        warehouse_id = assignment.get("warehouse_id")
        warehouse = directory.get(warehouse_id)
        if warehouse is None:
            logger.warning(
                "Warehouse %s (%r) not found in warehouse directory - defaulting to %s region",
                warehouse_id, assignment.get("warehouse_name"), FALLBACK_HOME_REGION,
            )
            regions[idx] = FALLBACK_HOME_REGION
        else:
            regions[idx] = get_warehouse_region(warehouse)

    return regions


def build_score_matrix(
    assignments: List[dict],
    warehouses: List[dict]
) -> pd.DataFrame:
    """
    Build a score matrix: proximity score from every candidate warehouse to every state.

    Args:
        assignments: routing assignments (only active ones are candidates)
        warehouses : warehouse directory records with id, name, address.state

    Returns:
        DataFrame with columns [state_code, candidate, assignment_id, warehouse_id,
                                priority, home_region, score]
    """
    assignments = assignments or []
    home_regions = _home_regions(assignments, warehouses)

    rows = []
    for idx, home_region in home_regions.items():
        assignment = assignments[idx]
        warehouse_id = assignment.get("warehouse_id")
        for state_code in STATE_CODES:
            rows.append({
                "state_code"   : state_code,
                "candidate"    : idx,
                "assignment_id": assignment.get("id"),
                "warehouse_id" : "" if warehouse_id is None else str(warehouse_id),
                "priority"     : assignment.get("priority") or 0,
                "home_region"  : home_region,
                "score"        : proximity_score(state_code, home_region),
            })
    return pd.DataFrame(rows, columns=SCORE_COLUMNS)


def plan_auto_assignment(
    assignments: List[dict],
    warehouses: List[dict]
) -> List[dict]:
    """
    Compute a full partition of the 50 states across the active assignments.

    Args:
        assignments: current routing assignments (not mutated)
        warehouses : warehouse directory used to derive each home region

    Returns:
        New list of assignments, same order. Each active assignment holds its
        sorted states in a single US region; inactive assignments hold none.
        With no active candidate the assignments are returned unchanged.
    """
    assignments = assignments or []
    scores = build_score_matrix(assignments, warehouses)
    if scores.empty:
        return copy.deepcopy(assignments)

    best = (
        scores
        .sort_values(["state_code", "score", "priority", "warehouse_id", "candidate"], kind="mergesort")
        .drop_duplicates("state_code", keep="first")
    )
    states_by_candidate = {
        int(idx): sorted(states)
        for idx, states in best.groupby("candidate")["state_code"].apply(list).items()
    }

    planned = []
    for idx, assignment in enumerate(assignments):
        updated = copy.deepcopy(assignment)
        updated["regions"] = [make_region(states_by_candidate.get(idx, []))]
        planned.append(updated)
    return planned


def summarize_assignment_plan(assignments: List[dict]) -> pd.DataFrame:
    """State count per assignment, in priority order."""
    rows = [
        {
            "warehouse_id"  : a.get("warehouse_id"),
            "warehouse_name": a.get("warehouse_name", ""),
            "priority"      : a.get("priority", 0),
            "is_active"     : a.get("is_active", True),
            "state_count"   : len(assignment_states(a)),
        }
        for a in assignments or []
    ]
    summary = pd.DataFrame(
        rows, columns=["warehouse_id", "warehouse_name", "priority", "is_active", "state_count"]
    )
    return summary.sort_values("priority", kind="mergesort").reset_index(drop=True)


def apply_auto_assignment(
    config: RoutingConfig,
    warehouses: Optional[List[dict]]
) -> RoutingConfig:
    """
    Run the planner against a config and return the updated draft.
    A config without assignments comes back as an unchanged copy.
    """
    draft = config.copy()
    if not draft.assignments:
        return draft

    draft.assignments = plan_auto_assignment(draft.assignments, warehouses or [])

    summary = summarize_assignment_plan(draft.assignments)
    for _, row in summary.iterrows():
        logger.info(
            "Auto-assign: %s (%s, priority %s) -> %d states",
            row["warehouse_name"], row["warehouse_id"], row["priority"], row["state_count"],
        )
    return draft
