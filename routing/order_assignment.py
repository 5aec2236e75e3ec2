"""
Batch Order Routing
Applies the resolver to orders coming from the ingestion layer and summarizes
where they were routed.

Orders are plain records (dicts or DataFrame rows) carrying:
  - shipping_province      : state from the shipping address
  - shipping_address1      : "street, state, ..." used when province is missing
  - shipping_country_code  : defaults to US
"""

from typing import Tuple

import numpy as np
import pandas as pd

from config.routing_constants import DEFAULT_COUNTRY_CODE, REASON_REGION_MATCH
from routing.resolver import resolve_warehouse, is_resolved
from routing.routing_config import RoutingConfig


def _text(value) -> str:
    # NaN from DataFrame rows counts as missing
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return ""
    return str(value).strip()


def extract_shipping_destination(order) -> Tuple[str, str]:
    """
    Pull (state, country_code) out of an order's shipping fields.
    Falls back to the second comma-separated part of shipping_address1.
    """
    state = _text(order.get("shipping_province"))
    if not state:
        parts = _text(order.get("shipping_address1")).split(",")
        state = parts[1].strip() if len(parts) > 1 else ""

    country_code = _text(order.get("shipping_country_code")) or DEFAULT_COUNTRY_CODE
    return state, country_code


def assign_warehouse_to_order(order: dict, config: RoutingConfig) -> dict:
    """Return a copy of the order with warehouse_id and routing_reason set."""
    state, country_code = extract_shipping_destination(order)
    result = resolve_warehouse(state, country_code, config)
    return {
        **order,
        "warehouse_id"  : result.get("warehouse_id") if is_resolved(result) else None,
        "routing_reason": result["reason"],
    }


def assign_warehouses_to_orders(orders: pd.DataFrame, config: RoutingConfig) -> pd.DataFrame:
    """
    Route a batch of orders against one config snapshot.

    Args:
        orders: DataFrame with shipping_province / shipping_address1 /
                shipping_country_code columns (missing columns are treated as blank)
        config: routing config shared by every order in the batch

    Returns:
        Copy of orders with warehouse_id, routing_reason, is_unresolved columns
    """
    routed = orders.copy()
    if routed.empty:
        routed["warehouse_id"] = pd.Series(dtype=object)
        routed["routing_reason"] = pd.Series(dtype=object)
        routed["is_unresolved"] = pd.Series(dtype=bool)
        return routed

    results = [
        resolve_warehouse(*extract_shipping_destination(row), config)
        for row in routed.to_dict("records")
    ]
    routed["warehouse_id"] = [r.get("warehouse_id") if is_resolved(r) else None for r in results]
    routed["routing_reason"] = [r["reason"] for r in results]
    routed["is_unresolved"] = [not is_resolved(r) for r in results]
    return routed


def summarize_routing(routed: pd.DataFrame) -> dict:
    """
    Summarize a routed batch.

    Args:
        routed: output of assign_warehouses_to_orders

    Returns:
        dict with total_orders, unresolved_orders, unresolved_pct,
                   region_match_pct, orders_by_warehouse
    """
    total = len(routed)
    if total == 0:
        return {
            "total_orders"       : 0,
            "unresolved_orders"  : 0,
            "unresolved_pct"     : 0.0,
            "region_match_pct"   : 0.0,
            "orders_by_warehouse": {},
        }

    unresolved = int(routed["is_unresolved"].sum())
    region_matches = int((routed["routing_reason"] == REASON_REGION_MATCH).sum())
    by_warehouse = routed.loc[~routed["is_unresolved"], "warehouse_id"].value_counts()

    return {
        "total_orders"       : total,
        "unresolved_orders"  : unresolved,
        "unresolved_pct"     : round(unresolved / total * 100, 2),
        "region_match_pct"   : round(region_matches / total * 100, 2),
        "orders_by_warehouse": {str(k): int(v) for k, v in by_warehouse.items()},
    }
