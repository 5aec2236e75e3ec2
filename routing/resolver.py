"""
Routing Resolver
Picks the fulfillment warehouse for one order from its shipping state/country
and the store's routing config.

Evaluated in order, first match wins:
  1. no config                                   -> unresolved
  2. simple mode / region routing off / no rules -> primary ?? fallback
  3. no shipping state                           -> primary ?? fallback
  4. active assignments serving country + state  -> lowest priority value
  5. no match                                    -> primary ?? fallback

Pure: no I/O, never mutates the config, never raises. An unresolved result
means "hold for manual assignment".
"""

import logging
from typing import Optional, Union

from config.routing_constants import (
    DEFAULT_COUNTRY_CODE, ADVANCED_ROUTING_MODE,
    REASON_NO_CONFIG, REASON_REGION_ROUTING_DISABLED, REASON_NO_SHIPPING_STATE,
    REASON_REGION_MATCH, REASON_NO_REGION_MATCH,
)
from routing.routing_config import RoutingConfig
from routing.state_normalizer import normalize_state_code

logger = logging.getLogger(__name__)


def _resolved(warehouse_id: str, reason: str) -> dict:
    return {"warehouse_id": warehouse_id, "reason": reason}


def _unresolved(reason: str) -> dict:
    return {"unresolved": True, "reason": reason}


def _default_warehouse(config: RoutingConfig, reason: str) -> dict:
    warehouse_id = config.primary_warehouse_id or config.fallback_warehouse_id
    return _resolved(warehouse_id, reason) if warehouse_id else _unresolved(reason)


def _country_code(code: Optional[str]) -> str:
    return (code or "").strip().upper() or DEFAULT_COUNTRY_CODE


def is_resolved(result: dict) -> bool:
    return not result.get("unresolved", False)


def resolve_warehouse(
    shipping_state: Optional[str],
    shipping_country_code: Optional[str],
    config: Union[RoutingConfig, dict, None]
) -> dict:
    """
    Resolve the warehouse for one shipping destination.

    Args:
        shipping_state       : raw state from the shipping address ("CA", "california")
        shipping_country_code: ISO country code from the shipping address
        config               : RoutingConfig, or its persisted dict form

    Returns:
        {"warehouse_id": ..., "reason": ...} or {"unresolved": True, "reason": ...}
    """
    if not config:
        logger.warning("No warehouse routing config - order left unresolved")
        return _unresolved(REASON_NO_CONFIG)

    if isinstance(config, dict):
        config = RoutingConfig.from_dict(config)

    if (config.mode != ADVANCED_ROUTING_MODE
            or not config.enable_region_routing
            or not config.assignments):
        return _default_warehouse(config, REASON_REGION_ROUTING_DISABLED)

    state_code = normalize_state_code(shipping_state)
    if not state_code:
        logger.warning("No shipping state provided - using default warehouse")
        return _default_warehouse(config, REASON_NO_SHIPPING_STATE)

    country_code = _country_code(shipping_country_code)

    matches = [
        a for a in config.assignments
        if a.get("is_active", True) and any(
            _country_code(region.get("country_code")) == country_code
            and state_code in (region.get("states") or [])
            for region in a.get("regions") or []
        )
    ]
    # Stable: equal priorities keep config order
    matches.sort(key=lambda a: a.get("priority") or 0)

    if matches:
        selected = matches[0]
        logger.debug(
            "Routed %s, %s -> %s (priority %s)",
            state_code, country_code, selected.get("warehouse_name"), selected.get("priority"),
        )
        return _resolved(selected.get("warehouse_id"), REASON_REGION_MATCH)

    logger.debug("No warehouse serves %s, %s - using default", state_code, country_code)
    return _default_warehouse(config, REASON_NO_REGION_MATCH)
