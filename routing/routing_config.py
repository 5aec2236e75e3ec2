"""
Routing configuration document.
One RoutingConfig per store/integration; persisted whole by an external store.
In memory: snake_case attributes and assignment dicts.
Persisted: the camelCase document the dashboard reads and writes.
"""
# routing/routing_config.py
import copy
import json
from typing import List, Optional

from config.routing_constants import (
    DEFAULT_ROUTING_MODE, DEFAULT_COUNTRY, DEFAULT_COUNTRY_CODE,
)


def make_region(states: Optional[List[str]] = None,
                country: str = DEFAULT_COUNTRY,
                country_code: str = DEFAULT_COUNTRY_CODE) -> dict:
    """Build the single "states list" region an assignment carries."""
    return {
        "country": country,
        "country_code": country_code,
        "states": list(states or []),
    }


def make_assignment(assignment_id: str, warehouse_id: str, warehouse_name: str = "",
                    priority: int = 1, states: Optional[List[str]] = None,
                    is_active: bool = True) -> dict:
    return {
        "id": assignment_id,
        "warehouse_id": warehouse_id,
        "warehouse_name": warehouse_name,
        "priority": priority,
        "regions": [make_region(states)],
        "is_active": is_active,
    }


def assignment_states(assignment: dict) -> List[str]:
    """All state codes held by an assignment, across its regions."""
    states = []
    for region in assignment.get("regions") or []:
        states.extend(region.get("states") or [])
    return states


def _pick(data: dict, camel: str, snake: str, default=None):
    if camel in data:
        return data[camel]
    return data.get(snake, default)


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _region_from_dict(data: dict) -> dict:
    return {
        "country": data.get("country", DEFAULT_COUNTRY),
        "country_code": _pick(data, "countryCode", "country_code", DEFAULT_COUNTRY_CODE),
        "states": list(data.get("states") or []),
    }


def _region_to_dict(region: dict) -> dict:
    return {
        "country": region.get("country", DEFAULT_COUNTRY),
        "countryCode": region.get("country_code", DEFAULT_COUNTRY_CODE),
        "states": list(region.get("states") or []),
    }


def _assignment_from_dict(data: dict) -> dict:
    return {
        "id": data.get("id"),
        "warehouse_id": _pick(data, "warehouseId", "warehouse_id"),
        "warehouse_name": _pick(data, "warehouseName", "warehouse_name", ""),
        "priority": _as_int(data.get("priority")),
        "regions": [_region_from_dict(r) for r in data.get("regions") or []],
        "is_active": bool(_pick(data, "isActive", "is_active", True)),
    }


def _assignment_to_dict(assignment: dict) -> dict:
    return {
        "id": assignment.get("id"),
        "warehouseId": assignment.get("warehouse_id"),
        "warehouseName": assignment.get("warehouse_name", ""),
        "priority": assignment.get("priority"),
        "regions": [_region_to_dict(r) for r in assignment.get("regions") or []],
        "isActive": assignment.get("is_active", True),
    }


class RoutingConfig:
    """Warehouse routing configuration for one store (EcommerceWarehouseConfig)."""

    def __init__(self, mode: str = DEFAULT_ROUTING_MODE,
                 primary_warehouse_id: Optional[str] = None,
                 fallback_warehouse_id: Optional[str] = None,
                 enable_region_routing: bool = False,
                 assignments: Optional[List[dict]] = None):
        self.mode = mode
        self.primary_warehouse_id = primary_warehouse_id
        self.fallback_warehouse_id = fallback_warehouse_id
        self.enable_region_routing = enable_region_routing

        # [{id, warehouse_id, warehouse_name, priority, regions, is_active}]
        self.assignments: List[dict] = list(assignments or [])

    def copy(self) -> "RoutingConfig":
        """Independent deep copy, used as the draft for edits."""
        return RoutingConfig(
            mode=self.mode,
            primary_warehouse_id=self.primary_warehouse_id,
            fallback_warehouse_id=self.fallback_warehouse_id,
            enable_region_routing=self.enable_region_routing,
            assignments=copy.deepcopy(self.assignments),
        )

    def to_dict(self) -> dict:
        """Serialize to the persisted document."""
        return {
            "mode": self.mode,
            "primaryWarehouseId": self.primary_warehouse_id,
            "fallbackWarehouseId": self.fallback_warehouse_id,
            "enableRegionRouting": self.enable_region_routing,
            "assignments": [_assignment_to_dict(a) for a in self.assignments],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoutingConfig":
        """Deserialize from the persisted document (snake_case keys also accepted)."""
        data = data or {}
        return cls(
            mode=data.get("mode", DEFAULT_ROUTING_MODE),
            primary_warehouse_id=_pick(data, "primaryWarehouseId", "primary_warehouse_id") or None,
            fallback_warehouse_id=_pick(data, "fallbackWarehouseId", "fallback_warehouse_id") or None,
            enable_region_routing=bool(_pick(data, "enableRegionRouting", "enable_region_routing", False)),
            assignments=[_assignment_from_dict(a) for a in data.get("assignments") or []],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> "RoutingConfig":
        return cls.from_dict(json.loads(json_str))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RoutingConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"RoutingConfig(mode={self.mode!r}, primary={self.primary_warehouse_id!r}, "
            f"fallback={self.fallback_warehouse_id!r}, "
            f"region_routing={self.enable_region_routing}, assignments={len(self.assignments)})"
        )


def default_routing_config(warehouses: Optional[List[dict]] = None) -> RoutingConfig:
    """Initial config for a store that has not configured routing yet."""
    warehouses = warehouses or []
    return RoutingConfig(
        mode=DEFAULT_ROUTING_MODE,
        primary_warehouse_id=warehouses[0].get("id") if warehouses else None,
        fallback_warehouse_id=None,
        enable_region_routing=False,
        assignments=[],
    )
