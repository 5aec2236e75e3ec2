# routing/state_normalizer.py

"""
State normalization and lookup helpers.
Maps free-form state input ("California", "ca", "NY") to a 2-letter code.
"""

from typing import List, Optional

from config.us_regions import (
    US_STATES, STATE_CODES, STATE_NAMES, STATE_REGIONS, STATE_NAME_TO_CODE,
)


def normalize_state_code(state: Optional[str]) -> str:
    """
    Normalize a state to its 2-letter uppercase code.

    Full names are matched case-insensitively against the 50-state table.
    Any 2-character input is treated as a code and uppercased.
    Unrecognized input is returned uppercased, never raised on; callers treat
    it as "no match".
    """
    if not state:
        return ""

    value = str(state).strip().upper()
    if len(value) == 2:
        return value

    return STATE_NAME_TO_CODE.get(value, value)


def is_valid_state_code(code: Optional[str]) -> bool:
    return code in STATE_REGIONS


def get_state_by_code(code: str) -> Optional[dict]:
    for s in US_STATES:
        if s["code"] == code:
            return dict(s)
    return None


def get_state_by_name(name: str) -> Optional[dict]:
    code = STATE_NAME_TO_CODE.get((name or "").strip().upper())
    return get_state_by_code(code) if code else None


def get_states_by_region(region: str) -> List[dict]:
    return [dict(s) for s in US_STATES if s["region"] == region]


def get_region_by_state_code(code: str) -> Optional[str]:
    return STATE_REGIONS.get(code)


def get_all_state_codes() -> List[str]:
    return list(STATE_CODES)


def format_state_display(code: str) -> str:
    """Format a state for display, e.g. "CA - California". Unknown codes pass through."""
    name = STATE_NAMES.get(code)
    return f"{code} - {name}" if name else code
