"""
Project-wide constants for warehouse routing.
Single source of truth, imported by every other module.
"""

# ── Routing Modes ──
ROUTING_MODES = ("simple", "advanced")
DEFAULT_ROUTING_MODE = "simple"
ADVANCED_ROUTING_MODE = "advanced"

# ── Geography ──
DEFAULT_COUNTRY = "United States"
DEFAULT_COUNTRY_CODE = "US"

# Home region for a warehouse whose address.state is missing or unrecognized.
# Placeholder carried over from the dashboard, not a geographic choice.
FALLBACK_HOME_REGION = "Mountain"

# ── Proximity Scores (lower = closer) ──
SCORE_SAME_REGION = 0
SCORE_ADJACENT_REGION = 1
SCORE_FAR_REGION = 2

# ── Assignment IDs ──
ASSIGNMENT_ID_PREFIX = "assignment"

# ── Resolver Reason Codes ──
REASON_NO_CONFIG = "NO_CONFIG"
REASON_REGION_ROUTING_DISABLED = "REGION_ROUTING_DISABLED"
REASON_NO_SHIPPING_STATE = "NO_SHIPPING_STATE"
REASON_REGION_MATCH = "REGION_MATCH"
REASON_NO_REGION_MATCH = "NO_REGION_MATCH"
