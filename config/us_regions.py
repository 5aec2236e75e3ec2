"""
US state and region reference data for warehouse routing.
50 states partitioned into 9 regions, plus the hand-authored region adjacency
table used for proximity scoring.
"""

REGIONS = [
    "New England",
    "Mid-Atlantic",
    "Southeast",
    "Great Lakes",
    "Plains",
    "South Central",
    "Mountain",
    "Pacific Northwest",
    "Pacific",
]

US_STATES = [
    {"code": "AL", "name": "Alabama",        "region": "Southeast"},
    {"code": "AK", "name": "Alaska",         "region": "Pacific Northwest"},
    {"code": "AZ", "name": "Arizona",        "region": "Mountain"},
    {"code": "AR", "name": "Arkansas",       "region": "South Central"},
    {"code": "CA", "name": "California",     "region": "Pacific"},
    {"code": "CO", "name": "Colorado",       "region": "Mountain"},
    {"code": "CT", "name": "Connecticut",    "region": "New England"},
    {"code": "DE", "name": "Delaware",       "region": "Mid-Atlantic"},
    {"code": "FL", "name": "Florida",        "region": "Southeast"},
    {"code": "GA", "name": "Georgia",        "region": "Southeast"},
    {"code": "HI", "name": "Hawaii",         "region": "Pacific"},
    {"code": "ID", "name": "Idaho",          "region": "Mountain"},
    {"code": "IL", "name": "Illinois",       "region": "Great Lakes"},
    {"code": "IN", "name": "Indiana",        "region": "Great Lakes"},
    {"code": "IA", "name": "Iowa",           "region": "Plains"},
    {"code": "KS", "name": "Kansas",         "region": "Plains"},
    {"code": "KY", "name": "Kentucky",       "region": "Southeast"},
    {"code": "LA", "name": "Louisiana",      "region": "South Central"},
    {"code": "ME", "name": "Maine",          "region": "New England"},
    {"code": "MD", "name": "Maryland",       "region": "Mid-Atlantic"},
    {"code": "MA", "name": "Massachusetts",  "region": "New England"},
    {"code": "MI", "name": "Michigan",       "region": "Great Lakes"},
    {"code": "MN", "name": "Minnesota",      "region": "Plains"},
    {"code": "MS", "name": "Mississippi",    "region": "Southeast"},
    {"code": "MO", "name": "Missouri",       "region": "Plains"},
    {"code": "MT", "name": "Montana",        "region": "Mountain"},
    {"code": "NE", "name": "Nebraska",       "region": "Plains"},
    {"code": "NV", "name": "Nevada",         "region": "Mountain"},
    {"code": "NH", "name": "New Hampshire",  "region": "New England"},
    {"code": "NJ", "name": "New Jersey",     "region": "Mid-Atlantic"},
    {"code": "NM", "name": "New Mexico",     "region": "Mountain"},
    {"code": "NY", "name": "New York",       "region": "Mid-Atlantic"},
    {"code": "NC", "name": "North Carolina", "region": "Southeast"},
    {"code": "ND", "name": "North Dakota",   "region": "Plains"},
    {"code": "OH", "name": "Ohio",           "region": "Great Lakes"},
    {"code": "OK", "name": "Oklahoma",       "region": "South Central"},
    {"code": "OR", "name": "Oregon",         "region": "Pacific Northwest"},
    {"code": "PA", "name": "Pennsylvania",   "region": "Mid-Atlantic"},
    {"code": "RI", "name": "Rhode Island",   "region": "New England"},
    {"code": "SC", "name": "South Carolina", "region": "Southeast"},
    {"code": "SD", "name": "South Dakota",   "region": "Plains"},
    {"code": "TN", "name": "Tennessee",      "region": "Southeast"},
    {"code": "TX", "name": "Texas",          "region": "South Central"},
    {"code": "UT", "name": "Utah",           "region": "Mountain"},
    {"code": "VT", "name": "Vermont",        "region": "New England"},
    {"code": "VA", "name": "Virginia",       "region": "Southeast"},
    {"code": "WA", "name": "Washington",     "region": "Pacific Northwest"},
    {"code": "WV", "name": "West Virginia",  "region": "Southeast"},
    {"code": "WI", "name": "Wisconsin",      "region": "Great Lakes"},
    {"code": "WY", "name": "Wyoming",        "region": "Mountain"},
]

# Entered by hand, not derived from coordinates. Symmetric by convention.
REGION_ADJACENCY = {
    "New England":       ["Mid-Atlantic"],
    "Mid-Atlantic":      ["New England", "Southeast", "Great Lakes"],
    "Southeast":         ["Mid-Atlantic", "Great Lakes", "South Central"],
    "Great Lakes":       ["Mid-Atlantic", "Southeast", "Plains"],
    "Plains":            ["Great Lakes", "South Central", "Mountain"],
    "South Central":     ["Southeast", "Plains", "Mountain"],
    "Mountain":          ["Plains", "South Central", "Pacific Northwest", "Pacific"],
    "Pacific Northwest": ["Mountain", "Pacific"],
    "Pacific":           ["Pacific Northwest", "Mountain"],
}

# Quick lookups
STATE_CODES = [s["code"] for s in US_STATES]
STATE_NAMES = {s["code"]: s["name"] for s in US_STATES}
STATE_REGIONS = {s["code"]: s["region"] for s in US_STATES}
STATE_NAME_TO_CODE = {s["name"].upper(): s["code"] for s in US_STATES}
REGION_STATES = {
    region: sorted(s["code"] for s in US_STATES if s["region"] == region)
    for region in REGIONS
}

# 6+5+10+5+7+4+8+3+2 = 50
TOTAL_STATES = len(STATE_CODES)
