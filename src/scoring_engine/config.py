# Raw Power Score baseline: average total stats that maps to 100
RPS_BASELINE_TOTAL = 600

# Overall score weights (fixed)
RPS_WEIGHT = 0.75
DS_WEIGHT = 0.25

# Offense/defense ratio beyond which a team leans one way
STAT_BALANCE_RATIO = 1.2

# Unique type count thresholds for coverage labels
COVERAGE_EXCEPTIONAL_MIN = 8
COVERAGE_SOLID_MIN = 5

# Diversity tiers: (min unique types, grade, score), highest first
DIVERSITY_TIERS = [
    (10, "A", 100),
    (8, "B", 85),
    (6, "C", 70),
    (4, "D", 55),
    (2, "E", 40),
    (0, "F", 25),
]

# Overall score boundaries for the team tier
ROOKIE_TIER_MAX = 40
SOLID_TIER_MAX = 70

# Fallback text when no personality qualities resolve
DEFAULT_QUALITIES = "unique potential"

# Fallback dominant type when the roster carries no type tags
DEFAULT_DOMINANT_TYPE = "balanced"

# Ordinal fallbacks for unnamed roster members in the synergy paragraph
ORDINAL_FALLBACKS = (
    "Your first companion",
    "your second ally",
    "your third partner",
    "your fourth teammate",
    "Your fifth member",
    "your final addition",
)
