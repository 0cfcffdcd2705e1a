"""
Centralized Weights Configuration for EscapeArtist Agent

All heuristic weights, gating thresholds and time parameters in one place.
Modify values here to test different strategies.
"""

# ═══════════════════════════════════════════════════════════════
# WALL SCORING WEIGHTS
# ═══════════════════════════════════════════════════════════════

# score = LEADER * dLeader - SELF * dSelf + OTHER * dOther
WALL_IMPACT_ON_LEADER_WEIGHT = 100
WALL_IMPACT_ON_SELF_WEIGHT = 70
WALL_IMPACT_ON_OTHER_WEIGHT = 40

# A candidate must slow the leader by at least this many steps
MIN_IMPACT_ON_LEADER = 1


# ═══════════════════════════════════════════════════════════════
# WALL GATING THRESHOLDS (heuristic constants)
# ═══════════════════════════════════════════════════════════════

# Only start walling once the leader is closer than this to its goal
LEADER_DISTANCE_THRESHOLD = 4

# ...and only while the last live player is further than this from its goal
TRAILING_DISTANCE_THRESHOLD = 2


# ═══════════════════════════════════════════════════════════════
# TIME MANAGEMENT
# ═══════════════════════════════════════════════════════════════

# CodinGame gives 100ms per turn (1s on the first one)
MAX_TIME_PER_TURN = 0.090
FIRST_TURN_TIME = 0.900

# Stop evaluating new candidates when less than this is left
TIME_SAFETY_MARGIN = 0.010


# ═══════════════════════════════════════════════════════════════
# DEBUG
# ═══════════════════════════════════════════════════════════════

# Debug text goes to stderr (stdout is the command channel)
VERBOSE = True

# Dump the acting player's path field every turn (large output)
DUMP_PATH_FIELD = False

# Suffix appended to every command
DEFAULT_MESSAGE = "go go go!"
WALL_MESSAGE = "not so fast"
