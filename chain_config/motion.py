"""
Motion Parameters
=================
Parameters for the FABRIK solver and for interactive chain adjustment.
"""

# =============================================================================
# FABRIK IK SOLVER
# =============================================================================

FABRIK_TOLERANCE = 0.5
"""End-effector to target distance at which a solve counts as converged"""

FABRIK_MAX_ITERATIONS = 10
"""Hard cap on forward/backward rounds per solve call"""

# =============================================================================
# INTERACTIVE ADJUSTMENT
# =============================================================================

MIN_SEGMENT_COUNT = 1
"""Lowest segment count reachable through ChainConfig.adjusted()"""

MIN_SEGMENT_LENGTH = 2.0
"""Lowest segment length reachable through ChainConfig.adjusted()"""

SEGMENT_COUNT_STEP = 1
"""Segment count change per adjustment step"""

SEGMENT_LENGTH_STEP = 5.0
"""Segment length change per adjustment step"""
