"""
Chain Geometry Parameters
=========================
Rest-pose dimensions of the articulated chain.

Units are whatever the caller draws in (pixels for windowed front-ends,
character cells for terminal ones).
"""

# =============================================================================
# REST POSE
# =============================================================================

DEFAULT_SEGMENT_COUNT = 8
"""Number of rigid links in a freshly built chain"""

DEFAULT_SEGMENT_LENGTH = 50.0
"""Length shared by every link of a uniform chain"""

REST_POSE_DIRECTION = (0.0, -1.0)
"""Direction the rest pose extends from the origin (screen 'up' = -y)"""
