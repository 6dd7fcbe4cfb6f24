"""
FABRIK 2D Inverse Kinematics Module

Forward And Backward Reaching Inverse Kinematics for a planar chain of
fixed-length segments.

Modules:
    - fabrik_solver: Chain class with the solve orchestrator (use this for IK solving)
    - fabrik_config: ChainConfig parameter bundle
    - fabrik_initialization: Rest-pose layout and segment-length helpers
    - fabrik_iteration: Forward reach, backward reach and out-of-reach stretch
    - vector2: Immutable 2D vector
"""

import logging

from chain_config import system as sys_config
from .vector2 import Vector2
from .fabrik_config import ChainConfig
from .fabrik_solver import Chain
from .fabrik_initialization import FabrikInitialization
from .fabrik_iteration import FabrikIteration

logging.getLogger(sys_config.LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    'Vector2',
    'ChainConfig',
    'Chain',
    'FabrikInitialization',
    'FabrikIteration'
]
