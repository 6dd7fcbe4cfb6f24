"""
Chain Configuration Package
===========================

Centralized default parameters for the 2D FABRIK chain.
All parameters are organized into logical modules:

- chain: Rest-pose geometry (segment count, segment length)
- motion: FABRIK solver parameters and interactive adjustment limits
- system: Logger name and debug switches

Usage:
    from chain_config import chain, motion, system

    # Or import specific values
    from chain_config.chain import DEFAULT_SEGMENT_COUNT
    from chain_config.motion import FABRIK_TOLERANCE
"""

from . import chain
from . import motion
from . import system

__version__ = '1.0.0'
__all__ = ['chain', 'motion', 'system']
