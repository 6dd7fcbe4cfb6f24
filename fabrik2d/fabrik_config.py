#!/usr/bin/env python3
"""
FABRIK Chain Configuration

Parameter bundle used to build (and rebuild) a uniform chain.
"""

from dataclasses import dataclass, replace

from chain_config import chain as chain_defaults
from chain_config import motion as motion_config


@dataclass
class ChainConfig:
    """Segment layout and solver limits for a uniform chain."""
    segment_count: int = chain_defaults.DEFAULT_SEGMENT_COUNT
    segment_length: float = chain_defaults.DEFAULT_SEGMENT_LENGTH
    tolerance: float = motion_config.FABRIK_TOLERANCE
    max_iterations: int = motion_config.FABRIK_MAX_ITERATIONS

    def adjusted(self, count_steps: int = 0, length_steps: int = 0) -> 'ChainConfig':
        """
        Return a copy with segment count/length moved by whole adjustment steps.

        Steps are scaled by SEGMENT_COUNT_STEP and SEGMENT_LENGTH_STEP. A step
        that would take either value below its minimum leaves that value
        unchanged, the same way the interactive front-ends ignore a decrement
        at the lower limit.

        Args:
            count_steps: Signed number of segment count steps
            length_steps: Signed number of segment length steps

        Returns:
            New ChainConfig; tolerance and max_iterations are carried over
        """
        segment_count = self.segment_count + count_steps * motion_config.SEGMENT_COUNT_STEP
        if segment_count < motion_config.MIN_SEGMENT_COUNT:
            segment_count = self.segment_count

        segment_length = self.segment_length + length_steps * motion_config.SEGMENT_LENGTH_STEP
        if segment_length < motion_config.MIN_SEGMENT_LENGTH:
            segment_length = self.segment_length

        return replace(self, segment_count=segment_count, segment_length=segment_length)
