#!/usr/bin/env python3
"""
FABRIK Solver - Chain
=====================
The 2D kinematic chain and the orchestration of a complete FABRIK solve.
Encapsulates construction, rebuild, origin updates, the reachability check
and the iteration loop with convergence checking.
"""

import logging
import warnings
from typing import Dict, List, Optional, Sequence

import numpy as np

from chain_config import system as sys_config
from .fabrik_config import ChainConfig
from .fabrik_initialization import FabrikInitialization
from .fabrik_iteration import FabrikIteration
from .vector2 import Vector2

logger = logging.getLogger(__name__)


class Chain:
    """
    A kinematic chain of joints solved toward a target with FABRIK.

    Attributes:
        joints: Joint positions; joints[0] is the base, joints[-1] the end effector
        lengths: Fixed distance between joints[i] and joints[i + 1]
        tolerance: Convergence distance for the end effector
        max_iterations: Hard cap on forward/backward rounds per solve
    """

    def __init__(self, origin, config: Optional[ChainConfig] = None):
        """
        Create a uniform chain extending from origin in the rest pose.

        Args:
            origin: Anchor position for the base (Vector2 or (x, y))
            config: Segment layout and solver limits (defaults if None)
        """
        if config is None:
            config = ChainConfig()
        if config.segment_count < 0:
            warnings.warn(
                f"Negative segment_count {config.segment_count}; building a single-joint chain",
                RuntimeWarning, stacklevel=2)

        self.joints: List[Vector2] = []
        self._build(
            Vector2.from_any(origin),
            FabrikInitialization.uniform_lengths(config.segment_count, config.segment_length),
            config.tolerance,
            config.max_iterations,
        )

    @classmethod
    def with_lengths(cls,
                     origin,
                     lengths: Sequence[float],
                     tolerance: float,
                     max_iterations: int) -> 'Chain':
        """
        Create a chain with individual segment lengths, in the rest pose.

        An empty lengths sequence gives a single-joint chain with zero reach.
        Zero-length segments are accepted as they are.
        """
        chain = cls.__new__(cls)
        chain.joints = []
        chain._build(Vector2.from_any(origin), [float(length) for length in lengths],
                     tolerance, max_iterations)
        return chain

    def _build(self, origin: Vector2, lengths: List[float],
               tolerance: float, max_iterations: int) -> None:
        if any(length < 0 for length in lengths):
            warnings.warn("Negative segment length; chain geometry is degenerate",
                          RuntimeWarning, stacklevel=3)
        if tolerance < 0:
            warnings.warn(f"Negative tolerance {tolerance}; its magnitude is used",
                          RuntimeWarning, stacklevel=3)
        if max_iterations < 1:
            warnings.warn(f"max_iterations {max_iterations} < 1; reachable targets are never iterated",
                          RuntimeWarning, stacklevel=3)

        self._origin = origin
        self.lengths = lengths
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self._total_length = FabrikInitialization.calculate_total_length(lengths)
        # Same list object for the lifetime of the chain
        self.joints[:] = FabrikInitialization.create_straight_chain(origin, lengths)

        logger.debug('Chain built: %d segments, total length %.3f',
                     len(lengths), self._total_length)

    def rebuild(self, config: ChainConfig) -> None:
        """
        Rebuild the chain with a new config at the current origin.

        The previous pose is discarded, not migrated; solve again toward the
        last target to restore continuity.
        """
        self._build(
            self._origin,
            FabrikInitialization.uniform_lengths(config.segment_count, config.segment_length),
            config.tolerance,
            config.max_iterations,
        )

    def reset_pose(self) -> None:
        """Put the current segments back into the rest pose at the origin."""
        self.joints[:] = FabrikInitialization.create_straight_chain(self._origin, self.lengths)

    def set_origin(self, origin) -> None:
        """
        Move the anchor. Only joints[0] is updated; call solve() afterwards
        to bring the rest of the chain back into a consistent pose.
        """
        self._origin = Vector2.from_any(origin)
        self.joints[0] = self._origin

    def origin(self) -> Vector2:
        return self._origin

    def total_length(self) -> float:
        """Total reach of the chain."""
        return self._total_length

    def joint_count(self) -> int:
        return len(self.joints)

    def segment_count(self) -> int:
        return len(self.lengths)

    def end_effector(self) -> Vector2:
        return self.joints[-1]

    def is_reachable(self, target) -> bool:
        """True if target lies strictly inside the chain's reach from the base."""
        target = Vector2.from_any(target)
        return self.joints[0].distance_squared(target) < self._total_length * self._total_length

    def joints_array(self) -> np.ndarray:
        """Joint positions as an array of shape (joint_count, 2)."""
        return np.array([[joint.x, joint.y] for joint in self.joints], dtype=np.float64)

    def segment_distances(self) -> np.ndarray:
        """Current distances between consecutive joints."""
        return FabrikInitialization.calculate_joint_distances(self.joints_array())

    def max_length_error(self) -> float:
        """Largest deviation of any segment from its fixed length."""
        if not self.lengths:
            return 0.0
        errors = np.abs(self.segment_distances() - np.asarray(self.lengths, dtype=np.float64))
        return float(errors.max())

    def solve(self, target) -> Dict:
        """
        Solve IK toward target using FABRIK.

        The current joints[0] is the fixed base. Targets at or beyond the
        chain's reach are answered with the fully stretched chain in a single
        pass; otherwise forward and backward reaching alternate until the end
        effector is within tolerance or max_iterations rounds have run. The
        joint list is rewritten in place and no error is raised.

        Args:
            target: Target end-effector position (Vector2 or (x, y))

        Returns:
            Dictionary containing:
                - 'reachable': bool - Whether the iterative branch was used
                - 'converged': bool - Whether the end effector ended within tolerance
                - 'iterations': int - Number of forward/backward rounds run
                - 'final_error': float - End effector to target distance
        """
        target = Vector2.from_any(target)
        base = self.joints[0]

        reachable = base.distance_squared(target) < self._total_length * self._total_length
        iterations = 0

        if not reachable:
            FabrikIteration.stretch_toward(self.joints, self.lengths, base, target)
        else:
            tolerance_sq = self.tolerance * self.tolerance
            last = len(self.joints) - 1
            for _ in range(self.max_iterations):
                if self.joints[last].distance_squared(target) < tolerance_sq:
                    break
                FabrikIteration.iterate_once(self.joints, self.lengths, target, base)
                iterations += 1

        final_error = self.joints[-1].distance(target)

        if sys_config.debug_enabled():
            logger.debug('solve target=(%.3f, %.3f) reachable=%s iterations=%d error=%.6f',
                         target.x, target.y, reachable, iterations, final_error)

        return {
            'reachable': reachable,
            'converged': final_error <= abs(self.tolerance),
            'iterations': iterations,
            'final_error': final_error,
        }

    def __repr__(self) -> str:
        return (f'Chain(origin={self._origin!r}, segments={len(self.lengths)}, '
                f'total_length={self._total_length!r})')
