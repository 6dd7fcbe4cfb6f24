#!/usr/bin/env python3
"""
FABRIK Initialization Module

Generates the rest pose (cold start) of a chain and the segment-length
bookkeeping shared by construction and rebuild.
"""

from typing import List, Sequence

import numpy as np

from chain_config import chain as chain_defaults
from .vector2 import Vector2


class FabrikInitialization:
    """Rest-pose layout and segment-length helpers."""

    REST_DIRECTION = Vector2(*chain_defaults.REST_POSE_DIRECTION)

    @staticmethod
    def uniform_lengths(segment_count: int, segment_length: float) -> List[float]:
        """Lengths of a chain whose segments all share one length."""
        return [float(segment_length)] * max(0, segment_count)

    @staticmethod
    def create_straight_chain(origin: Vector2, lengths: Sequence[float]) -> List[Vector2]:
        """
        Lay joints out in a straight line from origin (cold start).

        Each joint sits its segment length further along REST_DIRECTION than
        the previous one, so with the default direction x stays constant and
        y decreases.

        Returns:
            List of len(lengths) + 1 joints, starting with origin
        """
        joints = [origin]
        pos = origin
        for length in lengths:
            pos = pos + FabrikInitialization.REST_DIRECTION * length
            joints.append(pos)
        return joints

    @staticmethod
    def calculate_total_length(lengths: Sequence[float]) -> float:
        """Maximum reach of the chain."""
        return float(sum(lengths))

    @staticmethod
    def calculate_joint_distances(points: np.ndarray) -> np.ndarray:
        """
        Calculate distances between consecutive joints.

        Args:
            points: Array of shape (num_joints, 2)

        Returns:
            Array of distances of shape (num_joints-1,)
        """
        if len(points) < 2:
            return np.zeros(0, dtype=np.float64)
        return np.linalg.norm(np.diff(points, axis=0), axis=1)

    @staticmethod
    def validate_joints(points: np.ndarray) -> bool:
        """Validate a joint array: shape (n, 2) with n >= 1 and finite values."""
        if points.ndim != 2 or points.shape[1] != 2:
            return False
        if points.shape[0] < 1:
            return False
        if not np.all(np.isfinite(points)):
            return False
        return True
