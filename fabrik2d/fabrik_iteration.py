#!/usr/bin/env python3
"""
FABRIK Iteration Module

Implements the forward and backward reaching passes and the straight-line
stretch used when the target is out of reach. All passes rewrite the joint
list in place.
"""

from typing import List, Sequence

from .vector2 import Vector2


class FabrikIteration:
    """FABRIK passes over a joint list with fixed segment lengths."""

    @staticmethod
    def forward_reach(joints: List[Vector2],
                      lengths: Sequence[float],
                      target: Vector2) -> None:
        """
        Forward pass: pin the end effector to target and walk back to the base.

        Each joint is moved along the direction from the already-updated next
        joint toward its own current position, at its segment length. The
        base ends up detached from the origin.

        Args:
            joints: Joint positions, len(lengths) + 1 entries, modified in place
            lengths: Fixed distances between consecutive joints
            target: Target end-effector position
        """
        last = len(joints) - 1
        joints[last] = target

        for i in range(last - 1, -1, -1):
            direction = (joints[i] - joints[i + 1]).normalize()
            joints[i] = joints[i + 1] + direction * lengths[i]

    @staticmethod
    def backward_reach(joints: List[Vector2],
                       lengths: Sequence[float],
                       base: Vector2) -> None:
        """
        Backward pass: re-anchor the base and walk out to the end effector.

        Args:
            joints: Joint positions, modified in place
            lengths: Fixed distances between consecutive joints
            base: Anchor position for joints[0]
        """
        joints[0] = base

        for i in range(len(lengths)):
            direction = (joints[i + 1] - joints[i]).normalize()
            joints[i + 1] = joints[i] + direction * lengths[i]

    @staticmethod
    def stretch_toward(joints: List[Vector2],
                       lengths: Sequence[float],
                       base: Vector2,
                       target: Vector2) -> None:
        """
        Lay the chain out fully extended on the ray from base toward target.

        Used for unreachable targets, where the straight line is the exact
        answer and no iteration is needed. joints[0] is left where it is.
        """
        direction = (target - base).normalize()
        pos = base
        for i, length in enumerate(lengths):
            pos = pos + direction * length
            joints[i + 1] = pos

    @staticmethod
    def iterate_once(joints: List[Vector2],
                     lengths: Sequence[float],
                     target: Vector2,
                     base: Vector2) -> None:
        """One complete FABRIK round (forward reach, then backward reach)."""
        FabrikIteration.forward_reach(joints, lengths, target)
        FabrikIteration.backward_reach(joints, lengths, base)
