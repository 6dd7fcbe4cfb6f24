#!/usr/bin/env python3
"""
Vector2 Module

Immutable 2D point/displacement value used for joints, origins and targets.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""
    x: float
    y: float

    # Assigned below the class body
    ZERO = None

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self * scalar

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_squared(other))

    def normalize(self) -> Vector2:
        """
        Unit vector in the same direction.

        A vector of exactly zero length normalizes to the zero vector instead
        of raising, so coincident joints yield a zero direction and the solver
        leaves that segment collapsed on its anchor rather than producing NaN.
        """
        length = self.length()
        if length == 0.0:
            return Vector2.ZERO
        return Vector2(self.x / length, self.y / length)

    def to_array(self) -> np.ndarray:
        """Return the vector as a numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def from_any(value) -> Vector2:
        """
        Coerce a point given as a Vector2, an (x, y) sequence or a numpy array.

        Args:
            value: Vector2, 2-element tuple/list, or array of shape (2,)

        Returns:
            Vector2 with float components

        Raises:
            ValueError: If the value does not describe a single 2D point
        """
        if isinstance(value, Vector2):
            return value
        try:
            arr = np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Cannot interpret {value!r} as a 2D point") from exc
        if arr.shape != (2,):
            raise ValueError(f"2D point must have shape (2,), got {arr.shape}")
        return Vector2(float(arr[0]), float(arr[1]))


Vector2.ZERO = Vector2(0.0, 0.0)
