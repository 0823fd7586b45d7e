"""
Immutable 2D vector used for all boid kinematics.
"""

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """
    2D vector with 32-bit float components.

    Every operation returns a new vector. Scalars are converted to float32
    before use so results stay in single precision.
    """

    x: np.float32 = np.float32(0.0)
    y: np.float32 = np.float32(0.0)

    def __post_init__(self):
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def mult(self, scalar: float) -> "Vector2":
        scalar = np.float32(scalar)
        return Vector2(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> "Vector2":
        """
        Divide both components by a scalar.

        Division by zero yields inf or NaN components rather than raising.
        """
        scalar = np.float32(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector2(self.x / scalar, self.y / scalar)

    def magnitude_squared(self) -> np.float32:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> np.float32:
        return np.sqrt(self.magnitude_squared())

    def limit(self, max_value: float) -> "Vector2":
        """
        Clamp the magnitude to max_value.

        Vectors already within the limit are returned as-is.
        """
        max_value = np.float32(max_value)
        magnitude_sq = self.magnitude_squared()
        if magnitude_sq > max_value * max_value:
            ratio = max_value / np.sqrt(magnitude_sq)
            return Vector2(self.x * ratio, self.y * ratio)
        return self

    def dist(self, other: "Vector2") -> np.float32:
        dx = other.x - self.x
        dy = other.y - self.y
        return np.sqrt(dx * dx + dy * dy)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag > 0:
            return Vector2(self.x / mag, self.y / mag)
        return self

    def heading(self) -> float:
        """Angle of the vector in radians, measured from the +x axis."""
        return math.atan2(float(self.y), float(self.x))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.mult(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        return self.div(scalar)

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({float(self.x)}, {float(self.y)})"


ZERO = Vector2(0.0, 0.0)
