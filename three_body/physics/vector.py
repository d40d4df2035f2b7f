"""Immutable 3D vector value type."""

import math
from dataclasses import dataclass
from typing import Mapping, Tuple

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """Three-component vector of 64-bit floats.

    Every operation returns a new instance; NaN/Inf are not checked and
    simply propagate.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Vector3":
        """Build a vector from a ``{x, y, z}`` mapping.

        Raises:
            KeyError: If a component is missing
        """
        return cls(float(data['x']), float(data['y']), float(data['z']))

    @classmethod
    def from_sequence(cls, values) -> "Vector3":
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def add(self, other: "Vector3") -> "Vector3":
        """Componentwise sum."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        """Componentwise difference ``self - other``."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def norm(self) -> float:
        """Euclidean length sqrt(x^2 + y^2 + z^2)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def l1_norm(self) -> float:
        """Manhattan length |x| + |y| + |z|."""
        return abs(self.x) + abs(self.y) + abs(self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> "Vector3":
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector3":
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)
