from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def with_y(self, y: float) -> Vector3:
        return Vector3(self.x, y, self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_array(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=float)

    @classmethod
    def from_array(cls, values: np.ndarray) -> Vector3:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


UP = Vector3(0.0, 1.0, 0.0)
DOWN = Vector3(0.0, -1.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)
BACK = Vector3(0.0, 0.0, -1.0)
LEFT = Vector3(-1.0, 0.0, 0.0)
RIGHT = Vector3(1.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rotation:
    """Unit quaternion ``w + xi + yj + zk`` describing an orientation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Rotation:
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vector3, degrees: float) -> Rotation:
        norm = axis.length()
        if norm == 0.0:
            raise ValueError("Rotation axis must be non-zero")
        half = math.radians(degrees) / 2.0
        scale = math.sin(half) / norm
        return cls(math.cos(half), axis.x * scale, axis.y * scale, axis.z * scale)

    def __mul__(self, other: Rotation) -> Rotation:
        """Compose so that ``other`` is applied first, in this rotation's frame."""

        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        product = np.array(
            (
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            )
        )
        product /= np.linalg.norm(product)
        return Rotation(*(float(value) for value in product))

    def as_matrix(self) -> np.ndarray:
        w, x, y, z = self.w, self.x, self.y, self.z
        return np.array(
            (
                (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)),
                (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)),
                (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)),
            )
        )

    def apply(self, vector: Vector3) -> Vector3:
        return Vector3.from_array(self.as_matrix() @ vector.as_array())

    def rotated_locally(self, axis: Vector3, degrees: float) -> Rotation:
        """Rotate about ``axis`` expressed in this orientation's local frame."""

        return self * Rotation.from_axis_angle(axis, degrees)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)
