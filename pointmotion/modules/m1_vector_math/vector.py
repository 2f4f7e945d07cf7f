"""
#WHERE
    Used by quaternion.py, rotations.py, sphere.py, m2_primitives (Rotatable,
    shape builders), m3_frames (FrameBuilder) and the playback recipes.

#WHAT
    Mutable 3D vector value type.  Arithmetic operators return new vectors;
    ``set``, ``add``, ``scale`` and ``normalize`` work in place and return
    ``self`` so they can be chained.  Equality is exact per component.

    Axis helpers follow the host world convention (Y up, Z south):
        up (0, 1, 0)     down (0, -1, 0)
        north (0, 0, -1) south (0, 0, 1)
        east (1, 0, 0)   west (-1, 0, 0)

#INPUT
    Three floats, another Vector3, or a length-3 array.

#OUTPUT
    Vector3 instances, floats (dot, magnitude), numpy arrays (to_array).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence

import numpy as np

from pointmotion.shared.errors import InvalidArgumentError

if TYPE_CHECKING:
    from .quaternion import Quaternion


@dataclass(slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # ── in-place mutation ────────────────────────────────────────

    def set(self, x: "float | Vector3", y: float = 0.0, z: float = 0.0) -> "Vector3":
        if isinstance(x, Vector3):
            x, y, z = x.x, x.y, x.z
        self.x, self.y, self.z = float(x), float(y), float(z)
        return self

    def add(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def scale(self, scalar: float) -> "Vector3":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def normalize(self) -> "Vector3":
        """Scale to unit length.  The zero vector is left untouched."""
        mag = self.magnitude()
        if mag == 0:
            return self
        return self.scale(1.0 / mag)

    # ── value operations ─────────────────────────────────────────

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def normalized(self) -> "Vector3":
        return self.copy().normalize()

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # ── constructors ─────────────────────────────────────────────

    @classmethod
    def from_array(cls, values: "Sequence[float] | np.ndarray") -> "Vector3":
        if len(values) != 3:
            raise InvalidArgumentError(f"Expected 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_quaternion(cls, q: "Quaternion") -> "Vector3":
        return cls(q.i, q.j, q.k)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> "Vector3":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def north(cls) -> "Vector3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def south(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def east(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def west(cls) -> "Vector3":
        return cls(-1.0, 0.0, 0.0)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def difference(a: Vector3, b: Vector3) -> Vector3:
    """Vector pointing from *b* to *a*."""
    return a - b


def interpolate(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation, ``a`` at t=0 and ``b`` at t=1 (t is not clamped)."""
    return Vector3(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )
