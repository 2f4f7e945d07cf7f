"""Quaternion value type: q = real + i·i + j·j + k·k.

Unit quaternions act as 3D rotation operators (see rotations.py).  The
product ``q1 * q2`` is the Hamilton product q1∘q2 and is not commutative.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pointmotion.shared.errors import DomainError
from .vector import Vector3


@dataclass(slots=True)
class Quaternion:
    real: float = 0.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    def __add__(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(self.real + other.real, self.i + other.i,
                          self.j + other.j, self.k + other.k)

    def __mul__(self, q: "Quaternion") -> "Quaternion":
        a1, b1, c1, d1 = self.real, self.i, self.j, self.k
        a2, b2, c2, d2 = q.real, q.i, q.j, q.k
        return Quaternion(
            a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
            a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
            a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
            a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
        )

    def scale(self, scalar: float) -> "Quaternion":
        return Quaternion(self.real * scalar, self.i * scalar,
                          self.j * scalar, self.k * scalar)

    def norm(self) -> float:
        return math.sqrt(self.real * self.real + self.i * self.i
                         + self.j * self.j + self.k * self.k)

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.real, -self.i, -self.j, -self.k)

    def inverse(self) -> "Quaternion":
        """q⁻¹ = conj(q) / |q|².  Raises DomainError for the zero quaternion."""
        n = self.norm()
        if n == 0:
            raise DomainError("Cannot compute inverse of a zero quaternion")
        return self.conjugate().scale(1.0 / (n * n))

    @property
    def vector(self) -> Vector3:
        return Vector3(self.i, self.j, self.k)

    @classmethod
    def from_vector(cls, v: Vector3) -> "Quaternion":
        """Pure quaternion (real part 0) carrying *v*."""
        return cls(0.0, v.x, v.y, v.z)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """cos(angle/2) + sin(angle/2)·axiŝ.  A zero axis yields the real scalar cos(angle/2)."""
        half = angle / 2.0
        rot = cls.from_vector(axis.normalized()).scale(math.sin(half))
        rot.real += math.cos(half)
        return rot

    def __str__(self) -> str:
        return f"{self.real:.2f} + {self.i:.2f}i + {self.j:.2f}j + {self.k:.2f}k"
