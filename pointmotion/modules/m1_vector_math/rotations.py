"""Axis-angle rotation of a vector by quaternion conjugation.

``rotate_vector`` is the single rotation primitive of the package; Rotatable,
the shape builders and every recipe rotate through it.
"""

from __future__ import annotations

from pointmotion.shared.errors import InvalidArgumentError
from .quaternion import Quaternion
from .vector import Vector3


def rotate_vector(axis: Vector3, angle: float, vector: Vector3) -> Vector3:
    """Rotate *vector* about *axis* by *angle* radians (right-hand rule).

    Computes the sandwich product ``a · v · a⁻¹`` with
    ``a = cos(angle/2) + sin(angle/2)·axiŝ``.  *axis* need not be unit
    length but must be non-zero.
    """
    if axis.magnitude() == 0:
        raise InvalidArgumentError("Can't rotate around a zero axis vector")

    a = Quaternion.from_axis_angle(axis, angle)
    rotated = (a * Quaternion.from_vector(vector)) * a.inverse()
    return rotated.vector
