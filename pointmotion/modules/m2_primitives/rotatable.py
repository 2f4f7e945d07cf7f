"""
#WHERE
    Built by builder.py (circle / rectangle / sphere / star), consumed by
    m3_frames.FrameBuilder.add_primitive and the playback recipes.

#WHAT
    Oriented point cloud: a rigid set of points with a centre and a unit
    orientation normal.  Supports translation, rotation about any pivot and
    reorientation of the normal; ``copy()`` is a total deep copy.

#INPUT
    Centre, unit normal and a list of Vector3 points.

#OUTPUT
    Mutated Rotatable state; copies of points / centre / normal on read.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from pointmotion.modules.m1_vector_math import Vector3, cross, dot, rotate_vector
from pointmotion.shared.constants import COLINEAR_TOLERANCE
from pointmotion.shared.errors import FatalError, InvalidArgumentError

log = logging.getLogger(__name__)


class _Alignment(enum.Enum):
    SAME = "same"           # colinear, same direction
    OPPOSITE = "opposite"   # colinear, antiparallel
    GENERAL = "general"


def _classify(cos_angle: float) -> _Alignment:
    if cos_angle >= 1.0 - COLINEAR_TOLERANCE:
        return _Alignment.SAME
    if cos_angle <= -1.0 + COLINEAR_TOLERANCE:
        return _Alignment.OPPOSITE
    return _Alignment.GENERAL


def _perpendicular_axis(normal: Vector3) -> Vector3:
    """Any axis perpendicular to *normal*, for the antiparallel half-turn."""
    axis = Vector3(-normal.y, normal.x, 0.0)
    if axis == Vector3.zero():
        axis = Vector3(normal.z, 0.0, -normal.x)
        if axis.magnitude() == 0:
            raise FatalError(f"No perpendicular axis for normal {normal}")
    return axis


class Rotatable:
    """Rigid point cloud with a centre and a unit orientation normal."""

    __slots__ = ("_points", "_centre", "_normal")

    def __init__(self, centre: Vector3, normal: Vector3, points: Iterable[Vector3]):
        # *normal* must already be unit length; builders guarantee this.
        self._centre = centre.copy()
        self._normal = normal.copy()
        self._points: List[Vector3] = [p.copy() for p in points]

    # ── accessors (always copies) ────────────────────────────────

    @property
    def points(self) -> List[Vector3]:
        return [p.copy() for p in self._points]

    @property
    def centre(self) -> Vector3:
        return self._centre.copy()

    @property
    def normal(self) -> Vector3:
        return self._normal.copy()

    def to_array(self) -> np.ndarray:
        """(N, 3) float64 array of the current point positions."""
        if not self._points:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([p.to_list() for p in self._points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return (f"Rotatable(points={len(self._points)}, centre={self._centre}, "
                f"normal={self._normal})")

    # ── translation ──────────────────────────────────────────────

    def set_centre(self, centre: Vector3) -> None:
        delta = centre - self._centre
        for p in self._points:
            p.add(delta)
        self._centre.set(centre)

    def offset(self, delta: Vector3) -> None:
        self.set_centre(self._centre + delta)

    # ── rotation ─────────────────────────────────────────────────

    def rotate(self, angle: float, axis: Vector3, pivot: Optional[Vector3] = None) -> None:
        """Rotate normal, centre and points by *angle* about *axis* through *pivot*.

        *pivot* defaults to the cloud's own centre, in which case the centre
        does not move.
        """
        pivot = self._centre.copy() if pivot is None else pivot.copy()

        self._normal.set(rotate_vector(axis, angle, self._normal).normalize())

        if self._centre != pivot:
            rel = rotate_vector(axis, angle, self._centre - pivot)
            self._centre.set(rel + pivot)

        for p in self._points:
            rel = rotate_vector(axis, angle, p - pivot)
            p.set(rel + pivot)

    def set_normal(self, normal: Vector3) -> None:
        """Reorient the whole cloud so its normal points along *normal*."""
        if normal.magnitude() == 0:
            raise InvalidArgumentError("Normal cannot be the zero vector")
        target = normal.normalized()

        if self._normal == Vector3.zero() or self._normal == target:
            return

        cos_angle = max(-1.0, min(1.0, dot(self._normal, target)))
        alignment = _classify(cos_angle)

        if alignment is _Alignment.SAME:
            self._normal.set(target)
            return
        if alignment is _Alignment.OPPOSITE:
            self.rotate(math.pi, _perpendicular_axis(self._normal))
        else:
            self.rotate(math.acos(cos_angle), cross(self._normal, target).normalize())

        # Overwrite to stop drift accumulating over repeated reorientations.
        self._normal.set(target)
        log.debug("Reoriented %d points: %s", len(self._points), alignment.value)

    # ── copy ─────────────────────────────────────────────────────

    def copy(self) -> "Rotatable":
        return Rotatable(self._centre, self._normal, self._points)
