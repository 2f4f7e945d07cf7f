"""
#WHERE
    Built by the playback recipes (one frame per pose) and by tests;
    collected into a Sequence by sequence.py.

#WHAT
    One animation time sample: an (N, 6) float64 array of point records
    [px, py, pz, vx, vy, vz].  Velocity is the displacement the renderer
    extrapolates towards over the frame's display duration.

#INPUT
    Explicit position / velocity pairs, or primitive snapshots.

#OUTPUT
    Read-only Frame.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m2_primitives import Primitive
from pointmotion.shared.errors import InvalidArgumentError

log = logging.getLogger(__name__)

RECORD_SIZE = 6


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


class Frame:
    __slots__ = ("_points",)

    def __init__(self, points: np.ndarray):
        points = np.array(points, dtype=np.float64, copy=True)
        if points.size == 0:
            points = points.reshape(0, RECORD_SIZE)
        if points.ndim != 2 or points.shape[1] != RECORD_SIZE:
            raise InvalidArgumentError(
                f"Frame records must have shape (N, {RECORD_SIZE}), got {points.shape}")
        self._points = _readonly(points)

    @property
    def points(self) -> np.ndarray:
        """(N, 6) read-only array."""
        return self._points

    @property
    def positions(self) -> np.ndarray:
        return self._points[:, :3]

    @property
    def velocities(self) -> np.ndarray:
        return self._points[:, 3:]

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Frame(points={len(self)})"

    @classmethod
    def builder(cls) -> "FrameBuilder":
        return FrameBuilder()

    @classmethod
    def from_primitive(cls, primitive: Primitive,
                       next_state: Optional[Primitive] = None) -> "Frame":
        return FrameBuilder().add_primitive(primitive, next_state).build()


class FrameBuilder:
    def __init__(self) -> None:
        self._records: List[List[float]] = []

    def add_point(self, position: Vector3, velocity: Optional[Vector3] = None) -> "FrameBuilder":
        velocity = velocity or Vector3.zero()
        self._records.append([position.x, position.y, position.z,
                              velocity.x, velocity.y, velocity.z])
        return self

    def add_primitive(self, current: Primitive,
                      next_state: Optional[Primitive] = None) -> "FrameBuilder":
        """Snapshot *current*'s points.

        With *next_state*, each point's velocity is its displacement to the
        matching point of *next_state*; otherwise velocities are zero.
        """
        points = current.points
        if next_state is None:
            for p in points:
                self.add_point(p)
            return self

        next_points = next_state.points
        if len(points) != len(next_points):
            raise InvalidArgumentError(
                f"Current and next state point counts differ: "
                f"{len(points)} != {len(next_points)}")
        for cur, nxt in zip(points, next_points):
            self.add_point(cur, nxt - cur)
        return self

    def build(self) -> Frame:
        if not self._records:
            return Frame(np.zeros((0, RECORD_SIZE)))
        return Frame(np.asarray(self._records, dtype=np.float64))
