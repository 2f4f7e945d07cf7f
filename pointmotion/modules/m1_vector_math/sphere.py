"""Fibonacci (golden-angle) point distribution on a sphere surface."""

from __future__ import annotations

import logging
from typing import List

import numpy as np

from pointmotion.shared.constants import GOLDEN_ANGLE, MIN_SPHERE_POINTS
from pointmotion.shared.errors import InvalidArgumentError
from .vector import Vector3

log = logging.getLogger(__name__)


def fibonacci_sphere_array(point_count: int, radius: float) -> np.ndarray:
    """(point_count, 3) array of near-uniform points on a sphere at the origin.

    Points run from the north pole (y = +radius) to the south pole
    (y = -radius); the output order is stable for identical inputs, which
    callers rely on for per-point identity across frames.
    """
    if point_count < MIN_SPHERE_POINTS:
        raise InvalidArgumentError(
            f"A sphere needs at least {MIN_SPHERE_POINTS} points, got {point_count}")
    if radius <= 0:
        raise InvalidArgumentError(f"Sphere radius must be positive, got {radius}")

    idx = np.arange(point_count, dtype=np.float64)
    y = 1.0 - (idx / (point_count - 1)) * 2.0          # 1 → -1
    ring = np.sqrt(np.clip(1.0 - y * y, 0.0, None))    # ring radius at y
    theta = GOLDEN_ANGLE * idx

    pts = np.column_stack([np.cos(theta) * ring, y, np.sin(theta) * ring])
    log.debug("fibonacci_sphere: %d points, r=%.3f", point_count, radius)
    return pts * radius


def fibonacci_sphere(point_count: int, radius: float) -> List[Vector3]:
    return [Vector3.from_array(row) for row in fibonacci_sphere_array(point_count, radius)]
