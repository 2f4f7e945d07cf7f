"""Shape factory for Rotatable point clouds.

Every shape is laid out in a canonical local frame centred at the origin,
planar shapes in the XY plane with normal ``south()`` (+Z), then moved with
``set_centre`` and, for planar shapes, turned with ``set_normal``.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List

from pointmotion.modules.m1_vector_math import Vector3, fibonacci_sphere
from pointmotion.shared.constants import MIN_CIRCLE_POINTS, MIN_RECTANGLE_POINTS
from pointmotion.shared.errors import InvalidArgumentError
from .rotatable import Rotatable

log = logging.getLogger(__name__)


def _place(points: List[Vector3], canonical_normal: Vector3, centre: Vector3,
           normal: "Vector3 | None" = None) -> Rotatable:
    obj = Rotatable(Vector3.zero(), canonical_normal, points)
    obj.set_centre(centre)
    if normal is not None:
        obj.set_normal(normal)
    return obj


def circle(centre: Vector3, radius: float, point_count: int, normal: Vector3) -> Rotatable:
    """*point_count* points evenly spaced by angle on a circle of *radius*."""
    if point_count < MIN_CIRCLE_POINTS:
        raise InvalidArgumentError(
            f"A circle needs at least {MIN_CIRCLE_POINTS} points, got {point_count}")
    if radius <= 0:
        raise InvalidArgumentError(f"Circle radius must be positive, got {radius}")

    # n-th roots of unity scaled by the radius
    points = []
    for i in range(point_count):
        angle = 2 * math.pi * i / point_count
        points.append(Vector3(radius * math.cos(angle), radius * math.sin(angle), 0.0))

    log.debug("circle: r=%.3f, %d points", radius, point_count)
    return _place(points, Vector3.south(), centre, normal)


def rectangle(centre: Vector3, width: float, height: float, point_count: int,
              normal: Vector3) -> Rotatable:
    """*point_count* points spread evenly by arc length along the perimeter.

    The walk starts at the bottom-left corner and runs bottom → right → top →
    left, so each edge gets a share of points proportional to its length.
    """
    if point_count < MIN_RECTANGLE_POINTS:
        raise InvalidArgumentError(
            f"A rectangle needs at least {MIN_RECTANGLE_POINTS} points, got {point_count}")
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(
            f"Rectangle sides must be positive, got {width} x {height}")

    half_w, half_h = width / 2.0, height / 2.0
    perimeter = 2 * (width + height)

    points = []
    for i in range(point_count):
        d = (i / point_count) * perimeter
        if d < width:                               # bottom, left → right
            x, y = -half_w + d, -half_h
        elif d < width + height:                    # right, bottom → top
            x, y = half_w, -half_h + (d - width)
        elif d < 2 * width + height:                # top, right → left
            x, y = half_w - (d - (width + height)), half_h
        else:                                       # left, top → bottom
            x, y = -half_w, half_h - (d - (2 * width + height))
        points.append(Vector3(x, y, 0.0))

    log.debug("rectangle: %.3f x %.3f, %d points", width, height, point_count)
    return _place(points, Vector3.south(), centre, normal)


def sphere(centre: Vector3, radius: float, point_count: int) -> Rotatable:
    # fibonacci_sphere validates point_count and radius
    points = fibonacci_sphere(point_count, radius)
    log.debug("sphere: r=%.3f, %d points", radius, point_count)
    return _place(points, Vector3.east(), centre)


def star(centre: Vector3, radius: float, branch_count: int, points_per_branch: int) -> Rotatable:
    """Radial branches along Fibonacci-sphere directions.

    Point j of a branch sits at ``(radius / points_per_branch) * (j + 1)``
    from the centre, so the outermost point of every branch is at *radius*.
    Points are ordered branch by branch.
    """
    if points_per_branch < 1:
        raise InvalidArgumentError(
            f"A star branch needs at least 1 point, got {points_per_branch}")

    roots = fibonacci_sphere(branch_count, radius)
    step = radius / points_per_branch

    points = []
    for root in roots:
        unit_step = root.normalized().scale(step)
        points.extend(unit_step * (j + 1) for j in range(points_per_branch))

    log.debug("star: r=%.3f, %d branches x %d points", radius, branch_count, points_per_branch)
    return _place(points, Vector3.east(), centre)


class ShapeFactory:
    """Name → builder lookup, for callers that select shapes from config or CLI."""

    BUILDERS: Dict[str, Callable[..., Rotatable]] = {
        "circle": circle,
        "rectangle": rectangle,
        "sphere": sphere,
        "star": star,
    }

    @staticmethod
    def create(shape: str, *args, **kwargs) -> Rotatable:
        builder = ShapeFactory.BUILDERS.get(shape)
        if builder is None:
            raise InvalidArgumentError(f"Unknown shape: {shape}")
        return builder(*args, **kwargs)
