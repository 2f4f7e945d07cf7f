"""Canned animations built on a template point cloud.

Each recipe copies its template once per frame, poses the copy and snapshots
it, so the template itself is never mutated.

    StaticAnimation      — a single frame, shown for a full second
    SpinningAnimation    — spins about an axis that itself precesses about up
    RollingAnimation     — orbits a pivot while rolling without slipping
    HorizontalAnimation  — eases back and forth between two positions
"""

from __future__ import annotations

import logging
import math

from pointmotion.modules.m1_vector_math import Vector3, interpolate, rotate_vector
from pointmotion.modules.m2_primitives import Primitive, Rotatable
from pointmotion.modules.m3_frames import Frame, Sequence, SequenceBuilder
from pointmotion.shared.constants import (
    ROLL_FRAMES, SLIDE_FRAMES, SPIN_FRAMES, STATIC_TICKS_PER_FRAME,
)
from pointmotion.shared.errors import InvalidArgumentError
from pointmotion.shared.mem_profile import profile_memory
from .animation import Animation

log = logging.getLogger(__name__)

ROLL_ORBITS: int = 5


def _check_frames(frames: int) -> int:
    if frames < 2:
        raise InvalidArgumentError(f"An animated recipe needs at least 2 frames, got {frames}")
    return frames


class StaticAnimation(Animation):
    ticks_per_frame = STATIC_TICKS_PER_FRAME

    def __init__(self, primitive: Primitive):
        super().__init__()
        self.primitive = primitive.copy()

    def generate_sequence(self) -> Sequence:
        return SequenceBuilder().add_frame(Frame.from_primitive(self.primitive)).build()


class SpinningAnimation(Animation):
    """One full precession of the spin axis and two full spins per loop."""

    def __init__(self, template: Rotatable, frames: int = SPIN_FRAMES,
                 axis: "Vector3 | None" = None):
        super().__init__()
        self.template = template.copy()
        self.frames = _check_frames(frames)
        self.axis = (axis or Vector3(1.0, 1.0, 0.0)).normalized()

    @profile_memory
    def generate_sequence(self) -> Sequence:
        axis_step = 2 * math.pi / self.frames
        spin_step = 4 * math.pi / self.frames

        builder = SequenceBuilder()
        for i in range(self.frames):
            pose = self.template.copy()
            current_axis = rotate_vector(Vector3.up(), axis_step * i, self.axis)
            pose.rotate(spin_step * i, current_axis)
            builder.add_frame(Frame.from_primitive(pose))
        return builder.build_velocity(looping=True)


class RollingAnimation(Animation):
    """Orbit the template's centre at two radii out, rolling as it goes.

    The template is turned to face north and pushed ``2 * radius`` along
    that normal; every frame then orbits it about ``up()`` through the
    original centre and spins it about the radial axis by the angle that
    covers the same arc length at *radius* (rolling without slipping).
    """

    def __init__(self, template: Rotatable, radius: float, frames: int = ROLL_FRAMES,
                 orbits: int = ROLL_ORBITS):
        super().__init__()
        if radius <= 0:
            raise InvalidArgumentError(f"Rolling radius must be positive, got {radius}")
        if orbits < 1:
            raise InvalidArgumentError(f"Need at least one orbit, got {orbits}")
        self.template = template.copy()
        self.radius = radius
        self.frames = _check_frames(frames)
        self.orbits = orbits

    @profile_memory
    def generate_sequence(self) -> Sequence:
        template = self.template.copy()
        pivot = template.centre
        template.set_normal(Vector3.north())
        orbit_radius = 2 * self.radius
        template.offset(template.normal.scale(orbit_radius))

        orbit_step = 2 * math.pi * self.orbits / self.frames
        roll_step = orbit_step * orbit_radius / self.radius

        builder = SequenceBuilder()
        for i in range(self.frames):
            pose = template.copy()
            pose.rotate(orbit_step * i, Vector3.up(), pivot)
            pose.rotate(roll_step * i, pivot - pose.centre)
            builder.add_frame(Frame.from_primitive(pose))
        return builder.build_velocity(looping=True)


class HorizontalAnimation(Animation):
    """Slide from *start* to *end* and back with a cosine ease per loop."""

    def __init__(self, template: Rotatable, start: Vector3, end: Vector3,
                 frames: int = SLIDE_FRAMES):
        super().__init__()
        self.template = template.copy()
        self.start_pos = start.copy()
        self.end_pos = end.copy()
        self.frames = _check_frames(frames)

    @profile_memory
    def generate_sequence(self) -> Sequence:
        builder = SequenceBuilder()
        for i in range(self.frames):
            t = i / (self.frames - 1)
            t = 0.5 - 0.5 * math.cos(t * 2 * math.pi)
            pose = self.template.copy()
            pose.set_centre(interpolate(self.start_pos, self.end_pos, t))
            builder.add_frame(Frame.from_primitive(pose))
        return builder.build_velocity(looping=True)
