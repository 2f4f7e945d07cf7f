"""Named demo animations over the default template shapes."""

from __future__ import annotations

from typing import Dict

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m2_primitives import circle, rectangle, sphere, star
from pointmotion.shared import constants as C
from .animation import Animation
from .recipes import (
    HorizontalAnimation, RollingAnimation, SpinningAnimation, StaticAnimation,
)


def build_demo_catalog(spin_frames: int = C.SPIN_FRAMES,
                       roll_frames: int = C.ROLL_FRAMES,
                       slide_frames: int = C.SLIDE_FRAMES) -> Dict[str, Animation]:
    origin = Vector3.zero()
    ring = circle(origin, C.DEMO_CIRCLE_RADIUS, C.DEMO_CIRCLE_POINTS, Vector3.up())
    rect = rectangle(origin, C.DEMO_RECT_WIDTH, C.DEMO_RECT_HEIGHT,
                     C.DEMO_RECT_POINTS, Vector3.up())
    ball = sphere(origin, C.DEMO_SPHERE_RADIUS, C.DEMO_SPHERE_POINTS)
    spiky = star(origin, C.DEMO_STAR_RADIUS, C.DEMO_STAR_BRANCHES, C.DEMO_STAR_BRANCH_POINTS)

    return {
        "circle": StaticAnimation(ring),
        "rectangle": StaticAnimation(rect),
        "sphere": StaticAnimation(ball),
        "star": StaticAnimation(spiky),
        "spinning_circle": SpinningAnimation(ring, spin_frames),
        "spinning_rectangle": SpinningAnimation(rect, spin_frames),
        "spinning_star": SpinningAnimation(spiky, spin_frames),
        "spinning_sphere": SpinningAnimation(ball, spin_frames),
        "rolling_sphere": RollingAnimation(ball, C.DEMO_SPHERE_RADIUS, roll_frames),
        "horizontal_circle": HorizontalAnimation(
            ring, Vector3.north().scale(5), Vector3.south().scale(5), slide_frames),
    }
