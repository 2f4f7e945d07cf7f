"""
#WHERE
    Imported by m3_frames (FrameBuilder.add_primitive), m4_playback recipes,
    main.py and tests.

#WHAT
    Primitives Module (Module 2): oriented point clouds (Rotatable) and the
    canonical shape builders that produce them.

#INPUT
    Centre, size, point counts and orientation normal.

#OUTPUT
    Rotatable instances.
"""

from .base import Primitive
from .rotatable import Rotatable
from .builder import circle, rectangle, sphere, star, ShapeFactory

__all__ = [
    "Primitive",
    "Rotatable",
    "circle",
    "rectangle",
    "sphere",
    "star",
    "ShapeFactory",
]
