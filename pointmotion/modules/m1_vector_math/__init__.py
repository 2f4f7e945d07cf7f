"""
Vector Math Module (Module 1)
=============================
Value algebra the rest of the package is built on.

- Vector3: mutable 3D vector with exact equality and host axis helpers
- Quaternion: Hamilton quaternion, inverse raises DomainError on zero
- rotate_vector: axis-angle rotation through quaternion conjugation
- fibonacci_sphere: deterministic near-uniform points on a sphere

Example:
    from pointmotion.modules.m1_vector_math import Vector3, rotate_vector

    v = rotate_vector(Vector3.south(), math.pi / 2, Vector3.up())
    print(v)  # ≈ Vector3(x=-1.0, y=0.0, z=0.0)
"""

from .vector import Vector3, dot, cross, difference, interpolate
from .quaternion import Quaternion
from .rotations import rotate_vector
from .sphere import fibonacci_sphere, fibonacci_sphere_array

__all__ = [
    "Vector3",
    "dot",
    "cross",
    "difference",
    "interpolate",
    "Quaternion",
    "rotate_vector",
    "fibonacci_sphere",
    "fibonacci_sphere_array",
]
