"""
pointmotion
===========
Quaternion-driven 3D point-cloud animation encoding.

    m1_vector_math  Vector3, Quaternion, rotate_vector, fibonacci_sphere
    m2_primitives   Rotatable point clouds + circle / rectangle / sphere / star
    m3_frames       Frame / Sequence encoding with velocity inference
    m4_playback     schedulers, renderers, animation lifecycle, demo recipes
"""

__version__ = "0.1.0"
