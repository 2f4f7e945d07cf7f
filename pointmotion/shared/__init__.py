"""
#WHERE
    Imported by every pointmotion module (M1–M4), main.py and the tests.

#WHAT
    Shared error hierarchy, constants and memory-profiling hooks.

#INPUT
    None (constants and exception types).

#OUTPUT
    PointMotionError family; tracemalloc_snapshot / profile_memory helpers.
"""

from .errors import (
    PointMotionError,
    InvalidArgumentError,
    DomainError,
    InvalidStateError,
    FatalError,
)
from .mem_profile import profile_memory, tracemalloc_snapshot

__all__ = [
    "PointMotionError",
    "InvalidArgumentError",
    "DomainError",
    "InvalidStateError",
    "FatalError",
    "profile_memory",
    "tracemalloc_snapshot",
]
