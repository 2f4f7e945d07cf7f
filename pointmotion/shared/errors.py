"""Exception hierarchy shared by every pointmotion module.

Each error also derives from the closest builtin so callers can catch either
the library type or the usual ``ValueError`` / ``RuntimeError``.
"""


class PointMotionError(Exception):
    """Base class for all pointmotion errors."""


class InvalidArgumentError(PointMotionError, ValueError):
    """Out-of-range or structurally invalid input."""


class DomainError(PointMotionError, ArithmeticError):
    """Mathematically undefined operation (e.g. inverting a zero quaternion)."""


class InvalidStateError(PointMotionError, RuntimeError):
    """Operation not valid for the object's current state."""


class FatalError(PointMotionError, SystemError):
    """Internal invariant violation. Should never surface for valid input."""
