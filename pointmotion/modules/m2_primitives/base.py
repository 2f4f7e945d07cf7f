"""Structural interface every renderable point primitive satisfies."""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from pointmotion.modules.m1_vector_math import Vector3


@runtime_checkable
class Primitive(Protocol):
    @property
    def points(self) -> List[Vector3]: ...

    @property
    def centre(self) -> Vector3: ...

    def copy(self) -> "Primitive": ...

    def offset(self, delta: Vector3) -> None: ...
