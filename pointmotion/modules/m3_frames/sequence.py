"""Ordered, immutable frame collections and their builder.

``SequenceBuilder.build_velocity`` infers per-point velocity by finite
difference against the successor frame ``(i + 1) mod N``.  Without looping
the *first* frame is its own successor and gets zero velocity; the last
frame still points back at frame 0.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

import numpy as np

from pointmotion.shared.errors import InvalidStateError
from .frame import Frame

log = logging.getLogger(__name__)


class Sequence:
    __slots__ = ("_frames",)

    def __init__(self, frames: Tuple[Frame, ...]):
        self._frames = tuple(frames)

    def get_frame(self, index: int) -> np.ndarray:
        """(N, 6) read-only records of frame *index*."""
        return self._frames[index].points

    @property
    def total_frames(self) -> int:
        return len(self._frames)

    @property
    def is_empty(self) -> bool:
        return not self._frames

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, index: int) -> Frame:
        return self._frames[index]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __repr__(self) -> str:
        return f"Sequence(frames={len(self._frames)})"

    @classmethod
    def builder(cls) -> "SequenceBuilder":
        return SequenceBuilder()


class SequenceBuilder:
    def __init__(self) -> None:
        self._frames: List[Frame] = []

    def add_frame(self, frame: Frame) -> "SequenceBuilder":
        self._frames.append(frame)
        return self

    def __len__(self) -> int:
        return len(self._frames)

    def build(self) -> Sequence:
        """Frames exactly as added, no velocity inference."""
        log.debug("Sequence built: %d frames (static)", len(self._frames))
        return Sequence(tuple(self._frames))

    def build_velocity(self, looping: bool) -> Sequence:
        """Frames with velocity = successor position - own position."""
        n = len(self._frames)
        if n < 2:
            raise InvalidStateError(
                f"Velocity inference needs at least 2 frames, got {n}")

        sizes = {len(f) for f in self._frames}
        if len(sizes) != 1:
            raise InvalidStateError(
                f"All frames must have the same number of points to infer "
                f"velocity, got sizes {sorted(sizes)}")

        positions = np.stack([f.positions for f in self._frames])   # (F, N, 3)
        successors = np.roll(positions, -1, axis=0)
        if not looping:
            successors[0] = positions[0]

        records = np.concatenate([positions, successors - positions], axis=2)
        log.debug("Sequence built: %d frames x %d points (velocity, looping=%s)",
                  n, records.shape[1], looping)
        return Sequence(tuple(Frame(r) for r in records))
