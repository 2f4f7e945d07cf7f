"""Frame consumers.  Renderers receive one frame's (N, 6) records per call."""

from __future__ import annotations

import collections
import logging
import threading
from dataclasses import dataclass
from typing import Deque, List, Protocol, Tuple

import numpy as np

from pointmotion.modules.m1_vector_math import Vector3

log = logging.getLogger(__name__)


class FrameRenderer(Protocol):
    def render_frame(self, origin: Vector3, duration_ticks: int, points: np.ndarray) -> None: ...


def trail_segments(origin: Vector3, points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """World-space (start, end) of each point's trail: start + velocity = end."""
    start = points[:, :3] + origin.to_array()
    return start, start + points[:, 3:]


@dataclass(slots=True, frozen=True)
class RenderedFrame:
    origin: Vector3
    duration_ticks: int
    points: np.ndarray


class LoggingRenderer:
    """Keeps the last *history* frames it was handed and logs a summary of each."""

    def __init__(self, history: int = 256):
        self._frames: Deque[RenderedFrame] = collections.deque(maxlen=history)
        self._count = 0
        self._lock = threading.Lock()

    @property
    def frames_rendered(self) -> int:
        return self._count

    @property
    def history(self) -> List[RenderedFrame]:
        with self._lock:
            return list(self._frames)

    def render_frame(self, origin: Vector3, duration_ticks: int, points: np.ndarray) -> None:
        start, end = trail_segments(origin, points)
        with self._lock:
            self._frames.append(RenderedFrame(origin.copy(), duration_ticks, points))
            self._count += 1
        if len(points):
            log.debug("frame #%d: %d points, %d ticks, mean travel %.4f",
                      self._count, len(points), duration_ticks,
                      float(np.linalg.norm(end - start, axis=1).mean()))
