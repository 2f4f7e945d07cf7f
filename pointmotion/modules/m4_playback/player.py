"""Sequence playback: one frame per scheduler interval, once or looping."""

from __future__ import annotations

import logging
from typing import Optional

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m3_frames import Sequence
from pointmotion.shared.errors import InvalidArgumentError
from .renderer import FrameRenderer
from .scheduler import Scheduler, Task

log = logging.getLogger(__name__)


class SequencePlayer:
    """Scheduler callback that hands successive frames to a renderer.

    Each frame is shown for ``frame_duration_ticks``, which is also the
    scheduling interval.  With ``loop`` the index wraps to 0 after the last
    frame; without it the task cancels itself.
    """

    def __init__(self, sequence: Sequence, renderer: FrameRenderer, origin: Vector3,
                 frame_duration_ticks: int, loop: bool):
        self.sequence = sequence
        self.renderer = renderer
        self.origin = origin.copy()
        self.frame_duration_ticks = frame_duration_ticks
        self.loop = loop
        self.index = 0

    def __call__(self, task: Task) -> None:
        if self.index >= self.sequence.total_frames:
            if not self.loop:
                task.cancel()
                log.debug("Sequence finished after %d frames", self.index)
                return
            self.index = 0

        frame = self.sequence.get_frame(self.index)
        self.index += 1
        self.renderer.render_frame(self.origin, self.frame_duration_ticks, frame)


def _schedule(scheduler: Scheduler, renderer: FrameRenderer, sequence: Sequence,
              frame_duration_ticks: int, origin: Optional[Vector3], loop: bool) -> Optional[Task]:
    if frame_duration_ticks < 1:
        raise InvalidArgumentError(
            f"Frame duration must be at least 1 tick, got {frame_duration_ticks}")
    if sequence.is_empty:
        return None

    player = SequencePlayer(sequence, renderer, origin or Vector3.zero(),
                            frame_duration_ticks, loop)
    log.info("Playing %d frames every %d ticks (loop=%s)",
             sequence.total_frames, frame_duration_ticks, loop)
    return scheduler.schedule_repeating(player, frame_duration_ticks)


def play_sequence(scheduler: Scheduler, renderer: FrameRenderer, sequence: Sequence,
                  frame_duration_ticks: int, origin: Optional[Vector3] = None) -> Optional[Task]:
    """Play *sequence* once.  Returns None for an empty sequence."""
    return _schedule(scheduler, renderer, sequence, frame_duration_ticks, origin, loop=False)


def loop_sequence(scheduler: Scheduler, renderer: FrameRenderer, sequence: Sequence,
                  frame_duration_ticks: int, origin: Optional[Vector3] = None) -> Optional[Task]:
    """Play *sequence* forever, wrapping to the first frame.  None if empty."""
    return _schedule(scheduler, renderer, sequence, frame_duration_ticks, origin, loop=True)
