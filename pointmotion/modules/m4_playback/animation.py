"""
#WHERE
    Base class of every recipe in recipes.py; driven by main.py and tests.

#WHAT
    Two-state animation lifecycle.  ``start`` generates the sequence once
    and hands it to a scheduler; ``stop`` cancels that registration.
    Transitions are looked up in a table keyed by (state, action), so
    starting a running animation or stopping an idle one is rejected with
    InvalidStateError.

#INPUT
    Scheduler, renderer, world origin.

#OUTPUT
    Scheduled task; AnimationState.
"""

from __future__ import annotations

import abc
import enum
import logging
from typing import Dict, Optional, Tuple

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m3_frames import Sequence
from pointmotion.shared.constants import DEFAULT_TICKS_PER_FRAME
from pointmotion.shared.errors import InvalidStateError
from .player import loop_sequence, play_sequence
from .renderer import FrameRenderer
from .scheduler import Scheduler, Task

log = logging.getLogger(__name__)


class AnimationState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


_TRANSITIONS: Dict[Tuple[AnimationState, str], AnimationState] = {
    (AnimationState.IDLE, "start"): AnimationState.RUNNING,
    (AnimationState.RUNNING, "stop"): AnimationState.IDLE,
}


class Animation(abc.ABC):
    ticks_per_frame: int = DEFAULT_TICKS_PER_FRAME

    def __init__(self) -> None:
        self._state = AnimationState.IDLE
        self._task: Optional[Task] = None

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is AnimationState.RUNNING

    @abc.abstractmethod
    def generate_sequence(self) -> Sequence:
        ...

    def _next_state(self, action: str) -> AnimationState:
        nxt = _TRANSITIONS.get((self._state, action))
        if nxt is None:
            raise InvalidStateError(f"Cannot {action} {self.name}: it is {self._state.value}")
        return nxt

    def start(self, scheduler: Scheduler, renderer: FrameRenderer,
              origin: Optional[Vector3] = None, loop: bool = True) -> Task:
        nxt = self._next_state("start")

        sequence = self.generate_sequence()
        if sequence.is_empty:
            raise InvalidStateError(f"{self.name} generated an empty sequence")

        play = loop_sequence if loop else play_sequence
        self._task = play(scheduler, renderer, sequence, self.ticks_per_frame, origin)
        self._state = nxt
        log.info("%s started: %d frames, %d ticks/frame",
                 self.name, sequence.total_frames, self.ticks_per_frame)
        return self._task

    def stop(self) -> None:
        nxt = self._next_state("stop")
        self._task.cancel()
        self._task = None
        self._state = nxt
        log.info("%s stopped", self.name)
