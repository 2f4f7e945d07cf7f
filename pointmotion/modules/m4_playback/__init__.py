"""
Playback Module (Module 4)
==========================
Turns finished sequences into timed frame delivery.

Pieces:
  - Schedulers: ManualScheduler (tick on demand), ThreadedScheduler (wall clock)
  - Renderers:  LoggingRenderer (records frames, logs summaries)
  - Player:     play_sequence / loop_sequence
  - Lifecycle:  Animation with AnimationState (idle / running)
  - Recipes:    static, spinning, rolling, horizontal + build_demo_catalog()

Example:
    from pointmotion.modules.m4_playback import (
        ManualScheduler, LoggingRenderer, build_demo_catalog,
    )

    demo = build_demo_catalog()["spinning_circle"]
    scheduler, renderer = ManualScheduler(), LoggingRenderer()
    demo.start(scheduler, renderer)
    scheduler.advance(40)
    demo.stop()
"""

from .scheduler import (
    Scheduler,
    Task,
    ManualScheduler,
    ManualTask,
    ThreadedScheduler,
    RepeatingThread,
)
from .renderer import FrameRenderer, LoggingRenderer, RenderedFrame, trail_segments
from .player import SequencePlayer, play_sequence, loop_sequence
from .animation import Animation, AnimationState
from .recipes import (
    StaticAnimation,
    SpinningAnimation,
    RollingAnimation,
    HorizontalAnimation,
)
from .catalog import build_demo_catalog
from .config import PlaybackConfig

__all__ = [
    "Scheduler",
    "Task",
    "ManualScheduler",
    "ManualTask",
    "ThreadedScheduler",
    "RepeatingThread",
    "FrameRenderer",
    "LoggingRenderer",
    "RenderedFrame",
    "trail_segments",
    "SequencePlayer",
    "play_sequence",
    "loop_sequence",
    "Animation",
    "AnimationState",
    "StaticAnimation",
    "SpinningAnimation",
    "RollingAnimation",
    "HorizontalAnimation",
    "build_demo_catalog",
    "PlaybackConfig",
]
