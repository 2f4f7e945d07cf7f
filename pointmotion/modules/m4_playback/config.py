"""Runtime settings for playing a demo; populated from CLI arguments in main.py."""

from dataclasses import dataclass
from typing import Optional

from pointmotion.shared.constants import TICK_SECONDS


@dataclass
class PlaybackConfig:
    tick_seconds: float = TICK_SECONDS
    run_seconds: float = 5.0
    loop: bool = True
    ticks_per_frame: Optional[int] = None   # None → the recipe's own default
    history: int = 256                      # frames kept by LoggingRenderer
