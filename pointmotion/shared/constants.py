"""
#WHERE
    Imported by the primitives, frames and playback modules, main.py and tests.
    Single source of truth for tick timing, tolerances and demo defaults.

#WHAT
    Centralised constants used across 2+ modules.  Edit here, not in
    individual module files.

#INPUT / #OUTPUT
    Pure constants, no I/O.
"""

import math

# ── Timing ───────────────────────────────────────────────────────────────

TICKS_PER_SECOND: int = 20                    # host clock rate
TICK_SECONDS: float = 1.0 / TICKS_PER_SECOND

# ── Geometry ─────────────────────────────────────────────────────────────

GOLDEN_ANGLE: float = math.pi * (math.sqrt(5.0) - 1.0)   # radians
COLINEAR_TOLERANCE: float = 1e-12   # |dot ∓ 1| below this counts as colinear

MIN_CIRCLE_POINTS: int = 3
MIN_RECTANGLE_POINTS: int = 3
MIN_SPHERE_POINTS: int = 5

# ── Demo recipes ─────────────────────────────────────────────────────────

DEFAULT_TICKS_PER_FRAME: int = 2
STATIC_TICKS_PER_FRAME: int = 20
SPIN_FRAMES: int = 10 * (TICKS_PER_SECOND // DEFAULT_TICKS_PER_FRAME)
SLIDE_FRAMES: int = 10 * (TICKS_PER_SECOND // DEFAULT_TICKS_PER_FRAME)
ROLL_FRAMES: int = 100 * (TICKS_PER_SECOND // DEFAULT_TICKS_PER_FRAME)

# Template shapes of the demo catalog
DEMO_CIRCLE_RADIUS: float = 5.0
DEMO_CIRCLE_POINTS: int = 100
DEMO_RECT_WIDTH: float = 5.0
DEMO_RECT_HEIGHT: float = 2.0
DEMO_RECT_POINTS: int = 100
DEMO_SPHERE_RADIUS: float = 5.0
DEMO_SPHERE_POINTS: int = 300
DEMO_STAR_RADIUS: float = 10.0
DEMO_STAR_BRANCHES: int = 10
DEMO_STAR_BRANCH_POINTS: int = 20
