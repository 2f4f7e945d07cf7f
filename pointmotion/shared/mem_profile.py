"""Memory profiling helpers for sequence generation.

Long recipes (a rolling sphere is 1000 frames of 300 points) allocate one
``Rotatable`` copy per frame, so these two hooks exist to keep an eye on it:

1. ``tracemalloc_snapshot(label)`` — context manager, stdlib only.  Logs the
   heap delta across the block and, at DEBUG, the biggest allocation sites.

2. ``@profile_memory`` — decorator, active only with ``PROFILE_MEMORY=1``.
   Wraps the function in ``memory_profiler.profile`` when that package is
   installed (``pip install pointmotion[profile]``).

Usage::

    with tracemalloc_snapshot("rolling_sphere"):
        sequence = animation.generate_sequence()

    PROFILE_MEMORY=1 python main.py rolling_sphere --seconds 2
"""
from __future__ import annotations

import contextlib
import logging
import os
import tracemalloc
from typing import Callable, Generator, TypeVar

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

_TRUTHY = {"1", "true", "yes", "on"}


def profiling_enabled() -> bool:
    return os.environ.get("PROFILE_MEMORY", "0").strip().lower() in _TRUTHY


@contextlib.contextmanager
def tracemalloc_snapshot(label: str, top_n: int = 5) -> Generator[None, None, None]:
    """Log the net Python heap change around a block.

    Nesting is safe: tracing is only stopped by the call that started it.
    """
    started_here = not tracemalloc.is_tracing()
    if started_here:
        tracemalloc.start(10)

    before = tracemalloc.take_snapshot()
    size_before = sum(s.size for s in before.statistics("filename"))
    try:
        yield
    finally:
        after = tracemalloc.take_snapshot()
        size_after = sum(s.size for s in after.statistics("filename"))
        log.info("[mem] %s: %+d KB (%.2f MB -> %.2f MB)",
                 label, (size_after - size_before) // 1024,
                 size_before / 1024 / 1024, size_after / 1024 / 1024)

        for stat in after.compare_to(before, "lineno")[:top_n]:
            if stat.size_diff:
                site = str(stat.traceback[0]) if stat.traceback else "<unknown>"
                log.debug("[mem]   %+8.1f KB  %s", stat.size_diff / 1024, site)

        if started_here:
            tracemalloc.stop()


def profile_memory(fn: F) -> F:
    """Line-level RAM profile of *fn* when ``PROFILE_MEMORY=1``, else *fn* itself."""
    if not profiling_enabled():
        return fn

    try:
        from memory_profiler import profile as _mp_profile  # type: ignore[import-untyped]
    except ImportError:
        log.warning("[mem] PROFILE_MEMORY=1 but memory-profiler is not installed")
        return fn

    log.debug("[mem] memory_profiler active -> %s", fn.__qualname__)
    return _mp_profile(fn)
