"""
#WHERE
    Used by player.py (play_sequence / loop_sequence), animation.py, main.py
    and the playback tests.

#WHAT
    Periodic callback scheduling against a tick clock.

    ManualScheduler   — ticks only advance when ``advance()`` is called;
                        deterministic, used by tests and offline tools.
    ThreadedScheduler — one background thread per registration, sleeping
                        ``interval_ticks * tick_seconds`` between calls.

    Every registration fires on the first tick (no initial delay) and then
    once per ``interval_ticks``.  Callbacks receive their own task so they
    can cancel themselves.

#INPUT
    Callback(task), interval in ticks.

#OUTPUT
    Task handles with ``cancel()`` / ``cancelled``.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Protocol

from pointmotion.shared.constants import TICK_SECONDS
from pointmotion.shared.errors import InvalidArgumentError

log = logging.getLogger(__name__)


class Task(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


TaskCallback = Callable[[Task], None]


class Scheduler(Protocol):
    def schedule_repeating(self, callback: TaskCallback, interval_ticks: int) -> Task: ...


def _check_interval(interval_ticks: int) -> None:
    if interval_ticks < 1:
        raise InvalidArgumentError(f"Interval must be at least 1 tick, got {interval_ticks}")


# ---------------------------------------------------------------------------
# Manual clock
# ---------------------------------------------------------------------------

class ManualTask:
    __slots__ = ("callback", "interval_ticks", "next_tick", "_cancelled")

    def __init__(self, callback: TaskCallback, interval_ticks: int, first_tick: int):
        self.callback = callback
        self.interval_ticks = interval_ticks
        self.next_tick = first_tick
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ManualScheduler:
    def __init__(self) -> None:
        self.current_tick = 0
        self._tasks: List[ManualTask] = []

    @property
    def active_tasks(self) -> int:
        return sum(1 for t in self._tasks if not t.cancelled)

    def schedule_repeating(self, callback: TaskCallback, interval_ticks: int) -> ManualTask:
        _check_interval(interval_ticks)
        task = ManualTask(callback, interval_ticks, self.current_tick)
        self._tasks.append(task)
        return task

    def advance(self, ticks: int = 1) -> None:
        """Run *ticks* clock ticks, firing every due callback in registration order.

        A callback that raises propagates to the caller; the clock still moves
        past the tick it was on, so the next ``advance`` does not re-fire it.
        """
        for _ in range(ticks):
            try:
                for task in list(self._tasks):
                    if not task.cancelled and task.next_tick <= self.current_tick:
                        task.next_tick += task.interval_ticks
                        task.callback(task)
            finally:
                self._tasks = [t for t in self._tasks if not t.cancelled]
                self.current_tick += 1


# ---------------------------------------------------------------------------
# Wall clock
# ---------------------------------------------------------------------------

class RepeatingThread(threading.Thread):
    """Calls *callback* every *interval* seconds until cancelled.

    A callback that raises is logged and ends the loop.
    """

    def __init__(self, callback: TaskCallback, interval: float):
        super().__init__(daemon=True)
        self.callback = callback
        self.interval = interval
        self._stop_flag = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._stop_flag.is_set()

    def run(self) -> None:
        while not self._stop_flag.is_set():
            try:
                self.callback(self)
            except Exception:
                log.exception("Scheduled callback failed, cancelling task")
                self._stop_flag.set()
                break
            self._stop_flag.wait(self.interval)

    def cancel(self) -> None:
        self._stop_flag.set()
        if self.is_alive() and threading.current_thread() is not self:
            self.join()


class ThreadedScheduler:
    def __init__(self, tick_seconds: float = TICK_SECONDS):
        if tick_seconds <= 0:
            raise InvalidArgumentError(f"Tick length must be positive, got {tick_seconds}")
        self.tick_seconds = tick_seconds
        self._tasks: List[RepeatingThread] = []
        self._lock = threading.Lock()

    def schedule_repeating(self, callback: TaskCallback, interval_ticks: int) -> RepeatingThread:
        _check_interval(interval_ticks)
        task = RepeatingThread(callback, interval_ticks * self.tick_seconds)
        with self._lock:
            self._tasks = [t for t in self._tasks if not t.cancelled]
            self._tasks.append(task)
        task.start()
        return task

    def shutdown(self) -> None:
        with self._lock:
            tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        log.debug("ThreadedScheduler shut down (%d tasks)", len(tasks))
