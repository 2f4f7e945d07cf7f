"""Tests for Playback - schedulers, players, animation lifecycle and recipes."""

import logging
import sys
import threading

import numpy as np
import pytest

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m2_primitives import circle, sphere
from pointmotion.modules.m3_frames import FrameBuilder, Sequence, SequenceBuilder
from pointmotion.modules.m4_playback import (
    Animation, AnimationState, HorizontalAnimation, LoggingRenderer, ManualScheduler,
    PlaybackConfig, RollingAnimation, SpinningAnimation, StaticAnimation,
    ThreadedScheduler, build_demo_catalog, loop_sequence, play_sequence, trail_segments,
)
from pointmotion.shared.constants import DEFAULT_TICKS_PER_FRAME, STATIC_TICKS_PER_FRAME
from pointmotion.shared.errors import InvalidArgumentError, InvalidStateError
from pointmotion.shared.mem_profile import profile_memory, tracemalloc_snapshot


def _sequence(frames: int) -> Sequence:
    builder = SequenceBuilder()
    for i in range(frames):
        builder.add_frame(FrameBuilder().add_point(Vector3(i, 0, 0)).build())
    return builder.build()


def _rendered_x(renderer: LoggingRenderer) -> list:
    return [float(f.points[0, 0]) for f in renderer.history]


class _Fixed(Animation):
    def __init__(self, sequence: Sequence):
        super().__init__()
        self.sequence = sequence

    def generate_sequence(self) -> Sequence:
        return self.sequence


class _Broken(Animation):
    def generate_sequence(self) -> Sequence:
        raise InvalidArgumentError("bad template")


# ---------------------------------------------------------------------------
# Schedulers
# ---------------------------------------------------------------------------

class TestManualScheduler:

    def test_fires_immediately_then_every_interval(self):
        scheduler = ManualScheduler()
        fired = []
        scheduler.schedule_repeating(lambda task: fired.append(scheduler.current_tick), 2)
        scheduler.advance(5)
        assert fired == [0, 2, 4]
        assert scheduler.current_tick == 5

    def test_cancelled_task_stops_firing(self):
        scheduler = ManualScheduler()
        fired = []
        task = scheduler.schedule_repeating(lambda t: fired.append(1), 1)
        scheduler.advance(3)
        task.cancel()
        scheduler.advance(3)
        assert len(fired) == 3
        assert scheduler.active_tasks == 0

    def test_callback_can_cancel_itself(self):
        scheduler = ManualScheduler()
        calls = []

        def once(task):
            calls.append(scheduler.current_tick)
            task.cancel()

        scheduler.schedule_repeating(once, 1)
        scheduler.advance(4)
        assert calls == [0]

    def test_tasks_fire_in_registration_order(self):
        scheduler = ManualScheduler()
        order = []
        scheduler.schedule_repeating(lambda t: order.append("a"), 1)
        scheduler.schedule_repeating(lambda t: order.append("b"), 1)
        scheduler.advance(2)
        assert order == ["a", "b", "a", "b"]

    def test_raising_callback_does_not_refire_same_tick(self):
        scheduler = ManualScheduler()
        fired = []

        def flaky(task):
            fired.append(scheduler.current_tick)
            if len(fired) == 1:
                raise RuntimeError("render failed")

        scheduler.schedule_repeating(flaky, 2)
        with pytest.raises(RuntimeError):
            scheduler.advance(1)
        assert scheduler.current_tick == 1

        scheduler.advance(2)
        assert fired == [0, 2]

    def test_task_cancelled_before_raising_is_pruned(self):
        scheduler = ManualScheduler()

        def fail_once(task):
            task.cancel()
            raise RuntimeError("render failed")

        scheduler.schedule_repeating(fail_once, 1)
        with pytest.raises(RuntimeError):
            scheduler.advance(1)
        assert scheduler.active_tasks == 0
        scheduler.advance(3)

    @pytest.mark.parametrize("interval", [0, -3])
    def test_interval_below_one_raises(self, interval):
        with pytest.raises(InvalidArgumentError, match="at least 1 tick"):
            ManualScheduler().schedule_repeating(lambda t: None, interval)


class TestThreadedScheduler:

    def setup_method(self):
        self.scheduler = ThreadedScheduler(tick_seconds=0.001)

    def teardown_method(self):
        self.scheduler.shutdown()

    def test_callback_runs_repeatedly(self):
        done = threading.Event()
        calls = []

        def tick(task):
            calls.append(1)
            if len(calls) == 3:
                task.cancel()
                done.set()

        task = self.scheduler.schedule_repeating(tick, 1)
        assert done.wait(timeout=5)
        task.join(timeout=5)
        assert task.cancelled
        assert len(calls) == 3

    def test_raising_callback_cancels_task(self, caplog):
        def boom(task):
            raise RuntimeError("render failed")

        with caplog.at_level(logging.ERROR):
            task = self.scheduler.schedule_repeating(boom, 1)
            task.join(timeout=5)
        assert task.cancelled
        assert not task.is_alive()
        assert "cancelling task" in caplog.text

    def test_shutdown_stops_all_tasks(self):
        tasks = [self.scheduler.schedule_repeating(lambda t: None, 1) for _ in range(3)]
        self.scheduler.shutdown()
        assert all(t.cancelled and not t.is_alive() for t in tasks)

    @pytest.mark.parametrize("tick", [0, -0.05])
    def test_non_positive_tick_raises(self, tick):
        with pytest.raises(InvalidArgumentError):
            ThreadedScheduler(tick)


# ---------------------------------------------------------------------------
# Renderer and player
# ---------------------------------------------------------------------------

class TestRenderer:

    def test_trail_segments(self):
        points = np.array([[0, 0, 0, 1, 2, 3], [1, 1, 1, 0, 0, 0]], dtype=float)
        start, end = trail_segments(Vector3(1, 0, 0), points)
        np.testing.assert_array_equal(start, [[1, 0, 0], [2, 1, 1]])
        np.testing.assert_array_equal(end, [[2, 2, 3], [2, 1, 1]])

    def test_history_is_bounded(self):
        renderer = LoggingRenderer(history=2)
        for i in range(3):
            renderer.render_frame(Vector3.zero(), 1, np.full((1, 6), float(i)))
        assert renderer.frames_rendered == 3
        assert _rendered_x(renderer) == [1.0, 2.0]

    def test_origin_is_copied(self):
        renderer = LoggingRenderer()
        origin = Vector3(1, 2, 3)
        renderer.render_frame(origin, 4, np.zeros((0, 6)))
        origin.set(0, 0, 0)
        assert renderer.history[0].origin == Vector3(1, 2, 3)
        assert renderer.history[0].duration_ticks == 4


class TestPlayer:

    def setup_method(self):
        self.scheduler = ManualScheduler()
        self.renderer = LoggingRenderer()

    def test_loop_wraps_to_first_frame(self):
        task = loop_sequence(self.scheduler, self.renderer, _sequence(3), 1)
        self.scheduler.advance(7)
        assert _rendered_x(self.renderer) == [0, 1, 2, 0, 1, 2, 0]
        assert not task.cancelled

    def test_play_once_cancels_after_last_frame(self):
        task = play_sequence(self.scheduler, self.renderer, _sequence(3), 2)
        self.scheduler.advance(10)
        assert _rendered_x(self.renderer) == [0, 1, 2]
        assert task.cancelled
        assert self.scheduler.active_tasks == 0

    def test_frame_duration_is_reported(self):
        play_sequence(self.scheduler, self.renderer, _sequence(2), 3, Vector3(0, 64, 0))
        self.scheduler.advance(1)
        frame = self.renderer.history[0]
        assert frame.duration_ticks == 3
        assert frame.origin == Vector3(0, 64, 0)

    def test_empty_sequence_schedules_nothing(self):
        assert play_sequence(self.scheduler, self.renderer, Sequence.builder().build(), 1) is None
        assert loop_sequence(self.scheduler, self.renderer, Sequence.builder().build(), 1) is None
        assert self.scheduler.active_tasks == 0

    def test_zero_duration_raises(self):
        with pytest.raises(InvalidArgumentError):
            loop_sequence(self.scheduler, self.renderer, _sequence(2), 0)


# ---------------------------------------------------------------------------
# Animation lifecycle
# ---------------------------------------------------------------------------

class TestAnimationLifecycle:

    def setup_method(self):
        self.scheduler = ManualScheduler()
        self.renderer = LoggingRenderer()
        self.anim = _Fixed(_sequence(4))

    def test_start_and_stop(self):
        assert self.anim.state is AnimationState.IDLE
        task = self.anim.start(self.scheduler, self.renderer)
        assert self.anim.is_running
        self.scheduler.advance(DEFAULT_TICKS_PER_FRAME * 2)
        assert self.renderer.frames_rendered == 2

        self.anim.stop()
        assert task.cancelled
        assert self.anim.state is AnimationState.IDLE
        self.scheduler.advance(10)
        assert self.renderer.frames_rendered == 2

    def test_double_start_raises(self):
        self.anim.start(self.scheduler, self.renderer)
        with pytest.raises(InvalidStateError, match="running"):
            self.anim.start(self.scheduler, self.renderer)
        assert self.scheduler.active_tasks == 1

    def test_stop_when_idle_raises(self):
        with pytest.raises(InvalidStateError, match="idle"):
            self.anim.stop()

    def test_restart_after_stop(self):
        self.anim.start(self.scheduler, self.renderer)
        self.anim.stop()
        self.anim.start(self.scheduler, self.renderer)
        assert self.anim.is_running

    def test_play_once(self):
        self.anim.ticks_per_frame = 1
        task = self.anim.start(self.scheduler, self.renderer, loop=False)
        self.scheduler.advance(10)
        assert self.renderer.frames_rendered == 4
        assert task.cancelled

    def test_generation_failure_leaves_idle(self):
        anim = _Broken()
        with pytest.raises(InvalidArgumentError):
            anim.start(self.scheduler, self.renderer)
        assert anim.state is AnimationState.IDLE
        assert self.scheduler.active_tasks == 0

    def test_empty_sequence_is_rejected(self):
        anim = _Fixed(Sequence.builder().build())
        with pytest.raises(InvalidStateError, match="empty"):
            anim.start(self.scheduler, self.renderer)
        assert anim.state is AnimationState.IDLE


# ---------------------------------------------------------------------------
# Recipes
# ---------------------------------------------------------------------------

def _assert_looping_velocities(seq: Sequence) -> None:
    n = seq.total_frames
    for i in range(n):
        here, nxt = seq.get_frame(i), seq.get_frame((i + 1) % n)
        np.testing.assert_allclose(here[:, 3:], nxt[:, :3] - here[:, :3], atol=1e-12)


class TestRecipes:

    def setup_method(self):
        self.ring = circle(Vector3.zero(), 1, 6, Vector3.up())

    def test_static_single_frame(self):
        anim = StaticAnimation(self.ring)
        seq = anim.generate_sequence()
        assert anim.ticks_per_frame == STATIC_TICKS_PER_FRAME
        assert seq.total_frames == 1
        assert not seq.get_frame(0)[:, 3:].any()

    def test_spinning_keeps_radius_and_loops(self):
        seq = SpinningAnimation(self.ring, frames=8).generate_sequence()
        assert seq.total_frames == 8
        for frame in seq:
            np.testing.assert_allclose(np.linalg.norm(frame.positions, axis=1), 1.0)
        _assert_looping_velocities(seq)

    def test_spinning_does_not_touch_template(self):
        before = self.ring.points
        SpinningAnimation(self.ring, frames=4).generate_sequence()
        assert self.ring.points == before

    def test_horizontal_eases_between_endpoints(self):
        start, end = Vector3(0, 0, -5), Vector3(0, 0, 5)
        seq = HorizontalAnimation(self.ring, start, end, frames=5).generate_sequence()
        centres = [frame.positions.mean(axis=0) for frame in seq]
        np.testing.assert_allclose(centres[0], start.to_array(), atol=1e-9)
        np.testing.assert_allclose(centres[1], [0, 0, 0], atol=1e-9)
        np.testing.assert_allclose(centres[2], end.to_array(), atol=1e-9)
        np.testing.assert_allclose(centres[4], start.to_array(), atol=1e-9)
        _assert_looping_velocities(seq)

    def test_rolling_orbits_two_radii_out(self):
        ball = sphere(Vector3.zero(), 1, 10)
        seq = RollingAnimation(ball, radius=1, frames=8, orbits=1).generate_sequence()
        assert seq.total_frames == 8
        for frame in seq:
            dist = np.linalg.norm(frame.positions, axis=1)
            assert dist.min() >= 1 - 1e-9
            assert dist.max() <= 3 + 1e-9
        _assert_looping_velocities(seq)

    @pytest.mark.parametrize("kwargs", [
        {"radius": 0},
        {"radius": 1, "orbits": 0},
        {"radius": 1, "frames": 1},
    ])
    def test_rolling_invalid_arguments(self, kwargs):
        with pytest.raises(InvalidArgumentError):
            RollingAnimation(sphere(Vector3.zero(), 1, 10), **kwargs)

    def test_spinning_needs_two_frames(self):
        with pytest.raises(InvalidArgumentError, match="at least 2 frames"):
            SpinningAnimation(self.ring, frames=1)


class TestCatalog:

    NAMES = {
        "circle", "rectangle", "sphere", "star",
        "spinning_circle", "spinning_rectangle", "spinning_star", "spinning_sphere",
        "rolling_sphere", "horizontal_circle",
    }

    def test_names(self):
        assert set(build_demo_catalog(4, 4, 4)) == self.NAMES

    def test_small_catalog_generates(self):
        for name, anim in build_demo_catalog(3, 3, 3).items():
            seq = anim.generate_sequence()
            assert not seq.is_empty, name

    @pytest.mark.slow
    def test_default_catalog_generates(self):
        catalog = build_demo_catalog()
        assert catalog["rolling_sphere"].generate_sequence().total_frames == 1000
        assert catalog["spinning_star"].generate_sequence().total_frames == 100


# ---------------------------------------------------------------------------
# Ambient: config and memory profiling
# ---------------------------------------------------------------------------

class TestConfigAndProfiling:

    def test_playback_config_defaults(self):
        config = PlaybackConfig()
        assert config.loop is True
        assert config.ticks_per_frame is None
        assert config.tick_seconds > 0

    def test_cli_defaults_come_from_playback_config(self, monkeypatch):
        import main

        monkeypatch.setattr(sys, "argv", ["main.py"])
        args = main._args()
        assert args.seconds == PlaybackConfig.run_seconds
        assert args.tick_seconds == PlaybackConfig.tick_seconds

    def test_tracemalloc_snapshot_logs_label(self, caplog):
        with caplog.at_level(logging.INFO, logger="pointmotion.shared.mem_profile"):
            with tracemalloc_snapshot("ring build"):
                circle(Vector3.zero(), 1, 50, Vector3.up())
        assert "[mem] ring build" in caplog.text

    def test_profile_memory_is_noop_by_default(self, monkeypatch):
        monkeypatch.delenv("PROFILE_MEMORY", raising=False)

        def fn():
            return 1

        assert profile_memory(fn) is fn
