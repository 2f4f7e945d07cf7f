#!/usr/bin/env python3
"""Point-cloud animation demos: generate a sequence and play it on a tick clock."""

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pointmotion.modules.m4_playback import (
    LoggingRenderer, PlaybackConfig, ThreadedScheduler, build_demo_catalog,
)
from pointmotion.shared import PointMotionError, tracemalloc_snapshot

log = logging.getLogger("pointmotion")


def _args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Quaternion point-cloud animation demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py spinning_circle\n"
            "  python main.py rolling_sphere --seconds 10 --tick-seconds 0.01\n"
            "  python main.py --list\n"
        ),
    )
    p.add_argument("demo", nargs="?", default="spinning_circle")
    p.add_argument("--list", action="store_true", help="list demo names and exit")
    p.add_argument("--seconds", type=float, default=PlaybackConfig.run_seconds)
    p.add_argument("--tick-seconds", type=float, default=PlaybackConfig.tick_seconds)
    p.add_argument("--ticks-per-frame", type=int, default=None)
    p.add_argument("--once", action="store_true", help="play the sequence once instead of looping")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


def run(name: str, config: PlaybackConfig) -> int:
    catalog = build_demo_catalog()
    demo = catalog.get(name)
    if demo is None:
        log.error("Demo not found: %s (try --list)", name)
        return 2
    if config.ticks_per_frame is not None:
        demo.ticks_per_frame = config.ticks_per_frame

    renderer = LoggingRenderer(history=config.history)
    try:
        scheduler = ThreadedScheduler(config.tick_seconds)
    except PointMotionError as exc:
        log.error("Bad playback config: %s", exc)
        return 2

    try:
        with tracemalloc_snapshot(f"{name} sequence"):
            demo.start(scheduler, renderer, loop=config.loop)
        time.sleep(config.run_seconds)
        demo.stop()
    except PointMotionError as exc:
        log.error("Demo %s failed: %s", name, exc)
        return 1
    finally:
        scheduler.shutdown()

    last = renderer.history[-1] if renderer.history else None
    print(f"\ndemo    → {name}")
    print(f"frames  : {renderer.frames_rendered} rendered")
    if last is not None:
        print(f"points  : {len(last.points)} per frame, {last.duration_ticks} ticks each")
    return 0


def main() -> None:
    args = _args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")
    if args.list:
        for name in build_demo_catalog():
            print(name)
        return

    config = PlaybackConfig(
        tick_seconds=args.tick_seconds,
        run_seconds=args.seconds,
        loop=not args.once,
        ticks_per_frame=args.ticks_per_frame,
    )
    sys.exit(run(args.demo, config))


if __name__ == "__main__":
    main()
