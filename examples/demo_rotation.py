#!/usr/bin/env python3
"""Demo: rotate a circle, then play a spinning star on the manual clock"""

import math
import os
import sys
import logging

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pointmotion.modules.m1_vector_math import Vector3
from pointmotion.modules.m2_primitives import circle, star
from pointmotion.modules.m3_frames import Frame
from pointmotion.modules.m4_playback import LoggingRenderer, ManualScheduler, SpinningAnimation

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    logger.info("=" * 60)
    logger.info("Demo: quaternion rotation of point clouds")
    logger.info("=" * 60)

    ring = circle(Vector3.zero(), 5, 100, Vector3.up())
    ring.rotate(math.pi / 2, Vector3.south())
    frame = Frame.from_primitive(ring)
    logger.info(f"Circle normal after quarter turn: {ring.normal}")
    logger.info(f"Frame: {len(frame)} points, max |x| = {abs(frame.positions[:, 0]).max():.2e}")

    spiky = star(Vector3.zero(), 10, 10, 20)
    anim = SpinningAnimation(spiky, frames=40)
    scheduler, renderer = ManualScheduler(), LoggingRenderer()

    anim.start(scheduler, renderer, origin=Vector3(0, 64, 0))
    scheduler.advance(40 * anim.ticks_per_frame)
    anim.stop()

    logger.info("\n" + "=" * 60)
    logger.info(f"Rendered {renderer.frames_rendered} frames of {len(spiky)} points")
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
