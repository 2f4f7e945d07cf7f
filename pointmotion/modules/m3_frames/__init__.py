"""
Frames Module (Module 3)
========================
Encodes a discrete animation as position + velocity samples.

- Frame / FrameBuilder: one time sample, (N, 6) records
- Sequence / SequenceBuilder: ordered frames, static or velocity-inferred

Example:
    from pointmotion.modules.m3_frames import Frame, SequenceBuilder

    builder = SequenceBuilder()
    for pose in poses:
        builder.add_frame(Frame.from_primitive(pose))
    sequence = builder.build_velocity(looping=True)
    print(sequence.total_frames, sequence.get_frame(0).shape)
"""

from .frame import Frame, FrameBuilder, RECORD_SIZE
from .sequence import Sequence, SequenceBuilder

__all__ = [
    "Frame",
    "FrameBuilder",
    "RECORD_SIZE",
    "Sequence",
    "SequenceBuilder",
]
