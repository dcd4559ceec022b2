"""Keyframe bracketing shared by the camera and color-grading timelines."""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

K = TypeVar("K")


@dataclass(frozen=True)
class Bracket(Generic[K]):
    """Keyframes surrounding a frame.

    ``next`` is None when the frame is held on ``prev`` (before the first or at
    or after the last keyframe); ``progress`` is the raw, un-eased fraction.
    """

    prev: K
    next: Optional[K]
    progress: float


def sort_keyframes(keyframes: Sequence[K], frames: Sequence[int]) -> List[K]:
    """Stable sort by frame so equal frames keep insertion order."""

    order = sorted(range(len(keyframes)), key=lambda index: frames[index])
    return [keyframes[index] for index in order]


def find_bracket(keyframes: Sequence[K], frames: Sequence[int], frame: float) -> Bracket[K]:
    """Locate the keyframes around ``frame`` in an ascending timeline.

    Among keyframes sharing a frame number the last inserted is used at and
    after that frame, and the first inserted is the target when approaching
    it from the left, which produces a hard cut.
    """

    if not keyframes:
        raise ValueError("timeline requires at least one keyframe")
    if frame < frames[0]:
        return Bracket(prev=keyframes[0], next=None, progress=0.0)
    index = bisect_right(frames, frame)
    prev_index = index - 1
    if index >= len(keyframes):
        return Bracket(prev=keyframes[prev_index], next=None, progress=1.0)
    span = frames[index] - frames[prev_index]
    progress = (frame - frames[prev_index]) / span if span > 0 else 1.0
    return Bracket(prev=keyframes[prev_index], next=keyframes[index], progress=progress)


__all__ = ["Bracket", "find_bracket", "sort_keyframes"]
