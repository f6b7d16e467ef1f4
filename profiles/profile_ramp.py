from __future__ import annotations

import random

from core.profile import Profile


class RampProfile(Profile):
    """Frame rate drifts from ``start_fps`` down to ``end_fps`` then holds."""

    name = "ramp"

    def __init__(self, start_fps: float = 120.0, end_fps: float = 20.0, ramp_frames: int = 900):
        self.start_fps = start_fps
        self.end_fps = end_fps
        self.ramp_frames = max(1, ramp_frames)

    def frame_dt(self, step: int, rng: random.Random) -> float:
        _ = rng
        t = min(1.0, step / self.ramp_frames)
        fps = self.start_fps + (self.end_fps - self.start_fps) * t
        return 1.0 / fps


def create_profile() -> Profile:
    return RampProfile()
