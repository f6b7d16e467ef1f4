from __future__ import annotations

import random

from core.profile import Profile


class StutterProfile(Profile):
    """On-budget frames with a long hitch every ``period`` frames."""

    name = "stutter"

    def __init__(self, period: int = 45, hitch: float = 0.25):
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = period
        self.hitch = hitch

    def frame_dt(self, step: int, rng: random.Random) -> float:
        _ = rng
        if step > 0 and step % self.period == 0:
            return self.hitch
        return self.budget


def create_profile() -> Profile:
    return StutterProfile()
