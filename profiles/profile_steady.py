from __future__ import annotations

import random

from core.profile import Profile


class SteadyProfile(Profile):
    """Frames land on budget with a little timing jitter."""

    name = "steady"

    def __init__(self, jitter: float = 0.05):
        self.jitter = jitter

    def frame_dt(self, step: int, rng: random.Random) -> float:
        _ = step
        return self.budget * (1.0 + rng.uniform(-self.jitter, self.jitter))


def create_profile() -> Profile:
    return SteadyProfile()
