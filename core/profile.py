"""Workload profile base interface.

A profile decides how long each frame of the demo takes. Headless runs use
the value directly as the frame dt; windowed runs wait out the extra time so
the real clock reflects the simulated load.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from core.config import TARGET_RENDERING_FPS


class Profile(ABC):
    """Abstract base class for frame-time workload profiles."""

    name: str = "profile"
    target_fps: float = float(TARGET_RENDERING_FPS)

    @property
    def budget(self) -> float:
        return 1.0 / self.target_fps

    @abstractmethod
    def frame_dt(self, step: int, rng: random.Random) -> float:
        """Return the duration in seconds of frame number ``step``."""
        raise NotImplementedError

    def load_fraction(self, dt: float) -> float:
        """Share of the frame budget a frame of length dt consumed (can exceed 1)."""
        if self.budget <= 0.0:
            return 0.0
        return dt / self.budget
