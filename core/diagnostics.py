"""Rolling-history diagnostics and the FPS metric source built on them."""

from __future__ import annotations

from collections import deque

from core.config import DEFAULT_MAX_HISTORY

FPS = "fps"
FRAME_TIME = "frame_time"
FRAME_COUNT = "frame_count"


class Diagnostic:
    """A named measurement with a bounded history."""

    def __init__(self, name: str, suffix: str = "", max_history: int = DEFAULT_MAX_HISTORY):
        if max_history <= 0:
            raise ValueError("max_history must be positive")
        self.name = name
        self.suffix = suffix
        self.max_history = max_history
        self._history: deque[float] = deque(maxlen=max_history)

    def add_measurement(self, value: float) -> None:
        self._history.append(float(value))

    def value(self) -> float | None:
        if not self._history:
            return None
        return self._history[-1]

    def average(self) -> float | None:
        if not self._history:
            return None
        return sum(self._history) / len(self._history)

    def history_len(self) -> int:
        return len(self._history)


class Diagnostics:
    """Registry of diagnostics by name."""

    def __init__(self):
        self._diagnostics: dict[str, Diagnostic] = {}

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics[diagnostic.name] = diagnostic

    def get(self, name: str) -> Diagnostic | None:
        return self._diagnostics.get(name)

    def add_measurement(self, name: str, value: float) -> None:
        diagnostic = self._diagnostics.get(name)
        if diagnostic is not None:
            diagnostic.add_measurement(value)

    def names(self) -> list[str]:
        return sorted(self._diagnostics)


class FpsMetricSource:
    """Expose the rolling FPS average, or None until a sample exists."""

    def __init__(self, diagnostics: Diagnostics):
        self.diagnostics = diagnostics

    def get_current_average(self) -> float | None:
        fps = self.diagnostics.get(FPS)
        if fps is None:
            return None
        return fps.average()
