from __future__ import annotations

from core.diagnostics import FPS, FRAME_COUNT, FRAME_TIME, Diagnostic, Diagnostics
from core.ecs import System


class FrameTimeDiagnosticsSystem(System):
    """Record per-frame FPS, frame time and frame count into Diagnostics."""

    def __init__(self, diagnostics: Diagnostics, max_history: int | None = None):
        super().__init__()
        self.diagnostics = diagnostics
        self.frame_count = 0
        kwargs = {} if max_history is None else {"max_history": max_history}
        for name, suffix in ((FPS, ""), (FRAME_TIME, "ms"), (FRAME_COUNT, "")):
            if diagnostics.get(name) is None:
                diagnostics.add(Diagnostic(name, suffix, **kwargs))

    def update(self, dt: float) -> None:
        self.frame_count += 1
        self.diagnostics.add_measurement(FRAME_COUNT, float(self.frame_count))
        # A zero-length frame carries no rate information
        if dt <= 0.0:
            return
        self.diagnostics.add_measurement(FPS, 1.0 / dt)
        self.diagnostics.add_measurement(FRAME_TIME, dt * 1000.0)
