"""Headless overlay timeline plotting utilities.

Renders the value shown by the FPS overlay against the underlying rolling
average, with hidden stretches shaded, saving to a PNG file via the Agg
backend.
"""

from __future__ import annotations

import math
from pathlib import Path

from core.components import ScreenDiagsState, Text
from core.diagnostics import FpsMetricSource

# (time, displayed value or nan, visible, rolling average or nan)
Sample = tuple[float, float, bool, float]


def displayed_value(state: ScreenDiagsState) -> str | None:
    """Return the overlay's value text, or None while it is hidden."""
    if state.text_entity is None:
        return None
    text = state.text_entity.get_component(Text)
    if text is None or len(text.sections) < 2:
        raise RuntimeError(f"Entity {state.text_entity.uid} missing diagnostics Text sections")
    return text.sections[1].value


def _as_float(text: str | None) -> float:
    if text is None:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def save_overlay_plot(samples: list[Sample], out_path: str | None = None) -> str:
    """Save a PNG plot of displayed vs. averaged FPS over time.

    Args:
        samples: list of (t, displayed, visible, average) tuples
        out_path: optional explicit output path

    Returns:
        Output file path.
    """
    if out_path is None:
        out_path = str(Path("outputs") / "overlay.png")

    if len(samples) < 2:
        if samples:
            samples = samples + [samples[-1]]
        else:
            samples = [(0.0, math.nan, False, math.nan), (1.0, math.nan, False, math.nan)]

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import numpy as np

    ts = np.array([s[0] for s in samples])
    shown = np.array([s[1] for s in samples])
    visible = np.array([s[2] for s in samples])
    avg = np.array([s[3] for s in samples])

    fig, ax = plt.subplots(figsize=(10, 4), dpi=150)
    ax.plot(ts, avg, color="#888888", linewidth=1.0, alpha=0.8, label="rolling average")
    ax.step(ts, shown, where="post", color="#d62728", linewidth=2.0, label="displayed")

    finite = np.concatenate([shown[np.isfinite(shown)], avg[np.isfinite(avg)]])
    y_max = float(finite.max()) if finite.size else 1.0
    ax.fill_between(
        ts,
        0.0,
        max(1.0, y_max) * 1.05,
        where=~visible,
        step="post",
        color="#444444",
        alpha=0.15,
        label="hidden",
    )

    ax.set_xlim(float(ts.min()), float(ts.max()) if ts.max() > ts.min() else float(ts.min()) + 1.0)
    ax.set_ylim(0.0, max(1.0, y_max) * 1.05)
    ax.set_xlabel("time (s)")
    ax.set_ylabel("FPS")
    ax.set_title("FPS overlay: displayed value vs. rolling average")
    ax.legend(loc="upper right")
    ax.grid(True, linestyle=":", alpha=0.3)

    fig.tight_layout()
    out_file = Path(out_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_file)
    plt.close(fig)
    return str(out_file)


class Plotter:
    """Collects overlay samples and writes a plot at the end of a headless run.

    Usage:
        plotter = Plotter(world, metrics, enabled=headless and plot)
        plotter.set_sampling_from_print_freq(print_freq, target_fps)
        plotter.seed_initial_sample()
        ... each frame ...
        plotter.update(dt)
        ... on shutdown ...
        extras = plotter.finalize()
    """

    def __init__(self, world, metrics: FpsMetricSource, *, enabled: bool = False) -> None:
        self.enabled = enabled
        self.world = world
        self.metrics = metrics
        self._samples: list[Sample] = []
        self._sample_period_s: float = 1.0
        self._time_accum: float = 0.0
        self._time: float = 0.0

    def set_sampling_from_print_freq(self, print_freq: int, target_fps: float) -> None:
        """Configure sampling period using print frequency and a reference FPS.

        If print_freq <= 0, defaults to 1.0s. Otherwise, samples every N frames,
        i.e., period = max(1, print_freq) / target_fps seconds.
        """
        if print_freq and print_freq > 0 and target_fps > 0:
            frames = max(1, int(print_freq))
            self._sample_period_s = frames / float(target_fps)
        else:
            self._sample_period_s = 1.0

    def seed_initial_sample(self) -> None:
        if not self.enabled:
            return
        self._samples.clear()
        self._time_accum = 0.0
        self._time = 0.0
        self._record_sample()

    def update(self, dt: float) -> None:
        if not self.enabled:
            return
        self._time += dt
        self._time_accum += dt
        while self._time_accum >= self._sample_period_s:
            self._time_accum -= self._sample_period_s
            self._record_sample()

    def _record_sample(self) -> None:
        _, state = self.world.single(ScreenDiagsState)
        text = displayed_value(state)
        avg = self.metrics.get_current_average()
        self._samples.append(
            (
                self._time,
                _as_float(text),
                text is not None,
                math.nan if avg is None else avg,
            )
        )

    def get_samples(self) -> list[Sample]:
        return list(self._samples)

    def finalize(self) -> dict:
        """Write the plot file if enabled.

        Returns a dict suitable for merging into the run's result summary.
        Keys may include: "plot_path" or "plot_error".
        """
        if not self.enabled:
            return {}
        try:
            import datetime as _dt

            ts = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
            out_path = str(Path("outputs") / f"overlay_{ts}.png")
            save_overlay_plot(self._samples, out_path=out_path)
            return {"plot_path": out_path}
        except Exception as e:  # pragma: no cover - plotting optional
            return {"plot_error": str(e)}
