"""Demo orchestration: ties the overlay plugin to a host loop and runs it."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from core.app import App
from core.config import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH, TARGET_RENDERING_FPS
from core.diagnostics import Diagnostics, FpsMetricSource
from core.plugin import ScreenDiagsPlugin, screen_diags_state, toggle_screen_diags
from core.profile import Profile
from utils.plot import Plotter, displayed_value

logger = logging.getLogger(__name__)


@dataclass
class LoopTimers:
    frame_dt: float
    toggle_period: float = 0.0
    time_accum_toggle: float = 0.0
    elapsed_time: float = 0.0

    def advance_frame(self, dt: float) -> None:
        self.frame_dt = dt
        self.time_accum_toggle += dt
        self.elapsed_time += dt

    def should_toggle(self) -> bool:
        return self.toggle_period > 0.0 and self.time_accum_toggle >= self.toggle_period

    def consume_toggle(self) -> None:
        self.time_accum_toggle -= self.toggle_period


def _build_headless_stats(elapsed: float, app: App, metrics: FpsMetricSource) -> str:
    state = screen_diags_state(app.world)
    shown = displayed_value(state)
    avg = metrics.get_current_average()
    parts = [f"t:{elapsed:6.2f}"]
    parts.append(f"avg:{avg:6.1f}" if avg is not None else "avg:   --")
    parts.append(f"overlay:{shown}" if shown is not None else "overlay:hidden")
    return " | ".join(parts)


class DiagsDemo:
    """Run a profile-driven frame loop with the FPS overlay attached."""

    def __init__(
        self,
        profile: Profile,
        width: int = DEFAULT_SCREEN_WIDTH,
        height: int = DEFAULT_SCREEN_HEIGHT,
        seed: int | None = None,
        headless: bool = False,
        toggle_every: float = 0.0,
        plot: bool = False,
        app: App | None = None,
    ):
        self.profile = profile
        self.headless = headless
        self.toggle_every = toggle_every
        self.seed = random.randint(0, 1000000) if seed is None else seed
        self.rng = random.Random(self.seed)
        self.running = True

        self.app = app or App()
        if not self.app.has_plugin(ScreenDiagsPlugin):
            self.app.add_plugin(ScreenDiagsPlugin())
        self.metrics = FpsMetricSource(self.app.world.resource(Diagnostics))
        self.app.startup()

        if not headless:
            from ui.renderer import Renderer
            from utils.input import InputHandler

            self.input_handler = InputHandler()
            self.renderer = Renderer(self.app, width, height)
        else:
            self.input_handler = None
            self.renderer = None

        self.plotter = Plotter(self.app.world, self.metrics, enabled=headless and plot)

    def run(
        self,
        print_freq: int = 60,
        max_time: float | None = None,
        max_steps: int | None = None,
    ) -> dict:
        step_count = 0
        toggle_count = 0

        frame_dt = self.profile.budget
        timers = LoopTimers(frame_dt=frame_dt, toggle_period=self.toggle_every)

        self.plotter.set_sampling_from_print_freq(print_freq, TARGET_RENDERING_FPS)
        self.plotter.seed_initial_sample()

        while self.running:
            if self.headless:
                if max_time is not None and timers.elapsed_time >= max_time:
                    break
            if max_steps is not None and step_count >= max_steps:
                break

            if not self.headless and self.input_handler is not None:
                input_events = self.input_handler.get_events()
                if input_events.get("quit"):
                    self.running = False
                    break
                if input_events.get("toggle_diags"):
                    enabled = toggle_screen_diags(self.app.world)
                    toggle_count += 1
                    logger.info("FPS overlay %s", "enabled" if enabled else "disabled")

            timers.advance_frame(frame_dt)

            while timers.should_toggle():
                timers.consume_toggle()
                enabled = toggle_screen_diags(self.app.world)
                toggle_count += 1
                logger.info("FPS overlay %s at t=%.2f", "enabled" if enabled else "disabled", timers.elapsed_time)

            self.app.update(frame_dt)
            self.plotter.update(frame_dt)

            if not self.headless and self.renderer is not None:
                self.renderer.load_fraction = self.profile.load_fraction(frame_dt)
                self.renderer.draw()
                self._simulate_load(step_count)
                frame_dt = self.renderer.tick(TARGET_RENDERING_FPS)
            else:
                frame_dt = self.profile.frame_dt(step_count, self.rng)

            if self.headless and print_freq > 0 and step_count % print_freq == 0:
                print(_build_headless_stats(timers.elapsed_time, self.app, self.metrics))

            step_count += 1

        if self.renderer:
            self.renderer.shutdown()

        state = screen_diags_state(self.app.world)
        result = {
            "time": timers.elapsed_time,
            "steps": step_count,
            "toggles": toggle_count,
            "visible": state.text_entity is not None,
            "displayed": displayed_value(state),
            "seed": self.seed,
        }
        plot_extras = self.plotter.finalize()
        if plot_extras:
            result.update(plot_extras)
        return result

    def _simulate_load(self, step: int) -> None:
        import pygame

        extra = self.profile.frame_dt(step, self.rng) - self.profile.budget
        if extra > 0.0:
            pygame.time.wait(int(extra * 1000.0))
