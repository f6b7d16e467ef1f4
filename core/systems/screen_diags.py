from __future__ import annotations

from core.components import ScreenDiagsState
from core.diags_text import DiagsTextSpawner
from core.ecs import System, World
from utils.protocols import MetricSource


def setup_screen_diags(world: World, spawner: DiagsTextSpawner, refresh_interval: float) -> None:
    """Startup hook: spawn the placeholder text and the controller state.

    The first element never samples the metric, so the first frame always
    shows the placeholder.
    """
    entity = spawner.spawn(None)
    state = ScreenDiagsState(text_entity=entity)
    state.timer.duration = refresh_interval
    world.spawn(state)


class ScreenDiagsSystem(System):
    """Show, hide and throttle-refresh the FPS overlay text once per tick."""

    def __init__(self, spawner: DiagsTextSpawner, metrics: MetricSource):
        super().__init__()
        self.spawner = spawner
        self.metrics = metrics

    def update(self, dt: float) -> None:
        if not self.world:
            return
        _, state = self.world.single(ScreenDiagsState)

        if state.text_entity is None:
            # Disabled and already gone
            if state.paused:
                return
            # Just enabled: spawn with whatever value is available now
            state.text_entity = self.spawner.spawn(self._sample_text())
            return

        if not self.world.contains(state.text_entity):
            raise RuntimeError(
                f"Diagnostics text {state.text_entity!r} was removed from the world outside ScreenDiagsSystem"
            )

        if state.paused:
            entity = state.text_entity
            state.text_entity = None
            self.spawner.despawn(entity)
            return

        if not state.timer.tick(dt).just_finished:
            return

        # Keep the previous number when the metric has a gap
        text = self._sample_text()
        if text is not None:
            self.spawner.update_value(state.text_entity, text)

    def _sample_text(self) -> str | None:
        value = self.metrics.get_current_average()
        if value is None:
            return None
        return self.spawner.format_value(value)
