"""Plugins that wire frame-time diagnostics and the FPS overlay into an App."""

from __future__ import annotations

from core.app import App
from core.assets import AssetServer
from core.components import ScreenDiagsState
from core.config import OverlayStyle
from core.diagnostics import Diagnostics, FpsMetricSource
from core.diags_text import DiagsTextSpawner
from core.ecs import World
from core.systems.frame_time import FrameTimeDiagnosticsSystem
from core.systems.screen_diags import ScreenDiagsSystem, setup_screen_diags


class FrameTimeDiagnosticsPlugin:
    """Insert a Diagnostics resource and sample frame timings every tick."""

    def __init__(self, max_history: int | None = None):
        self.max_history = max_history

    def build(self, app: App) -> None:
        diagnostics = app.world.get_resource(Diagnostics)
        if diagnostics is None:
            diagnostics = Diagnostics()
            app.insert_resource(diagnostics)
        app.add_system(FrameTimeDiagnosticsSystem(diagnostics, self.max_history))


class ScreenDiagsPlugin:
    """Draw an FPS counter on screen.

    Toggle it through the ScreenDiagsState component, or with
    set_screen_diags_enabled / toggle_screen_diags.
    """

    def __init__(self, style: OverlayStyle | None = None):
        self.style = style or OverlayStyle()

    def build(self, app: App) -> None:
        if not app.has_plugin(FrameTimeDiagnosticsPlugin):
            app.add_plugin(FrameTimeDiagnosticsPlugin())
        assets = app.world.get_resource(AssetServer)
        if assets is None:
            assets = AssetServer()
            app.insert_resource(assets)

        spawner = DiagsTextSpawner(app.world, assets, self.style)
        metrics = FpsMetricSource(app.world.resource(Diagnostics))
        interval = self.style.refresh_interval
        app.add_startup_system(lambda world: setup_screen_diags(world, spawner, interval))
        app.add_system(ScreenDiagsSystem(spawner, metrics))


def screen_diags_state(world: World) -> ScreenDiagsState:
    _, state = world.single(ScreenDiagsState)
    return state


def set_screen_diags_enabled(world: World, enabled: bool) -> None:
    screen_diags_state(world).set_enabled(enabled)


def toggle_screen_diags(world: World) -> bool:
    """Flip the overlay and return whether it is now enabled."""
    state = screen_diags_state(world)
    state.toggle()
    return state.enabled
