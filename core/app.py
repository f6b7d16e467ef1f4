"""Minimal app shell: startup hooks plus per-tick systems over one World."""

from __future__ import annotations

import logging
from typing import Any

from core.ecs import System, World
from utils.protocols import Plugin, StartupSystem

logger = logging.getLogger(__name__)


class App:
    """Owns the World and runs startup hooks once, then systems every tick."""

    def __init__(self, world: World | None = None):
        self.world = world or World()
        self._startup: list[StartupSystem] = []
        self._plugins: set[type] = set()
        self.started = False

    def add_plugin(self, plugin: Plugin) -> App:
        """Build a plugin once; the first instance of a plugin type wins.

        Later instances of the same type are ignored with a warning.
        """
        if type(plugin) in self._plugins:
            logger.warning("%s already added; ignoring duplicate", type(plugin).__name__)
            return self
        self._plugins.add(type(plugin))
        plugin.build(self)
        return self

    def has_plugin(self, plugin_type: type) -> bool:
        return plugin_type in self._plugins

    def add_startup_system(self, system: StartupSystem) -> App:
        self._startup.append(system)
        return self

    def add_system(self, system: System) -> App:
        self.world.add_system(system)
        return self

    def insert_resource(self, resource: Any) -> App:
        self.world.insert_resource(resource)
        return self

    def startup(self) -> None:
        if self.started:
            raise RuntimeError("App startup already ran")
        self.started = True
        for system in self._startup:
            system(self.world)

    def update(self, dt: float) -> None:
        if not self.started:
            self.startup()
        self.world.update(dt)
