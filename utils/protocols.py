"""Typing protocols for host-provided collaborators."""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from core.ecs import World


class MetricSource(Protocol):
    def get_current_average(self) -> float | None: ...


class Plugin(Protocol):
    def build(self, app) -> None: ...


class StartupSystem(Protocol):
    def __call__(self, world: World) -> None: ...
