from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.config import UPDATE_INTERVAL

if TYPE_CHECKING:
    from core.assets import FontHandle
    from core.ecs import Entity


@dataclass
class TextStyle:
    """Font, size and RGBA color for one text section."""
    font: FontHandle | None = None
    font_size: float = 32.0
    color: tuple[int, int, int, int] = (255, 255, 255, 255)


@dataclass
class TextSection:
    """One independently styled run of text."""
    value: str = ""
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class Text:
    """Component holding a list of text sections drawn left to right."""
    sections: list[TextSection] = field(default_factory=list)

    @property
    def value(self) -> str:
        return "".join(section.value for section in self.sections)


@dataclass
class UiNode:
    """Screen-space placement of a UI element (pixels, top-left origin)."""
    x: int = 0
    y: int = 0


@dataclass
class ScreenDiagsText:
    """Marker component for the diagnostics overlay text element."""


@dataclass
class RefreshTimer:
    """Repeating accumulate-and-compare interval timer.

    When it finishes, ``elapsed`` wraps modulo ``duration``;
    ``just_finished`` is true only for the tick that crossed the interval.
    """
    duration: float = UPDATE_INTERVAL
    elapsed: float = 0.0
    just_finished: bool = False

    def tick(self, dt: float) -> RefreshTimer:
        self.elapsed += dt
        self.just_finished = self.elapsed >= self.duration
        if self.just_finished:
            self.elapsed = self.elapsed % self.duration if self.duration > 0.0 else 0.0
        return self


@dataclass
class ScreenDiagsState:
    """Overlay controller state: existence witness, pause flag and refresh timer.

    Only ``paused`` is meant to be written from outside the overlay systems.
    """
    text_entity: Entity | None = None
    paused: bool = False
    timer: RefreshTimer = field(default_factory=RefreshTimer)

    @property
    def enabled(self) -> bool:
        return not self.paused

    def pause(self) -> None:
        self.paused = True

    def unpause(self) -> None:
        self.paused = False

    def toggle(self) -> None:
        self.paused = not self.paused

    def set_enabled(self, enabled: bool) -> None:
        self.paused = not enabled
