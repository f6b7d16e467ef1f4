"""Spawn, despawn and update the diagnostics overlay text element."""

from __future__ import annotations

import logging

from core.assets import AssetServer
from core.components import ScreenDiagsText, Text, TextSection, TextStyle, UiNode
from core.config import LABEL, OVERLAY_MARGIN, PLACEHOLDER, OverlayStyle
from core.ecs import Entity, World

logger = logging.getLogger(__name__)

VALUE_SECTION = 1


def format_value(raw: float) -> str:
    """Render a metric value with zero decimal places."""
    return f"{raw:.0f}"


class DiagsTextSpawner:
    """Effector for the overlay text element; holds no overlay state of its own."""

    def __init__(self, world: World, assets: AssetServer, style: OverlayStyle | None = None):
        self.world = world
        self.assets = assets
        self.style = style or OverlayStyle()

    def spawn(self, initial_value: str | None = None) -> Entity:
        """Create the label + value text entity; value falls back to the placeholder."""
        font = self.assets.load(self.style.font_path)

        def _style() -> TextStyle:
            return TextStyle(
                font=font,
                font_size=self.style.font_size,
                color=self.style.font_color,
            )

        text = Text(
            sections=[
                TextSection(value=LABEL, style=_style()),
                TextSection(
                    value=initial_value if initial_value is not None else PLACEHOLDER,
                    style=_style(),
                ),
            ]
        )
        entity = self.world.spawn(
            text,
            UiNode(OVERLAY_MARGIN, OVERLAY_MARGIN),
            ScreenDiagsText(),
        )
        logger.debug("Spawned diagnostics text %r with value %r", entity, text.sections[1].value)
        return entity

    def despawn(self, entity: Entity) -> None:
        self.world.despawn_recursive(entity)
        logger.debug("Despawned diagnostics text %r", entity)

    def update_value(self, entity: Entity, text: str) -> None:
        """Overwrite the value section only."""
        comp = entity.get_component(Text)
        if comp is None or len(comp.sections) <= VALUE_SECTION:
            raise RuntimeError(f"Entity {entity.uid} missing diagnostics Text sections")
        comp.sections[VALUE_SECTION].value = text

    @staticmethod
    def format_value(raw: float) -> str:
        return format_value(raw)
