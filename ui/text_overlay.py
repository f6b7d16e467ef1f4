"""Draw Text entities with pygame fonts."""

from __future__ import annotations

import logging
from pathlib import Path

from core.assets import FontHandle
from core.components import Text, UiNode

logger = logging.getLogger(__name__)


class TextOverlay:
    """Render every entity carrying Text and UiNode, sections left to right."""

    def __init__(self, screen, shadow_offset: int = 1):
        self.screen = screen
        self.shadow_offset = shadow_offset
        self._fonts: dict[tuple[str | None, int], object] = {}

    def resolve_font(self, handle: FontHandle | None, size: float):
        import pygame

        path = handle.path if handle is not None else None
        px = max(1, int(round(size)))
        key = (path, px)
        font = self._fonts.get(key)
        if font is not None:
            return font
        if path is not None and Path(path).is_file():
            font = pygame.font.Font(path, px)
        else:
            if path is not None:
                logger.warning("Font %s not found, using default font", path)
            font = pygame.font.Font(None, px)
        self._fonts[key] = font
        return font

    def draw(self, world) -> None:
        for entity in world.get_entities_with(Text, UiNode):
            text = entity.get_component(Text)
            node = entity.get_component(UiNode)
            if text is None or node is None:
                continue
            self._draw_sections(text, node.x, node.y)

    def _draw_sections(self, text: Text, x: int, y: int) -> None:
        for section in text.sections:
            if not section.value:
                continue
            font = self.resolve_font(section.style.font, section.style.font_size)
            color = section.style.color[:3]
            shadow = font.render(section.value, True, (0, 0, 0))
            self.screen.blit(shadow, (x + self.shadow_offset, y + self.shadow_offset))
            surface = font.render(section.value, True, color)
            self.screen.blit(surface, (x, y))
            x += surface.get_width()
