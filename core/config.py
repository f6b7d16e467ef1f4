"""Centralized configuration constants."""

from __future__ import annotations

from dataclasses import dataclass

# Screen defaults
DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720

# Update rates
TARGET_RENDERING_FPS = 60

# Screen diagnostics overlay
FONT_SIZE = 32.0
FONT_COLOR = (255, 0, 0, 255)
UPDATE_INTERVAL = 1.0  # Seconds between displayed value refreshes
FONT_PATH = "fonts/screen-diags-font.ttf"
LABEL = "FPS: "
PLACEHOLDER = "..."
OVERLAY_MARGIN = 10  # Pixels from the top-left corner

# Frame-time diagnostics
DEFAULT_MAX_HISTORY = 20


@dataclass(frozen=True)
class OverlayStyle:
    """Fixed visual configuration for the screen diagnostics overlay."""
    font_size: float = FONT_SIZE
    font_color: tuple[int, int, int, int] = FONT_COLOR
    refresh_interval: float = UPDATE_INTERVAL
    font_path: str = FONT_PATH
