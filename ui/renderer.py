"""Window, clock and per-frame drawing for the diagnostics demo."""

import os
import pygame
from .text_overlay import TextOverlay


class Renderer:
    """Handles all rendering operations for the demo window."""

    def __init__(self, app, width: int, height: int, title: str = "Screen Diagnostics"):
        """Initialize renderer with an app reference and manage display/clock."""
        self.app = app
        # Avoid forcing an OpenGL context; some environments set this and lack GLX.
        os.environ.pop("PYGAME_FORCE_OPENGL", None)
        os.environ.setdefault("SDL_VIDEO_X11_FORCE_EGL", "1")
        os.environ.setdefault("SDL_RENDER_DRIVER", "software")
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        # Colors
        self.bg_color = (20, 20, 25)
        self.help_color = (200, 200, 200)
        self.load_color = (80, 120, 200)

        self.font = pygame.font.SysFont("monospace", 14)
        self.text_overlay = TextOverlay(self.screen)
        self.load_fraction = 0.0

    def tick(self, target_fps: int) -> float:
        """Tick internal clock and return frame dt in seconds."""
        return self.clock.tick(target_fps) / 1000.0

    def shutdown(self):
        pygame.quit()

    def draw_load_bar(self):
        """Bar along the bottom showing how much of the frame budget the profile used."""
        rect = self.screen.get_rect()
        width = int(rect.width * max(0.0, min(1.0, self.load_fraction)))
        if width > 0:
            pygame.draw.rect(self.screen, self.load_color, (0, rect.bottom - 6, width, 6))

    def draw_help(self):
        lines = ["F3: Toggle FPS overlay", "Q/ESC: Quit"]
        y_offset = self.screen.get_rect().bottom - 20 - len(lines) * 18
        for line in lines:
            surface = self.font.render(line, True, self.help_color)
            self.screen.blit(surface, (10, y_offset))
            y_offset += 18

    def draw(self):
        """Render the complete frame."""
        self.screen.fill(self.bg_color)
        self.draw_load_bar()
        self.draw_help()
        self.text_overlay.draw(self.app.world)
        pygame.display.flip()
