"""Input collection: translate OS events into simple control signals only."""

import pygame


class InputHandler:
    """Collects input events, without applying any overlay logic."""

    def get_events(self) -> dict:
        """Poll pygame events and return signals.

        Signals include:
          - quit: bool
          - toggle_diags: bool (F3 pressed this frame)
        """
        signals: dict = {"quit": False, "toggle_diags": False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                signals["quit"] = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    signals["quit"] = True
                elif event.key == pygame.K_F3:
                    signals["toggle_diags"] = True

        return signals
