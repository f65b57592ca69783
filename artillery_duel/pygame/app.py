"""Pygame-powered presentation layer for the artillery duel."""

from __future__ import annotations

import logging
from typing import Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of the duel."
    ) from exc

from artillery_duel.core.config import RuleSettings, TerrainSettings
from artillery_duel.core.game import Game
from artillery_duel.core.session import GameSession
from artillery_duel.pygame.input import InputHandler
from artillery_duel.pygame.keybindings import DEFAULT_BINDINGS, KeyBindings
from artillery_duel.pygame.renderer import (
    draw_background,
    draw_game_over,
    draw_hud,
    draw_particles,
    draw_projectiles,
    draw_tanks,
    draw_terrain,
)

logger = logging.getLogger(__name__)


class PygameDuel:
    """Graphical client built on top of the core session.

    The window size sets the playfield; each frame runs one simulation tick
    and draws the resulting snapshot.
    """

    def __init__(
        self,
        player_one: str = "Player 1",
        player_two: str = "Player 2",
        width: int = 1280,
        height: int = 720,
        seed: Optional[int] = None,
        rules: Optional[RuleSettings] = None,
        bindings: Optional[KeyBindings] = None,
        fps: int = 60,
    ) -> None:
        pygame.init()
        pygame.font.init()
        self.display_surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Artillery Duel")
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.font = pygame.font.Font(None, 22)
        self.title_font = pygame.font.Font(None, 64)
        self.bindings = bindings or DEFAULT_BINDINGS

        settings = TerrainSettings(width=width, height=height, seed=seed)
        self.session = GameSession(Game(player_one, player_two, settings, rules))
        self.input = InputHandler(self)
        self.running = True
        logger.debug("Client started at %dx%d (seed=%s)", width, height, seed)

    @property
    def screen(self) -> pygame.Surface:
        return self.display_surface

    def resize(self, width: int, height: int) -> None:
        self.display_surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.session.resize(width, height)

    # ------------------------------------------------------------------
    # Game Loop helpers
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_events()
            self.session.update(dt)
            self._draw()
        self.input.release_all()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.input.release_all()
            else:
                self.input.process_event(event)

    def _draw(self) -> None:
        snapshot = self.session.snapshot()
        rules = self.session.rules
        surface = self.screen
        draw_background(surface)
        draw_terrain(surface, snapshot)
        draw_tanks(surface, snapshot, (rules.tank_width, rules.tank_height, rules.turret_length))
        draw_projectiles(surface, snapshot)
        draw_particles(surface, snapshot)
        draw_hud(surface, snapshot, self.font)
        draw_game_over(surface, snapshot, self.title_font)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameDuel(**kwargs)
    app.run()


__all__ = ["PygameDuel", "run_pygame"]
