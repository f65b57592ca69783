"""Pygame front-end for the artillery duel."""

from artillery_duel.pygame.app import PygameDuel, run_pygame

__all__ = ["PygameDuel", "run_pygame"]
