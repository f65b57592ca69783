"""Rendering helpers for the pygame front-end."""

from artillery_duel.pygame.renderer.scene import (
    draw_background,
    draw_game_over,
    draw_hud,
    draw_particles,
    draw_projectiles,
    draw_tanks,
    draw_terrain,
)

__all__ = [
    "draw_background",
    "draw_game_over",
    "draw_hud",
    "draw_particles",
    "draw_projectiles",
    "draw_tanks",
    "draw_terrain",
]
