"""Rendering helpers for the artillery duel pygame client.

Everything here draws from a :class:`GameSnapshot`; nothing mutates the match.
"""

from __future__ import annotations

import math
from typing import Tuple

import pygame
import pygame.gfxdraw

from artillery_duel.core.game import GameSnapshot, Phase, TankView

BACKGROUND = pygame.Color(15, 15, 26)
GRID = pygame.Color(26, 26, 46)
TERRAIN_FILL = pygame.Color(42, 157, 143)
TERRAIN_EDGE = pygame.Color(38, 70, 83)
TURRET = pygame.Color(85, 85, 85)
TRACKS = pygame.Color(17, 17, 17)
TEXT = pygame.Color(235, 235, 235)


def _rgb(color: Tuple[int, int, int]) -> pygame.Color:
    return pygame.Color(*color)


def draw_background(surface: pygame.Surface) -> None:
    surface.fill(BACKGROUND)
    width, height = surface.get_size()
    for x in range(0, width, 50):
        pygame.draw.line(surface, GRID, (x, 0), (x, height))
    for y in range(0, height, 50):
        pygame.draw.line(surface, GRID, (0, y), (width, y))


def draw_terrain(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    if not snapshot.terrain:
        return
    height = surface.get_height()
    outline = [(i, h) for i, h in enumerate(snapshot.terrain)]
    polygon = [(0, height)] + outline + [(len(snapshot.terrain) - 1, height)]
    pygame.draw.polygon(surface, TERRAIN_FILL, polygon)
    if len(outline) > 1:
        pygame.draw.lines(surface, TERRAIN_EDGE, False, outline, 2)


def _draw_tank(surface: pygame.Surface, tank: TankView, body: Tuple[float, float, float], active: bool) -> None:
    width, height, turret_length = body
    x, y = tank.x, tank.y
    rads = math.radians(tank.angle)
    pivot = (x, y - height + 5)
    tip = (pivot[0] + math.cos(rads) * turret_length, pivot[1] - math.sin(rads) * turret_length)
    pygame.draw.line(surface, TURRET, pivot, tip, 6)

    hull = [
        (x - width / 2, y),
        (x + width / 2, y),
        (x + width / 2 - 5, y - height),
        (x - width / 2 + 5, y - height),
    ]
    pygame.draw.polygon(surface, _rgb(tank.color), hull)
    pygame.draw.rect(surface, TRACKS, pygame.Rect(int(x - width / 2), int(y - 4), int(width), 4))
    if active:
        pygame.draw.circle(surface, TEXT, (int(x), int(y - 10)), 30, 1)


def draw_tanks(surface: pygame.Surface, snapshot: GameSnapshot, body: Tuple[float, float, float]) -> None:
    for tank in snapshot.tanks:
        if tank.health <= 0:
            continue
        active = tank.id == snapshot.tanks[snapshot.turn].id and snapshot.phase is Phase.AIMING
        _draw_tank(surface, tank, body, active)


def draw_projectiles(surface: pygame.Surface, snapshot: GameSnapshot, radius: int = 4) -> None:
    for projectile in snapshot.projectiles:
        color = TERRAIN_EDGE if projectile.digging else _rgb(projectile.color)
        pygame.draw.circle(surface, color, (int(projectile.x), int(projectile.y)), radius)


def draw_particles(surface: pygame.Surface, snapshot: GameSnapshot) -> None:
    width, height = surface.get_size()
    for particle in snapshot.particles:
        px, py = int(particle.x), int(particle.y)
        if not (-600 < px < width + 600 and -600 < py < height + 600):
            continue
        alpha = max(0, min(255, int(particle.life * 255)))
        r, g, b = particle.color
        pygame.gfxdraw.filled_circle(surface, px, py, max(1, int(particle.size)), (r, g, b, alpha))


def draw_hud(surface: pygame.Surface, snapshot: GameSnapshot, font: pygame.font.Font) -> None:
    width = surface.get_width()
    bar_width = 200
    for idx, tank in enumerate(snapshot.tanks):
        left = 20 if idx == 0 else width - bar_width - 20
        frame = pygame.Rect(left, 16, bar_width, 14)
        pygame.draw.rect(surface, GRID, frame)
        filled = frame.copy()
        filled.width = int(bar_width * max(0, tank.health) / 100)
        pygame.draw.rect(surface, _rgb(tank.color), filled)
        label = font.render(f"{tank.name}  {tank.health}%  (Score: {tank.score})", True, TEXT)
        surface.blit(label, (left, 34))

    current = snapshot.tanks[snapshot.turn]
    turn_text = f"{current.name}'s Turn (Shot {snapshot.shot_number}/{snapshot.shots_per_player})"
    turn_label = font.render(turn_text, True, _rgb(current.color))
    surface.blit(turn_label, turn_label.get_rect(midtop=(width // 2, 14)))

    controls = (
        f"Angle {current.angle}  Power {current.power}  Fuel {current.fuel}"
        f"  Weapon: {current.weapon_name}"
    )
    controls_label = font.render(controls, True, TEXT)
    surface.blit(controls_label, controls_label.get_rect(midtop=(width // 2, 36)))
    if snapshot.message:
        message_label = font.render(snapshot.message, True, TEXT)
        surface.blit(message_label, message_label.get_rect(midtop=(width // 2, 58)))


def draw_game_over(surface: pygame.Surface, snapshot: GameSnapshot, font: pygame.font.Font) -> None:
    if snapshot.phase is not Phase.GAMEOVER:
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surface.blit(overlay, (0, 0))
    if snapshot.winner is None:
        text, color = "It's a Draw!", TEXT
    else:
        winner = next(tank for tank in snapshot.tanks if tank.id == snapshot.winner)
        text, color = f"{winner.name} Wins!", _rgb(winner.color)
    center = (surface.get_width() // 2, surface.get_height() // 2)
    label = font.render(text, True, color)
    surface.blit(label, label.get_rect(center=center))
