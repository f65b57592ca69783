"""Cosmetic particles emitted by explosions and the victory celebration.

Nothing in the match rules reads particle state; the field only exists so a
renderer has something to draw.
"""

from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass
from typing import List, Tuple

from artillery_duel.core.terrain import Terrain
from artillery_duel.core.weapons import Weapon

FIRE = (255, 68, 0)
ASH = (51, 51, 51)
FLASH = (255, 255, 255)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    decay: float
    color: Tuple[int, int, int]
    size: float
    anti_gravity: bool = False
    bounce: bool = False


class ParticleField:
    """Owns the live particle list and its simple ballistic update."""

    def __init__(self, rng: random.Random, gravity: float = 0.1, bounce_gravity: float = 0.2) -> None:
        self._rng = rng
        self.gravity = gravity
        self.bounce_gravity = bounce_gravity
        self.particles: List[Particle] = []

    def clear(self) -> None:
        self.particles = []

    def __len__(self) -> int:
        return len(self.particles)

    # ------------------------------------------------------------------
    # Emitters
    def spawn_explosion(self, x: float, y: float, weapon: Weapon) -> None:
        rng = self._rng
        if weapon.flash:
            self.particles.append(
                Particle(x, y, 0.0, 0.0, life=0.2, decay=0.05, color=FLASH, size=500.0)
            )
        speed = weapon.particle_speed
        for _ in range(weapon.particle_count):
            self.particles.append(
                Particle(
                    x,
                    y,
                    (rng.random() - 0.5) * speed,
                    (rng.random() - 0.5) * speed,
                    life=1.0,
                    decay=weapon.particle_decay + rng.random() * 0.01,
                    color=weapon.color,
                    size=rng.random() * 4 + 2,
                    anti_gravity=weapon.heals,
                )
            )

    def spawn_volcano(self, x: float, y: float, count: int = 30) -> None:
        rng = self._rng
        for i in range(count):
            self.particles.append(
                Particle(
                    x,
                    y,
                    (rng.random() - 0.5) * 20,
                    -(rng.random() * 25 + 10),
                    life=3.0,
                    decay=0.01,
                    color=FIRE if i % 2 == 0 else ASH,
                    size=rng.random() * 5 + 2,
                    bounce=True,
                )
            )

    def spawn_celebration(self, width: float, height: float, count: int = 5) -> None:
        rng = self._rng
        for _ in range(count):
            r, g, b = colorsys.hls_to_rgb(rng.random(), 0.5, 1.0)
            self.particles.append(
                Particle(
                    rng.random() * width,
                    rng.random() * height,
                    (rng.random() - 0.5) * 10,
                    (rng.random() - 0.5) * 10,
                    life=2.0 + rng.random(),
                    decay=0.01,
                    color=(int(r * 255), int(g * 255), int(b * 255)),
                    size=rng.random() * 5 + 2,
                    anti_gravity=True,
                )
            )

    # ------------------------------------------------------------------
    def update(self, terrain: Terrain) -> None:
        for particle in self.particles:
            particle.life -= particle.decay
            particle.x += particle.vx
            particle.y += particle.vy
            if particle.bounce:
                floor = terrain.height_at(particle.x)
                if particle.y > floor:
                    particle.y = floor
                    particle.vy = -particle.vy * 0.5
                    particle.vx *= 0.8
                particle.vy += self.bounce_gravity
            elif not particle.anti_gravity:
                particle.vy += self.gravity
        self.particles = [p for p in self.particles if p.life > 0]


__all__ = ["Particle", "ParticleField"]
