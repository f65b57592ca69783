"""Projectile flight: gravity, ground and tank collisions, bouncing and digging."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Tuple

from artillery_duel.core.config import RuleSettings
from artillery_duel.core.tank import Tank
from artillery_duel.core.weapons import CollisionOutcome, Weapon, collision_outcome, gravity_multiplier

if TYPE_CHECKING:
    from artillery_duel.core.game import Game

logger = logging.getLogger(__name__)

ImpactHandler = Callable[["Projectile", float, float], None]
MissHandler = Callable[["Projectile"], None]


@dataclass
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    weapon: Weapon
    bounces: int = 0
    digging: bool = False
    dig_depth: float = 0.0
    active: bool = True


@dataclass
class ProjectileStep:
    """What happened to the live projectiles during one tick."""

    impacts: List[Tuple[float, float]] = field(default_factory=list)
    misses: int = 0
    bounces: int = 0
    digs_started: int = 0


class ProjectileSimulator:
    """Advances every live projectile of a :class:`Game` by one tick."""

    def __init__(self, rules: RuleSettings) -> None:
        self.rules = rules

    def launch(self, game: "Game", tank: Tank) -> Projectile:
        weapon = tank.weapon
        rads = math.radians(tank.angle)
        speed = tank.power * self.rules.power_scale
        x, y = tank.turret_tip(self.rules.turret_length, self.rules.tank_height)
        projectile = Projectile(
            x=x,
            y=y,
            vx=math.cos(rads) * speed,
            vy=-math.sin(rads) * speed,
            weapon=weapon,
            bounces=weapon.bounces,
        )
        game.projectiles.append(projectile)
        logger.debug(
            "%s fired %s: angle=%d power=%d from (%.1f, %.1f)",
            tank.name,
            weapon.name,
            tank.angle,
            tank.power,
            x,
            y,
        )
        return projectile

    def step(self, game: "Game", on_impact: ImpactHandler, on_miss: MissHandler) -> ProjectileStep:
        """Move each projectile once; explosions are handed to ``on_impact`` at once.

        Projectiles added while stepping (cluster fragments) wait for the next
        tick. Inactive projectiles are purged at the end.
        """

        step = ProjectileStep()
        for projectile in list(game.projectiles):
            if not projectile.active:
                continue
            self._advance(game, projectile, step, on_impact, on_miss)
        game.projectiles = [p for p in game.projectiles if p.active]
        return step

    # ------------------------------------------------------------------
    def _advance(
        self,
        game: "Game",
        projectile: Projectile,
        step: ProjectileStep,
        on_impact: ImpactHandler,
        on_miss: MissHandler,
    ) -> None:
        rules = self.rules
        if projectile.digging:
            projectile.y += rules.dig_rate
            projectile.dig_depth += rules.dig_rate
            if projectile.dig_depth > rules.dig_limit:
                self._detonate(projectile, step, on_impact)
                return
        else:
            projectile.vy += rules.gravity * gravity_multiplier(projectile.weapon, rules)
            projectile.x += projectile.vx
            projectile.y += projectile.vy

        if projectile.x < 0 or projectile.x > game.width or projectile.y > game.height:
            projectile.active = False
            step.misses += 1
            logger.debug("%s left the playfield at (%.1f, %.1f)", projectile.weapon.name, projectile.x, projectile.y)
            on_miss(projectile)
            return

        if projectile.digging:
            return

        floor = game.terrain.height_at(projectile.x)
        if projectile.y >= floor:
            outcome = collision_outcome(projectile.weapon, projectile.digging, projectile.bounces)
            if outcome is CollisionOutcome.DIG:
                projectile.digging = True
                projectile.vx = 0.0
                projectile.vy = 0.0
                step.digs_started += 1
                return
            if outcome is CollisionOutcome.BOUNCE:
                projectile.bounces -= 1
                projectile.vy = -projectile.vy * rules.bounce_restitution
                projectile.vx *= rules.bounce_friction
                projectile.y = floor - rules.bounce_lift
                step.bounces += 1
            else:
                self._detonate(projectile, step, on_impact)
                return

        for tank in game.tanks:
            if self.hits_tank(projectile.x, projectile.y, tank):
                self._detonate(projectile, step, on_impact)
                return

    def hits_tank(self, x: float, y: float, tank: Tank) -> bool:
        half_width = self.rules.tank_width / 2
        body = self.rules.tank_height
        return abs(x - tank.x) < half_width and abs(y - (tank.y - body / 2)) < body

    @staticmethod
    def _detonate(projectile: Projectile, step: ProjectileStep, on_impact: ImpactHandler) -> None:
        projectile.active = False
        step.impacts.append((projectile.x, projectile.y))
        on_impact(projectile, projectile.x, projectile.y)


__all__ = ["Projectile", "ProjectileSimulator", "ProjectileStep"]
