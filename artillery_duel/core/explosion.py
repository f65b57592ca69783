"""Explosion resolution: craters, area damage, scoring and secondary spawns."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from artillery_duel.core.config import RuleSettings
from artillery_duel.core.projectile import Projectile
from artillery_duel.core.tank import Tank
from artillery_duel.core.weapons import (
    DEFAULT_BLAST,
    SecondaryEffect,
    Weapon,
    cluster_fragment,
    crater_factor,
    deals_damage,
    falloff_factor,
    secondary_effect,
)

if TYPE_CHECKING:
    from artillery_duel.core.game import Game

logger = logging.getLogger(__name__)


@dataclass
class ExplosionReport:
    """Information about a resolved explosion."""

    x: float
    y: float
    weapon: Weapon
    carved: bool = False
    effects: List[Tuple[Tank, int]] = field(default_factory=list)
    points: int = 0
    fatalities: List[Tank] = field(default_factory=list)
    fragments: List[Projectile] = field(default_factory=list)


class ExplosionResolver:
    """Apply one explosion to the game in a fixed order.

    Terrain is carved first, then damage and score are applied, then cluster
    fragments or volcano ash are spawned. ``after_explosion`` runs last and is
    where the turn controller evaluates the win condition.
    """

    def __init__(
        self,
        rules: RuleSettings,
        after_explosion: Optional[Callable[["Game"], None]] = None,
    ) -> None:
        self.rules = rules
        self.after_explosion = after_explosion

    def resolve(self, game: "Game", x: float, y: float, weapon: Optional[Weapon] = None) -> ExplosionReport:
        weapon = weapon or DEFAULT_BLAST
        report = ExplosionReport(x=x, y=y, weapon=weapon)
        game.particles.spawn_explosion(x, y, weapon)

        factor = crater_factor(weapon)
        if factor is not None:
            game.terrain.deform(x, y, weapon.radius, factor)
            report.carved = True

        if deals_damage(weapon):
            self._apply_damage(game, report)

        effect = secondary_effect(weapon)
        if effect is SecondaryEffect.CLUSTER:
            report.fragments = self._spawn_fragments(game, x, y, weapon)
        elif effect is SecondaryEffect.VOLCANO:
            game.particles.spawn_volcano(x, y)

        logger.debug(
            "%s exploded at (%.1f, %.1f): effects=%s points=%d destroyed=%s fragments=%d",
            weapon.name,
            x,
            y,
            [(tank.name, amount) for tank, amount in report.effects],
            report.points,
            [tank.name for tank in report.fatalities],
            len(report.fragments),
        )
        if self.after_explosion is not None:
            self.after_explosion(game)
        return report

    def effect_on(self, tank: Tank, x: float, y: float, weapon: Weapon) -> int:
        """Signed health change a blast at ``(x, y)`` would inflict on ``tank``."""

        reach = weapon.radius + self.rules.hitbox_margin
        distance = math.hypot(tank.x - x, tank.y - y)
        if distance >= reach:
            return 0
        return math.floor(falloff_factor(weapon, distance, reach) * weapon.damage)

    # ------------------------------------------------------------------
    def _apply_damage(self, game: "Game", report: ExplosionReport) -> None:
        shooter = game.current_tank
        for tank in game.tanks:
            effect = self.effect_on(tank, report.x, report.y, report.weapon)
            if effect == 0:
                continue
            was_alive = tank.alive
            tank.apply_effect(effect)
            report.effects.append((tank, effect))
            if was_alive and not tank.alive:
                report.fatalities.append(tank)
            if tank is shooter:
                continue
            shooter.score += effect
            report.points += effect
            if game.first_scorer is None and effect > 0:
                game.first_scorer = shooter.id
                logger.debug("%s scored first", shooter.name)

    def _spawn_fragments(self, game: "Game", x: float, y: float, weapon: Weapon) -> List[Projectile]:
        rng = game.rng
        fragment = cluster_fragment(weapon)
        spawned: List[Projectile] = []
        for _ in range(self.rules.cluster_fragments):
            projectile = Projectile(
                x=x,
                y=y - self.rules.cluster_lift,
                vx=(rng.random() - 0.5) * 15,
                vy=-(rng.random() * 10 + 5),
                weapon=fragment,
            )
            spawned.append(projectile)
        game.projectiles.extend(spawned)
        return spawned


__all__ = ["ExplosionReport", "ExplosionResolver"]
