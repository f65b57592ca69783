"""Core simulation for the artillery duel, independent of rendering."""

from artillery_duel.core.config import RuleSettings, TerrainSettings
from artillery_duel.core.explosion import ExplosionReport, ExplosionResolver
from artillery_duel.core.game import Game, GameSnapshot, Phase
from artillery_duel.core.particles import Particle, ParticleField
from artillery_duel.core.projectile import Projectile, ProjectileSimulator, ProjectileStep
from artillery_duel.core.session import GameSession
from artillery_duel.core.tank import Tank
from artillery_duel.core.terrain import Terrain
from artillery_duel.core.timers import HoldRepeater, ScheduledTask, Scheduler
from artillery_duel.core.weapons import DEFAULT_BLAST, WEAPONS, Weapon, WeaponKind

__all__ = [
    "DEFAULT_BLAST",
    "ExplosionReport",
    "ExplosionResolver",
    "Game",
    "GameSession",
    "GameSnapshot",
    "HoldRepeater",
    "Particle",
    "ParticleField",
    "Phase",
    "Projectile",
    "ProjectileSimulator",
    "ProjectileStep",
    "RuleSettings",
    "ScheduledTask",
    "Scheduler",
    "Tank",
    "Terrain",
    "TerrainSettings",
    "WEAPONS",
    "Weapon",
    "WeaponKind",
]
