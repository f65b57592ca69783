"""Weapon catalog and the rules each kind of weapon follows."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from artillery_duel.core.config import RuleSettings

Color = Tuple[int, int, int]


class WeaponKind(Enum):
    """Closed set of weapon behaviours."""

    STANDARD = "standard"
    HEAVY = "heavy"
    FAST = "fast"
    TERRAIN_ONLY = "terrain_only"
    CLUSTER = "cluster"
    BOUNCER = "bouncer"
    DIGGER = "digger"
    VOLCANO = "volcano"
    HEAL = "heal"


class CollisionOutcome(Enum):
    EXPLODE = "explode"
    DIG = "dig"
    BOUNCE = "bounce"


class SecondaryEffect(Enum):
    NONE = "none"
    CLUSTER = "cluster"
    VOLCANO = "volcano"


@dataclass(frozen=True)
class Weapon:
    """Immutable weapon definition."""

    id: str
    name: str
    damage: int
    radius: float
    color: Color
    kind: WeaponKind = WeaponKind.STANDARD
    bounces: int = 0
    # Explosion burst handed to the particle field.
    particle_count: int = 20
    particle_speed: float = 10.0
    particle_decay: float = 0.02
    flash: bool = False

    @property
    def heavy(self) -> bool:
        return self.kind is WeaponKind.HEAVY

    @property
    def fast(self) -> bool:
        return self.kind is WeaponKind.FAST

    @property
    def terrain_only(self) -> bool:
        return self.kind is WeaponKind.TERRAIN_ONLY

    @property
    def cluster(self) -> bool:
        return self.kind is WeaponKind.CLUSTER

    @property
    def digs(self) -> bool:
        return self.kind is WeaponKind.DIGGER

    @property
    def volcano(self) -> bool:
        return self.kind is WeaponKind.VOLCANO

    @property
    def heals(self) -> bool:
        return self.kind is WeaponKind.HEAL


WEAPONS: Tuple[Weapon, ...] = (
    Weapon("standard", "Standard Shell", 30, 40, (255, 255, 255)),
    Weapon("big_shot", "Big Shot", 40, 80, (255, 170, 0), WeaponKind.HEAVY),
    Weapon(
        "sniper",
        "Sniper",
        50,
        20,
        (255, 0, 0),
        WeaponKind.FAST,
        particle_count=10,
        particle_speed=5.0,
    ),
    Weapon(
        "dirt_mover",
        "Dirt Mover",
        10,
        120,
        (139, 69, 19),
        WeaponKind.TERRAIN_ONLY,
        particle_count=50,
        particle_speed=15.0,
    ),
    Weapon(
        "nuke",
        "Nuke",
        60,
        150,
        (0, 255, 0),
        particle_count=100,
        particle_speed=25.0,
        particle_decay=0.01,
        flash=True,
    ),
    Weapon("heal", "Repair Kit", -30, 40, (0, 255, 255), WeaponKind.HEAL),
    Weapon("cluster", "Cluster Bomb", 10, 30, (255, 0, 255), WeaponKind.CLUSTER),
    Weapon("bouncer", "Leap Frog", 35, 40, (136, 255, 136), WeaponKind.BOUNCER, bounces=1),
    Weapon("digger", "Digger", 30, 30, (170, 170, 170), WeaponKind.DIGGER),
    Weapon("volcano", "Volcano", 15, 30, (255, 85, 0), WeaponKind.VOLCANO),
)

# Stand-in for impacts that have no originating weapon.
DEFAULT_BLAST = Weapon("blast", "Blast", 20, 60, (255, 255, 255))


def weapon_at(index: int) -> Optional[Weapon]:
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if not 0 <= index < len(WEAPONS):
        return None
    return WEAPONS[index]


# ----------------------------------------------------------------------
# Behaviour resolution
def gravity_multiplier(weapon: Weapon, rules: RuleSettings) -> float:
    if weapon.kind is WeaponKind.HEAVY:
        return rules.heavy_gravity_scale
    if weapon.kind is WeaponKind.FAST:
        return rules.fast_gravity_scale
    return 1.0


def collision_outcome(weapon: Weapon, digging: bool, bounces_left: int) -> CollisionOutcome:
    """Decide what a projectile does when it reaches the ground."""

    if weapon.kind is WeaponKind.DIGGER and not digging:
        return CollisionOutcome.DIG
    if weapon.kind is WeaponKind.BOUNCER and bounces_left > 0:
        return CollisionOutcome.BOUNCE
    return CollisionOutcome.EXPLODE


def crater_factor(weapon: Weapon) -> Optional[float]:
    """Shape multiplier for the crater, or ``None`` when the ground is left alone."""

    if weapon.kind is WeaponKind.HEAL:
        return None
    if weapon.kind is WeaponKind.TERRAIN_ONLY:
        return 1.5
    return 1.0


def deals_damage(weapon: Weapon) -> bool:
    return weapon.kind is not WeaponKind.TERRAIN_ONLY


def falloff_factor(weapon: Weapon, distance: float, reach: float) -> float:
    if weapon.kind is WeaponKind.FAST:
        return 1.0
    return max(0.0, 1.0 - distance / reach)


def secondary_effect(weapon: Weapon) -> SecondaryEffect:
    if weapon.kind is WeaponKind.CLUSTER:
        return SecondaryEffect.CLUSTER
    if weapon.kind is WeaponKind.VOLCANO:
        return SecondaryEffect.VOLCANO
    return SecondaryEffect.NONE


def cluster_fragment(weapon: Weapon) -> Weapon:
    """Smaller copy of a cluster weapon that cannot split again."""

    return dataclasses.replace(
        weapon,
        name="MiniBomb",
        kind=WeaponKind.STANDARD,
        radius=20,
        damage=5,
    )


__all__ = [
    "CollisionOutcome",
    "DEFAULT_BLAST",
    "SecondaryEffect",
    "WEAPONS",
    "Weapon",
    "WeaponKind",
    "cluster_fragment",
    "collision_outcome",
    "crater_factor",
    "deals_damage",
    "falloff_factor",
    "gravity_multiplier",
    "secondary_effect",
    "weapon_at",
]
