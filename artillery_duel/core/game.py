"""Match state for the artillery duel, independent of rendering."""

from __future__ import annotations

import dataclasses
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from artillery_duel.core.config import RuleSettings, TerrainSettings
from artillery_duel.core.particles import Particle, ParticleField
from artillery_duel.core.projectile import Projectile
from artillery_duel.core.tank import Tank
from artillery_duel.core.terrain import Terrain

logger = logging.getLogger(__name__)

PLAYER_COLORS = ((255, 68, 68), (68, 68, 255))


class Phase(Enum):
    AIMING = "aiming"
    # Kept for renderers; movement is only accepted while aiming.
    MOVING = "moving"
    FIRING = "firing"
    GAMEOVER = "gameover"


@dataclass(frozen=True)
class TankView:
    id: int
    name: str
    color: Tuple[int, int, int]
    x: float
    y: float
    angle: int
    power: int
    health: int
    fuel: int
    weapon_index: int
    weapon_name: str
    score: int


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    weapon_id: str
    color: Tuple[int, int, int]
    digging: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything a renderer needs for one frame."""

    width: int
    height: int
    terrain: Tuple[float, ...]
    tanks: Tuple[TankView, ...]
    projectiles: Tuple[ProjectileView, ...]
    particles: Tuple[Particle, ...]
    phase: Phase
    turn: int
    turn_count: int
    shot_number: int
    shots_per_player: int
    first_scorer: Optional[int]
    winner: Optional[int]
    message: str = ""


class Game:
    """Owns the terrain, both tanks, live projectiles and the match bookkeeping."""

    def __init__(
        self,
        player_one: str = "Player 1",
        player_two: str = "Player 2",
        settings: Optional[TerrainSettings] = None,
        rules: Optional[RuleSettings] = None,
        seed: Optional[int] = None,
        terrain: Optional[Terrain] = None,
    ) -> None:
        self.settings = settings or TerrainSettings(seed=seed)
        self.rules = rules or RuleSettings()
        self.rng = random.Random(self.settings.seed if seed is None else seed)
        self.width = self.settings.width
        self.height = self.settings.height
        self.terrain = terrain if terrain is not None else Terrain.generate(self.settings, self.rng)
        self.tanks = self._spawn_tanks(player_one, player_two)
        self.projectiles: List[Projectile] = []
        self.particles = ParticleField(self.rng)

        self.turn = 0
        self.phase = Phase.AIMING
        self.turn_count = 0
        self.first_scorer: Optional[int] = None
        self.winner: Optional[Tank] = None
        self.reset_players()

    def _spawn_tanks(self, player_one: str, player_two: str) -> List[Tank]:
        rules = self.rules
        common = dict(
            power=rules.start_power,
            health=rules.max_health,
            fuel=rules.max_fuel,
            max_angle=rules.max_angle,
            max_power=rules.max_power,
            max_health=rules.max_health,
            max_fuel=rules.max_fuel,
        )
        return [
            Tank(0, player_one, PLAYER_COLORS[0], x=rules.spawn_inset, angle=45, **common),
            Tank(1, player_two, PLAYER_COLORS[1], x=self.width - rules.spawn_inset, angle=135, **common),
        ]

    # ------------------------------------------------------------------
    # Properties
    @property
    def current_tank(self) -> Tank:
        return self.tanks[self.turn]

    @property
    def opponent(self) -> Tank:
        return self.tanks[1 - self.turn]

    def tank_by_id(self, tank_id: int) -> Tank:
        return next(tank for tank in self.tanks if tank.id == tank_id)

    # ------------------------------------------------------------------
    # Lifecycle
    def reset_players(self) -> None:
        """Put both tanks and the match bookkeeping back to their starting values."""

        self.turn = 0
        self.phase = Phase.AIMING
        self.winner = None
        self.turn_count = 0
        self.first_scorer = None
        self.projectiles = []
        self.particles.clear()
        starts = (
            (self.rules.spawn_inset, 45),
            (self.width - self.rules.spawn_inset, 135),
        )
        for tank, (x, angle) in zip(self.tanks, starts):
            tank.x = x
            tank.angle = angle
            tank.health = self.rules.max_health
            tank.fuel = self.rules.max_fuel
            tank.score = 0
            tank.last_command = None
            tank.snap_to(self.terrain)

    def regenerate_terrain(self) -> None:
        settings = dataclasses.replace(self.settings, width=self.width, height=self.height)
        self.terrain = Terrain.generate(settings, self.rng)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new playfield size without reshaping existing terrain."""

        self.width = max(1, int(width))
        self.height = max(1, int(height))
        logger.debug("Playfield resized to %dx%d", self.width, self.height)

    # ------------------------------------------------------------------
    # Simulation helpers
    def settle_tanks(self) -> bool:
        """Let tanks drop onto lowered ground; return True while any is falling."""

        falling = False
        for tank in self.tanks:
            ground = self.terrain.height_at(tank.x)
            if tank.y < ground:
                tank.y += self.rules.tank_fall_rate
                falling = True
            else:
                tank.y = ground
        return falling

    def score_winner(self) -> Optional[Tank]:
        """Higher score wins; ties go to the first scorer, else nobody."""

        first, second = self.tanks
        if first.score > second.score:
            return first
        if second.score > first.score:
            return second
        if self.first_scorer is not None:
            return self.tank_by_id(self.first_scorer)
        return None

    def elimination_winner(self) -> Optional[Tank]:
        winner: Optional[Tank] = None
        if self.tanks[0].health <= 0:
            winner = self.tanks[1]
        if self.tanks[1].health <= 0:
            winner = self.tanks[0]
        return winner

    # ------------------------------------------------------------------
    def snapshot(self, message: str = "") -> GameSnapshot:
        shots = max(1, self.rules.turn_limit // 2)
        return GameSnapshot(
            width=self.width,
            height=self.height,
            terrain=tuple(self.terrain.heights()),
            tanks=tuple(
                TankView(
                    id=tank.id,
                    name=tank.name,
                    color=tank.color,
                    x=tank.x,
                    y=tank.y,
                    angle=tank.angle,
                    power=tank.power,
                    health=tank.health,
                    fuel=tank.fuel,
                    weapon_index=tank.weapon_index,
                    weapon_name=tank.weapon.name,
                    score=tank.score,
                )
                for tank in self.tanks
            ),
            projectiles=tuple(
                ProjectileView(p.x, p.y, p.weapon.id, p.weapon.color, p.digging)
                for p in self.projectiles
            ),
            particles=tuple(dataclasses.replace(p) for p in self.particles.particles),
            phase=self.phase,
            turn=self.turn,
            turn_count=self.turn_count,
            shot_number=min(shots, self.turn_count // 2 + 1),
            shots_per_player=shots,
            first_scorer=self.first_scorer,
            winner=self.winner.id if self.winner is not None else None,
            message=message,
        )


__all__ = [
    "Game",
    "GameSnapshot",
    "Phase",
    "ProjectileView",
    "TankView",
]
