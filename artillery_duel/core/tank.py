"""Tank entity definitions and actions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from artillery_duel.core.terrain import Terrain
from artillery_duel.core.weapons import WEAPONS, weapon_at


@dataclass
class Tank:
    """A player-controlled tank.

    ``angle`` is in degrees with 0 facing right, 90 straight up and 180 facing
    left. ``y`` follows the terrain except while the tank is falling.
    """

    id: int
    name: str
    color: Tuple[int, int, int]
    x: float
    y: float = 0.0
    angle: int = 45
    power: int = 50
    health: int = 100
    fuel: int = 200
    weapon_index: int = 0
    score: int = 0
    max_angle: int = 180
    max_power: int = 100
    max_health: int = 100
    max_fuel: int = 200
    last_command: Optional[str] = field(default=None, init=False)

    def set_angle(self, value: int) -> None:
        self.angle = max(0, min(self.max_angle, int(value)))
        self.last_command = f"angle {self.angle}"

    def adjust_angle(self, delta: int) -> None:
        self.set_angle(self.angle + delta)

    def set_power(self, value: int) -> None:
        self.power = max(0, min(self.max_power, int(value)))
        self.last_command = f"power {self.power}"

    def adjust_power(self, delta: int) -> None:
        self.set_power(self.power + delta)

    def select_weapon(self, index: int) -> bool:
        weapon = weapon_at(index)
        if weapon is None:
            return False
        self.weapon_index = index
        self.last_command = f"weapon {weapon.name}"
        return True

    @property
    def weapon(self):
        return WEAPONS[self.weapon_index]

    def snap_to(self, terrain: Terrain) -> None:
        self.y = terrain.height_at(self.x)

    def move(
        self,
        terrain: Terrain,
        direction: int,
        *,
        step: float,
        margin: float,
        playfield_width: float,
    ) -> bool:
        """Drive one step sideways, spending one unit of fuel."""

        if self.fuel <= 0:
            return False
        target_x = self.x + direction * step
        if target_x < margin or target_x > playfield_width - margin:
            return False
        self.x = target_x
        self.snap_to(terrain)
        self.fuel = max(0, self.fuel - 1)
        self.last_command = "left" if direction < 0 else "right"
        return True

    def refuel(self) -> None:
        self.fuel = self.max_fuel

    def apply_effect(self, amount: int) -> int:
        """Subtract ``amount`` from health (negative heals); return the real change."""

        before = self.health
        self.health = max(0, min(self.max_health, self.health - amount))
        return before - self.health

    @property
    def alive(self) -> bool:
        return self.health > 0

    def turret_tip(self, turret_length: float, body_height: float) -> Tuple[float, float]:
        rads = math.radians(self.angle)
        return (
            self.x + math.cos(rads) * turret_length,
            (self.y - body_height) - math.sin(rads) * turret_length,
        )

    def info_line(self) -> str:
        return (
            f"{self.name} HP:{self.health:3d} Score:{self.score:3d}"
            f" Angle:{self.angle:3d} Pow:{self.power:3d}"
            f" Fuel:{self.fuel:3d} {self.weapon.name}"
            f" Last:{self.last_command or '-'}"
        )
