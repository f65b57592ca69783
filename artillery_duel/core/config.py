"""Tunable settings for terrain generation and match rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TerrainSettings:
    """Configuration options for terrain generation."""

    width: int = 1280
    height: int = 720
    base_ratio: float = 0.5
    primary_frequency: float = 0.003
    primary_amplitude: float = 100.0
    secondary_frequency: float = 0.01
    secondary_amplitude: float = 50.0
    noise: float = 5.0
    smoothing: int = 2
    seed: Optional[int] = None


@dataclass
class RuleSettings:
    """Physics constants and match rules shared by every core component."""

    gravity: float = 0.4
    heavy_gravity_scale: float = 1.5
    fast_gravity_scale: float = 0.5

    tank_width: float = 30.0
    tank_height: float = 15.0
    turret_length: float = 20.0
    spawn_inset: float = 100.0
    edge_margin: float = 10.0

    max_health: int = 100
    max_power: int = 100
    max_angle: int = 180
    max_fuel: int = 200
    move_step: float = 2.0
    power_scale: float = 0.3
    start_power: int = 50

    hitbox_margin: float = 20.0
    bounce_restitution: float = 0.6
    bounce_friction: float = 0.8
    bounce_lift: float = 2.0
    dig_rate: float = 3.0
    dig_limit: float = 100.0
    tank_fall_rate: float = 2.0

    cluster_fragments: int = 5
    cluster_lift: float = 10.0

    turn_limit: int = 10
    settle_delay: float = 1.0
    adjust_interval: float = 0.05
    move_interval: float = 0.016


__all__ = ["RuleSettings", "TerrainSettings"]
