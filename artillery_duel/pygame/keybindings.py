"""Keyboard layout for the hot-seat pygame client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import pygame


@dataclass
class KeyBindings:
    move_left: int
    move_right: int
    turret_up: int
    turret_down: int
    power_increase: int
    power_decrease: int
    fire: int
    next_weapon: int
    previous_weapon: int
    restart: int


DEFAULT_BINDINGS = KeyBindings(
    move_left=pygame.K_LEFT,
    move_right=pygame.K_RIGHT,
    turret_up=pygame.K_UP,
    turret_down=pygame.K_DOWN,
    power_increase=pygame.K_PERIOD,
    power_decrease=pygame.K_COMMA,
    fire=pygame.K_RETURN,
    next_weapon=pygame.K_e,
    previous_weapon=pygame.K_q,
    restart=pygame.K_r,
)

# Number row picks a catalog slot directly; 0 is the tenth weapon.
WEAPON_KEYS: List[int] = [
    pygame.K_1,
    pygame.K_2,
    pygame.K_3,
    pygame.K_4,
    pygame.K_5,
    pygame.K_6,
    pygame.K_7,
    pygame.K_8,
    pygame.K_9,
    pygame.K_0,
]


def action_for_key(bindings: KeyBindings, key: int) -> Optional[str]:
    """Return the binding field name mapped to ``key``, if any."""

    lookup: Dict[int, str] = {value: name for name, value in vars(bindings).items()}
    return lookup.get(key)


def weapon_slot_for_key(key: int) -> Optional[int]:
    if key in WEAPON_KEYS:
        return WEAPON_KEYS.index(key)
    return None


__all__ = ["DEFAULT_BINDINGS", "KeyBindings", "WEAPON_KEYS", "action_for_key", "weapon_slot_for_key"]
