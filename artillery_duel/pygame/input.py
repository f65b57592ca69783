"""Input handling for the pygame client."""

from __future__ import annotations

import pygame

from artillery_duel.core.weapons import WEAPONS
from artillery_duel.pygame.keybindings import action_for_key, weapon_slot_for_key


class InputHandler:
    """Translate pygame events into session commands.

    Holding an aim, power or movement key keeps a repeating action alive on
    the session; releasing the key stops it.
    """

    def __init__(self, app) -> None:
        self.app = app
        self._held_keys: set[int] = set()

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in self._held_keys:
                return
            self._held_keys.add(event.key)
            self._handle_key_down(event.key)
        elif event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
            self._handle_key_up(event.key)
        elif event.type == pygame.VIDEORESIZE:
            self.app.resize(event.w, event.h)

    def release_all(self) -> None:
        self._held_keys.clear()
        self.app.session.release_controls()

    # ------------------------------------------------------------------
    # Internal helpers
    def _handle_key_down(self, key: int) -> None:
        app = self.app
        session = app.session
        if key == pygame.K_ESCAPE:
            app.running = False
            return

        slot = weapon_slot_for_key(key)
        if slot is not None:
            session.select_weapon(slot)
            return

        action = action_for_key(app.bindings, key)
        if action is None:
            return
        if action == "restart":
            self.release_all()
            session.restart()
        elif action == "fire":
            session.fire()
        elif action == "move_left":
            session.move(-1)
            session.start_move(-1)
        elif action == "move_right":
            session.move(1)
            session.start_move(1)
        elif action == "turret_up":
            session.start_adjust_angle(1)
        elif action == "turret_down":
            session.start_adjust_angle(-1)
        elif action == "power_increase":
            session.start_adjust_power(1)
        elif action == "power_decrease":
            session.start_adjust_power(-1)
        elif action in {"next_weapon", "previous_weapon"}:
            step = 1 if action == "next_weapon" else -1
            index = (session.current_tank.weapon_index + step) % len(WEAPONS)
            session.select_weapon(index)

    def _handle_key_up(self, key: int) -> None:
        action = action_for_key(self.app.bindings, key)
        if action in {"move_left", "move_right"}:
            self.app.session.stop_move()
        elif action in {"turret_up", "turret_down", "power_increase", "power_decrease"}:
            self.app.session.stop_adjust()


__all__ = ["InputHandler"]
