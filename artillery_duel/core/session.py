"""Turn controller: commands, per-tick simulation and the match state machine."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from artillery_duel.core.explosion import ExplosionReport, ExplosionResolver
from artillery_duel.core.game import Game, GameSnapshot, Phase
from artillery_duel.core.projectile import Projectile, ProjectileSimulator, ProjectileStep
from artillery_duel.core.tank import Tank
from artillery_duel.core.timers import HoldRepeater, ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class GameSession:
    """Own the mutable state of an active match and drive it tick by tick.

    Commands that do not fit the current phase are ignored and return a falsy
    value. Time only moves through :meth:`update`, which advances the
    scheduler (settle delay and held controls) and then runs one tick.
    """

    def __init__(self, game: Game, *, scheduler: Optional[Scheduler] = None) -> None:
        self.game = game
        self.rules = game.rules
        self.scheduler = scheduler or Scheduler()
        self.simulator = ProjectileSimulator(self.rules)
        self.resolver = ExplosionResolver(self.rules, after_explosion=lambda _game: self.check_victory())

        self.message = f"{self.current_tank.name}'s turn"
        self.explosions: List[ExplosionReport] = []
        self.last_step = ProjectileStep()

        self._turn_end_task: Optional[ScheduledTask] = None
        self._adjust_repeat = HoldRepeater(self.scheduler, self.rules.adjust_interval)
        self._move_repeat = HoldRepeater(self.scheduler, self.rules.move_interval, immediate=False)

    # ------------------------------------------------------------------
    # Properties
    @property
    def tanks(self) -> Sequence[Tank]:
        return self.game.tanks

    @property
    def current_tank(self) -> Tank:
        return self.game.current_tank

    @property
    def current_player(self) -> int:
        return self.game.turn

    @property
    def phase(self) -> Phase:
        return self.game.phase

    @property
    def winner(self) -> Optional[Tank]:
        return self.game.winner

    @property
    def fire_enabled(self) -> bool:
        return self.game.phase is Phase.AIMING

    @property
    def settle_pending(self) -> bool:
        return self._turn_end_task is not None and self._turn_end_task.active

    def snapshot(self) -> GameSnapshot:
        return self.game.snapshot(self.message)

    # ------------------------------------------------------------------
    # Aiming commands
    def set_angle(self, value: int) -> bool:
        if not self.fire_enabled:
            return False
        self.current_tank.set_angle(value)
        return True

    def adjust_angle(self, delta: int) -> bool:
        return self.set_angle(self.current_tank.angle + delta)

    def set_power(self, value: int) -> bool:
        if not self.fire_enabled:
            return False
        self.current_tank.set_power(value)
        return True

    def adjust_power(self, delta: int) -> bool:
        return self.set_power(self.current_tank.power + delta)

    def select_weapon(self, index: int) -> bool:
        if not self.fire_enabled:
            return False
        tank = self.current_tank
        if not tank.select_weapon(index):
            return False
        self.message = f"{tank.name} selected {tank.weapon.name}"
        return True

    def move(self, direction: int) -> bool:
        if not self.fire_enabled or direction not in (-1, 1):
            return False
        tank = self.current_tank
        moved = tank.move(
            self.game.terrain,
            direction,
            step=self.rules.move_step,
            margin=self.rules.edge_margin,
            playfield_width=self.game.width,
        )
        if not moved:
            logger.debug("%s cannot move %+d (fuel=%d, x=%.1f)", tank.name, direction, tank.fuel, tank.x)
        return moved

    # Held controls -----------------------------------------------------
    def start_adjust_angle(self, delta: int) -> None:
        self._adjust_repeat.start(lambda: self.adjust_angle(delta))

    def start_adjust_power(self, delta: int) -> None:
        self._adjust_repeat.start(lambda: self.adjust_power(delta))

    def stop_adjust(self) -> None:
        self._adjust_repeat.stop()

    def start_move(self, direction: int) -> None:
        if not self.fire_enabled:
            return
        self._move_repeat.start(lambda: self.move(direction))

    def stop_move(self) -> None:
        self._move_repeat.stop()

    def release_controls(self) -> None:
        self._adjust_repeat.stop()
        self._move_repeat.stop()

    # ------------------------------------------------------------------
    # Firing and match control
    def fire(self) -> Optional[Projectile]:
        if not self.fire_enabled:
            return None
        tank = self.current_tank
        self.release_controls()
        self.game.phase = Phase.FIRING
        tank.last_command = "fire"
        self.message = f"{tank.name} fires {tank.weapon.name}!"
        return self.simulator.launch(self.game, tank)

    def restart(self) -> None:
        self.release_controls()
        self.cancel_settle_delay()
        self.game.regenerate_terrain()
        self.game.reset_players()
        self.explosions = []
        self.message = f"{self.current_tank.name}'s turn"
        logger.debug("Match restarted")

    def resize(self, width: int, height: int) -> None:
        self.game.resize(width, height)

    # ------------------------------------------------------------------
    # Simulation
    def update(self, dt: float) -> ProjectileStep:
        self.scheduler.advance(dt)
        return self.tick()

    def tick(self) -> ProjectileStep:
        """Advance projectiles, particles and falling tanks by one step."""

        game = self.game
        self.explosions = []
        if game.phase is Phase.FIRING:
            self.last_step = self.simulator.step(game, self._on_impact, self._on_miss)
        else:
            self.last_step = ProjectileStep()
        game.particles.update(game.terrain)
        falling = game.settle_tanks()
        if game.winner is not None:
            game.particles.spawn_celebration(game.width, game.height)

        if game.phase is Phase.FIRING and not game.projectiles and not falling:
            if not self.settle_pending:
                self.start_settle_delay()
        elif self.settle_pending and (game.projectiles or falling):
            self.cancel_settle_delay()
        return self.last_step

    def start_settle_delay(self) -> ScheduledTask:
        self.cancel_settle_delay()
        self._turn_end_task = self.scheduler.call_later(self.rules.settle_delay, self._on_settled)
        return self._turn_end_task

    def cancel_settle_delay(self) -> None:
        if self._turn_end_task is not None:
            self._turn_end_task.cancel()
            self._turn_end_task = None

    def _on_settled(self) -> None:
        self._turn_end_task = None
        self.advance_turn()

    def _on_impact(self, projectile: Projectile, x: float, y: float) -> None:
        report = self.resolver.resolve(self.game, x, y, projectile.weapon)
        self.explosions.append(report)
        if self.game.phase is Phase.GAMEOVER:
            return
        if report.effects:
            hits = ", ".join(f"{tank.name} {-amount:+d}" for tank, amount in report.effects)
            self.message = f"{projectile.weapon.name} hit: {hits}"
        else:
            self.message = f"{projectile.weapon.name} hit the ground."

    def _on_miss(self, projectile: Projectile) -> None:
        if self.game.phase is not Phase.FIRING:
            return
        if any(p.active for p in self.game.projectiles):
            return
        self.advance_turn()
        if self.game.phase is not Phase.GAMEOVER:
            self.message = (
                f"{projectile.weapon.name} flew off into the distance. "
                f"{self.current_tank.name}'s turn"
            )

    # ------------------------------------------------------------------
    # Turn helpers
    def advance_turn(self) -> None:
        game = self.game
        if game.phase is Phase.GAMEOVER:
            return
        self.cancel_settle_delay()
        game.turn_count += 1
        if game.turn_count >= self.rules.turn_limit:
            self.end_by_score()
            return
        game.turn = 1 - game.turn
        game.current_tank.refuel()
        game.phase = Phase.AIMING
        self.message = f"{game.current_tank.name}'s turn"
        logger.debug("Turn %d: %s", game.turn_count, game.current_tank.info_line())

    def check_victory(self) -> None:
        if self.game.phase is Phase.GAMEOVER:
            return
        winner = self.game.elimination_winner()
        if winner is None:
            return
        loser = next(tank for tank in self.game.tanks if tank is not winner)
        self._finish(winner, f"{winner.name} wins! {loser.name} is destroyed.")

    def end_by_score(self) -> None:
        winner = self.game.score_winner()
        if winner is None:
            self._finish(None, "It's a draw!")
        else:
            self._finish(winner, f"{winner.name} wins on score!")

    def _finish(self, winner: Optional[Tank], message: str) -> None:
        game = self.game
        game.phase = Phase.GAMEOVER
        game.winner = winner
        for projectile in game.projectiles:
            projectile.active = False
        game.projectiles = []
        self.cancel_settle_delay()
        self.release_controls()
        self.message = message
        logger.debug(
            "Game over after %d turns: %s (scores %s)",
            game.turn_count,
            message,
            [tank.score for tank in game.tanks],
        )


__all__ = ["GameSession"]
