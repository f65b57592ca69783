import math

import pytest

from artillery_duel.core.projectile import Projectile, ProjectileSimulator
from artillery_duel.core.weapons import WEAPONS


def _by_id(weapon_id: str):
    return next(weapon for weapon in WEAPONS if weapon.id == weapon_id)


class Recorder:
    def __init__(self) -> None:
        self.impacts = []
        self.misses = []

    def on_impact(self, projectile, x, y) -> None:
        self.impacts.append((projectile, x, y))

    def on_miss(self, projectile) -> None:
        self.misses.append(projectile)


def _step(game, recorder: Recorder):
    simulator = ProjectileSimulator(game.rules)
    return simulator.step(game, recorder.on_impact, recorder.on_miss)


def test_launch_starts_at_turret_tip(flat_game):
    tank = flat_game.tanks[0]
    tank.set_angle(45)
    tank.set_power(50)

    projectile = ProjectileSimulator(flat_game.rules).launch(flat_game, tank)

    speed = 50 * 0.3
    assert projectile.vx == pytest.approx(math.cos(math.pi / 4) * speed)
    assert projectile.vy == pytest.approx(-math.sin(math.pi / 4) * speed)
    assert projectile.x == pytest.approx(100 + math.cos(math.pi / 4) * 20)
    assert projectile.y == pytest.approx(400 - 15 - math.sin(math.pi / 4) * 20)
    assert flat_game.projectiles == [projectile]


@pytest.mark.parametrize(
    "weapon_id, expected_vy",
    [("standard", 0.4), ("big_shot", 0.6), ("sniper", 0.2)],
)
def test_gravity_depends_on_weapon(flat_game, weapon_id, expected_vy):
    projectile = Projectile(x=400, y=100, vx=1, vy=0, weapon=_by_id(weapon_id))
    flat_game.projectiles.append(projectile)

    _step(flat_game, Recorder())

    assert projectile.vy == pytest.approx(expected_vy)
    assert projectile.x == pytest.approx(401)
    assert projectile.y == pytest.approx(100 + expected_vy)


def test_leaving_playfield_is_a_miss(flat_game):
    recorder = Recorder()
    projectile = Projectile(x=799.5, y=100, vx=5, vy=0, weapon=WEAPONS[0])
    flat_game.projectiles.append(projectile)

    step = _step(flat_game, recorder)

    assert step.misses == 1
    assert recorder.misses == [projectile]
    assert recorder.impacts == []
    assert flat_game.projectiles == []


def test_ground_contact_explodes(flat_game):
    recorder = Recorder()
    flat_game.projectiles.append(Projectile(x=400, y=399.8, vx=0, vy=0, weapon=WEAPONS[0]))

    step = _step(flat_game, recorder)

    assert len(recorder.impacts) == 1
    _, x, y = recorder.impacts[0]
    assert x == 400
    assert y == pytest.approx(400.2)
    assert step.impacts == [(x, y)]
    assert flat_game.projectiles == []


def test_bouncer_reflects_once_then_explodes(flat_game):
    recorder = Recorder()
    bouncer = _by_id("bouncer")
    projectile = Projectile(x=400, y=399, vx=2, vy=5, weapon=bouncer, bounces=bouncer.bounces)
    flat_game.projectiles.append(projectile)

    step = _step(flat_game, recorder)

    assert step.bounces == 1
    assert projectile.active
    assert projectile.bounces == 0
    assert projectile.vy == pytest.approx(-5.4 * 0.6)
    assert projectile.vx == pytest.approx(1.6)
    assert projectile.y == pytest.approx(398)

    for _ in range(50):
        _step(flat_game, recorder)
        if recorder.impacts:
            break
    assert len(recorder.impacts) == 1
    assert flat_game.projectiles == []


def test_digger_explodes_after_dig_limit(flat_game):
    recorder = Recorder()
    projectile = Projectile(x=400, y=399.8, vx=0, vy=0, weapon=_by_id("digger"))
    flat_game.projectiles.append(projectile)

    step = _step(flat_game, recorder)
    assert step.digs_started == 1
    assert projectile.digging
    assert (projectile.vx, projectile.vy) == (0.0, 0.0)

    for _ in range(33):
        _step(flat_game, recorder)
    assert projectile.active
    assert projectile.dig_depth == pytest.approx(99)
    assert recorder.impacts == []

    _step(flat_game, recorder)
    assert projectile.dig_depth == pytest.approx(102)
    assert not projectile.active
    assert len(recorder.impacts) == 1


def test_direct_hit_on_tank(flat_game):
    recorder = Recorder()
    target = flat_game.tanks[1]
    flat_game.projectiles.append(Projectile(x=target.x, y=385, vx=0, vy=0, weapon=WEAPONS[0]))

    _step(flat_game, recorder)

    assert len(recorder.impacts) == 1
    _, x, y = recorder.impacts[0]
    assert (x, y) == (target.x, pytest.approx(385.4))


def test_projectiles_added_during_step_wait_for_next_tick(flat_game):
    simulator = ProjectileSimulator(flat_game.rules)
    late = Projectile(x=300, y=100, vx=0, vy=0, weapon=WEAPONS[0])

    def spawn(projectile, x, y):
        flat_game.projectiles.append(late)

    flat_game.projectiles.append(Projectile(x=400, y=399.8, vx=0, vy=0, weapon=WEAPONS[0]))
    simulator.step(flat_game, spawn, lambda projectile: None)

    assert flat_game.projectiles == [late]
    assert late.y == 100
