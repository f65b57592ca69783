import dataclasses

import pytest

from artillery_duel.core.config import RuleSettings
from artillery_duel.core.weapons import (
    DEFAULT_BLAST,
    WEAPONS,
    CollisionOutcome,
    SecondaryEffect,
    WeaponKind,
    cluster_fragment,
    collision_outcome,
    crater_factor,
    deals_damage,
    falloff_factor,
    gravity_multiplier,
    secondary_effect,
    weapon_at,
)


def _by_id(weapon_id: str):
    return next(weapon for weapon in WEAPONS if weapon.id == weapon_id)


def test_catalog_order_is_fixed() -> None:
    assert [weapon.id for weapon in WEAPONS] == [
        "standard",
        "big_shot",
        "sniper",
        "dirt_mover",
        "nuke",
        "heal",
        "cluster",
        "bouncer",
        "digger",
        "volcano",
    ]
    assert _by_id("standard").damage == 30
    assert _by_id("standard").radius == 40
    assert _by_id("heal").damage == -30


def test_weapons_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        WEAPONS[0].damage = 99  # type: ignore[misc]


def test_flags_follow_kind() -> None:
    assert _by_id("big_shot").heavy
    assert _by_id("sniper").fast
    assert _by_id("dirt_mover").terrain_only
    assert _by_id("cluster").cluster
    assert _by_id("digger").digs
    assert _by_id("volcano").volcano
    assert _by_id("heal").heals
    assert _by_id("bouncer").bounces == 1
    standard = WEAPONS[0]
    assert not (standard.heavy or standard.fast or standard.cluster or standard.digs)


def test_gravity_multiplier() -> None:
    rules = RuleSettings()

    assert gravity_multiplier(_by_id("standard"), rules) == 1.0
    assert gravity_multiplier(_by_id("big_shot"), rules) == pytest.approx(1.5)
    assert gravity_multiplier(_by_id("sniper"), rules) == pytest.approx(0.5)


def test_collision_outcomes() -> None:
    digger = _by_id("digger")
    bouncer = _by_id("bouncer")

    assert collision_outcome(digger, digging=False, bounces_left=0) is CollisionOutcome.DIG
    assert collision_outcome(digger, digging=True, bounces_left=0) is CollisionOutcome.EXPLODE
    assert collision_outcome(bouncer, digging=False, bounces_left=1) is CollisionOutcome.BOUNCE
    assert collision_outcome(bouncer, digging=False, bounces_left=0) is CollisionOutcome.EXPLODE
    assert collision_outcome(WEAPONS[0], digging=False, bounces_left=3) is CollisionOutcome.EXPLODE


def test_crater_and_damage_rules() -> None:
    assert crater_factor(_by_id("standard")) == 1.0
    assert crater_factor(_by_id("dirt_mover")) == pytest.approx(1.5)
    assert crater_factor(_by_id("heal")) is None
    assert not deals_damage(_by_id("dirt_mover"))
    assert deals_damage(_by_id("heal"))


def test_falloff_factor() -> None:
    standard = _by_id("standard")
    sniper = _by_id("sniper")

    assert falloff_factor(standard, 0.0, 60.0) == 1.0
    assert falloff_factor(standard, 30.0, 60.0) == pytest.approx(0.5)
    assert falloff_factor(standard, 90.0, 60.0) == 0.0
    assert falloff_factor(sniper, 39.0, 40.0) == 1.0


def test_secondary_effects() -> None:
    assert secondary_effect(_by_id("cluster")) is SecondaryEffect.CLUSTER
    assert secondary_effect(_by_id("volcano")) is SecondaryEffect.VOLCANO
    assert secondary_effect(_by_id("nuke")) is SecondaryEffect.NONE


def test_cluster_fragment_cannot_split_again() -> None:
    parent = _by_id("cluster")
    fragment = cluster_fragment(parent)

    assert fragment.name == "MiniBomb"
    assert fragment.radius == 20
    assert fragment.damage == 5
    assert fragment.color == parent.color
    assert fragment.kind is WeaponKind.STANDARD
    assert not fragment.cluster
    assert parent.cluster


def test_weapon_at_rejects_bad_indices() -> None:
    assert weapon_at(0) is WEAPONS[0]
    assert weapon_at(len(WEAPONS)) is None
    assert weapon_at(-1) is None
    assert weapon_at(True) is None  # type: ignore[arg-type]


def test_default_blast() -> None:
    assert DEFAULT_BLAST.radius == 60
    assert DEFAULT_BLAST.damage == 20
