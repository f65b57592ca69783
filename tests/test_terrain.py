from __future__ import annotations

import random

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from artillery_duel.core.config import TerrainSettings
from artillery_duel.core.terrain import Terrain


def test_generate_matches_playfield_width() -> None:
    terrain = Terrain.generate(TerrainSettings(width=640, height=480, seed=7))

    assert len(terrain) == 640
    base = 480 * 0.5
    # two sine waves of amplitude 100 and 50 plus up to 5 units of noise
    assert all(base - 150 <= h <= base + 155 for h in terrain.heights())


def test_generate_is_reproducible_with_seed() -> None:
    first = Terrain.generate(TerrainSettings(width=200, seed=42))
    second = Terrain.generate(TerrainSettings(width=200, seed=42))

    assert first.heights() == second.heights()


def test_smoothing_averages_neighbours() -> None:
    terrain = Terrain([0.0, 0.0, 10.0, 0.0, 0.0, 0.0])
    terrain._smooth_heights(2)

    assert terrain.height_map[0] == pytest.approx(10.0 / 3)
    assert terrain.height_map[2] == pytest.approx(2.0)
    assert terrain.height_map[5] == pytest.approx(0.0)


def test_height_at_clamps_and_truncates() -> None:
    terrain = Terrain([10.0, 20.0, 30.0])

    assert terrain.height_at(-50) == 10.0
    assert terrain.height_at(1.9) == 20.0
    assert terrain.height_at(2.5) == 30.0
    assert terrain.height_at(1_000) == 30.0


def test_deform_digs_semicircle(flat_terrain: Terrain) -> None:
    flat_terrain.deform(400, 400, 40)

    assert flat_terrain.height_at(400) == pytest.approx(440.0)
    assert flat_terrain.height_at(376) == pytest.approx(400.0 + 32.0)
    assert flat_terrain.height_at(440) == pytest.approx(400.0)
    assert flat_terrain.height_at(359) == pytest.approx(400.0)


def test_deform_clips_at_edges(flat_terrain: Terrain) -> None:
    flat_terrain.deform(5, 400, 30, 1.5)
    flat_terrain.deform(798, 400, 30)

    assert len(flat_terrain) == 800
    assert flat_terrain.height_at(5) == pytest.approx(445.0)
    assert flat_terrain.height_at(799) > 400.0


def test_empty_terrain_is_rejected() -> None:
    with pytest.raises(ValueError):
        Terrain([])


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(
    width=st.integers(min_value=1, max_value=300),
    x=st.floats(min_value=-1_000, max_value=1_000, allow_nan=False),
    seed=st.integers(min_value=0, max_value=5_000),
)
def test_height_at_matches_clamped_lookup(width: int, x: float, seed: int) -> None:
    rng = random.Random(seed)
    terrain = Terrain(rng.uniform(100, 500) for _ in range(width))

    clamped = max(0.0, min(float(width - 1), x))
    assert terrain.height_at(x) == terrain.height_at(clamped)


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(
    width=st.integers(min_value=1, max_value=300),
    center_x=st.floats(min_value=-100, max_value=400, allow_nan=False),
    radius=st.floats(min_value=0, max_value=150, allow_nan=False),
    factor=st.floats(min_value=0, max_value=3, allow_nan=False),
    seed=st.integers(min_value=0, max_value=5_000),
)
def test_deform_keeps_length_and_only_lowers_ground(
    width: int,
    center_x: float,
    radius: float,
    factor: float,
    seed: int,
) -> None:
    terrain = Terrain.generate(TerrainSettings(width=width, height=600, seed=seed))
    before = list(terrain.heights())

    terrain.deform(center_x, 300, radius, factor)

    after = terrain.heights()
    assert len(after) == len(before)
    for old, new in zip(before, after):
        assert new >= old
