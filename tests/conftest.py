import pytest

from artillery_duel.core.config import TerrainSettings
from artillery_duel.core.game import Game
from artillery_duel.core.session import GameSession
from artillery_duel.core.terrain import Terrain


@pytest.fixture
def flat_settings() -> TerrainSettings:
    """Provide a deterministic playfield for gameplay tests."""

    return TerrainSettings(width=800, height=600, seed=1234)


@pytest.fixture
def flat_terrain() -> Terrain:
    return Terrain.flat(800, 400.0)


@pytest.fixture
def flat_game(flat_settings: TerrainSettings, flat_terrain: Terrain) -> Game:
    return Game("Alpha", "Bravo", settings=flat_settings, terrain=flat_terrain)


@pytest.fixture
def session(flat_game: Game) -> GameSession:
    return GameSession(flat_game)
