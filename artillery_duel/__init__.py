"""Top-level package for the two-player artillery duel."""

__version__ = "1.0.0"

from artillery_duel.core import (
    WEAPONS,
    Game,
    GameSession,
    GameSnapshot,
    Phase,
    RuleSettings,
    Tank,
    Terrain,
    TerrainSettings,
)

__all__ = [
    "WEAPONS",
    "Game",
    "GameSession",
    "GameSnapshot",
    "Phase",
    "RuleSettings",
    "Tank",
    "Terrain",
    "TerrainSettings",
]

__all__.append("__version__")

try:
    from artillery_duel.pygame import PygameDuel, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameDuel = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

__all__.extend(["PygameDuel", "run_pygame"])
