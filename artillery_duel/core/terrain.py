"""Destructible heightfield terrain: one ground sample per horizontal unit."""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, List, Optional, Sequence

from artillery_duel.core.config import TerrainSettings

logger = logging.getLogger(__name__)


class Terrain:
    """Ground surface stored as a y offset from the top of the playfield.

    Larger values sit lower on screen. The number of samples is fixed when the
    terrain is built; every read and write clamps or clips the column index.
    """

    def __init__(self, heights: Iterable[float]) -> None:
        self.height_map: List[float] = [float(h) for h in heights]
        if not self.height_map:
            raise ValueError("terrain needs at least one column")

    @classmethod
    def generate(
        cls,
        settings: Optional[TerrainSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> "Terrain":
        """Build rolling hills from two sine waves, jitter and a box blur."""

        settings = settings or TerrainSettings()
        rng = rng or random.Random(settings.seed)
        base = settings.height * settings.base_ratio
        heights = [
            base
            + math.sin(i * settings.primary_frequency) * settings.primary_amplitude
            + math.sin(i * settings.secondary_frequency) * settings.secondary_amplitude
            + rng.random() * settings.noise
            for i in range(max(1, settings.width))
        ]
        terrain = cls(heights)
        terrain._smooth_heights(settings.smoothing)
        logger.debug(
            "Terrain generated: width=%d, base=%.1f, range=(%.1f, %.1f)",
            terrain.width,
            base,
            min(terrain.height_map),
            max(terrain.height_map),
        )
        return terrain

    @classmethod
    def flat(cls, width: int, level: float) -> "Terrain":
        return cls(level for _ in range(max(1, width)))

    # ------------------------------------------------------------------
    # Queries
    @property
    def width(self) -> int:
        return len(self.height_map)

    def __len__(self) -> int:
        return len(self.height_map)

    def column(self, x: float) -> int:
        return int(max(0.0, min(float(self.width - 1), x)))

    def height_at(self, x: float) -> float:
        """Return the ground height under ``x``, clamped into the playfield."""

        return self.height_map[self.column(x)]

    def heights(self) -> Sequence[float]:
        return tuple(self.height_map)

    # ------------------------------------------------------------------
    # Terrain manipulation
    def deform(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        shape_factor: float = 1.0,
    ) -> None:
        """Push a semicircular crater into the columns around ``center_x``.

        The profile only depends on the horizontal distance, so ``center_y``
        does not change the depth. Heights only grow (the ground sinks) for a
        non-negative ``shape_factor``; nothing is smoothed afterwards.
        """

        if radius <= 0:
            return
        start = int(math.floor(max(0.0, center_x - radius)))
        end = int(math.floor(min(float(self.width), center_x + radius)))
        r_sq = radius * radius
        for i in range(start, end):
            dx = i - center_x
            self.height_map[i] += math.sqrt(max(0.0, r_sq - dx * dx)) * shape_factor
        logger.debug(
            "Crater at (%.1f, %.1f) radius=%.1f factor=%.2f over columns [%d, %d)",
            center_x,
            center_y,
            radius,
            shape_factor,
            start,
            end,
        )

    # ------------------------------------------------------------------
    def _smooth_heights(self, radius: int) -> None:
        if radius <= 0:
            return
        span = self.width
        temp = self.height_map[:]
        for i in range(span):
            lo = max(0, i - radius)
            hi = min(span - 1, i + radius)
            window = temp[lo:hi + 1]
            self.height_map[i] = sum(window) / len(window)


__all__ = ["Terrain"]
