"""Apple placement by two-phase rejection sampling."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import Cell

if TYPE_CHECKING:
    from grid_snake.grid import GridModel

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 500

PHASE_DISTANCE = "distance"
PHASE_FREE = "free"
PHASE_FALLBACK = "fallback"


@dataclass(frozen=True)
class ApplePlacement:
    """Outcome of a placement: the chosen cell and the phase that chose it."""

    cell: Cell
    phase: str

    @property
    def degraded(self) -> bool:
        """True when the distance constraint could not be honoured."""
        return self.phase != PHASE_DISTANCE


def place_apple(
    body: Sequence[tuple[int, int]],
    min_distance: int,
    grid: GridModel,
    rng: np.random.Generator | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> ApplePlacement:
    """Pick an apple cell off the snake, preferably far from its head.

    Phase 1 draws uniformly random cells until one is at least
    *min_distance* (Manhattan) from the head and not on the snake.
    Phase 2 drops the distance requirement. If both phases exhaust
    *max_attempts* draws, the head's own cell is returned as a
    placeholder.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1.")
    if not body:
        raise ValueError("Snake body must not be empty.")
    rng = rng if rng is not None else np.random.default_rng()

    head = Cell(*body[0])
    occupied = set(body)

    for candidate in _draw(rng, grid, max_attempts):
        if head.manhattan(candidate) < min_distance:
            continue
        if candidate in occupied:
            continue
        return ApplePlacement(candidate, PHASE_DISTANCE)

    logger.debug(
        "No cell at distance >= %d after %d draws; relaxing.",
        min_distance, max_attempts,
    )
    for candidate in _draw(rng, grid, max_attempts):
        if candidate not in occupied:
            return ApplePlacement(candidate, PHASE_FREE)

    logger.warning(
        "No free cell found after %d draws (snake length %d); "
        "placing apple on the head.",
        max_attempts, len(body),
    )
    return ApplePlacement(head, PHASE_FALLBACK)


def _draw(rng: np.random.Generator, grid: GridModel, count: int):
    """Yield *count* uniformly random cells within the grid bounds."""
    xs = rng.integers(0, grid.width, size=count)
    ys = rng.integers(0, grid.height, size=count)
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        yield Cell(x, y)
