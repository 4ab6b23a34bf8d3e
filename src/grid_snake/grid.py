"""Grid extents and cell/world coordinate conversion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from grid_snake.errors import ConfigurationError


class Cell(NamedTuple):
    """A discrete grid coordinate. Equality is structural."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Cell:
        """Return the cell shifted by ``(dx, dy)``."""
        return Cell(self.x + dx, self.y + dy)

    def manhattan(self, other: tuple[int, int]) -> int:
        """Manhattan distance to another cell."""
        return abs(self.x - other[0]) + abs(self.y - other[1])


class WorldPosition(NamedTuple):
    """Scene-agnostic position produced for the rendering collaborator."""

    x: float
    y: float
    z: float


class GridModel:
    """Fixed-size grid of cells ``{(x, y) : 0 <= x < width, 0 <= y < height}``.

    The grid is laid on the horizontal X/Z plane of the scene: cell ``x``
    maps to world X and cell ``y`` maps to world Z.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        cell_size: float = 1.0,
        origin: tuple[float, float, float] = (0.0, 0.0, 0.0),
        elevation: float = 0.0,
    ) -> None:
        if width < 1 or height < 1:
            raise ConfigurationError("Grid dimensions must be positive.")
        if cell_size <= 0:
            raise ConfigurationError("cell_size must be positive.")
        self._width = int(width)
        self._height = int(height)
        self._cell_size = float(cell_size)
        self._origin = WorldPosition(*(float(v) for v in origin))
        self._elevation = float(elevation)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def area(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    @property
    def diameter(self) -> int:
        """Largest Manhattan distance between two cells."""
        return (self._width - 1) + (self._height - 1)

    def is_inside(self, cell: tuple[int, int]) -> bool:
        """Check whether a cell lies within the grid."""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def to_world(self, cell: tuple[int, int]) -> WorldPosition:
        """Map a cell to the world position of its center.

        Cells sit half a unit above the reference plane.
        """
        x, y = cell
        return WorldPosition(
            self._origin.x + x * self._cell_size,
            self._elevation + 0.5,
            self._origin.z + y * self._cell_size,
        )

    def to_grid(self, position: tuple[float, float, float]) -> Cell:
        """Map a world position back to the nearest cell (not bounds-checked)."""
        local_x = position[0] - self._origin.x
        local_z = position[2] - self._origin.z
        return Cell(
            int(round(local_x / self._cell_size)),
            int(round(local_z / self._cell_size)),
        )

    def occupancy(self, cells: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a ``(height, width)`` boolean mask of the given cells.

        Cells outside the grid are ignored.
        """
        mask = np.zeros((self._height, self._width), dtype=bool)
        for x, y in cells:
            if 0 <= x < self._width and 0 <= y < self._height:
                mask[y, x] = True
        return mask

    def free_cell_count(self, occupied: Iterable[tuple[int, int]]) -> int:
        """Count the cells not covered by *occupied*."""
        return int(self.area - np.count_nonzero(self.occupancy(occupied)))

    def to_dict(self) -> dict:
        """Serialize grid parameters to a dictionary."""
        return {
            "width": self._width,
            "height": self._height,
            "cell_size": self._cell_size,
        }

    def __repr__(self) -> str:
        return f"GridModel(width={self._width}, height={self._height})"
