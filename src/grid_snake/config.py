"""Engine configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.errors import ConfigurationError
from grid_snake.snake import Direction, initial_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Everything needed to rebuild an engine from scratch.

    Supports JSON serialization for reproducibility.
    """

    # Grid
    grid_width: int = 20
    grid_height: int = 20
    cell_size: float = 1.0

    # Snake
    start_cell: tuple[int, int] = (10, 10)
    initial_length: int = 5
    start_direction: Direction = Direction.RIGHT

    # Apple
    min_apple_distance: int = 5
    max_apple_attempts: int = 500

    # Driver
    move_interval: float = 0.5

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ConfigurationError("grid_width and grid_height must be positive.")
        if self.cell_size <= 0:
            raise ConfigurationError("cell_size must be positive.")
        if self.initial_length < 1:
            raise ConfigurationError("initial_length must be at least 1.")
        if self.max_apple_attempts < 1:
            raise ConfigurationError("max_apple_attempts must be at least 1.")
        if self.move_interval <= 0:
            raise ConfigurationError("move_interval must be positive.")

        diameter = (self.grid_width - 1) + (self.grid_height - 1)
        if not 0 <= self.min_apple_distance <= diameter:
            raise ConfigurationError(
                f"min_apple_distance must be between 0 and {diameter} "
                "for this grid."
            )

        if not self._inside(self.start_cell):
            raise ConfigurationError(
                f"start_cell {tuple(self.start_cell)} is outside the "
                f"{self.grid_width}x{self.grid_height} grid."
            )
        for cell in initial_body(
            self.start_cell, self.start_direction, self.initial_length,
        ):
            if not self._inside(cell):
                raise ConfigurationError(
                    "initial_length does not fit the configured grid behind "
                    "start_cell; move the start cell or reduce the length."
                )

    def _inside(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.grid_width and 0 <= y < self.grid_height

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists, enums names)."""
        d = asdict(self)
        d["start_cell"] = list(self.start_cell)
        d["start_direction"] = self.start_direction.name
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> EngineConfig:
        """Build a config from a plain dict as produced by :meth:`to_dict`."""
        data = dict(raw)
        if "start_cell" in data:
            data["start_cell"] = tuple(data["start_cell"])
        if "start_direction" in data:
            try:
                data["start_direction"] = Direction[data["start_direction"]]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown start_direction {data['start_direction']!r}."
                ) from None
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> EngineConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
