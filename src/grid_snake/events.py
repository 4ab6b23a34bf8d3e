"""Callback sinks notified by the engine."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from grid_snake.grid import Cell


@dataclass
class EngineEvents:
    """Optional outcome callbacks for rendering, audio and UI collaborators.

    Any callback left as ``None`` is skipped. Exceptions raised by a
    callback propagate to whoever called the engine.
    """

    on_segments_updated: Callable[[Sequence[Cell]], None] | None = None
    on_apple_relocated: Callable[[Cell], None] | None = None
    on_score_changed: Callable[[int], None] | None = None
    on_apple_eaten: Callable[[int], None] | None = None
    on_game_over: Callable[[], None] | None = None

    def segments_updated(self, cells: Sequence[Cell]) -> None:
        if self.on_segments_updated is not None:
            self.on_segments_updated(cells)

    def apple_relocated(self, cell: Cell) -> None:
        if self.on_apple_relocated is not None:
            self.on_apple_relocated(cell)

    def score_changed(self, score: int) -> None:
        if self.on_score_changed is not None:
            self.on_score_changed(score)

    def apple_eaten(self, score: int) -> None:
        if self.on_apple_eaten is not None:
            self.on_apple_eaten(score)

    def game_over(self) -> None:
        if self.on_game_over is not None:
            self.on_game_over()
