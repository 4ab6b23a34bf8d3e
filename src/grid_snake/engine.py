"""Tick-driven movement and collision state machine."""

from __future__ import annotations

import enum
import logging

import numpy as np

from grid_snake.apple import place_apple
from grid_snake.config import EngineConfig
from grid_snake.events import EngineEvents
from grid_snake.grid import Cell, GridModel
from grid_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    """Engine lifecycle states. ``GAME_OVER`` is terminal."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class SnakeEngine:
    """Single-snake, tick-driven game engine.

    The engine owns the snake, the queued direction, the apple and the
    game-over latch. An external driver calls :meth:`queue_direction`
    between ticks and :meth:`tick` at a fixed cadence; outcomes are
    reported through :class:`EngineEvents` callbacks.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        events: EngineEvents | None = None,
        grid: GridModel | None = None,
    ) -> None:
        cfg = config or EngineConfig()
        self.config = cfg
        self.events = events or EngineEvents()
        self.grid = grid or GridModel(
            cfg.grid_width, cfg.grid_height, cell_size=cfg.cell_size,
        )
        if (self.grid.width, self.grid.height) != (cfg.grid_width, cfg.grid_height):
            raise ValueError("grid dimensions do not match the config.")
        self.rng = np.random.default_rng(cfg.seed)
        self._init_state()
        self._announce()

    def _init_state(self) -> None:
        cfg = self.config
        self.snake = Snake(cfg.start_cell, cfg.start_direction, cfg.initial_length)
        self._direction = cfg.start_direction
        self._queued = cfg.start_direction
        self._status = GameStatus.RUNNING
        self._score = 0
        self._tick = 0
        self._won = False
        self._apple = self._place_apple()

    # --- read-only views ---

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def game_over(self) -> bool:
        return self._status is GameStatus.GAME_OVER

    @property
    def won(self) -> bool:
        """True when the game ended because the snake filled the grid."""
        return self._won

    @property
    def score(self) -> int:
        return self._score

    @property
    def apple(self) -> Cell:
        return self._apple

    @property
    def head(self) -> Cell:
        return self.snake.head

    @property
    def segments(self) -> tuple[Cell, ...]:
        """Snapshot of the body cells, head first."""
        return tuple(self.snake.body)

    @property
    def direction(self) -> Direction:
        """The direction applied on the most recent tick."""
        return self._direction

    @property
    def queued_direction(self) -> Direction:
        return self._queued

    @property
    def tick_count(self) -> int:
        return self._tick

    # --- control ---

    def queue_direction(self, direction: Direction) -> None:
        """Request a direction for the next tick.

        A request for the exact opposite of the active direction is
        discarded and the previously queued direction is kept.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"Expected a Direction, got {direction!r}.")
        if self.game_over:
            return
        if direction is self._direction.opposite:
            return
        self._queued = direction

    def tick(self) -> None:
        """Advance the game by one step. No-op once the game is over."""
        if self.game_over:
            return

        self._direction = self._queued
        next_head = self.snake.next_head(self._direction)

        # Both checks run against the prospective head before any mutation.
        if not self.grid.is_inside(next_head):
            self._end_game(f"left the grid at {tuple(next_head)}")
            return
        # A growing snake keeps its tail cell, so the tail counts then.
        will_grow = next_head == self._apple
        if self.snake.collides(next_head, exclude_tail=not will_grow):
            self._end_game(f"ran into itself at {tuple(next_head)}")
            return

        vacated = self.snake.advance(next_head)
        self._tick += 1

        if will_grow:
            self.snake.grow(vacated)
            self._score += 1
            if self.grid.free_cell_count(self.snake.body) == 0:
                # Nowhere left to put an apple; the head cell stands in.
                self._apple = self.snake.head
                self._won = True
            else:
                self._apple = self._place_apple()
            self.events.apple_eaten(self._score)
            self.events.score_changed(self._score)
            self.events.apple_relocated(self._apple)

        self.events.segments_updated(self.segments)

        if self._won:
            self._status = GameStatus.GAME_OVER
            logger.info(
                "Snake filled the grid at tick %d with score %d.",
                self._tick, self._score,
            )
            self.events.game_over()

    def reset(self) -> None:
        """Rebuild the initial state from the same config.

        The RNG is not reseeded, so successive games see different apples.
        """
        self._init_state()
        logger.info("Engine reset.")
        self._announce()

    def _announce(self) -> None:
        """Send the full initial picture to the sinks."""
        self.events.segments_updated(self.segments)
        self.events.apple_relocated(self._apple)
        self.events.score_changed(self._score)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self._tick,
            "score": self._score,
            "status": self._status.value,
            "game_over": self.game_over,
            "won": self._won,
            "direction": self._direction.name,
            "snake": self.snake.to_dict(),
            "apple": list(self._apple),
            "grid": self.grid.to_dict(),
        }

    # --- internals ---

    def _place_apple(self) -> Cell:
        placement = place_apple(
            self.snake.body,
            self.config.min_apple_distance,
            self.grid,
            rng=self.rng,
            max_attempts=self.config.max_apple_attempts,
        )
        logger.debug("Apple placed at %s (%s).", tuple(placement.cell), placement.phase)
        return placement.cell

    def _end_game(self, reason: str) -> None:
        """Latch the game-over state and notify once."""
        self._status = GameStatus.GAME_OVER
        logger.info(
            "Snake %s; game over at tick %d with score %d.",
            reason, self._tick, self._score,
        )
        self.events.game_over()
