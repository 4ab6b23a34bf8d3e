"""Grid Snake — discrete-cell movement and collision engine."""

from grid_snake.apple import ApplePlacement, place_apple
from grid_snake.config import EngineConfig
from grid_snake.driver import TickDriver
from grid_snake.engine import GameStatus, SnakeEngine
from grid_snake.errors import ConfigurationError
from grid_snake.events import EngineEvents
from grid_snake.grid import Cell, GridModel, WorldPosition
from grid_snake.snake import Direction, Snake

__all__ = [
    "ApplePlacement",
    "Cell",
    "ConfigurationError",
    "Direction",
    "EngineConfig",
    "EngineEvents",
    "GameStatus",
    "GridModel",
    "Snake",
    "SnakeEngine",
    "TickDriver",
    "WorldPosition",
    "place_apple",
]
