"""Tests for the async tick driver."""

import asyncio

import pytest

from grid_snake.config import EngineConfig
from grid_snake.driver import TickDriver
from grid_snake.engine import SnakeEngine
from grid_snake.grid import Cell


def _engine(**overrides) -> SnakeEngine:
    overrides.setdefault("seed", 0)
    engine = SnakeEngine(EngineConfig(**overrides))
    engine._apple = Cell(0, 0)
    return engine


class TestTickDriver:
    def test_interval_defaults_to_config(self):
        driver = TickDriver(_engine(move_interval=0.25))
        assert driver.interval == 0.25

    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="positive"):
            TickDriver(_engine(), interval=0)

    def test_max_ticks(self):
        engine = _engine()
        driver = TickDriver(engine, interval=0.001)
        issued = asyncio.run(driver.run(max_ticks=3))
        assert issued == 3
        assert engine.tick_count == 3
        assert engine.head == Cell(13, 10)
        assert not driver.running

    def test_stops_at_game_over(self):
        engine = _engine(grid_width=8, grid_height=8, start_cell=(5, 4),
                         initial_length=2, min_apple_distance=2)
        driver = TickDriver(engine, interval=0.001)
        issued = asyncio.run(driver.run(max_ticks=50))
        assert engine.game_over
        assert issued == 3

    def test_stop_from_callback(self):
        engine = _engine()
        driver = TickDriver(engine, interval=0.001)
        engine.events.on_segments_updated = lambda cells: driver.stop()
        issued = asyncio.run(driver.run(max_ticks=10))
        assert issued == 1

    def test_cancellation_propagates(self):
        engine = _engine()
        driver = TickDriver(engine, interval=10.0)

        async def scenario():
            task = asyncio.create_task(driver.run())
            await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())
        assert engine.tick_count == 0
        assert not driver.running

    def test_callback_errors_propagate(self):
        engine = _engine()

        def boom(cells):
            raise RuntimeError("render failed")

        engine.events.on_segments_updated = boom
        driver = TickDriver(engine, interval=0.001)
        with pytest.raises(RuntimeError, match="render failed"):
            asyncio.run(driver.run(max_ticks=5))
