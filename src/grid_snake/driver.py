"""Fixed-interval async tick loop that drives an engine."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.engine import SnakeEngine

logger = logging.getLogger(__name__)


class TickDriver:
    """Calls :meth:`SnakeEngine.tick` every *interval* seconds.

    Input handlers call ``engine.queue_direction`` between ticks; the
    loop never runs two ticks concurrently.
    """

    def __init__(self, engine: SnakeEngine, interval: float | None = None) -> None:
        if interval is None:
            interval = engine.config.move_interval
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.engine = engine
        self.interval = interval
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Stop the loop after the current sleep."""
        self._running = False

    async def run(self, max_ticks: int | None = None) -> int:
        """Tick until game over, :meth:`stop`, or *max_ticks* ticks.

        Returns the number of ticks issued.
        """
        self._running = True
        issued = 0
        try:
            while self._running and not self.engine.game_over:
                if max_ticks is not None and issued >= max_ticks:
                    break
                await asyncio.sleep(self.interval)
                if not self._running:
                    break
                self.engine.tick()
                issued += 1
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", issued)
            raise
        except Exception:
            logger.exception("Tick loop error after %d ticks.", issued)
            raise
        finally:
            self._running = False
        return issued
