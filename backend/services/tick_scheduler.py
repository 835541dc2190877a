"""
Periodic driver for the game engine.

Registers a single `schedule` job that calls GameEngine.tick() every
interval. The job cancels itself when a tick ends the run; ticking only
resumes after restart().
"""

import logging
import time
from typing import Callable, Optional

import schedule

from domain.constants import DEFAULT_TICK_MS
from domain.game_state import TickResult
from game_engine import GameEngine

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Calls engine.tick() at a fixed period until the run ends.

    Args:
        engine: the engine to drive
        interval_ms: tick period in milliseconds
        scheduler: schedule.Scheduler to register on (a private one by default)
        sleep: sleep function used by run()
    """

    def __init__(
        self,
        engine: GameEngine,
        interval_ms: int = DEFAULT_TICK_MS,
        scheduler: Optional[schedule.Scheduler] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}ms.")
        self.engine = engine
        self.interval_ms = interval_ms
        self.scheduler = scheduler or schedule.Scheduler()
        self._sleep = sleep
        self._job: Optional[schedule.Job] = None
        self.ticks = 0
        self.last_result: Optional[TickResult] = None

    @property
    def is_running(self) -> bool:
        return self._job is not None and self._job in self.scheduler.jobs

    def start(self) -> bool:
        """Schedule ticking. Refused while the engine sits in GAME_OVER."""
        if self.engine.is_game_over():
            logger.warning("Not starting ticks: run is over, restart() first.")
            return False
        if self.is_running:
            return True

        self._job = self.scheduler.every(self.interval_ms / 1000.0).seconds.do(self._on_tick)
        logger.info("Ticking every %sms", self.interval_ms)
        return True

    def stop(self) -> None:
        if self._job is not None:
            self.scheduler.cancel_job(self._job)
            self._job = None
            logger.info("Ticking stopped after %s ticks", self.ticks)

    def restart(self) -> bool:
        """Start a fresh run and resume ticking."""
        self.stop()
        self.engine.restart()
        self.ticks = 0
        self.last_result = None
        return self.start()

    def _on_tick(self):
        result = self.engine.tick()
        self.ticks += 1
        self.last_result = result

        if result.game_over:
            logger.info("Run ended at tick %s with score %s; ticking stopped.",
                        result.tick_number, result.score)
            self._job = None
            return schedule.CancelJob
        return None

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def run(self, max_ticks: Optional[int] = None) -> Optional[TickResult]:
        """
        Block until the run ends (or max_ticks ticks have run).

        Returns:
            The last TickResult, or None if no tick ran.
        """
        if not self.start():
            return self.last_result

        while self.is_running:
            if max_ticks is not None and self.ticks >= max_ticks:
                logger.info("Reached max_ticks=%s", max_ticks)
                self.stop()
                break
            self.scheduler.run_pending()
            if not self.is_running:
                break
            idle = self.scheduler.idle_seconds
            if idle is not None and idle > 0:
                self._sleep(idle)

        return self.last_result
