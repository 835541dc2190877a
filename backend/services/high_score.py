"""
In-memory high score bookkeeping fed by GameOver notifications.

Scores live only as long as the process; nothing is written to disk.
"""

import logging
from typing import Callable, List, Optional

from domain.events import EventChannel, GameOver

logger = logging.getLogger(__name__)


class HighScoreTracker:
    """
    Tracks the last and best score across runs in one session.

    Attributes:
        best_score: highest final score seen so far
        last_score: final score of the most recent run, None before any run ends
        scores: every final score in the order the runs ended
    """

    def __init__(self, best_score: int = 0):
        self.best_score = best_score
        self.last_score: Optional[int] = None
        self.scores: List[int] = []
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def runs(self) -> int:
        return len(self.scores)

    def attach(self, events: EventChannel) -> None:
        self.detach()
        self._unsubscribe = events.subscribe(GameOver, self.on_game_over)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_game_over(self, event: GameOver) -> bool:
        """
        Record a finished run.

        Returns:
            True if the run set a new best score.
        """
        self.last_score = event.score
        self.scores.append(event.score)

        if event.score > self.best_score:
            previous = self.best_score
            self.best_score = event.score
            logger.info("New high score %s (previous %s)", event.score, previous)
            return True

        logger.info("Run scored %s; high score remains %s", event.score, self.best_score)
        return False
