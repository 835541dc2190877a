"""
Engine events and the channel that delivers them to observers.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, DefaultDict, List, Optional, Type

from .game_state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickCompleted:
    """Published after every tick that leaves the run alive."""

    state: GameState


@dataclass(frozen=True)
class GameOver:
    """Published exactly once per run, on the transition to GAME_OVER."""

    score: int
    tick_number: int
    death_reason: Optional[str]


Handler = Callable[[object], None]


class EventChannel:
    """
    Minimal synchronous publish/subscribe channel keyed by event class.

    Handlers run in subscription order on the publisher's thread. A failing
    handler is logged and skipped; the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[Type, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type, handler: Handler) -> Callable[[], None]:
        """Register a handler; returns a callable that unsubscribes it."""
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            self.unsubscribe(event_type, handler)

        return unsubscribe

    def unsubscribe(self, event_type: Type, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: object) -> None:
        for handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception:
                logger.exception("Handler %r failed for %s", handler, type(event).__name__)
