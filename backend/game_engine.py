"""
Single-snake game engine.

GameEngine is a synchronous state machine: every call to tick() advances the
run by exactly one step and nothing in here schedules itself. Drive it with
services.tick_scheduler.TickScheduler or call tick() directly.
"""

import logging
import random
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from domain.board import Board
from domain.constants import DEATH_SELF, DEATH_WALL, SPAWN_DIRECTION, Direction
from domain.events import EventChannel, GameOver, TickCompleted
from domain.food import Food, SpawnPolicy
from domain.game_state import GameState, GameStatus, TickResult
from domain.snake import Snake, spawn_body

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Manages:
      - Board (width, height)
      - Snake
      - Food
      - Score and run status
      - Pending direction request from the input side
      - Optional history for replay
    """

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        food_policy: SpawnPolicy = SpawnPolicy.UNIFORM,
        events: Optional[EventChannel] = None,
        spawn: Optional[Iterable[Tuple[int, int]]] = None,
        spawn_direction: Direction = SPAWN_DIRECTION,
        keep_history: bool = False,
    ):
        self.board = board
        self.rng = rng if rng is not None else random.Random(seed)
        self.food_policy = SpawnPolicy(food_policy)
        self.events = events or EventChannel()
        self.keep_history = keep_history

        self._spawn = list(spawn) if spawn is not None else spawn_body()
        self._spawn_direction = Direction(spawn_direction)

        self.snake: Snake
        self.food: Food
        self.score = 0
        self.status = GameStatus.RUNNING
        self.tick_number = 0
        self.death_reason: Optional[str] = None
        self.history: List[GameState] = []
        self._pending_direction: Optional[Direction] = None
        self._last_result: Optional[TickResult] = None

        self._new_run()

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def _new_run(self) -> None:
        self.snake = Snake(self._spawn, self._spawn_direction)
        outside = [tuple(p) for p in self.snake.body if not self.board.contains(p)]
        if outside:
            logger.warning("Spawn body leaves the %sx%s board at %s",
                           self.board.width, self.board.height, outside)
        self.food = Food(policy=self.food_policy)
        self._spawn_food()
        self.score = 0
        self.status = GameStatus.RUNNING
        self.tick_number = 0
        self.death_reason = None
        self.history = []
        self._pending_direction = None
        self._last_result = None
        self.record_history()

    def restart(self, board: Optional[Board] = None) -> None:
        """
        Abandon the current run (finished or not) and start a fresh one.

        Args:
            board: optional new board size, e.g. after the play surface resized
        """
        if board is not None:
            self.board = board
        abandoned = self.status is GameStatus.RUNNING and self.tick_number > 0
        self._new_run()
        logger.info(
            "Run restarted on %sx%s board%s",
            self.board.width,
            self.board.height,
            " (previous run abandoned)" if abandoned else "",
        )

    def _spawn_food(self) -> None:
        self.food.spawn(self.board, self.rng, occupied=self.snake.body)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, direction: Direction) -> bool:
        """
        Queue a direction change for the next tick (last write wins).

        Requests that reverse the snake's current heading are dropped so they
        cannot displace an earlier valid request. Ignored after game over.

        Returns:
            True if the request was queued.
        """
        if self.status is GameStatus.GAME_OVER:
            return False
        direction = Direction(direction)
        if direction == self.snake.direction.opposite():
            logger.debug("Ignoring reversal from %s to %s", self.snake.direction.value, direction.value)
            return False
        self._pending_direction = direction
        return True

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> TickResult:
        """
        Execute one step:
          1) If the run is over, do nothing and return the terminal result
          2) Apply the pending direction request
          3) Move the snake; it grows when its new head lands on the food
          4) On growth: score and respawn the food
          5) Check wall and self collisions; end the run on either
        """
        if self.status is GameStatus.GAME_OVER:
            return self._last_result

        if self._pending_direction is not None:
            self.snake.set_direction(self._pending_direction)
            self._pending_direction = None

        grew = self.snake.move(self.food.position)
        self.tick_number += 1

        if grew:
            self.score += 1
            self._spawn_food()
            logger.debug("Food eaten at tick %s, score %s, food now at %s",
                         self.tick_number, self.score, tuple(self.food.position))

        if self.snake.is_colliding_with_wall(self.board.width, self.board.height):
            self.death_reason = DEATH_WALL
        elif self.snake.is_colliding_with_self():
            self.death_reason = DEATH_SELF

        if self.death_reason is not None:
            self.status = GameStatus.GAME_OVER

        result = TickResult(
            status=self.status,
            score=self.score,
            tick_number=self.tick_number,
            grew=grew,
            death_reason=self.death_reason,
        )
        self._last_result = result
        self.record_history()

        if result.game_over:
            logger.info("Game over after %s ticks (%s collision). Final score: %s",
                        self.tick_number, self.death_reason, self.score)
            self.events.publish(GameOver(
                score=self.score,
                tick_number=self.tick_number,
                death_reason=self.death_reason,
            ))
        else:
            self.events.publish(TickCompleted(state=self.get_current_state()))

        return result

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def current_score(self) -> int:
        return self.score

    def is_game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def subscribe(self, event_type: type, handler: Callable[[Any], None]) -> Callable[[], None]:
        return self.events.subscribe(event_type, handler)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=[tuple(p) for p in self.snake.body],
            direction=self.snake.direction.value,
            food=tuple(self.food.position),
            score=self.score,
            status=self.status,
            width=self.board.width,
            height=self.board.height,
            death_reason=self.death_reason,
        )

    def record_history(self) -> None:
        if self.keep_history:
            self.history.append(self.get_current_state())

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded GameState objects to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in self.history]

    def print_board(self) -> str:
        return self.get_current_state().print_board()

    def __repr__(self):
        return (
            f"<GameEngine {self.board.width}x{self.board.height} tick={self.tick_number} "
            f"score={self.score} status={self.status.value}>"
        )
