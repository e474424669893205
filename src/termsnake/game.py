# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging
import random

from .body import Body
from .config import X_BOUNDS, Y_BOUNDS, START_BODY, RIGHT, CFG, Config
from .controls import DirectionController
from .food import spawn_food
from .geometry import Bounds, Coordinate, step

logger = logging.getLogger(__name__)


class EmptyBodyError(RuntimeError):
    """The body has no head to move; only happens if the state was never seeded."""


class Status(Enum):
    ALIVE = "alive"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass
class GameState:
    body: Body                     # head at the front
    controller: DirectionController
    bounds: Bounds
    food: Optional[Coordinate] = None
    status: Status = Status.ALIVE
    reason: Optional[str] = None   # why the game ended
    reroll_food: bool = True
    rng: random.Random = field(default_factory=random.Random)

    @property
    def direction(self):
        return self.controller.direction

    @property
    def score(self) -> int:
        return self.body.length()


def new_game_state(cfg: Config = CFG) -> GameState:
    return GameState(
        body=Body(START_BODY),
        controller=DirectionController(RIGHT),
        bounds=Bounds(x=X_BOUNDS, y=Y_BOUNDS),
        food=None,
        reroll_food=cfg.reroll_food,
        rng=random.Random(cfg.seed),
    )


def occupied_cells(state: GameState) -> List[Coordinate]:
    """Body cells head to tail, then the food cell if there is one."""
    cells = list(state.body)
    if state.food is not None:
        cells.append(state.food)
    return cells


# ---------- Update ----------
def step_game(state: GameState) -> Status:
    """
    Advance the game by one tick.
    - Moves the head one cell in the current direction (wrapping at the edges).
    - Running into the body ends the game and leaves body and food untouched.
    - Landing on food grows the body, otherwise the body shifts.
    - Spawns new food whenever none is on the board.
    Raises EmptyBodyError if there is no head.
    """
    if state.status is Status.GAME_OVER:
        return state.status

    head = state.body.head()
    if head is None:
        raise EmptyBodyError("empty body")

    new_head = step(head, state.direction, state.bounds)

    # Self collision
    if state.body.contains(new_head):
        state.status = Status.GAME_OVER
        state.reason = f"ran into itself at {new_head}"
        logger.info("Game over: %s (score %d)", state.reason, state.score)
        return state.status

    # Move / grow
    if state.food is not None and new_head == state.food:
        state.food = None
        state.body.grow_front(new_head)
        logger.debug("Ate food at %s, length now %d", new_head, state.score)
    else:
        state.body.advance_front(new_head)

    if state.food is None:
        state.food = spawn_food(state.bounds, state.body, state.rng, reroll=state.reroll_food)
        logger.debug("Spawned food at %s", state.food)

    return state.status
