from dataclasses import dataclass
from typing import Optional

# ----- Grid (inclusive bounds, in terminal cells) -----
X_BOUNDS = (1, 20)
Y_BOUNDS = (1, 10)
START_BODY = [(5, 5)]

# ----- Colors -----
GREEN = (80, 200, 80)
HEAD  = (120, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (LEFT, UP, RIGHT, DOWN)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None   # None -> unseeded RNG
    tick_ms: int = 100           # input wait per tick, acts as the game clock
    reroll_food: bool = True     # redraw food that lands on the body
    log_level: str = "WARNING"

CFG = Config()
