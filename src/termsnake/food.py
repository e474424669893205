# food.py
import logging
import random
from typing import Optional

from .body import Body
from .geometry import Bounds, Coordinate

logger = logging.getLogger(__name__)


def spawn_food(
    bounds: Bounds,
    body: Body,
    rng: random.Random = random,  # type: ignore[assignment]
    reroll: bool = True,
) -> Optional[Coordinate]:
    """
    Draw a food cell from [x.lo, x.hi) x [y.lo, y.hi).

    With reroll=True candidates on the body are redrawn; if the body covers
    every spawnable cell there is nowhere to put food and None is returned.
    With reroll=False the first draw is accepted even if it is occupied.
    """
    if reroll:
        taken = sum(1 for p in set(body) if bounds.in_interior(p))
        if taken >= bounds.interior_cells():
            logger.debug("No free cell for food (body=%d)", len(body))
            return None

    while True:
        fx = rng.randrange(bounds.x[0], bounds.x[1])
        fy = rng.randrange(bounds.y[0], bounds.y[1])
        if not reroll or (fx, fy) not in body:
            return (fx, fy)
