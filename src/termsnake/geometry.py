# geometry.py
from dataclasses import dataclass
from typing import Tuple

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Bounds:
    """Inclusive (lo, hi) ranges for each axis of the playable grid."""
    x: Tuple[int, int]
    y: Tuple[int, int]

    def interior_cells(self) -> int:
        """Number of cells food can spawn on (upper bounds excluded)."""
        return (self.x[1] - self.x[0]) * (self.y[1] - self.y[0])

    def in_interior(self, point: Coordinate) -> bool:
        px, py = point
        return self.x[0] <= px < self.x[1] and self.y[0] <= py < self.y[1]


def decrement(v: int, lo: int, hi: int) -> int:
    return v - 1 if v > lo else hi


def increment(v: int, lo: int, hi: int) -> int:
    return v + 1 if v < hi else lo


def step(point: Coordinate, direction: Tuple[int, int], bounds: Bounds) -> Coordinate:
    """
    Move `point` one cell in `direction`, wrapping to the opposite edge
    when it would leave `bounds` (torus, not clamped).
    """
    x, y = point
    dx, dy = direction
    if dx < 0:
        x = decrement(x, *bounds.x)
    elif dx > 0:
        x = increment(x, *bounds.x)
    if dy < 0:
        y = decrement(y, *bounds.y)
    elif dy > 0:
        y = increment(y, *bounds.y)
    return (x, y)
