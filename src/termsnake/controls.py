# controls.py
from typing import Tuple

from .config import DIRECTIONS, RIGHT


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class DirectionController:
    """Current heading; refuses 180° turns."""

    def __init__(self, direction: Tuple[int, int] = RIGHT):
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction {direction}")
        self.direction = direction

    def set(self, requested: Tuple[int, int]) -> bool:
        """Take `requested` unless it reverses the current heading. Returns True if taken."""
        if requested not in DIRECTIONS:
            raise ValueError(f"Unknown direction {requested}")
        if is_opposite(requested, self.direction):
            return False
        self.direction = requested
        return True
