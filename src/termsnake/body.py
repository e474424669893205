# body.py
from collections import deque
from typing import Deque, Iterable, Iterator, Optional

from .geometry import Coordinate


class Body:
    """
    The snake's segments, head at the front and tail at the back.
    Push-front / pop-back are O(1); membership is a linear scan.
    """

    def __init__(self, segments: Iterable[Coordinate] = ()):
        self.segments: Deque[Coordinate] = deque(segments)

    def head(self) -> Optional[Coordinate]:
        return self.segments[0] if self.segments else None

    def tail(self) -> Optional[Coordinate]:
        return self.segments[-1] if self.segments else None

    def contains(self, point: Coordinate) -> bool:
        return point in self.segments

    def grow_front(self, point: Coordinate) -> None:
        """New head, tail kept: the body gets one longer."""
        self.segments.appendleft(point)

    def advance_front(self, point: Coordinate) -> None:
        """New head, tail dropped: the body shifts by one cell."""
        self.segments.appendleft(point)
        self.segments.pop()

    def length(self) -> int:
        return len(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, point) -> bool:
        return self.contains(point)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.segments)

    def __repr__(self) -> str:
        return f"Body({list(self.segments)!r})"
