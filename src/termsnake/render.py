# render.py
from typing import Iterable, Optional, Tuple

from rich.color import Color
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .config import GREEN, HEAD, RED, TEXT
from .game import GameState, occupied_cells
from .geometry import Bounds, Coordinate

CELL = "  "  # two columns per cell so squares look square

SNAKE_STYLE = Style(bgcolor=Color.from_rgb(*GREEN))
HEAD_STYLE = Style(bgcolor=Color.from_rgb(*HEAD))
FOOD_STYLE = Style(bgcolor=Color.from_rgb(*RED))
TITLE_STYLE = Style(color=Color.from_rgb(*TEXT), bold=True)


def frame_size(bounds: Bounds) -> Tuple[int, int]:
    """Outer (width, height) of the frame in terminal columns/rows, border included."""
    cols = bounds.x[1] - bounds.x[0] + 1
    rows = bounds.y[1] - bounds.y[0] + 1
    return cols * len(CELL) + 2, rows + 2


def draw_grid(
    bounds: Bounds,
    cells: Iterable[Coordinate],
    food: Optional[Coordinate],
) -> Text:
    """`cells` is head first; the food cell, if listed, is coloured as food."""
    cells = list(cells)
    head = cells[0] if cells else None
    occupied = set(cells)

    text = Text(no_wrap=True)
    for y in range(bounds.y[0], bounds.y[1] + 1):
        if y > bounds.y[0]:
            text.append("\n")
        for x in range(bounds.x[0], bounds.x[1] + 1):
            p = (x, y)
            if p == head:
                text.append(CELL, HEAD_STYLE)
            elif p == food:
                text.append(CELL, FOOD_STYLE)
            elif p in occupied:
                text.append(CELL, SNAKE_STYLE)
            else:
                text.append(CELL)
    return text


def draw_game(state: GameState) -> Panel:
    """Bordered grid titled with the score."""
    grid = draw_grid(state.bounds, occupied_cells(state), state.food)
    width, height = frame_size(state.bounds)
    return Panel(
        grid,
        title=Text(f"score: {state.score}", TITLE_STYLE),
        title_align="left",
        width=width,
        height=height,
        padding=0,
    )
