# terminal.py
"""
Keyboard polling and the terminal session used by the game loop.

The session puts stdin in cbreak mode (no echo, no line buffering), shows the
game on the alternate screen, and always restores the terminal on the way out.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional
import os
import select
import sys

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - Windows
    termios = None
    tty = None

from rich.console import Console
from rich.live import Live

from .config import UP, DOWN, LEFT, RIGHT
from .controls import DirectionController

KEY_TO_DIR = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

ESCAPES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",     # application cursor mode
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}

QUIT_KEYS = {"q", "Q", "\x03", "\x04"}  # q, Ctrl-C, Ctrl-D


def split_keys(raw: Optional[str]) -> List[str]:
    """Cut one read into keypresses: 3-char CSI/SS3 sequences or single characters."""
    keys = []
    i = 0
    raw = raw or ""
    while i < len(raw):
        if raw[i] == "\x1b" and raw[i + 1 : i + 2] in ("[", "O") and i + 2 < len(raw):
            keys.append(raw[i : i + 3])
            i += 3
        else:
            keys.append(raw[i])
            i += 1
    return keys


def parse_keys(raw: Optional[str]) -> List[str]:
    """
    Map raw terminal input to a list of "up"/"down"/"left"/"right" in the
    order they were pressed. A quit anywhere in the read wins: ["quit"].
    """
    keys = []
    for k in split_keys(raw):
        if k in QUIT_KEYS:
            return ["quit"]
        if k in ESCAPES:
            keys.append(ESCAPES[k])
    return keys


def parse_key(raw: Optional[str]) -> Optional[str]:
    """First key in `raw` ("quit" if any quit key is present), or None."""
    keys = parse_keys(raw)
    return keys[0] if keys else None


def handle_key(key: Optional[str], controller: DirectionController) -> bool:
    """Apply a parsed key to the controller. Return False to quit."""
    if key == "quit":
        return False
    if key in KEY_TO_DIR:
        controller.set(KEY_TO_DIR[key])
    return True


def poll_key(timeout: float = 0.1, stream=None) -> Optional[str]:
    """Wait up to `timeout` seconds for a keypress; return the raw input or None."""
    stream = stream or sys.stdin
    readable, _, _ = select.select([stream], [], [], timeout)
    if not readable:
        return None
    data = os.read(stream.fileno(), 16)
    return data.decode(errors="ignore")


@contextmanager
def cbreak_mode(stream=None) -> Iterator[None]:
    """Unbuffered, no-echo input for the duration of the block."""
    stream = stream or sys.stdin
    if termios is None or not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


@contextmanager
def terminal_session(console: Optional[Console] = None) -> Iterator[Live]:
    """Raw-ish input plus a full-screen Live display; restored on every exit path."""
    console = console or Console()
    with cbreak_mode():
        with Live(console=console, screen=True, auto_refresh=False) as live:
            yield live
