# main.py
from collections import deque
from typing import Deque, List, Optional
import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG, Config
from .game import Status, new_game_state, step_game
from .render import draw_game
from .terminal import handle_key, parse_keys, poll_key, terminal_session

logger = logging.getLogger(__name__)


def queue_keys(pending: Deque[str], keys: List[str]) -> None:
    """Queue keys for later ticks; a held key's repeats collapse into one."""
    if "quit" in keys:
        pending.clear()
        pending.append("quit")
        return
    for key in keys:
        if not pending or pending[-1] != key:
            pending.append(key)


def next_key(pending: Deque[str]) -> Optional[str]:
    return pending.popleft() if pending else None


def run(cfg: Config = CFG, console: Optional[Console] = None) -> int:
    """Play one session until game over or quit. Returns the final score."""
    console = console or Console()
    state = new_game_state(cfg)
    running = True
    pending: Deque[str] = deque()
    logger.debug("Starting session: %s", cfg)

    try:
        with terminal_session(console) as live:
            while running:
                # 1) render
                live.update(draw_game(state), refresh=True)

                # 2) update
                if step_game(state) is Status.GAME_OVER:
                    break

                # 3) input; the poll timeout is the tick, one key is applied per tick
                queue_keys(pending, parse_keys(poll_key(cfg.tick_ms / 1000)))
                running = handle_key(next_key(pending), state.controller)
    except KeyboardInterrupt:
        state.reason = "interrupted"

    if state.status is Status.GAME_OVER:
        console.print(f"[bold red]Game over[/] ({state.reason}). score: {state.score}")
    else:
        reason = state.reason or "quit"
        console.print(f"Quit ({reason}). score: {state.score}")
    return state.score


def main():
    logging.basicConfig(
        level=CFG.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True))],
    )
    run(CFG)


if __name__ == "__main__":
    main()
