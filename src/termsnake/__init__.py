# src/termsnake/__init__.py
"""Terminal snake on a wrap-around grid."""

from src.termsnake.game import GameState, Status, EmptyBodyError, new_game_state, step_game

__all__ = ["GameState", "Status", "EmptyBodyError", "new_game_state", "step_game"]
