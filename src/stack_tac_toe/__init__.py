"""
Stack Tac Toe rules engine.

Four sets of nine pieces (three each of small, medium and large) are
placed in turn on a 3x3 board. Pieces of different sizes may share a
cell. A set wins with three pieces in a row, column, diagonal or single
cell whose sizes are all equal, ascending or descending.
"""

from .core import (
    GamePhase,
    GameState,
    GameStateManager,
    MoveResult,
    MoveStatus,
    RuleOptions,
    Size,
    StackItem,
    create_game_state_manager,
    detect_win,
)

__version__ = "0.1.0"
__all__ = [
    "GamePhase",
    "GameState",
    "GameStateManager",
    "MoveResult",
    "MoveStatus",
    "RuleOptions",
    "Size",
    "StackItem",
    "create_game_state_manager",
    "detect_win",
]
