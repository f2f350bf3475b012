"""Core game state representation, win detection and move handling."""

from .pieces import (
    NUM_SETS,
    BOARD_SIZE,
    COPIES_PER_SIZE,
    PIECES_PER_SET,
    TOTAL_PIECES,
    Location,
    Size,
    StackItem,
    PieceAndIndex,
    create_default_pieces,
    validate_location,
)
from .game_state import GamePhase, GameState
from .win_detector import WinningTriple, detect_win, find_winning_triple, is_winning_sizes
from .manager import (
    GameStateManager,
    MoveResult,
    MoveStatus,
    RuleOptions,
    create_game_state_manager,
)

__all__ = [
    "NUM_SETS",
    "BOARD_SIZE",
    "COPIES_PER_SIZE",
    "PIECES_PER_SET",
    "TOTAL_PIECES",
    "Location",
    "Size",
    "StackItem",
    "PieceAndIndex",
    "create_default_pieces",
    "validate_location",
    "GamePhase",
    "GameState",
    "WinningTriple",
    "detect_win",
    "find_winning_triple",
    "is_winning_sizes",
    "GameStateManager",
    "MoveResult",
    "MoveStatus",
    "RuleOptions",
    "create_game_state_manager",
]
