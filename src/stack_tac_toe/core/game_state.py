"""
Game state aggregate.

A game state consists of:
- The 36 pieces (mutated in place as they are placed)
- The phase (playing or ended)
- The set whose turn it is
- The winner, once the game has ended
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .pieces import (
    BOARD_SIZE,
    NUM_SETS,
    TOTAL_PIECES,
    Location,
    Size,
    StackItem,
    create_default_pieces,
    validate_location,
)


class GamePhase(str, Enum):
    PLAYING = "playing"
    ENDED = "ended"


@dataclass
class GameState:
    """
    Mutable game state, owned by a single GameStateManager.

    Board layout (x across, y down):

        (0,0) (1,0) (2,0)
        (0,1) (1,1) (2,1)
        (0,2) (1,2) (2,2)

    Each cell holds at most one piece of each size.
    """

    pieces: List[StackItem] = field(default_factory=create_default_pieces)
    phase: GamePhase = GamePhase.PLAYING
    active_set: int = 0  # Set to move, meaningful while playing
    winner: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.pieces) != TOTAL_PIECES:
            raise ValueError(
                f"Piece count {len(self.pieces)} doesn't match expected {TOTAL_PIECES}"
            )
        self.phase = GamePhase(self.phase)
        if not 0 <= self.active_set < NUM_SETS:
            raise ValueError(f"Invalid active set {self.active_set}, must be 0-{NUM_SETS - 1}")
        if (self.winner is not None) != (self.phase is GamePhase.ENDED):
            raise ValueError("Winner must be set exactly when the game has ended")
        if self.winner is not None and not 0 <= self.winner < NUM_SETS:
            raise ValueError(f"Invalid winner {self.winner}, must be 0-{NUM_SETS - 1}")

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.ENDED

    @property
    def placed_pieces(self) -> List[StackItem]:
        return [piece for piece in self.pieces if piece.location is not None]

    def pieces_at(self, location: Sequence[int]) -> List[StackItem]:
        """Pieces stacked on a cell, in sequence order."""
        cell = validate_location(location)
        return [piece for piece in self.pieces if piece.location == cell]

    def is_occupied(self, location: Location, size: Size) -> bool:
        """True if a piece of `size` (any set) already sits on `location`."""
        return any(
            piece.size == size and piece.location == location for piece in self.pieces
        )

    def __str__(self) -> str:
        """Human-readable board, one bracketed stack per cell."""
        cell_width = 11
        lines = []
        for y in range(BOARD_SIZE):
            cells = []
            for x in range(BOARD_SIZE):
                stack = " ".join(str(piece) for piece in self.pieces_at((x, y)))
                cells.append(f"[{stack:^{cell_width - 2}}]")
            lines.append(" ".join(cells))

        if self.is_over:
            lines.append(f"Set {self.winner} wins")
        else:
            lines.append(f"Set {self.active_set}'s turn")
        return "\n".join(lines)
