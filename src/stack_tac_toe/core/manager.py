"""
Game state manager.

Owns a GameState and is the only thing that mutates it. A move:
1. Validates the request (rejections leave state untouched)
2. Places the piece
3. Checks the active set's pieces for a winning triple
4. Ends the game or passes the turn to the next set
5. Calls the update callback once
"""

import logging
from enum import Enum
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .game_state import GamePhase, GameState
from .pieces import (
    NUM_SETS,
    TOTAL_PIECES,
    Location,
    PieceAndIndex,
    pieces_for_set,
    validate_location,
    validate_set,
)
from .win_detector import NODES, find_winning_triple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOptions:
    """
    Optional move checks.

    Attributes:
        enforce_active_set: Reject moves of pieces not owned by the active set
        reject_after_end: Reject all moves once the game has ended
    """

    enforce_active_set: bool = True
    reject_after_end: bool = True

    @classmethod
    def legacy(cls) -> "RuleOptions":
        """Permissive rules: any set may move, and moves continue after a win."""
        return cls(enforce_active_set=False, reject_after_end=False)


class MoveStatus(str, Enum):
    PLACED = "placed"
    WON = "won"
    ALREADY_PLACED = "already_placed"
    CELL_OCCUPIED = "cell_occupied"
    NOT_ACTIVE_SET = "not_active_set"
    GAME_ENDED = "game_ended"


ACCEPTED_STATUSES = (MoveStatus.PLACED, MoveStatus.WON)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single update_piece_location call."""

    status: MoveStatus
    index: int
    location: Location
    winner: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.status in ACCEPTED_STATUSES

    def __bool__(self) -> bool:
        return self.accepted


class GameStateManager:
    """
    Validates and applies moves for one game session.

    The update callback runs synchronously after every accepted move and
    never after a rejected one. Calling back into the manager from the
    callback is not supported.
    """

    def __init__(
        self,
        did_update: Optional[Callable[[], None]] = None,
        options: Optional[RuleOptions] = None,
    ):
        """
        Initialize a new game.

        Args:
            did_update: Optional zero-argument change callback
            options: Rule checks to apply (default: all enabled)
        """
        self._state = GameState()
        self._did_update = did_update
        self.options = options or RuleOptions()
        logger.debug("Created game state with %d pieces (%s)", TOTAL_PIECES, self.options)

    @property
    def game_state(self) -> GameState:
        """Current state. Read it after each callback; mutate only via moves."""
        return self._state

    def get_pieces_for_set(self, set_id: int) -> List[PieceAndIndex]:
        """All pieces of a set with their original indices, in index order."""
        return pieces_for_set(self._state.pieces, validate_set(set_id))

    def update_piece_location(self, index: int, location: Sequence[int]) -> MoveResult:
        """
        Place a piece on the board.

        Args:
            index: Piece index, 0-35
            location: Target cell as an (x, y) pair

        Returns:
            MoveResult describing whether the move was accepted

        Raises:
            ValueError: If index or location is malformed
        """
        index = self._validate_index(index)
        cell = validate_location(location)

        status = self._check_move(index, cell)
        if status is not None:
            logger.warning("Rejected move of piece %d to %s: %s", index, cell, status.value)
            return MoveResult(status=status, index=index, location=cell)

        state = self._state
        piece = state.pieces[index]
        piece.place(cell)
        logger.debug("Set %d placed piece %d (%s) at %s", piece.set, index, piece.size.name, cell)

        # Only the mover can have completed a triple
        mover = state.active_set
        triple = find_winning_triple(p.piece for p in pieces_for_set(state.pieces, mover))

        if triple is not None:
            state.winner = mover
            state.phase = GamePhase.ENDED
            logger.info("Set %d wins on %s %s", mover, triple.kind, triple.cells)
            result = MoveResult(status=MoveStatus.WON, index=index, location=cell, winner=mover)
        else:
            state.active_set = (mover + 1) % NUM_SETS
            logger.debug("Turn passes to set %d", state.active_set)
            result = MoveResult(status=MoveStatus.PLACED, index=index, location=cell)

        if self._did_update is not None:
            self._did_update()
        return result

    def legal_locations(self, index: int) -> List[Location]:
        """Cells where the piece at `index` may be placed right now."""
        index = self._validate_index(index)
        return [cell for cell in NODES if self._check_move(index, cell) is None]

    def legal_moves(self) -> List[Tuple[int, Location]]:
        """
        All accepted (index, location) moves for the active set.

        An empty list while playing means the active set is stuck.
        """
        moves = []
        for item in pieces_for_set(self._state.pieces, self._state.active_set):
            for cell in NODES:
                if self._check_move(item.index, cell) is None:
                    moves.append((item.index, cell))
        return moves

    def _check_move(self, index: int, cell: Location) -> Optional[MoveStatus]:
        """Return the rejection reason for a move, or None if it is allowed."""
        state = self._state
        piece = state.pieces[index]

        if self.options.reject_after_end and state.phase is GamePhase.ENDED:
            return MoveStatus.GAME_ENDED
        if piece.location is not None:
            return MoveStatus.ALREADY_PLACED
        if self.options.enforce_active_set and piece.set != state.active_set:
            return MoveStatus.NOT_ACTIVE_SET
        if state.is_occupied(cell, piece.size):
            return MoveStatus.CELL_OCCUPIED
        return None

    @staticmethod
    def _validate_index(index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Piece index must be an int, got {index!r}")
        if not 0 <= index < TOTAL_PIECES:
            raise ValueError(f"Invalid piece index {index}, must be 0-{TOTAL_PIECES - 1}")
        return index


def create_game_state_manager(
    did_update: Optional[Callable[[], None]] = None,
    options: Optional[RuleOptions] = None,
) -> GameStateManager:
    """Start a new game session."""
    return GameStateManager(did_update=did_update, options=options)
