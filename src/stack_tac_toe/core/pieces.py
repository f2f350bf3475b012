"""
Pieces (stack items) and the fixed board composition.

Four sets each own nine pieces: three copies of small, medium and large.
A piece's identity is its index in the 36-piece sequence:

    set 0: [S M L] [S M L] [S M L]   indices 0-8
    set 1: [S M L] [S M L] [S M L]   indices 9-17
    ...

Locations are (x, y) pairs with each coordinate in 0..2.
"""

from enum import IntEnum
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

NUM_SETS = 4
BOARD_SIZE = 3
COPIES_PER_SIZE = 3

Location = Tuple[int, int]


class Size(IntEnum):
    """Piece size. Ordered: SMALL < MEDIUM < LARGE."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def label(self) -> str:
        return self.name[0]


PIECES_PER_SET = len(Size) * COPIES_PER_SIZE
TOTAL_PIECES = NUM_SETS * PIECES_PER_SET


@dataclass
class StackItem:
    """
    A single piece.

    `set` and `size` are fixed at creation. `location` starts as None and
    is assigned exactly once through `place`.
    """

    set: int
    size: Size
    location: Optional[Location] = None

    def __post_init__(self) -> None:
        validate_set(self.set)
        self.size = Size(self.size)
        if self.location is not None:
            self.location = validate_location(self.location)

    @property
    def is_placed(self) -> bool:
        return self.location is not None

    def place(self, location: Sequence[int]) -> None:
        """Assign the piece's location. A placed piece never moves again."""
        if self.location is not None:
            raise ValueError(f"Piece is already placed at {self.location}")
        self.location = validate_location(location)

    def __str__(self) -> str:
        return f"{self.set}{self.size.label}"


class PieceAndIndex(NamedTuple):
    """A piece paired with its index in the full piece sequence."""

    piece: StackItem
    index: int


def validate_set(set_id: int) -> int:
    if isinstance(set_id, bool) or not isinstance(set_id, int):
        raise ValueError(f"Set id must be an int, got {set_id!r}")
    if not 0 <= set_id < NUM_SETS:
        raise ValueError(f"Invalid set {set_id}, must be 0-{NUM_SETS - 1}")
    return set_id


def validate_location(location: Sequence[int]) -> Location:
    """
    Normalize a location to an (x, y) tuple.

    Args:
        location: Any two-item sequence of ints, e.g. [0, 2] or (0, 2)

    Returns:
        Location tuple

    Raises:
        ValueError: If the location is malformed or off the board
    """
    try:
        x, y = location
    except (TypeError, ValueError):
        raise ValueError(f"Location must be a pair of ints, got {location!r}") from None

    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, int):
            raise ValueError(f"Location must be a pair of ints, got {location!r}")
        if not 0 <= coord < BOARD_SIZE:
            raise ValueError(f"Location {location!r} is off the {BOARD_SIZE}x{BOARD_SIZE} board")

    return (x, y)


def create_default_pieces() -> List[StackItem]:
    """
    Create the 36 starting pieces, all unplaced.

    Every piece is a fresh record so placing one copy never affects its
    siblings.
    """
    pieces = []
    for set_id in range(NUM_SETS):
        for _ in range(COPIES_PER_SIZE):
            for size in Size:
                pieces.append(StackItem(set=set_id, size=size))
    return pieces


def pieces_for_set(pieces: Sequence[StackItem], set_id: int) -> List[PieceAndIndex]:
    """Pieces belonging to `set_id`, each with its original index, in index order."""
    return [
        PieceAndIndex(piece=piece, index=index)
        for index, piece in enumerate(pieces)
        if piece.set == set_id
    ]
