"""
Win detection.

A set wins when three of its pieces form a winning triple on:
- A row:      (0,y) (1,y) (2,y)
- A column:   (x,0) (x,1) (x,2)
- A diagonal: (0,0) (1,1) (2,2) or (2,0) (1,1) (0,2)
- A node:     three pieces stacked on one cell

A triple wins if its sizes, in line order, are all equal, strictly
ascending (S M L) or strictly descending (L M S).

Only one set's pieces should be passed in; the detector does not filter.
"""

import itertools
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .pieces import BOARD_SIZE, Location, Size, StackItem

Line = Tuple[Location, Location, Location]

ROWS: Tuple[Line, ...] = tuple(
    tuple((x, y) for x in range(BOARD_SIZE)) for y in range(BOARD_SIZE)
)
COLUMNS: Tuple[Line, ...] = tuple(
    tuple((x, y) for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)
)
DIAGONAL: Line = ((0, 0), (1, 1), (2, 2))
ANTI_DIAGONAL: Line = ((2, 0), (1, 1), (0, 2))
NODES: Tuple[Location, ...] = tuple(
    (x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)
)

# Search order for lines
WIN_LINES: Tuple[Tuple[str, Line], ...] = (
    tuple(("row", line) for line in ROWS)
    + tuple(("column", line) for line in COLUMNS)
    + (("diagonal", DIAGONAL), ("anti_diagonal", ANTI_DIAGONAL))
)

ASCENDING = (Size.SMALL, Size.MEDIUM, Size.LARGE)
DESCENDING = (Size.LARGE, Size.MEDIUM, Size.SMALL)


@dataclass(frozen=True)
class WinningTriple:
    """Where a win was found and with which sizes."""

    kind: str  # row, column, diagonal, anti_diagonal or node
    cells: Line  # a node repeats its cell three times
    sizes: Tuple[Size, Size, Size]


def group_by_location(pieces: Iterable[StackItem]) -> Dict[Location, List[Size]]:
    """Map each occupied cell to the sizes on it, in input order. Unplaced pieces are skipped."""
    cells: Dict[Location, List[Size]] = {}
    for piece in pieces:
        if piece.location is None:
            continue
        cells.setdefault(piece.location, []).append(piece.size)
    return cells


def is_winning_sizes(sizes: Sequence[Size]) -> bool:
    """Check the size pattern of a candidate triple."""
    if len(sizes) != 3:
        return False

    sizes = tuple(sizes)
    if sizes[0] == sizes[1] == sizes[2]:
        return True
    return sizes == ASCENDING or sizes == DESCENDING


def line_candidates(
    cells: Dict[Location, List[Size]], line: Line
) -> Iterator[Tuple[Size, ...]]:
    """
    Every size combination along a line, one piece per cell.

    A line with an empty cell yields nothing.
    """
    stacks = [cells.get(cell, []) for cell in line]
    if any(not stack for stack in stacks):
        return iter(())
    return itertools.product(*stacks)


def find_winning_triple(pieces: Iterable[StackItem]) -> Optional[WinningTriple]:
    """
    Find the first winning triple among the given pieces.

    Checks rows, columns, the diagonal, the anti-diagonal, then each node.

    Args:
        pieces: Pieces of a single set (placed or not)

    Returns:
        The first WinningTriple found, or None
    """
    cells = group_by_location(pieces)

    for kind, line in WIN_LINES:
        for sizes in line_candidates(cells, line):
            if is_winning_sizes(sizes):
                return WinningTriple(kind=kind, cells=line, sizes=tuple(sizes))

    for node in NODES:
        sizes = cells.get(node, [])
        if is_winning_sizes(sizes):
            return WinningTriple(kind="node", cells=(node, node, node), sizes=tuple(sizes))

    return None


def detect_win(pieces: Iterable[StackItem]) -> bool:
    """True if the pieces contain at least one winning triple."""
    return find_winning_triple(pieces) is not None
