"""Tests for pieces and the default piece composition."""

import pytest
from stack_tac_toe.core import (
    NUM_SETS,
    PIECES_PER_SET,
    TOTAL_PIECES,
    Size,
    StackItem,
    create_default_pieces,
    validate_location,
)


def test_default_piece_count():
    """Test there are 36 pieces, nine per set, all unplaced."""
    pieces = create_default_pieces()

    assert len(pieces) == TOTAL_PIECES == 36
    for set_id in range(NUM_SETS):
        assert sum(1 for p in pieces if p.set == set_id) == PIECES_PER_SET
    assert all(p.location is None for p in pieces)


def test_default_piece_order():
    """Test pieces are grouped by set, each as three runs of S, M, L."""
    pieces = create_default_pieces()

    assert [p.set for p in pieces[:9]] == [0] * 9
    assert [p.set for p in pieces[27:]] == [3] * 9
    assert [p.size for p in pieces[9:18]] == [Size.SMALL, Size.MEDIUM, Size.LARGE] * 3


def test_copies_are_independent():
    """Test placing one copy does not move its siblings."""
    pieces = create_default_pieces()

    pieces[0].place((1, 1))

    assert pieces[0].location == (1, 1)
    assert pieces[3].location is None
    assert pieces[6].location is None
    assert pieces[0] is not pieces[3]


def test_place_only_once():
    """Test a placed piece cannot be placed again."""
    piece = StackItem(set=2, size=Size.LARGE)
    piece.place([2, 0])

    assert piece.is_placed
    assert piece.location == (2, 0)

    with pytest.raises(ValueError):
        piece.place((0, 0))
    assert piece.location == (2, 0)


def test_size_ordering():
    """Test sizes are ordered small < medium < large."""
    assert Size.SMALL < Size.MEDIUM < Size.LARGE
    assert str(StackItem(set=1, size=Size.MEDIUM)) == "1M"


def test_validate_location():
    """Test locations normalize to tuples and reject bad input."""
    assert validate_location([0, 2]) == (0, 2)
    assert validate_location((2, 1)) == (2, 1)

    bad_locations = [(3, 0), (0, -1), (0,), (0, 1, 2), "ab", None, (1.0, 0), (True, 0)]
    for location in bad_locations:
        with pytest.raises(ValueError):
            validate_location(location)


def test_stack_item_validation():
    """Test invalid sets are rejected at creation."""
    with pytest.raises(ValueError):
        StackItem(set=4, size=Size.SMALL)

    with pytest.raises(ValueError):
        StackItem(set=0, size=Size.SMALL, location=(5, 5))
