"""Tests for game state representation."""

import pytest
from stack_tac_toe.core import GamePhase, GameState, Size, create_default_pieces


def test_create_game_state():
    """Test a new state is playing, set 0 to move, no winner."""
    state = GameState()

    assert state.phase == GamePhase.PLAYING
    assert state.phase == "playing"
    assert state.active_set == 0
    assert state.winner is None
    assert not state.is_over
    assert len(state.pieces) == 36
    assert state.placed_pieces == []


def test_pieces_at_and_occupancy():
    """Test stacked pieces are reported per cell."""
    state = GameState()
    state.pieces[0].place((1, 1))  # set 0 small
    state.pieces[10].place((1, 1))  # set 1 medium

    assert state.pieces_at([1, 1]) == [state.pieces[0], state.pieces[10]]
    assert state.pieces_at((0, 0)) == []
    assert state.is_occupied((1, 1), Size.SMALL)
    assert state.is_occupied((1, 1), Size.MEDIUM)
    assert not state.is_occupied((1, 1), Size.LARGE)
    assert len(state.placed_pieces) == 2


def test_board_rendering():
    """Test the text board shows stacks and whose turn it is."""
    state = GameState()
    state.pieces[0].place((0, 0))
    state.pieces[11].place((0, 0))

    text = str(state)

    assert "0S 1L" in text
    assert "Set 0's turn" in text
    assert len(text.splitlines()) == 4


def test_ended_rendering():
    """Test the text board names the winner."""
    state = GameState(phase=GamePhase.ENDED, winner=2, active_set=2)

    assert state.is_over
    assert "Set 2 wins" in str(state)


def test_state_validation():
    """Test state validation catches errors."""
    # Wrong piece count
    with pytest.raises(ValueError):
        GameState(pieces=create_default_pieces()[:35])

    # Invalid active set
    with pytest.raises(ValueError):
        GameState(active_set=4)

    # Winner without the game ending
    with pytest.raises(ValueError):
        GameState(winner=1)

    # Ended without a winner
    with pytest.raises(ValueError):
        GameState(phase=GamePhase.ENDED)

    # Unknown phase
    with pytest.raises(ValueError):
        GameState(phase="paused")
