"""
Tests for space effects and the default board.
"""

import random

import pytest
from boardsession import InvalidConfigurationError, Player, create_board
from boardsession.spaces import (
    CHANCE_CARDS,
    ChanceSpace,
    FreeParkingSpace,
    GoSpace,
    GoToJailSpace,
    JailSpace,
    SpaceType,
    TaxSpace,
)


@pytest.fixture
def alice():
    return Player(0, "Alice", cash=1500)


def test_tax_reduces_cash(alice):
    tax = TaxSpace("Income Tax", 4, 200)

    description = tax.effect(alice)

    assert alice.cash == 1300
    assert "Income Tax" in description


def test_go_to_jail_moves_player(alice):
    space = GoToJailSpace(15, jail_position=5)
    alice.position = 15

    space.effect(alice)

    assert alice.position == 5


def test_passive_spaces_leave_player_alone(alice):
    for space in (GoSpace(0), FreeParkingSpace(10), JailSpace(5)):
        space.effect(alice)

    assert alice.cash == 1500
    assert alice.position == 0


def test_chance_applies_card_delta(alice):
    space = ChanceSpace(7, random.Random(3))
    expected_text, expected_delta = ChanceSpace(7, random.Random(3)).draw()

    description = space.effect(alice)

    assert alice.cash == 1500 + expected_delta
    assert expected_text in description
    assert (expected_text, expected_delta) in CHANCE_CARDS


def test_board_positions_match_indices():
    board = create_board(20, random.Random(1))

    assert len(board) == 20
    assert [s.position for s in board] == list(range(20))


def test_board_corners():
    board = create_board(20)

    assert board[0].space_type == SpaceType.GO
    assert board[5].space_type == SpaceType.JAIL
    assert board[10].space_type == SpaceType.FREE_PARKING
    assert board[15].space_type == SpaceType.GO_TO_JAIL
    assert board[15].jail_position == 5


def test_smallest_board_is_all_corners():
    board = create_board(4)

    assert [s.space_type for s in board] == [
        SpaceType.GO,
        SpaceType.JAIL,
        SpaceType.FREE_PARKING,
        SpaceType.GO_TO_JAIL,
    ]


def test_board_too_small():
    with pytest.raises(InvalidConfigurationError):
        create_board(3)
