"""Shared test fixtures for board session tests."""

import pytest
from boardsession import GameConfig, MonopolySession, Player
from boardsession.spaces import FreeParkingSpace, Space


class ScriptedPlayer(Player):
    """Player whose rolls come from a fixed script instead of dice."""

    def __init__(self, player_id, name, rolls, cash=1500):
        super().__init__(player_id, name, cash)
        self.rolls = list(rolls)
        self.rolled = []

    def throw(self):
        roll = self.rolls.pop(0)
        self.rolled.append(roll)
        return (roll,)


class RecordingSpace(Space):
    """Space that remembers who landed on it."""

    def __init__(self, position):
        super().__init__(f"G{position}", position, None)
        self.visitors = []

    def effect(self, player):
        self.visitors.append(player)
        return f"{player.name} lands on G{self.position}"


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def recording_board():
    """Four recording spaces G0..G3."""
    return [RecordingSpace(i) for i in range(4)]


@pytest.fixture
def plain_board():
    return [FreeParkingSpace(i, name=f"Lot {i}") for i in range(10)]


@pytest.fixture
def make_player():
    def _make(player_id, name, rolls, cash=1500):
        return ScriptedPlayer(player_id, name, rolls, cash)

    return _make


@pytest.fixture
def two_players(make_player):
    """Alice and Bob with scripted rolls of 3 and 5."""
    return [make_player(0, "Alice", [3] * 20), make_player(1, "Bob", [5] * 20)]


@pytest.fixture
def basic_session(game_config, two_players, recording_board):
    """Initialized session with two scripted players on a four-space board."""
    session = MonopolySession("Test Game", two_players, recording_board, game_config)
    session.init()
    return session
