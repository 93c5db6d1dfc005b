from boardsession import GameConfig, Player, create_game
from boardsession.snapshot import serialize_snapshot


def test_basic_snapshot_structure():
    session = create_game(GameConfig(seed=42), [Player(0, "A"), Player(1, "B")])
    session.init()
    session.advance_turn()

    snap = serialize_snapshot(session)

    assert snap["turn_number"] == 1
    assert snap["current_player_index"] == 1
    assert snap["current_player_id"] == 1
    assert snap["board_size"] == 20
    assert snap["ended"] is False
    assert snap["richest_player_id"] is None
    assert len(snap["players"]) == 2

    p0 = next(p for p in snap["players"] if p["player_id"] == 0)
    assert set(["player_id", "name", "cash", "position", "space_name"]).issubset(p0.keys())
    assert "rng" not in p0


def test_snapshot_after_end():
    session = create_game(GameConfig(seed=42), [Player(0, "A", cash=10), Player(1, "B", cash=20)])
    session.init()
    session.end()

    snap = serialize_snapshot(session)

    assert snap["ended"] is True
    assert snap["richest_player_id"] == 1
