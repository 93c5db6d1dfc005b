"""
Public snapshot serialization of a MonopolySession.

Produces a UI-friendly view of the current session without exposing
internal state such as RNGs.
"""

from __future__ import annotations

from typing import Any, Dict, List

from boardsession.session import MonopolySession


def serialize_snapshot(session: MonopolySession) -> Dict[str, Any]:
    """Serialize a session into a public, stable JSON dict.

    The snapshot includes:
    - game_name, turn_number, current player index and id
    - players with public info (cash, position, name of the space they are on)
    - board size and whether the session has ended
    """
    grids = session.get_grids()
    players: List[Dict[str, Any]] = []
    for index, player in enumerate(session.get_players()):
        space = grids[player.position]
        players.append(
            {
                "index": index,
                "player_id": getattr(player, "player_id", index),
                "name": getattr(player, "name", None),
                "cash": getattr(player, "cash", None),
                "position": player.position,
                "space_name": getattr(space, "name", None),
            }
        )

    current = session.get_current_player()
    richest = session.richest_player

    return {
        "game_name": session.game_name,
        "turn_number": session.turn_number,
        "current_player_index": session.current_player_index,
        "current_player_id": getattr(current, "player_id", session.current_player_index),
        "board_size": len(grids),
        "players": players,
        "ended": session.ended,
        "richest_player_id": getattr(richest, "player_id", None) if richest is not None else None,
    }
