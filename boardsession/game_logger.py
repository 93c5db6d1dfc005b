"""
JSONL logger for session events.

Copies the session's in-memory event log to a JSONL file, one event per
line, enriched with player names.
"""

import json
import os
from datetime import datetime
from typing import Any, Optional

from boardsession.session import MonopolySession


class GameLogger:
    """Logger that writes session events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None, log_dir: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
            log_dir: Directory for generated filenames (created if missing)
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"board_session_{timestamp}.jsonl"
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
                log_file = os.path.join(log_dir, log_file)

        self.log_file = log_file
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from the session's EventLog

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> None:
        """
        Log an event to the JSONL file.

        Args:
            event_type: Type of event (e.g., "game_start", "dice_roll", "land")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def flush_engine_events(self, session: MonopolySession) -> int:
        """Flush new session events to JSONL.

        Returns the number of events written.
        """
        events = session.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        names = {
            getattr(p, "player_id", i): getattr(p, "name", None)
            for i, p in enumerate(session.get_players())
        }

        wrote = 0
        for event in events[self._engine_last_idx :]:
            record = {"turn_number": event.turn_number, **event.details}
            if event.player_id is not None:
                record["player_id"] = event.player_id
                record["player_name"] = names.get(event.player_id)
            self.log_event(event.event_type.value, **record)
            wrote += 1

        self._engine_last_idx = len(events)
        return wrote

    def log_turn_snapshot(self, session: MonopolySession) -> None:
        """Log the state of every player at the start of a turn."""
        grids = session.get_grids()
        for index, player in enumerate(session.get_players()):
            space = grids[player.position]
            self.log_event(
                "player_state",
                turn_number=session.turn_number,
                player_id=getattr(player, "player_id", index),
                player_name=getattr(player, "name", None),
                cash=getattr(player, "cash", None),
                position=player.position,
                position_name=getattr(space, "name", None),
            )
