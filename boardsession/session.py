"""
Session lifecycle and turn advancement.

A session owns no players or spaces: it keeps references to lists built by
the driver and mutates the players in place. The driver must not resize
either list while the session is running, since turn and position indices
are taken modulo their lengths.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from boardsession.board import create_board
from boardsession.config import GameConfig
from boardsession.events import EventLog, EventType
from boardsession.exceptions import (
    InvalidConfigurationError,
    InvalidRollError,
    NotInitializedError,
    SessionEndedError,
)
from boardsession.player import SessionPlayer
from boardsession.spaces import Grid

logger = logging.getLogger(__name__)


@runtime_checkable
class GameSession(Protocol):
    """Lifecycle shared by every kind of session."""

    def init(self) -> None:
        ...

    def end(self) -> None:
        ...

    def get_players(self) -> List[SessionPlayer]:
        ...


@dataclass
class TurnResult:
    """Outcome of a single turn."""

    turn_number: int
    player_index: int
    player_id: Optional[int]
    player_name: str
    roll: int
    from_position: int
    to_position: int
    space_name: str
    description: str
    next_player_index: int


def _player_id(player) -> Optional[int]:
    return getattr(player, "player_id", None)


def _player_name(player) -> str:
    return getattr(player, "name", repr(player))


class SessionCore:
    """
    Name, roster and lifecycle flags of a session.

    Implements `GameSession` directly; richer sessions hold one of these and
    delegate to it.
    """

    def __init__(self, game_name: str, players: List[SessionPlayer], event_log: Optional[EventLog] = None):
        self._game_name = game_name
        self.players = players
        self.event_log = event_log if event_log is not None else EventLog()
        self.initialized = False
        self.ended = False
        self.richest_player: Optional[SessionPlayer] = None

    @property
    def game_name(self) -> str:
        return self._game_name

    def init(self) -> None:
        """Place every player on position 0. Safe to call more than once."""
        logger.info(f"Initializing game: {self._game_name}")
        for player in self.players:
            player.position = 0
        self.initialized = True
        self.event_log.log(
            EventType.GAME_START,
            game_name=self._game_name,
            players=[_player_name(p) for p in self.players],
        )

    def end(self, turn_number: int = 0) -> None:
        """Mark the session over and record the richest player."""
        self.ended = True
        self.richest_player = self._find_richest()
        richest_name = _player_name(self.richest_player) if self.richest_player is not None else None
        logger.info(f"Game over: {self._game_name} (richest player: {richest_name})")
        self.event_log.log(
            EventType.GAME_END,
            player_id=_player_id(self.richest_player) if self.richest_player is not None else None,
            turn_number=turn_number,
            richest_player=richest_name,
        )

    def _find_richest(self) -> Optional[SessionPlayer]:
        richest = None
        for player in self.players:
            cash = getattr(player, "cash", None)
            if cash is None:
                continue
            if richest is None or cash > richest.cash:
                richest = player
        return richest

    def get_players(self) -> List[SessionPlayer]:
        return self.players


class MonopolySession:
    """
    A Monopoly-style session: players circle a closed board in round-robin
    order, one turn per call to `advance_turn`.
    """

    def __init__(
        self,
        game_name: str,
        players: List[SessionPlayer],
        grids: Sequence[Grid],
        config: Optional[GameConfig] = None,
    ):
        if not players:
            raise InvalidConfigurationError("a session needs at least one player")
        if not grids:
            raise InvalidConfigurationError("a session needs at least one board space")

        self.config = config if config is not None else GameConfig()
        self.core = SessionCore(game_name, players)
        self.grids = grids
        self.current_player_index = 0
        self.turn_number = 0

    @property
    def game_name(self) -> str:
        return self.core.game_name

    @property
    def players(self) -> List[SessionPlayer]:
        return self.core.players

    @property
    def event_log(self) -> EventLog:
        return self.core.event_log

    @property
    def ended(self) -> bool:
        return self.core.ended

    @property
    def richest_player(self) -> Optional[SessionPlayer]:
        return self.core.richest_player

    def init(self) -> None:
        self.core.init()

    def end(self) -> None:
        self.core.end(self.turn_number)

    def get_players(self) -> List[SessionPlayer]:
        return self.core.get_players()

    def get_grids(self) -> Sequence[Grid]:
        return self.grids

    def get_current_player(self) -> SessionPlayer:
        """Get the player whose turn it is."""
        return self.players[self.current_player_index]

    def advance_turn(self) -> TurnResult:
        """
        Play one full turn for the current player.

        Rolls the dice, moves the player around the board (wrapping past the
        last space back to the first), applies the landed space's effect and
        passes the turn to the next player in list order.

        Returns:
            TurnResult with the roll, the move and the space's description

        Raises:
            NotInitializedError: if init() has not run and the config requires it
            SessionEndedError: if end() has already run
            InvalidRollError: if the player's roll is not a non-negative int

        A rejected roll leaves the session and its event log untouched. An
        exception from the space's effect propagates after the turn has
        passed to the next player.
        """
        if self.core.ended:
            raise SessionEndedError(f"{self.game_name} has already ended")
        if self.config.require_init and not self.core.initialized:
            raise NotInitializedError(f"{self.game_name} must be initialized before the first turn")

        player_index = self.current_player_index
        player = self.players[player_index]
        pid = _player_id(player)

        roll = player.roll_dice()
        # bool is an int subclass but never a roll
        if not isinstance(roll, int) or isinstance(roll, bool) or roll < 0:
            raise InvalidRollError(f"{_player_name(player)} rolled {roll!r}")

        turn_number = self.turn_number
        self.event_log.log(EventType.TURN_START, player_id=pid, turn_number=turn_number)
        self.event_log.log(EventType.DICE_ROLL, player_id=pid, turn_number=turn_number, total=roll)

        old_position = player.position
        new_position = (old_position + roll) % len(self.grids)
        player.position = new_position
        self.event_log.log(
            EventType.MOVE,
            player_id=pid,
            turn_number=turn_number,
            **{"from": old_position, "to": new_position, "spaces": roll},
        )

        # once the player has moved the turn is spent, even if the effect raises
        try:
            space = self.grids[new_position]
            description = space.effect(player)
        finally:
            self.current_player_index = (self.current_player_index + 1) % len(self.players)
            self.turn_number += 1

        space_name = getattr(space, "name", type(space).__name__)
        logger.debug(f"Turn {turn_number}: {description}")
        self.event_log.log(
            EventType.LAND,
            player_id=pid,
            turn_number=turn_number,
            position=new_position,
            space_name=space_name,
            description=description,
        )

        return TurnResult(
            turn_number=turn_number,
            player_index=player_index,
            player_id=pid,
            player_name=_player_name(player),
            roll=roll,
            from_position=old_position,
            to_position=new_position,
            space_name=space_name,
            description=description,
            next_player_index=self.current_player_index,
        )


def create_game(
    config: GameConfig,
    players: List[SessionPlayer],
    grids: Optional[Sequence[Grid]] = None,
    game_name: str = "Monopoly",
) -> MonopolySession:
    """
    Create a new session.

    When `grids` is omitted a default board of `config.board_size` spaces is
    built, with its own random stream derived from `config.seed`.
    """
    if grids is None:
        grids = create_board(config.board_size, config.rng_for("board"))
    return MonopolySession(game_name, players, grids, config)
