"""
Board Session Engine

A turn-based, Monopoly-style board loop: players circle a closed board in
round-robin order and trigger each space's effect on landing.
"""

from .board import create_board
from .config import GameConfig, SessionSettings, get_session_settings
from .exceptions import (
    BoardSessionError,
    InvalidConfigurationError,
    InvalidRollError,
    NotInitializedError,
    SessionEndedError,
)
from .player import Player, create_players
from .session import GameSession, MonopolySession, SessionCore, TurnResult, create_game

__all__ = [
    "GameSession",
    "MonopolySession",
    "SessionCore",
    "TurnResult",
    "create_game",
    "create_board",
    "Player",
    "create_players",
    "GameConfig",
    "SessionSettings",
    "get_session_settings",
    "BoardSessionError",
    "InvalidConfigurationError",
    "InvalidRollError",
    "NotInitializedError",
    "SessionEndedError",
]
