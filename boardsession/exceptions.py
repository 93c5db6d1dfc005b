"""
Exception hierarchy for board sessions.

Typed errors raised by the session, the default players and the board
factory so drivers can handle them consistently.
"""


class BoardSessionError(Exception):
    """Base exception for all session-related errors."""


class InvalidConfigurationError(BoardSessionError):
    """Session, board or player was built with unusable settings."""


class InvalidRollError(BoardSessionError):
    """A dice roll produced a value that cannot move a player."""


class NotInitializedError(BoardSessionError):
    """A turn was requested before the session was initialized."""


class SessionEndedError(BoardSessionError):
    """A turn was requested after the session ended."""
