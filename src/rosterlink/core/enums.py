"""Core enumerations for the roster connection game."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Player(IntEnum):
    """Seat at the table."""

    ONE = 1
    TWO = 2

    @property
    def opposite(self) -> Player:
        return Player.TWO if self is Player.ONE else Player.ONE

    def __str__(self) -> str:
        return f"Player {self.value}"


class GameStatus(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WON = 1


class MoveOutcome(StrEnum):
    """Result of a single ``submit_team`` call."""

    ACCEPTED = "accepted"
    REJECTED_DUPLICATE = "duplicate_team"
    REJECTED_SAME_FRANCHISE = "same_franchise"
    REJECTED_NO_CONNECTION = "no_connection"
    FORFEITED = "forfeited"  # the submission ended the game
    IGNORED = "ignored"  # game already over

    @property
    def is_rejection(self) -> bool:
        return self in _REJECTIONS


_REJECTIONS = frozenset(
    {
        MoveOutcome.REJECTED_DUPLICATE,
        MoveOutcome.REJECTED_SAME_FRANCHISE,
        MoveOutcome.REJECTED_NO_CONNECTION,
    }
)
