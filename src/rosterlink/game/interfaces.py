"""Abstract interfaces for the game layer.

The scheduler and any front end depend on these ABCs, not on the concrete
engine/timer implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING

from rosterlink.core.connections import DEFAULT_MAX_STRIKES

if TYPE_CHECKING:
    from rosterlink.core.team import TeamId
    from rosterlink.game.state import GameState, MoveResult


# ── Termination reasons ──────────────────────────────────────────────────────


class GameEndReason(StrEnum):
    """Why a game ended.  Values are the human-readable reasons."""

    TIME_EXPIRED = "time expired"
    CONNECTIONS_EXHAUSTED = "all connecting members exhausted"
    NO_CONNECTION = "no connecting members"


# ── Rule presets ─────────────────────────────────────────────────────────────


class RuleSet:
    """Immutable game configuration.

    Args:
        turn_seconds: Time allowed per turn once the first team is named.
        max_strikes: Uses after which a player can no longer connect teams.
        forfeit_on_no_connection: End the game (instead of letting the player
            retry) when the named team shares nobody with the current one.
    """

    __slots__ = ("turn_seconds", "max_strikes", "forfeit_on_no_connection")

    def __init__(
        self,
        turn_seconds: float = 30.0,
        max_strikes: int = DEFAULT_MAX_STRIKES,
        forfeit_on_no_connection: bool = False,
    ) -> None:
        if turn_seconds <= 0:
            raise ValueError(f"turn_seconds must be positive: {turn_seconds!r}")
        if max_strikes < 1:
            raise ValueError(f"max_strikes must be at least 1: {max_strikes!r}")
        self.turn_seconds = turn_seconds
        self.max_strikes = max_strikes
        self.forfeit_on_no_connection = forfeit_on_no_connection

    # Common presets
    @classmethod
    def classic(cls) -> RuleSet:
        return cls(30)

    @classmethod
    def blitz(cls) -> RuleSet:
        return cls(15)

    @classmethod
    def relaxed(cls) -> RuleSet:
        return cls(60)

    @classmethod
    def untimed(cls) -> RuleSet:
        """No turn limit."""
        return cls(float("inf"))

    @classmethod
    def strict(cls) -> RuleSet:
        """Naming a team with no shared players loses immediately."""
        return cls(30, forfeit_on_no_connection=True)

    @property
    def is_timed(self) -> bool:
        return self.turn_seconds != float("inf")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return (
            self.turn_seconds == other.turn_seconds
            and self.max_strikes == other.max_strikes
            and self.forfeit_on_no_connection == other.forfeit_on_no_connection
        )

    def __hash__(self) -> int:
        return hash(
            (self.turn_seconds, self.max_strikes, self.forfeit_on_no_connection)
        )

    def __repr__(self) -> str:
        limit = f"{self.turn_seconds:.0f}s" if self.is_timed else "untimed"
        extra = ", strict" if self.forfeit_on_no_connection else ""
        return f"RuleSet({limit}, {self.max_strikes} strikes{extra})"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnTimer(ABC):
    """Interface for a per-turn countdown."""

    @abstractmethod
    def start(self) -> None:
        """Start counting down from the current remaining time."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the countdown."""

    @abstractmethod
    def restart(self) -> None:
        """Refill to the full limit and start counting down."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left in the current turn."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Has the current turn run out of time?"""


class IGameEngine(ABC):
    """Interface for the turn/round state machine."""

    @property
    @abstractmethod
    def state(self) -> GameState: ...

    @abstractmethod
    def submit_team(self, team: TeamId | str) -> MoveResult:
        """Name a team for the player whose turn it is."""

    @abstractmethod
    def expire_turn(self) -> GameState:
        """The current player ran out of time."""

    @abstractmethod
    def reset(self) -> GameState:
        """Discard the current game and start a new one."""
