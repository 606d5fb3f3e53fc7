"""Game state: whose turn it is, teams named so far, strikes, result."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from rosterlink.core.connections import DEFAULT_MAX_STRIKES, Connection
from rosterlink.core.enums import GameStatus, MoveOutcome, Player
from rosterlink.core.team import TeamId
from rosterlink.game.interfaces import GameEndReason
from rosterlink.game.messages import t
from rosterlink.game.strikes import StrikeTable


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Immutable copy of a :class:`GameState` at one point in time."""

    current_player: Player
    history: tuple[TeamId, ...]
    strikes: tuple[tuple[str, int], ...]
    round_count: int
    last_connections: tuple[Connection, ...] | None
    status: GameStatus
    winner: Player | None
    end_reason: GameEndReason | None


@dataclass
class GameState:
    """Authoritative record of one game.

    This is a pure data/logic class with no timers and no UI.  Only
    :class:`~rosterlink.game.engine.GameEngine` mutates it.
    """

    max_strikes: int = DEFAULT_MAX_STRIKES
    current_player: Player = field(default=Player.ONE, init=False)
    history: list[TeamId] = field(default_factory=list, init=False)
    strikes: StrikeTable = field(init=False)
    round_count: int = field(default=0, init=False)
    last_connections: tuple[Connection, ...] | None = field(default=None, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    winner: Player | None = field(default=None, init=False)
    end_reason: GameEndReason | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.strikes = StrikeTable(self.max_strikes)

    # ── Transitions ──────────────────────────────────────────────────────

    def record_opening(self, team: TeamId) -> None:
        """First team of the game; no connection required."""
        self.history.append(team)
        self.current_player = Player.TWO
        self.round_count = 1
        self.last_connections = None

    def record_connection(
        self, team: TeamId, usable: Iterable[Connection]
    ) -> tuple[Connection, ...]:
        """Apply an accepted connecting move and return the scored links.

        Caller is responsible for checking that *usable* is non-empty and
        that every entry still has strikes left.
        """
        scored = tuple(
            Connection(c.name, self.strikes.add_strike(c.name))
            for c in sorted(usable)
        )
        self.history.append(team)
        self.current_player = self.current_player.opposite
        self.round_count += 1
        self.last_connections = scored
        return scored

    def forfeit(self, loser: Player, reason: GameEndReason) -> None:
        """*loser* failed to produce a legal move; the opponent wins."""
        self.status = GameStatus.WON
        self.winner = loser.opposite
        self.end_reason = reason

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def current_team(self) -> TeamId | None:
        """The team the next move must connect to."""
        return self.history[-1] if self.history else None

    @property
    def loser(self) -> Player | None:
        return self.winner.opposite if self.winner is not None else None

    @property
    def reason(self) -> str | None:
        """Human-readable termination reason."""
        return str(self.end_reason) if self.end_reason is not None else None

    @property
    def message(self) -> str:
        """Status line for the current situation."""
        s = t()
        if not self.is_game_over:
            player = s.player_label(self.current_player)
            if not self.history:
                return s.choose_first_team.format(player=player)
            return s.choose_connected_team.format(player=player)

        assert self.loser is not None
        loser = s.player_label(self.loser)
        if self.end_reason == GameEndReason.TIME_EXPIRED:
            return s.ran_out_of_time.format(player=loser)
        if self.end_reason == GameEndReason.CONNECTIONS_EXHAUSTED:
            return s.loses_exhausted.format(player=loser, max=self.max_strikes)
        if self.end_reason == GameEndReason.NO_CONNECTION:
            return s.loses_no_connection.format(player=loser)
        return s.wins.format(player=s.player_label(self.loser.opposite))

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            current_player=self.current_player,
            history=tuple(self.history),
            strikes=tuple(sorted(self.strikes.items())),
            round_count=self.round_count,
            last_connections=self.last_connections,
            status=self.status,
            winner=self.winner,
            end_reason=self.end_reason,
        )


@dataclass(frozen=True, slots=True)
class MoveResult:
    """What happened to one ``submit_team`` call."""

    outcome: MoveOutcome
    state: GameState
    team: TeamId | None = None
    connections: tuple[Connection, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.outcome == MoveOutcome.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.outcome.is_rejection

    @property
    def message(self) -> str:
        """Banner text: the rejection reason, or the new status line."""
        s = t()
        team = self.team.key if self.team is not None else ""
        current_team = self.state.current_team
        current = current_team.key if current_team is not None else ""
        if self.outcome == MoveOutcome.REJECTED_DUPLICATE:
            return s.rejected_duplicate.format(team=team)
        if self.outcome == MoveOutcome.REJECTED_SAME_FRANCHISE:
            return s.rejected_same_franchise.format(team=team, current=current)
        if self.outcome == MoveOutcome.REJECTED_NO_CONNECTION:
            return s.rejected_no_connection.format(team=team, current=current)
        if self.outcome == MoveOutcome.IGNORED:
            return s.ignored_game_over
        return self.state.message
