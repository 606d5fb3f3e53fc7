"""GameEngine: the turn/round state machine of a roster connection game.

Coordinates: GameState, ConnectionResolver, RosterTable.
Emits events via simple callbacks so a scheduler / UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rosterlink.core.connections import Connection, ConnectionResolver
from rosterlink.core.enums import MoveOutcome, Player
from rosterlink.core.roster import RosterTable
from rosterlink.core.team import TeamId
from rosterlink.game.interfaces import GameEndReason, IGameEngine, RuleSet
from rosterlink.game.state import GameState, MoveResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TeamAcceptedCallback = Callable[[TeamId, GameState], None]
MoveRejectedCallback = Callable[[MoveOutcome, TeamId], None]
TurnStartedCallback = Callable[[Player], None]
GameOverCallback = Callable[[GameState], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_team_accepted: list[TeamAcceptedCallback] = field(default_factory=list)
    on_move_rejected: list[MoveRejectedCallback] = field(default_factory=list)
    on_turn_started: list[TurnStartedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine(IGameEngine):
    """Validates submitted teams, scores connections, alternates turns and
    decides when the game is lost.

    The engine owns no clock.  Whoever runs the turn timer listens to
    ``events.on_turn_started`` and calls :meth:`expire_turn` on deadline.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_roster", "_rules", "_resolver", "_state", "events")

    def __init__(self, roster: RosterTable, rules: RuleSet | None = None) -> None:
        self._roster = roster
        self._rules = rules or RuleSet.classic()
        self._resolver = ConnectionResolver(roster, self._rules.max_strikes)
        self._state = GameState(max_strikes=self._rules.max_strikes)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def roster(self) -> RosterTable:
        return self._roster

    @property
    def resolver(self) -> ConnectionResolver:
        return self._resolver

    # ── IGameEngine impl ─────────────────────────────────────────────────

    def submit_team(self, team: TeamId | str) -> MoveResult:
        state = self._state
        team_id = self._roster.resolve(team)

        if state.is_game_over:
            return MoveResult(MoveOutcome.IGNORED, state, team_id)

        if team_id in state.history:
            return self._reject(MoveOutcome.REJECTED_DUPLICATE, team_id)

        current = state.current_team
        if current is None:
            state.record_opening(team_id)
            _LOGGER.debug("Opening team %s", team_id)
            self._emit_team_accepted(team_id)
            self._emit_turn_started()
            return MoveResult(MoveOutcome.ACCEPTED, state, team_id)

        if self._resolver.same_franchise(current, team_id):
            return self._reject(MoveOutcome.REJECTED_SAME_FRANCHISE, team_id)

        common = self._resolver.common_members(current, team_id, state.strikes)
        if not common:
            if self._rules.forfeit_on_no_connection:
                return self._forfeit(GameEndReason.NO_CONNECTION, team_id)
            return self._reject(MoveOutcome.REJECTED_NO_CONNECTION, team_id)

        usable = self._resolver.usable_members(common)
        if not usable:
            return self._forfeit(
                GameEndReason.CONNECTIONS_EXHAUSTED,
                team_id,
                connections=tuple(sorted(common)),
            )

        scored = state.record_connection(team_id, usable)
        _LOGGER.debug(
            "%s connected %s -> %s via %s",
            state.current_player.opposite,
            current,
            team_id,
            ", ".join(c.name for c in scored),
        )
        self._emit_team_accepted(team_id)
        self._emit_turn_started()
        return MoveResult(MoveOutcome.ACCEPTED, state, team_id, scored)

    def expire_turn(self) -> GameState:
        state = self._state
        if state.is_game_over or not state.history:
            return state
        state.forfeit(state.current_player, GameEndReason.TIME_EXPIRED)
        _LOGGER.info("%s ran out of time", state.current_player)
        self._emit_game_over()
        return state

    def reset(self) -> GameState:
        self._state = GameState(max_strikes=self._rules.max_strikes)
        for cb in self.events.on_reset:
            cb()
        return self._state

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, outcome: MoveOutcome, team: TeamId) -> MoveResult:
        _LOGGER.debug("Rejected %s: %s", team, outcome)
        for cb in self.events.on_move_rejected:
            cb(outcome, team)
        return MoveResult(outcome, self._state, team)

    def _forfeit(
        self,
        reason: GameEndReason,
        team: TeamId,
        connections: tuple[Connection, ...] = (),
    ) -> MoveResult:
        state = self._state
        state.forfeit(state.current_player, reason)
        _LOGGER.info("%s loses naming %s: %s", state.current_player, team, reason)
        self._emit_game_over()
        return MoveResult(MoveOutcome.FORFEITED, state, team, connections)

    def _emit_team_accepted(self, team: TeamId) -> None:
        for cb in self.events.on_team_accepted:
            cb(team, self._state)

    def _emit_turn_started(self) -> None:
        for cb in self.events.on_turn_started:
            cb(self._state.current_player)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._state)
