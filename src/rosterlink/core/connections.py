"""Connection queries between two rosters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rosterlink.core.roster import RosterTable
from rosterlink.core.team import TeamId

DEFAULT_MAX_STRIKES = 3


@dataclass(frozen=True, slots=True, order=True)
class Connection:
    """A player shared by two rosters, with that player's strike count."""

    name: str
    strikes: int = 0


class ConnectionResolver:
    """Side-effect-free queries over a :class:`RosterTable`.

    Strike counts are passed in as a snapshot; the resolver never stores or
    mutates them, so repeated calls with the same inputs give the same result.
    """

    __slots__ = ("_roster", "_max_strikes")

    def __init__(
        self, roster: RosterTable, max_strikes: int = DEFAULT_MAX_STRIKES
    ) -> None:
        self._roster = roster
        self._max_strikes = max_strikes

    @property
    def roster(self) -> RosterTable:
        return self._roster

    @property
    def max_strikes(self) -> int:
        return self._max_strikes

    def common_members(
        self,
        team_a: TeamId,
        team_b: TeamId,
        strikes: Mapping[str, int] | None = None,
    ) -> frozenset[Connection]:
        """Players on both rosters, annotated with their current strikes.

        An unknown team yields an empty set, the same as no overlap.
        """
        shared = self._roster.members(team_a) & self._roster.members(team_b)
        counts = strikes or {}
        return frozenset(Connection(name, counts.get(name, 0)) for name in shared)

    def usable_members(self, common: Iterable[Connection]) -> frozenset[Connection]:
        """Connections that still have strikes left."""
        return frozenset(c for c in common if c.strikes < self._max_strikes)

    def franchise_of(self, team: TeamId) -> str:
        """Franchise identity of *team*, independent of season."""
        return team.franchise_key

    def same_franchise(self, team_a: TeamId, team_b: TeamId) -> bool:
        return self.franchise_of(team_a) == self.franchise_of(team_b)
