"""Read-only roster table: which players were on which team."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from rosterlink.core.team import TeamId, parse_team_id, team_id_from_text
from rosterlink.runtime_assets import default_roster_path

_LOGGER = logging.getLogger(__name__)


class RosterTable(Mapping[TeamId, frozenset[str]]):
    """Immutable mapping ``TeamId -> frozenset of player names``.

    Keys are parsed into :class:`TeamId` once at construction.  The table is
    never mutated afterwards, so it can be shared by any number of games.
    """

    __slots__ = ("_rosters", "_by_key", "_canonical")

    def __init__(self, rosters: Mapping[TeamId, Iterable[str]] | None = None) -> None:
        self._rosters: dict[TeamId, frozenset[str]] = {}
        self._by_key: dict[str, TeamId] = {}
        self._canonical: dict[TeamId, TeamId] = {}
        for team, members in (rosters or {}).items():
            self._rosters[team] = frozenset(members)
            self._by_key[team.key] = team
            self._canonical[team] = team

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Iterable[str]]) -> RosterTable:
        """Build a table from display keys such as ``"2021 - 2022 Warriors"``.

        Raises:
            ValueError: a key cannot be parsed, two keys denote the same team,
                or a roster is not a list of names.
        """
        parsed: dict[TeamId, list[str]] = {}
        for key, members in raw.items():
            team = parse_team_id(key)
            if team in parsed:
                raise ValueError(f"Duplicate team in roster data: {key!r}")
            if isinstance(members, (str, bytes)) or not isinstance(members, Iterable):
                raise ValueError(f"Roster for {key!r} must be a list of player names")
            names = list(members)
            if not all(isinstance(name, str) for name in names):
                raise ValueError(f"Roster for {key!r} contains a non-string entry")
            parsed[team] = names
        return cls(parsed)

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, team: TeamId) -> frozenset[str]:
        return self._rosters[team]

    def __iter__(self) -> Iterator[TeamId]:
        return iter(self._rosters)

    def __len__(self) -> int:
        return len(self._rosters)

    def __repr__(self) -> str:
        return f"RosterTable({len(self._rosters)} teams)"

    # ── Queries ──────────────────────────────────────────────────────────

    def members(self, team: TeamId) -> frozenset[str]:
        """Roster of *team*, empty when the team is unknown."""
        return self._rosters.get(team, frozenset())

    def lookup(self, key: str) -> TeamId | None:
        """Find a known team by display key (any accepted spelling)."""
        team = self._by_key.get(key)
        if team is not None:
            return team
        return self._canonical.get(team_id_from_text(key))

    def resolve(self, team: TeamId | str) -> TeamId:
        """Turn user input into a :class:`TeamId`.

        Unknown keys still resolve, so callers can treat missing data as
        "no connection" rather than an error.
        """
        if isinstance(team, TeamId):
            return self._canonical.get(team, team)
        known = self.lookup(team)
        if known is not None:
            return known
        return team_id_from_text(team)


# ── Loading ──────────────────────────────────────────────────────────────────


def load_rosters(path: Path | str) -> RosterTable:
    """Load a roster table from a JSON object of ``key -> [names]``.

    Raises:
        OSError: the file cannot be read.
        ValueError: the file is not valid roster JSON.
    """
    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid roster JSON in {file_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Roster file must contain a JSON object: {file_path}")

    table = RosterTable.from_mapping(raw)
    _LOGGER.info("Loaded %d rosters from %s", len(table), file_path)
    return table


def load_default_rosters() -> RosterTable:
    """Load the bundled sample rosters."""
    return load_rosters(default_roster_path())
