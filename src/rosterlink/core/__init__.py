"""Core domain layer: teams, rosters and connection rules, no UI.

Quick start::

    from rosterlink.core import ConnectionResolver, load_default_rosters

    roster = load_default_rosters()
    resolver = ConnectionResolver(roster)
    a = roster.resolve("2016 - 2017 Warriors")
    b = roster.resolve("2021 - 2022 Warriors")
    print(resolver.common_members(a, b))
"""

from rosterlink.core.connections import (
    DEFAULT_MAX_STRIKES,
    Connection,
    ConnectionResolver,
)
from rosterlink.core.enums import GameStatus, MoveOutcome, Player
from rosterlink.core.roster import RosterTable, load_default_rosters, load_rosters
from rosterlink.core.search import search_teams
from rosterlink.core.team import (
    SeasonRange,
    TeamId,
    normalize_franchise,
    parse_team_id,
    team_id_from_text,
)

__all__ = [
    # Enums
    "GameStatus",
    "MoveOutcome",
    "Player",
    # Teams / rosters
    "RosterTable",
    "SeasonRange",
    "TeamId",
    "load_default_rosters",
    "load_rosters",
    "normalize_franchise",
    "parse_team_id",
    "team_id_from_text",
    # Rules
    "DEFAULT_MAX_STRIKES",
    "Connection",
    "ConnectionResolver",
    "search_teams",
]
