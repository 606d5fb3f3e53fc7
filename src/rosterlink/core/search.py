"""Team search used by autocomplete boxes."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable

from rosterlink.core.team import TeamId

_YEAR_QUERY_RE = re.compile(r"^\d{4}$")


def search_teams(
    teams: Iterable[TeamId],
    query: str,
    exclude: Collection[TeamId] = (),
    limit: int | None = None,
) -> list[TeamId]:
    """Return teams whose display key contains *query*, newest season first.

    A bare four-digit year ranks teams whose season starts in that year
    ahead of everything else.  An empty query matches nothing.
    """
    needle = query.strip().casefold()
    if not needle:
        return []

    matches = [
        team
        for team in teams
        if team not in exclude and needle in team.key.casefold()
    ]

    year = int(needle) if _YEAR_QUERY_RE.match(needle) else None

    def rank(team: TeamId) -> tuple[bool, int]:
        exact_year = year is not None and team.start_year == year
        return (not exact_year, -team.start_year)

    matches.sort(key=rank)
    if limit is not None:
        return matches[:limit]
    return matches
