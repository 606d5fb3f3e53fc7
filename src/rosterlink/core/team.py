"""Structured team identifiers.

Roster keys look like ``"2021 - 2022 Warriors"``: a season span followed by
the franchise name.  They are parsed once, when roster data is loaded, so the
rest of the code compares :class:`TeamId` values and never splits strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_TEAM_KEY_RE = re.compile(
    r"^\s*(?P<start>\d{4})(?:\s*-\s*(?P<end>\d{4}|\d{2}))?\s+(?P<name>[^\s-].*?)\s*$"
)


@dataclass(frozen=True, slots=True, order=True)
class SeasonRange:
    """Inclusive span of calendar years covered by one season."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Season ends before it starts: {self.start}-{self.end}")

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


def normalize_franchise(name: str) -> str:
    """Case-folded, whitespace-collapsed franchise name used for comparisons."""
    return " ".join(name.split()).casefold()


@dataclass(frozen=True, slots=True)
class TeamId:
    """One franchise in one season.

    Equality and hashing use the season and the normalised franchise name,
    so ``"2021 - 2022 Warriors"`` and ``"2021-22 warriors"`` are the same team.
    """

    season: SeasonRange | None
    franchise: str = field(compare=False)
    franchise_key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "franchise_key", normalize_franchise(self.franchise))

    @property
    def key(self) -> str:
        """Display identifier, e.g. ``"2021 - 2022 Warriors"``."""
        if self.season is None:
            return self.franchise
        return f"{self.season} {self.franchise}"

    @property
    def start_year(self) -> int:
        """First calendar year of the season, 0 when unknown."""
        return self.season.start if self.season is not None else 0

    def same_franchise(self, other: TeamId) -> bool:
        return self.franchise_key == other.franchise_key

    def __str__(self) -> str:
        return self.key


def parse_season(start_text: str, end_text: str | None) -> SeasonRange:
    start = int(start_text)
    if end_text is None:
        return SeasonRange(start, start)
    if len(end_text) == 4:
        return SeasonRange(start, int(end_text))
    # Two-digit end year: "1999-00" rolls over into the next century.
    end = start - start % 100 + int(end_text)
    if end < start:
        end += 100
    return SeasonRange(start, end)


def parse_team_id(key: str) -> TeamId:
    """Parse a roster key such as ``"2021 - 2022 Warriors"``.

    Accepted shapes: ``"YYYY - YYYY Name"``, ``"YYYY-YYYY Name"``,
    ``"YYYY-YY Name"`` and ``"YYYY Name"``.

    Raises:
        ValueError: *key* has no leading season or no franchise name.
    """
    match = _TEAM_KEY_RE.match(key)
    if match is None:
        raise ValueError(f"Invalid team key (expected 'YYYY - YYYY Name'): {key!r}")
    season = parse_season(match["start"], match["end"])
    return TeamId(season=season, franchise=" ".join(match["name"].split()))


def team_id_from_text(text: str) -> TeamId:
    """Lenient variant of :func:`parse_team_id` for user input.

    Text without a season prefix becomes a season-less :class:`TeamId`.
    """
    try:
        return parse_team_id(text)
    except ValueError:
        return TeamId(season=None, franchise=" ".join(text.split()))
