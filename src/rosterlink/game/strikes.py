"""Shared strike counter for one game."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from rosterlink.core.connections import DEFAULT_MAX_STRIKES


class StrikeTable(Mapping[str, int]):
    """Player name -> number of times used as a connector.

    Shared by both players.  Counts only ever go up and stop at
    ``max_strikes``; a name at the cap can no longer connect teams.
    """

    __slots__ = ("_counts", "_max_strikes")

    def __init__(self, max_strikes: int = DEFAULT_MAX_STRIKES) -> None:
        self._counts: dict[str, int] = {}
        self._max_strikes = max_strikes

    @property
    def max_strikes(self) -> int:
        return self._max_strikes

    def __getitem__(self, name: str) -> int:
        return self._counts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"StrikeTable({self._counts!r})"

    def count(self, name: str) -> int:
        """Strikes for *name*, 0 if never used."""
        return self._counts.get(name, 0)

    def is_exhausted(self, name: str) -> bool:
        return self.count(name) >= self._max_strikes

    def add_strike(self, name: str) -> int:
        """Record one more use of *name* and return the new count."""
        current = self.count(name)
        if current >= self._max_strikes:
            raise ValueError(f"{name!r} already has {current} strikes")
        self._counts[name] = current + 1
        return current + 1

    def leaderboard(self) -> list[tuple[str, int]]:
        """``(name, strikes)`` pairs, most strikes first, then by name."""
        return sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
