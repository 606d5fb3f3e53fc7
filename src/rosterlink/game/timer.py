"""Per-turn countdown."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from rosterlink.game.interfaces import ITurnTimer


@dataclass(frozen=True, slots=True)
class TimerSnapshot:
    """Point-in-time view of the countdown, for display."""

    remaining: float
    limit: float
    is_running: bool


class TurnTimer(ITurnTimer):
    """Countdown for the player whose turn it is.

    Uses monotonic time by default; pass *clock* to drive it from a logical
    or fake time source.
    """

    __slots__ = ("_limit", "_remaining", "_last_tick", "_running", "_clock")

    def __init__(
        self,
        limit_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if limit_seconds <= 0:
            raise ValueError(f"limit_seconds must be positive: {limit_seconds!r}")
        self._limit = limit_seconds
        self._remaining = limit_seconds
        self._last_tick: float = 0.0
        self._running: bool = False
        self._clock = clock

    # ── ITurnTimer implementation ────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = self._clock()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def restart(self) -> None:
        """Refill to the full limit for a new turn and start counting."""
        self._remaining = self._limit
        self._last_tick = self._clock()
        self._running = True

    def remaining(self) -> float:
        if self._running:
            elapsed = self._clock() - self._last_tick
            return max(0.0, self._remaining - elapsed)
        return max(0.0, self._remaining)

    def is_expired(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def is_unlimited(self) -> bool:
        return self._limit == float("inf")

    @property
    def is_running(self) -> bool:
        return self._running

    def reset(self) -> None:
        """Stop and refill, e.g. before the first move of a new game."""
        self._running = False
        self._remaining = self._limit

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            remaining=self.remaining(),
            limit=self._limit,
            is_running=self._running,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        now = self._clock()
        elapsed = now - self._last_tick
        self._remaining = max(0.0, self._remaining - elapsed)
        self._last_tick = now
