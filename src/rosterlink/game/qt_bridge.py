"""Qt bridge that turns a turn deadline into a single ``expire_turn`` call."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from rosterlink.core.enums import Player
from rosterlink.game.engine import GameEngine
from rosterlink.game.interfaces import RuleSet
from rosterlink.game.state import GameState
from rosterlink.game.timer import TurnTimer

_LOGGER = logging.getLogger(__name__)


class TurnScheduler(QObject):
    """Main-thread scheduler for the per-turn time limit.

    Restarts the countdown whenever the engine starts a new turn, polls it
    with a :class:`QTimer`, and calls :meth:`GameEngine.expire_turn` once
    when it reaches zero.  Untimed rule sets never expire.
    """

    remaining_changed = pyqtSignal(float)
    turn_expired = pyqtSignal(int)  # losing player number

    def __init__(
        self,
        engine: GameEngine,
        rules: RuleSet | None = None,
        *,
        interval_ms: int = 100,
        clock: Callable[[], float] = time.monotonic,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._countdown = TurnTimer(
            (rules or engine.rules).turn_seconds, clock=clock
        )

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._tick)

        engine.events.on_turn_started.append(self._on_turn_started)
        engine.events.on_game_over.append(self._on_game_over)
        engine.events.on_reset.append(self.stop)

    @property
    def countdown(self) -> TurnTimer:
        return self._countdown

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def remaining(self) -> float:
        return self._countdown.remaining()

    @pyqtSlot()
    def stop(self) -> None:
        """Stop polling and refill the countdown."""
        self._timer.stop()
        self._countdown.reset()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _on_turn_started(self, _player: Player) -> None:
        if self._countdown.is_unlimited:
            return
        self._countdown.restart()
        self._timer.start()
        self.remaining_changed.emit(self._countdown.remaining())

    def _on_game_over(self, _state: GameState) -> None:
        self._timer.stop()
        self._countdown.stop()

    # ── Internal ─────────────────────────────────────────────────────────

    def _tick(self) -> None:
        if not self._countdown.is_running:
            return
        remaining = self._countdown.remaining()
        self.remaining_changed.emit(remaining)
        if remaining > 0.0:
            return

        # Each turn expires at most once.
        self._timer.stop()
        self._countdown.stop()
        loser = self._engine.state.current_player
        _LOGGER.info("Turn time elapsed for %s", loser)
        state = self._engine.expire_turn()
        if state.is_game_over:
            self.turn_expired.emit(loser.value)
