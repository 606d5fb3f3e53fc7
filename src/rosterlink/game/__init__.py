"""Game management layer: engine, state, strikes, turn timer.

Quick start::

    from rosterlink.core import load_default_rosters
    from rosterlink.game import GameEngine, RuleSet

    engine = GameEngine(load_default_rosters(), RuleSet.classic())
    engine.submit_team("2016 - 2017 Warriors")
    result = engine.submit_team("2020 - 2021 Nets")
    print(result.outcome, result.connections)
"""

from rosterlink.game.engine import GameEngine, GameEvents
from rosterlink.game.interfaces import (
    GameEndReason,
    IGameEngine,
    ITurnTimer,
    RuleSet,
)
from rosterlink.game.state import GameSnapshot, GameState, MoveResult
from rosterlink.game.strikes import StrikeTable
from rosterlink.game.timer import TimerSnapshot, TurnTimer

__all__ = [
    # Interfaces
    "GameEndReason",
    "IGameEngine",
    "ITurnTimer",
    "RuleSet",
    # Concrete
    "GameEngine",
    "GameEvents",
    "GameSnapshot",
    "GameState",
    "MoveResult",
    "StrikeTable",
    "TimerSnapshot",
    "TurnTimer",
]
