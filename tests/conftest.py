"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from rosterlink.core.roster import RosterTable

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class FakeClock:
    """Manually advanced time source for timer tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for QObject/QTimer tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared message locale between tests."""
    from rosterlink.game.messages import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def small_roster() -> RosterTable:
    """Three franchises, two Warriors seasons, a few shared players."""
    return RosterTable.from_mapping(
        {
            "2016 - 2017 Warriors": ["Curry", "Thompson", "Durant", "Iguodala"],
            "2021 - 2022 Warriors": ["Curry", "Thompson", "Poole", "Iguodala"],
            "2020 - 2021 Nets": ["Durant", "Irving", "Harden"],
            "2019 - 2020 Rockets": ["Harden", "Westbrook", "Gordon"],
            "2017 - 2018 Celtics": ["Irving", "Horford", "Tatum"],
            "2007 - 2008 Celtics": ["Pierce", "Garnett", "Allen"],
        }
    )
