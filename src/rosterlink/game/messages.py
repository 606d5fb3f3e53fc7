"""Localised status lines for the roster connection game.

Usage::

    from rosterlink.game.messages import t, set_language

    set_language("Russian")
    print(t().choose_first_team.format(player=t().player_label(Player.ONE)))
"""

from __future__ import annotations

from dataclasses import dataclass

from rosterlink.core.enums import Player


@dataclass(frozen=True)
class Strings:
    player: str  # "Player {number}"

    # ── Turn prompts ─────────────────────────────────────────────────────
    choose_first_team: str  # "{player}: Choose your first team"
    choose_connected_team: str  # "{player}: Choose a team with common players"

    # ── Game over ────────────────────────────────────────────────────────
    ran_out_of_time: str  # "{player} ran out of time!"
    loses_exhausted: str  # "{player} loses! All common players have {max} strikes."
    loses_no_connection: str  # "{player} loses! No common players found."
    wins: str  # "{player} wins!"

    # ── Rejections ───────────────────────────────────────────────────────
    rejected_duplicate: str  # "{team} has already been named."
    rejected_same_franchise: str  # "{team} is the same franchise as {current}."
    rejected_no_connection: str  # "{team} shares no players with {current}."
    ignored_game_over: str

    def player_label(self, player: Player) -> str:
        return self.player.format(number=player.value)


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    player="Player {number}",
    choose_first_team="{player}: Choose your first team",
    choose_connected_team="{player}: Choose a team with common players",
    ran_out_of_time="{player} ran out of time!",
    loses_exhausted="{player} loses! All common players have {max} strikes.",
    loses_no_connection="{player} loses! No common players found.",
    wins="{player} wins!",
    rejected_duplicate="{team} has already been named.",
    rejected_same_franchise="{team} is the same franchise as {current}.",
    rejected_no_connection="{team} shares no players with {current}. Try again.",
    ignored_game_over="The game is over. Start a new game to keep playing.",
)

_RU = Strings(
    player="Игрок {number}",
    choose_first_team="{player}: выберите первую команду",
    choose_connected_team="{player}: выберите команду с общими игроками",
    ran_out_of_time="{player}: время вышло!",
    loses_exhausted="{player} проигрывает! У всех общих игроков по {max} страйка.",
    loses_no_connection="{player} проигрывает! Общих игроков не найдено.",
    wins="{player} побеждает!",
    rejected_duplicate="Команда {team} уже была названа.",
    rejected_same_franchise="{team} — та же франшиза, что и {current}.",
    rejected_no_connection="У {team} нет общих игроков с {current}. Попробуйте ещё раз.",
    ignored_game_over="Игра окончена. Начните новую игру.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
