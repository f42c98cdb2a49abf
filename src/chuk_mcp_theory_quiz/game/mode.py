"""
Game modes - which round to play next.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from chuk_mcp_theory_quiz.constants import ErrorMessages, GameMode
from chuk_mcp_theory_quiz.game.rounds import ChordsRound, IntervalsRound, Round, ScalesRound

ROUND_FACTORIES: dict[GameMode, Callable[[random.Random], Round]] = {
    GameMode.INTERVALS: IntervalsRound.generate,
    GameMode.CHORDS: ChordsRound.generate,
    GameMode.SCALES: ScalesRound.generate,
}


def new_round(mode: GameMode, rng: random.Random) -> Round:
    """
    Generate the next round for a game mode.

    MIXED first picks one of the single-kind modes at random.
    """
    if mode == GameMode.MIXED:
        mode = rng.choice(list(ROUND_FACTORIES))
    return ROUND_FACTORIES[mode](rng)


def parse_mode(name: str) -> GameMode:
    """Parse a game mode name case-insensitively."""
    try:
        return GameMode(name.strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in GameMode)
        raise ValueError(ErrorMessages.UNKNOWN_MODE.format(mode=name, choices=choices)) from None
