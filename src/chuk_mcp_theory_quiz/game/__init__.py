"""
Quiz layer - rounds, scoring and sessions built on the core engine.
"""

from chuk_mcp_theory_quiz.game.catalog import (
    STANDARD_CHORD_QUALITIES,
    STANDARD_INTERVALS,
    STANDARD_NOTES,
    STANDARD_SCALES,
)
from chuk_mcp_theory_quiz.game.mode import new_round, parse_mode
from chuk_mcp_theory_quiz.game.rounds import (
    ChordsRound,
    Grade,
    IntervalsRound,
    Round,
    ScalesRound,
    format_feedback,
    parse_notes,
)
from chuk_mcp_theory_quiz.game.scorekeeper import Scorekeeper
from chuk_mcp_theory_quiz.game.session import QuizSession, QuizSessionManager

__all__ = [
    # Catalog
    "STANDARD_NOTES",
    "STANDARD_INTERVALS",
    "STANDARD_CHORD_QUALITIES",
    "STANDARD_SCALES",
    # Rounds
    "Round",
    "IntervalsRound",
    "ChordsRound",
    "ScalesRound",
    "Grade",
    "format_feedback",
    "parse_notes",
    # Modes
    "new_round",
    "parse_mode",
    # Scoring
    "Scorekeeper",
    "QuizSession",
    "QuizSessionManager",
]
