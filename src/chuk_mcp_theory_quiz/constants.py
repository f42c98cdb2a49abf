"""
Constants and enums for the quiz.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class GameMode(str, Enum):
    """
    Which kinds of round a session plays.

    MIXED picks one of the other three at random each round.
    """

    MIXED = "mixed"
    INTERVALS = "intervals"
    CHORDS = "chords"
    SCALES = "scales"


class RoundKind(str, Enum):
    """The kinds of quiz round."""

    INTERVAL = "interval"
    CHORD = "chord"
    SCALE = "scale"


class RoundOutcome(str, Enum):
    """Result of grading one answer."""

    CORRECT = "correct"
    INCORRECT = "incorrect"
    ERROR = "error"  # Answer did not parse; not scored


class ErrorMessages:
    """Standardized error messages."""

    NO_SESSION = "No quiz session. Start one first."
    NO_ROUND = "No open round. Ask for the next round first."
    UNKNOWN_MODE = "Unknown game mode: '{mode}'. Expected one of: {choices}."


class FeedbackMessages:
    """Standardized feedback shown after an answer."""

    CORRECT = "Correct! ({seconds:.2f} sec.)"
    INCORRECT = "Incorrect! (Expected {expected}.)"
    ERROR = "Error: {message}."
