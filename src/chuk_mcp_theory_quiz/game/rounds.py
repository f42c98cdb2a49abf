"""
Quiz rounds - prompt generation and answer grading.

Each round draws its question from the standard pools, derives the expected
notes with the core engine, and grades a typed answer against them.
Answers are compared by pitch class, so any enharmonic spelling is accepted.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_theory_quiz.constants import FeedbackMessages, RoundKind, RoundOutcome
from chuk_mcp_theory_quiz.core import (
    CanonicalInterval,
    ChordQuality,
    ModalScale,
    Mode,
    Note,
    Scale,
    UnrecognizedNoteError,
)
from chuk_mcp_theory_quiz.game.catalog import (
    STANDARD_CHORD_QUALITIES,
    STANDARD_INTERVALS,
    STANDARD_NOTES,
    STANDARD_SCALES,
)
from chuk_mcp_theory_quiz.game.scorekeeper import Scorekeeper
from chuk_mcp_theory_quiz.models.quiz import RoundPrompt, RoundResult

logger = logging.getLogger(__name__)


def parse_notes(text: str) -> list[Note]:
    """
    Parse whitespace-separated notes.

    Raises:
        UnrecognizedNoteError: on the first token that is not a note
    """
    return [Note.parse(token) for token in text.split()]


def spell_notes(notes: list[Note]) -> str:
    """Join notes with spaces, e.g. 'C E G'."""
    return " ".join(str(note) for note in notes)


@dataclass(frozen=True)
class Grade:
    """Outcome of checking one answer, before scoring."""

    outcome: RoundOutcome
    expected: tuple[Note, ...]
    message: str | None = None

    @property
    def scored(self) -> bool:
        """Parse errors are not scored."""
        return self.outcome != RoundOutcome.ERROR


def format_feedback(grade: Grade, seconds: float | None = None) -> str:
    """Render feedback for a graded answer."""
    if grade.outcome == RoundOutcome.CORRECT:
        return FeedbackMessages.CORRECT.format(seconds=seconds or 0.0)
    if grade.outcome == RoundOutcome.INCORRECT:
        return FeedbackMessages.INCORRECT.format(expected=spell_notes(list(grade.expected)))
    return FeedbackMessages.ERROR.format(message=grade.message)


class Round(ABC):
    """
    A single quiz question.

    Subclasses define the prompt and the expected notes; grading, scoring and
    feedback are shared.
    """

    kind: ClassVar[RoundKind]
    label: ClassVar[str]

    @abstractmethod
    def prompt(self) -> str:
        """Question text, e.g. 'C Maj7'."""

    @abstractmethod
    def expected(self) -> list[Note]:
        """The notes a correct answer contains, in order."""

    def parse_answer(self, answer: str) -> list[Note]:
        """Parse an answer into notes."""
        return parse_notes(answer)

    def grade(self, answer: str) -> Grade:
        """Check an answer without recording it."""
        expected = tuple(self.expected())
        try:
            notes = self.parse_answer(answer)
        except UnrecognizedNoteError as e:
            return Grade(RoundOutcome.ERROR, expected, str(e))

        outcome = RoundOutcome.CORRECT if tuple(notes) == expected else RoundOutcome.INCORRECT
        return Grade(outcome, expected)

    def evaluate(self, answer: str, scorekeeper: Scorekeeper) -> RoundResult:
        """
        Grade an answer and record it.

        Parse errors are reported but not scored, so the round can be retried.
        """
        grade = self.grade(answer)
        seconds = None
        if grade.scored:
            seconds = scorekeeper.add_result(grade.outcome == RoundOutcome.CORRECT)
        logger.debug(f"{self.label} {self.prompt()!r}: {answer!r} -> {grade.outcome.value}")

        return RoundResult(
            outcome=grade.outcome,
            feedback=format_feedback(grade, seconds),
            expected=[str(note) for note in grade.expected],
            seconds=seconds,
        )

    def to_prompt(self) -> RoundPrompt:
        """Serializable form of this round's question."""
        return RoundPrompt(
            kind=self.kind,
            label=self.label,
            prompt=self.prompt(),
            note_count=len(self.expected()),
        )


@dataclass(frozen=True)
class IntervalsRound(Round):
    """Name the note an interval above or below a root."""

    kind: ClassVar[RoundKind] = RoundKind.INTERVAL
    label: ClassVar[str] = "Interval"

    root: Note
    interval: CanonicalInterval
    descending: bool = False

    @classmethod
    def generate(cls, rng: random.Random) -> IntervalsRound:
        """Draw a random interval question."""
        return cls(
            root=rng.choice(STANDARD_NOTES),
            descending=bool(rng.getrandbits(1)),
            interval=rng.choice(STANDARD_INTERVALS),
        )

    def prompt(self) -> str:
        direction = "down" if self.descending else "up"
        return f"{self.root} {direction} a {self.interval.display_name}"

    def expected(self) -> list[Note]:
        if self.descending:
            return [self.root - self.interval]
        return [self.root + self.interval]

    def parse_answer(self, answer: str) -> list[Note]:
        """The answer is a single note."""
        return [Note.parse(answer.strip())]


@dataclass(frozen=True)
class ChordsRound(Round):
    """Spell a chord from its root and quality."""

    kind: ClassVar[RoundKind] = RoundKind.CHORD
    label: ClassVar[str] = "Chord"

    root: Note
    quality: ChordQuality

    @classmethod
    def generate(cls, rng: random.Random) -> ChordsRound:
        """Draw a random chord question."""
        return cls(
            root=rng.choice(STANDARD_NOTES),
            quality=rng.choice(STANDARD_CHORD_QUALITIES),
        )

    def prompt(self) -> str:
        return f"{self.root} {self.quality.name}"

    def expected(self) -> list[Note]:
        return self.quality.spell(self.root)


@dataclass(frozen=True)
class ScalesRound(Round):
    """
    Spell a scale from its root.

    The scale is either one of the standard scales or a mode of the major
    scale; the two cases are kept as distinct types.
    """

    kind: ClassVar[RoundKind] = RoundKind.SCALE
    label: ClassVar[str] = "Scale"

    root: Note
    scale: Scale | ModalScale

    @classmethod
    def generate(cls, rng: random.Random) -> ScalesRound:
        """Draw a random scale question; a coin flip picks scale or mode."""
        root = rng.choice(STANDARD_NOTES)
        scale: Scale | ModalScale
        if rng.getrandbits(1):
            scale = rng.choice(STANDARD_SCALES)
        else:
            scale = ModalScale(STANDARD_SCALES[0], Mode.from_index(rng.randrange(len(Mode))))
        return cls(root=root, scale=scale)

    def prompt(self) -> str:
        return f"{self.root} {self.scale.name}"

    def expected(self) -> list[Note]:
        return self.scale.spell(self.root)
