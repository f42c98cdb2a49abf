"""
Tests for the quiz layer.

Tests cover:
- Standard pools (catalog.py)
- Rounds, grading and feedback (rounds.py)
- Scorekeeper (scorekeeper.py)
- Game modes (mode.py)
- QuizSession and QuizSessionManager (session.py)
"""

import random

import pytest

from chuk_mcp_theory_quiz.constants import GameMode, RoundKind, RoundOutcome
from chuk_mcp_theory_quiz.core import (
    CanonicalInterval,
    ChordQuality,
    ModalScale,
    Mode,
    Note,
    Scale,
    UnrecognizedNoteError,
)
from chuk_mcp_theory_quiz.game import (
    STANDARD_CHORD_QUALITIES,
    STANDARD_INTERVALS,
    STANDARD_NOTES,
    STANDARD_SCALES,
    ChordsRound,
    Grade,
    IntervalsRound,
    QuizSession,
    QuizSessionManager,
    ScalesRound,
    Scorekeeper,
    format_feedback,
    new_round,
    parse_mode,
    parse_notes,
)
from chuk_mcp_theory_quiz.models import QuizOptions


def correct_answer(quiz_round) -> str:
    return " ".join(str(note) for note in quiz_round.expected())


class TestCatalog:
    """Tests for the standard pools."""

    def test_standard_notes(self) -> None:
        """Seventeen notes: every default spelling plus the flats."""
        assert [str(n) for n in STANDARD_NOTES] == [
            "A",
            "A#",
            "Bb",
            "B",
            "C",
            "C#",
            "Db",
            "D",
            "D#",
            "Eb",
            "E",
            "F",
            "F#",
            "Gb",
            "G",
            "G#",
            "Ab",
        ]
        assert {n.pitch for n in STANDARD_NOTES} == set(range(12))

    def test_standard_intervals(self) -> None:
        """Minor 2 through Major 7."""
        assert [i.semitones for i in STANDARD_INTERVALS] == list(range(1, 12))

    def test_standard_chords(self) -> None:
        """Four triads and five sevenths."""
        assert len(STANDARD_CHORD_QUALITIES) == 9
        assert ChordQuality.MAJOR in STANDARD_CHORD_QUALITIES
        assert ChordQuality.SUSPENDED_2 not in STANDARD_CHORD_QUALITIES

    def test_standard_scales(self) -> None:
        """Major comes first."""
        assert STANDARD_SCALES[0] is Scale.MAJOR
        assert len(STANDARD_SCALES) == 3


class TestParseNotes:
    """Tests for answer parsing."""

    def test_parse_whitespace_separated(self) -> None:
        """Notes are split on any whitespace."""
        notes = parse_notes("  C   e\tG ")
        assert [str(n) for n in notes] == ["C", "E", "G"]

    def test_parse_empty(self) -> None:
        """An empty answer has no notes."""
        assert parse_notes("") == []

    def test_parse_bad_token(self) -> None:
        """The first bad token raises."""
        with pytest.raises(UnrecognizedNoteError) as excinfo:
            parse_notes("C H G")
        assert excinfo.value.text == "H"


class TestIntervalsRound:
    """Tests for interval rounds."""

    def test_prompt_ascending(self) -> None:
        """Ascending prompt names the direction and interval."""
        quiz_round = IntervalsRound(Note.parse("C"), CanonicalInterval.MAJOR_THIRD)
        assert quiz_round.prompt() == "C up a Major 3"
        assert quiz_round.expected() == [Note.parse("E")]

    def test_prompt_descending(self) -> None:
        """Descending rounds subtract the interval."""
        quiz_round = IntervalsRound(Note.parse("C"), CanonicalInterval.MINOR_THIRD, descending=True)
        assert quiz_round.prompt() == "C down a Minor 3"
        assert [str(n) for n in quiz_round.expected()] == ["A"]

    def test_grade(self) -> None:
        """Any spelling of the right pitch is correct."""
        quiz_round = IntervalsRound(Note.parse("C"), CanonicalInterval.MAJOR_THIRD)
        assert quiz_round.grade("E").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("Fb").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade(" E ").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("F").outcome == RoundOutcome.INCORRECT

    def test_grade_error(self) -> None:
        """Unparseable answers are errors naming the text."""
        quiz_round = IntervalsRound(Note.parse("C"), CanonicalInterval.MAJOR_THIRD)
        grade = quiz_round.grade("H")
        assert grade.outcome == RoundOutcome.ERROR
        assert "'H'" in grade.message
        assert quiz_round.grade("E G").outcome == RoundOutcome.ERROR

    def test_generate(self) -> None:
        """Generated rounds draw from the standard pools."""
        rng = random.Random(1)
        for _ in range(50):
            quiz_round = IntervalsRound.generate(rng)
            assert quiz_round.root in STANDARD_NOTES
            assert quiz_round.interval in STANDARD_INTERVALS

    def test_generate_both_directions(self) -> None:
        """The coin flip picks both directions."""
        rng = random.Random(2)
        directions = {IntervalsRound.generate(rng).descending for _ in range(100)}
        assert directions == {True, False}


class TestChordsRound:
    """Tests for chord rounds."""

    def test_prompt(self) -> None:
        """Prompt is root and quality name."""
        quiz_round = ChordsRound(Note.parse("C"), ChordQuality.MAJOR_7)
        assert quiz_round.prompt() == "C Maj7"
        assert quiz_round.to_prompt().note_count == 4
        assert quiz_round.to_prompt().kind == RoundKind.CHORD

    def test_grade(self) -> None:
        """Answers are compared note by note."""
        quiz_round = ChordsRound(Note.parse("C"), ChordQuality.MAJOR)
        assert quiz_round.grade("C E G").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("c e g").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("C Fb G").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("C E").outcome == RoundOutcome.INCORRECT
        assert quiz_round.grade("C G E").outcome == RoundOutcome.INCORRECT
        assert quiz_round.grade("C E G C").outcome == RoundOutcome.INCORRECT

    def test_generate(self) -> None:
        """Generated rounds use the standard chord pool."""
        rng = random.Random(3)
        for _ in range(50):
            assert ChordsRound.generate(rng).quality in STANDARD_CHORD_QUALITIES


class TestScalesRound:
    """Tests for scale rounds."""

    def test_modal_prompt(self) -> None:
        """Modal rounds are named by mode."""
        quiz_round = ScalesRound(Note.parse("F#"), ModalScale(Scale.MAJOR, Mode.AEOLIAN))
        assert quiz_round.prompt() == "F# Aeolian"
        assert quiz_round.grade("F# G# A B C# D E").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("Gb Ab A B Db D E").outcome == RoundOutcome.CORRECT

    def test_scale_prompt(self) -> None:
        """Plain scale rounds are named by scale."""
        quiz_round = ScalesRound(Note.parse("C"), Scale.HARMONIC_MINOR)
        assert quiz_round.prompt() == "C Harmonic Minor"
        assert quiz_round.grade("C D Eb F G Ab B").outcome == RoundOutcome.CORRECT
        assert quiz_round.grade("C D Eb F G Ab Bb").outcome == RoundOutcome.INCORRECT

    def test_generate_both_kinds(self) -> None:
        """The coin flip yields both plain scales and modes."""
        rng = random.Random(4)
        scales = [ScalesRound.generate(rng).scale for _ in range(100)]
        assert any(isinstance(s, Scale) for s in scales)
        assert any(isinstance(s, ModalScale) for s in scales)
        for scale in scales:
            if isinstance(scale, ModalScale):
                assert scale.scale is Scale.MAJOR
            else:
                assert scale in STANDARD_SCALES


class TestFeedback:
    """Tests for feedback text."""

    def test_correct(self) -> None:
        """Correct feedback shows the time."""
        grade = Grade(RoundOutcome.CORRECT, (Note.parse("E"),))
        assert format_feedback(grade, 1.234) == "Correct! (1.23 sec.)"

    def test_incorrect(self) -> None:
        """Incorrect feedback shows the expected notes."""
        expected = tuple(ChordQuality.MAJOR.spell(Note.parse("C")))
        grade = Grade(RoundOutcome.INCORRECT, expected)
        assert format_feedback(grade) == "Incorrect! (Expected C E G.)"

    def test_error(self) -> None:
        """Error feedback shows the parse message."""
        quiz_round = IntervalsRound(Note.parse("C"), CanonicalInterval.MAJOR_THIRD)
        assert format_feedback(quiz_round.grade("H")) == "Error: Unrecognized note: 'H'."


class TestScorekeeper:
    """Tests for Scorekeeper."""

    def test_empty_report(self, scorekeeper: Scorekeeper) -> None:
        """An empty session reports zeros."""
        report = scorekeeper.report()
        assert report.attempts == 0
        assert report.percent_correct == 0.0
        assert report.average_seconds == 0.0

    def test_timing(self, scorekeeper: Scorekeeper, clock) -> None:
        """Each answer is timed from the previous one."""
        clock.advance(2.0)
        assert scorekeeper.add_result(True) == 2.0
        clock.advance(3.0)
        assert scorekeeper.add_result(False) == 3.0

    def test_report(self, scorekeeper: Scorekeeper, clock) -> None:
        """Average time counts correct answers only."""
        for seconds, correct in [(2.0, True), (3.0, False), (1.0, True)]:
            clock.advance(seconds)
            scorekeeper.add_result(correct)

        report = scorekeeper.report()
        assert report.attempts == 3
        assert report.correct == 2
        assert report.percent_correct == pytest.approx(66.666, rel=1e-3)
        assert report.average_seconds == pytest.approx(1.5)
        assert report.to_text() == "Final results:\n  66.7% correct.\n  1.50 sec. average."

    def test_restart_timer(self, scorekeeper: Scorekeeper, clock) -> None:
        """Restarting the timer drops idle time."""
        clock.advance(10.0)
        scorekeeper.restart_timer()
        clock.advance(1.0)
        assert scorekeeper.add_result(True) == 1.0

    def test_evaluate_records(self, scorekeeper: Scorekeeper, clock) -> None:
        """Scored answers are recorded; parse errors are not."""
        quiz_round = ChordsRound(Note.parse("A"), ChordQuality.MINOR)

        result = quiz_round.evaluate("A H E", scorekeeper)
        assert result.outcome == RoundOutcome.ERROR
        assert result.seconds is None
        assert scorekeeper.attempts == 0

        clock.advance(4.0)
        result = quiz_round.evaluate("A C E", scorekeeper)
        assert result.correct
        assert result.seconds == 4.0
        assert result.feedback == "Correct! (4.00 sec.)"
        assert result.expected == ["A", "C", "E"]
        assert scorekeeper.attempts == 1


class TestGameMode:
    """Tests for game modes."""

    @pytest.mark.parametrize(
        "mode, round_type",
        [
            (GameMode.INTERVALS, IntervalsRound),
            (GameMode.CHORDS, ChordsRound),
            (GameMode.SCALES, ScalesRound),
        ],
    )
    def test_single_kind(self, mode: GameMode, round_type: type) -> None:
        """Single-kind modes always produce their round."""
        rng = random.Random(5)
        for _ in range(10):
            assert isinstance(new_round(mode, rng), round_type)

    def test_mixed(self) -> None:
        """Mixed mode produces every kind."""
        rng = random.Random(6)
        kinds = {type(new_round(GameMode.MIXED, rng)) for _ in range(100)}
        assert kinds == {IntervalsRound, ChordsRound, ScalesRound}

    def test_parse_mode(self) -> None:
        """Modes parse case-insensitively."""
        assert parse_mode("Chords") == GameMode.CHORDS
        with pytest.raises(ValueError, match="Unknown game mode"):
            parse_mode("arpeggios")


class TestQuizSession:
    """Tests for QuizSession."""

    def test_answer_without_round(self) -> None:
        """Answering before a round is an error."""
        session = QuizSession(QuizOptions(seed=1))
        with pytest.raises(ValueError):
            session.answer("C")

    def test_round_flow(self) -> None:
        """A scored answer closes the round."""
        session = QuizSession(QuizOptions(mode=GameMode.INTERVALS, seed=1))
        prompt = session.next_round()
        assert prompt.kind == RoundKind.INTERVAL
        assert prompt.note_count == 1

        answer = correct_answer(session.current_round)
        result = session.answer(answer)
        assert result.outcome == RoundOutcome.CORRECT
        assert session.current_round is None
        assert session.report().correct == 1

    def test_error_keeps_round(self) -> None:
        """A parse error leaves the round open."""
        session = QuizSession(QuizOptions(mode=GameMode.CHORDS, seed=2))
        session.next_round()
        open_round = session.current_round

        result = session.answer("X Y Z")
        assert result.outcome == RoundOutcome.ERROR
        assert session.current_round is open_round
        assert session.report().attempts == 0

    def test_seed_is_reproducible(self) -> None:
        """The same seed gives the same rounds."""
        first = QuizSession(QuizOptions(seed=42))
        second = QuizSession(QuizOptions(seed=42))
        assert [first.next_round() for _ in range(5)] == [second.next_round() for _ in range(5)]


class TestQuizSessionManager:
    """Tests for QuizSessionManager."""

    def test_lifecycle(self) -> None:
        """Sessions are started, fetched and ended by player."""
        manager = QuizSessionManager()
        assert manager.get("sam") is None

        session = manager.start("sam", QuizOptions(mode=GameMode.SCALES))
        assert manager.get("sam") is session
        assert manager.players() == ["sam"]

        report = manager.end("sam")
        assert report is not None
        assert report.attempts == 0
        assert manager.get("sam") is None
        assert manager.end("sam") is None
