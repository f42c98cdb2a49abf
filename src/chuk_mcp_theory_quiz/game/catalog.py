"""
Standard pools the quiz draws from.

Built once at import time and never mutated.
"""

from __future__ import annotations

from chuk_mcp_theory_quiz.core import (
    Accidental,
    CanonicalInterval,
    ChordQuality,
    Note,
    Scale,
)


def _build_standard_notes() -> tuple[Note, ...]:
    """Every default spelling, with the flat spelling added after each sharp."""
    notes: list[Note] = []
    for pitch in range(12):
        note = Note.from_pitch(pitch)
        notes.append(note)
        if note.accidental == Accidental.SHARP:
            notes.append(Note(note.name.step_up(), Accidental.FLAT))
    return tuple(notes)


# A A# Bb B C C# Db D D# Eb E F F# Gb G G# Ab
STANDARD_NOTES: tuple[Note, ...] = _build_standard_notes()

STANDARD_INTERVALS: tuple[CanonicalInterval, ...] = (
    CanonicalInterval.MINOR_SECOND,
    CanonicalInterval.MAJOR_SECOND,
    CanonicalInterval.MINOR_THIRD,
    CanonicalInterval.MAJOR_THIRD,
    CanonicalInterval.PERFECT_FOURTH,
    CanonicalInterval.TRITONE,
    CanonicalInterval.PERFECT_FIFTH,
    CanonicalInterval.MINOR_SIXTH,
    CanonicalInterval.MAJOR_SIXTH,
    CanonicalInterval.MINOR_SEVENTH,
    CanonicalInterval.MAJOR_SEVENTH,
)

STANDARD_CHORD_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
    ChordQuality.DOMINANT_7,
)

# Major first: modal rounds rotate it
STANDARD_SCALES: tuple[Scale, ...] = (
    Scale.MAJOR,
    Scale.MINOR,
    Scale.HARMONIC_MINOR,
)
