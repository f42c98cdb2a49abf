"""
Chord primitive - ChordQuality.

A chord quality is a stack of intervals. Each interval is measured from the
previous chord tone, not from the root: a major triad is M3 then m3.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from .interval import CanonicalInterval
from .note import Note


@dataclass(frozen=True)
class ChordQuality:
    """
    A named chord quality defined by stacked intervals.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[CanonicalInterval, ...]

    # Triads (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    SUSPENDED_2: ClassVar[ChordQuality]
    PHRYGIAN: ClassVar[ChordQuality]
    SUSPENDED_4: ClassVar[ChordQuality]
    LYDIAN: ClassVar[ChordQuality]

    # Sevenths
    DOMINANT_7: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    AUGMENTED_DOMINANT_7: ClassVar[ChordQuality]
    AUGMENTED_MAJOR_7: ClassVar[ChordQuality]
    DIMINISHED_MAJOR_7: ClassVar[ChordQuality]

    TRIADS: ClassVar[tuple[ChordQuality, ...]]
    SEVENTHS: ClassVar[tuple[ChordQuality, ...]]

    @classmethod
    def from_semitones(cls, name: str, sizes: Iterable[int]) -> ChordQuality:
        """Build a quality from raw interval sizes; raises ValueError on unmapped sizes."""
        return cls(name, tuple(CanonicalInterval.from_semitones(size) for size in sizes))

    @property
    def note_count(self) -> int:
        """Number of chord tones, root included."""
        return len(self.intervals) + 1

    def spell(self, root: Note) -> list[Note]:
        """
        Spell the chord from a root.

        Each tone is the previous tone plus the next interval. No
        enharmonic correction is applied.
        """
        notes = [root]
        note = root
        for interval in self.intervals:
            note = note + interval
            notes.append(note)
        return notes

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        sizes = ", ".join(str(i.semitones) for i in self.intervals)
        return f"ChordQuality({self.name!r}, [{sizes}])"

    @classmethod
    def parse(cls, name: str) -> ChordQuality:
        """
        Look up a catalog quality by name, e.g. 'Maj7', 'min7(b5)'.

        Case-insensitive.
        """
        lowered = name.strip().lower()
        for quality in cls.TRIADS + cls.SEVENTHS:
            if quality.name.lower() == lowered:
                return quality
        raise ValueError(f"Unknown chord quality: {name}")


# Define triads
ChordQuality.MAJOR = ChordQuality.from_semitones("Maj", [4, 3])
ChordQuality.MINOR = ChordQuality.from_semitones("Min", [3, 4])
ChordQuality.DIMINISHED = ChordQuality.from_semitones("Dim", [3, 3])
ChordQuality.AUGMENTED = ChordQuality.from_semitones("Aug", [4, 4])
ChordQuality.SUSPENDED_2 = ChordQuality.from_semitones("Sus2", [2, 5])
ChordQuality.PHRYGIAN = ChordQuality.from_semitones("Phr", [1, 6])
ChordQuality.SUSPENDED_4 = ChordQuality.from_semitones("Sus4", [5, 2])
ChordQuality.LYDIAN = ChordQuality.from_semitones("Lyd", [6, 1])

# Define sevenths
ChordQuality.DOMINANT_7 = ChordQuality.from_semitones("Dom7", [4, 3, 3])
ChordQuality.MAJOR_7 = ChordQuality.from_semitones("Maj7", [4, 3, 4])
ChordQuality.MINOR_7 = ChordQuality.from_semitones("Min7", [3, 4, 3])
ChordQuality.DIMINISHED_7 = ChordQuality.from_semitones("Dim7", [3, 3, 3])
ChordQuality.HALF_DIMINISHED_7 = ChordQuality.from_semitones("Min7(b5)", [3, 3, 4])
ChordQuality.AUGMENTED_DOMINANT_7 = ChordQuality.from_semitones("Dom7(#5)", [4, 4, 2])
ChordQuality.AUGMENTED_MAJOR_7 = ChordQuality.from_semitones("Maj7(#5)", [4, 4, 3])
ChordQuality.DIMINISHED_MAJOR_7 = ChordQuality.from_semitones("Dim(Maj7)", [3, 3, 7])

ChordQuality.TRIADS = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
    ChordQuality.SUSPENDED_2,
    ChordQuality.PHRYGIAN,
    ChordQuality.SUSPENDED_4,
    ChordQuality.LYDIAN,
)
ChordQuality.SEVENTHS = (
    ChordQuality.DOMINANT_7,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
    ChordQuality.AUGMENTED_DOMINANT_7,
    ChordQuality.AUGMENTED_MAJOR_7,
    ChordQuality.DIMINISHED_MAJOR_7,
)
