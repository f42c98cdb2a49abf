"""
Scale primitives - Scale, Mode, ModalScale.

Scales are step patterns: each interval is measured from one degree to the
next. Modes are rotations of a scale's steps, so a Dorian scale is the major
scale shifted by one step instead of a separate table.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .interval import CanonicalInterval
from .note import Note
from .pitch import PITCH_CLASS_COUNT


@dataclass(frozen=True)
class Scale:
    """
    A named scale defined by its step intervals.

    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones).
    Steps must sum to an octave.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[CanonicalInterval, ...]

    # Common scales (defined after class)
    MAJOR: ClassVar[Scale]
    MINOR: ClassVar[Scale]
    HARMONIC_MINOR: ClassVar[Scale]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError(f"Scale {self.name!r} has no steps")
        total = sum(i.semitones for i in self.intervals)
        if total != PITCH_CLASS_COUNT:
            raise ValueError(f"Scale intervals must sum to 12 semitones, got {total}")

    @classmethod
    def from_semitones(cls, name: str, sizes: Iterable[int]) -> Scale:
        """Build a scale from raw step sizes; raises ValueError on unmapped sizes."""
        return cls(name, tuple(CanonicalInterval.from_semitones(size) for size in sizes))

    def shift(self, steps: int) -> Scale:
        """
        Rotate the step pattern left by `steps` (mod the step count).

        Scale.MAJOR.shift(5) has the natural minor's steps.
        """
        steps %= len(self.intervals)
        if steps == 0:
            return self
        return Scale(
            f"{self.name} (+{steps})",
            self.intervals[steps:] + self.intervals[:steps],
        )

    def spell(self, root: Note) -> list[Note]:
        """
        Spell the scale from a root, one note per step.

        When a step lands on the previous note's letter (A -> A#), the note
        is respelled enharmonically (A# -> Bb). A natural that still collides
        (Bb -> B) moves to the next letter (Cb). The closing octave is
        computed and dropped.
        """
        notes = [root]
        note = root
        for interval in self.intervals:
            previous = note
            note = note + interval
            if note.name == previous.name:
                note = note.enharmonic()
            if note.name == previous.name:
                respelled = note.respell(previous.name.step_up())
                if respelled is not None:
                    note = respelled
            notes.append(note)

        # Remove octave
        notes.pop()
        return notes

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        sizes = ", ".join(str(i.semitones) for i in self.intervals)
        return f"Scale({self.name!r}, [{sizes}])"

    @classmethod
    def parse(cls, name: str) -> Scale:
        """Look up a catalog scale by name, e.g. 'Harmonic Minor'. Case-insensitive."""
        lowered = name.strip().lower().replace("_", " ")
        for scale in (cls.MAJOR, cls.MINOR, cls.HARMONIC_MINOR):
            if scale.name.lower() == lowered:
                return scale
        raise ValueError(f"Unknown scale: {name}")


Scale.MAJOR = Scale.from_semitones("Major", [2, 2, 1, 2, 2, 2, 1])
Scale.MINOR = Scale.from_semitones("Minor", [2, 1, 2, 2, 1, 2, 2])
Scale.HARMONIC_MINOR = Scale.from_semitones("Harmonic Minor", [2, 1, 2, 2, 1, 3, 1])


class Mode(IntEnum):
    """The seven diatonic modes, valued by their rotation of the major scale."""

    IONIAN = 0
    DORIAN = 1
    PHRYGIAN = 2
    LYDIAN = 3
    MIXOLYDIAN = 4
    AEOLIAN = 5
    LOCRIAN = 6

    @classmethod
    def from_index(cls, index: int) -> Mode:
        """Convert any integer to a mode, wrapping modulo 7."""
        return cls(index % len(cls))

    @property
    def display_name(self) -> str:
        """Title-case name, e.g. 'Aeolian'."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Look up a mode by name, case-insensitively."""
        key = name.strip().upper()
        if key not in cls.__members__:
            raise ValueError(f"Unknown mode: {name}")
        return cls.__members__[key]


@dataclass(frozen=True)
class ModalScale:
    """
    A scale played from one of its modes.

    ModalScale(Scale.MAJOR, Mode.AEOLIAN) spells the natural minor.
    """

    scale: Scale
    mode: Mode

    @property
    def name(self) -> str:
        """The mode name, e.g. 'Dorian'."""
        return self.mode.display_name

    def spell(self, root: Note) -> list[Note]:
        """Spell the rotated scale from a root."""
        return self.scale.shift(self.mode.value).spell(root)

    def __str__(self) -> str:
        return self.name
