"""
Interval primitives - CanonicalInterval.

A canonical interval is a named semitone distance. It is used both to
transpose notes and to describe the steps of chords and scales.
Sizes run from 0 to 21; 18 has no conventional name and is not defined.
"""

from __future__ import annotations

from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_DISPLAY_NAMES: dict[int, str] = {
    0: "Unison",
    1: "Minor 2",
    2: "Major 2",
    3: "Minor 3",
    4: "Major 3",
    5: "Perfect 4",
    6: "Tritone",
    7: "Perfect 5",
    8: "Minor 6",
    9: "Major 6",
    10: "Minor 7",
    11: "Major 7",
    12: "Octave",
    13: "Minor 9",
    14: "Major 9",
    15: "Minor 10",
    16: "Major 10",
    17: "Perfect 11",
    19: "Perfect 12",
    20: "Minor 13",
    21: "Major 13",
}
_SHORT_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
    13: "m9",
    14: "M9",
    15: "m10",
    16: "M10",
    17: "P11",
    19: "P12",
    20: "m13",
    21: "M13",
}


class CanonicalInterval(IntEnum):
    """
    A named, fixed-size interval in semitones.

    Constructing from an unmapped size (e.g. CanonicalInterval(18)) raises
    ValueError. Sizes only ever come from the hardcoded chord and scale
    tables, so that error means a broken table, not bad user input.
    """

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    OCTAVE = 12
    MINOR_NINTH = 13
    MAJOR_NINTH = 14
    MINOR_TENTH = 15
    MAJOR_TENTH = 16
    PERFECT_ELEVENTH = 17
    PERFECT_TWELFTH = 19
    MINOR_THIRTEENTH = 20
    MAJOR_THIRTEENTH = 21

    @property
    def semitones(self) -> int:
        """Size of the interval in semitones."""
        return self.value

    @property
    def display_name(self) -> str:
        """Conventional name, e.g. 'Perfect 5'."""
        return _DISPLAY_NAMES[self.value]

    @property
    def short_name(self) -> str:
        """Short symbol, e.g. 'P5'."""
        return _SHORT_NAMES[self.value]

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_semitones(cls, semitones: int) -> CanonicalInterval:
        """Get the interval of a given size; raises ValueError for unmapped sizes."""
        if semitones not in _DISPLAY_NAMES:
            raise ValueError(f"Invalid canonical interval size: {semitones}")
        return cls(semitones)

    @classmethod
    def parse(cls, name: str) -> CanonicalInterval:
        """
        Parse an interval from a display name, short name or member name.

        Examples: 'Major 3', 'M3', 'major_third'. Display and member names are
        case-insensitive; short names are case-sensitive (m3 != M3).
        """
        name = name.strip()

        for size, short in _SHORT_NAMES.items():
            if short == name:
                return cls(size)

        lowered = name.lower()
        for size, display in _DISPLAY_NAMES.items():
            if display.lower() == lowered:
                return cls(size)

        member_name = lowered.replace(" ", "_").upper()
        if member_name in cls.__members__:
            return cls.__members__[member_name]

        raise ValueError(f"Unknown interval: {name}")
