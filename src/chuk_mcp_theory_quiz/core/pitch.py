"""
Pitch primitives - pitch-class arithmetic, NoteName and Accidental.

Pitch classes are integers mod 12. The pitch space is anchored on A (A = 0),
so the natural letters sit at A=0, B=2, C=3, D=5, E=7, F=8, G=10.
Accidentals shift a letter by -2..+2 semitones.
"""

from __future__ import annotations

from enum import IntEnum

PITCH_CLASS_COUNT = 12


def normalize(pitch: int) -> int:
    """Reduce any integer to a pitch class in [0, 12)."""
    return ((pitch % PITCH_CLASS_COUNT) + PITCH_CLASS_COUNT) % PITCH_CLASS_COUNT


class NoteName(IntEnum):
    """
    The seven diatonic letter names.

    The value of each member is its pitch offset from A.
    Letters are cyclic: stepping up from G wraps to A and vice versa.
    """

    A = 0
    B = 2
    C = 3
    D = 5
    E = 7
    F = 8
    G = 10

    @property
    def pitch(self) -> int:
        """Pitch class of the natural letter."""
        return self.value

    def step_up(self) -> NoteName:
        """The next letter name (G wraps to A)."""
        return _LETTERS[(_LETTERS.index(self) + 1) % len(_LETTERS)]

    def step_down(self) -> NoteName:
        """The previous letter name (A wraps to G)."""
        return _LETTERS[(_LETTERS.index(self) - 1) % len(_LETTERS)]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_letter(cls, letter: str) -> NoteName | None:
        """Look up a letter case-insensitively; None if it is not A-G."""
        return cls.__members__.get(letter.upper()) if len(letter) == 1 else None


# Letter order (module level to avoid IntEnum member issues)
_LETTERS: list[NoteName] = list(NoteName)


# Display symbols, keyed by semitone offset
_ACCIDENTAL_SYMBOLS: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "##",
}


class Accidental(IntEnum):
    """
    A semitone modifier applied to a letter name.

    The value is the signed offset in semitones.
    """

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def semitones(self) -> int:
        """Signed semitone offset."""
        return self.value

    @property
    def symbol(self) -> str:
        """Text symbol: '', 'b', 'bb', '#' or '##'."""
        return _ACCIDENTAL_SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def from_symbol(cls, symbol: str) -> Accidental | None:
        """Look up an accidental by its exact symbol; None if unknown."""
        for offset, text in _ACCIDENTAL_SYMBOLS.items():
            if text == symbol:
                return cls(offset)
        return None
