"""
Note primitive - a spelled pitch class.

A Note is a letter name plus an accidental. Two notes are equal when they
sound the same (D# == Eb); the spelling is kept for display and for
letter-aware operations like scale spelling.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pitch import PITCH_CLASS_COUNT, Accidental, NoteName, normalize


class UnrecognizedNoteError(ValueError):
    """Raised when text does not match the note grammar (e.g. 'H', 'Cbbb')."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unrecognized note: {text!r}")
        self.text = text


@dataclass(frozen=True, eq=False)
class Note:
    """
    A note spelled as (letter, accidental).

    Equality and hashing use the pitch class only, so spellings of the same
    sound are interchangeable in sets, dicts and answer comparison.
    Use `spelling` when the exact letter and accidental matter.

    Arithmetic with an int or CanonicalInterval transposes by semitones and
    returns the default spelling of the resulting pitch class.

    Examples:
        Note(NoteName.D, Accidental.SHARP) == Note(NoteName.E, Accidental.FLAT)
        Note.parse("C") + CanonicalInterval.MAJOR_THIRD -> E
    """

    name: NoteName
    accidental: Accidental = Accidental.NATURAL

    @property
    def pitch(self) -> int:
        """Pitch class in [0, 12)."""
        return normalize(self.name.pitch + self.accidental.semitones)

    @property
    def spelling(self) -> tuple[NoteName, Accidental]:
        """The (letter, accidental) pair."""
        return (self.name, self.accidental)

    @classmethod
    def from_pitch(cls, pitch: int) -> Note:
        """
        Get the default spelling of a pitch class.

        Naturals on natural pitch classes, sharps on the other five.

        Raises:
            ValueError: pitch is outside [0, 12)
        """
        if not 0 <= pitch < PITCH_CLASS_COUNT:
            raise ValueError(f"Pitch class must be 0-11, got {pitch}")
        return _DEFAULT_SPELLINGS[pitch]

    def enharmonic(self) -> Note:
        """
        Get the other common spelling of this pitch.

        Naturals are their own enharmonic. Double accidentals fall back to
        the default spelling. Flats move to the letter below (Eb -> D#,
        Fb -> E), sharps to the letter above (D# -> Eb, E# -> F).
        """
        if self.accidental == Accidental.NATURAL:
            result = self
        elif self.accidental in (Accidental.DOUBLE_FLAT, Accidental.DOUBLE_SHARP):
            result = Note.from_pitch(self.pitch)
        elif self.accidental == Accidental.FLAT:
            lower = self.name.step_down()
            accidental = (
                Accidental.NATURAL if self.name in (NoteName.C, NoteName.F) else Accidental.SHARP
            )
            result = Note(lower, accidental)
        else:
            upper = self.name.step_up()
            accidental = (
                Accidental.NATURAL if self.name in (NoteName.B, NoteName.E) else Accidental.FLAT
            )
            result = Note(upper, accidental)

        assert result.pitch == self.pitch
        return result

    def respell(self, name: NoteName) -> Note | None:
        """
        Spell this pitch on a given letter.

        Returns None if the letter is more than two semitones away.
        """
        offset = normalize(self.pitch - name.pitch)
        if offset > PITCH_CLASS_COUNT // 2:
            offset -= PITCH_CLASS_COUNT
        if not Accidental.DOUBLE_FLAT <= offset <= Accidental.DOUBLE_SHARP:
            return None
        return Note(name, Accidental(offset))

    def __add__(self, semitones: int) -> Note:
        """Transpose up by an interval or a signed number of semitones."""
        if not isinstance(semitones, int):
            return NotImplemented
        delta = normalize(int(semitones))
        return Note.from_pitch(normalize(self.pitch + delta))

    def __sub__(self, semitones: int) -> Note:
        """Transpose down by an interval or a signed number of semitones."""
        if not isinstance(semitones, int):
            return NotImplemented
        return self + -int(semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.pitch == other.pitch

    def __hash__(self) -> int:
        return hash(self.pitch)

    def __str__(self) -> str:
        return f"{self.name.name}{self.accidental.symbol}"

    def __repr__(self) -> str:
        return f"Note({self.name.name}, {self.accidental.name})"

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note like 'C', 'c#', 'Dbb'.

        The letter is case-insensitive; the suffix must be exactly one of
        '', 'b', 'bb', '#', '##'. No whitespace is allowed.

        Raises:
            UnrecognizedNoteError: text does not match the grammar
        """
        if not text:
            raise UnrecognizedNoteError(text)

        name = NoteName.from_letter(text[0])
        accidental = Accidental.from_symbol(text[1:])
        if name is None or accidental is None:
            raise UnrecognizedNoteError(text)

        return cls(name, accidental)


def _build_default_spellings() -> list[Note]:
    spellings: list[Note | None] = [None] * PITCH_CLASS_COUNT
    for name in NoteName:
        spellings[name.pitch] = Note(name)
    for name in NoteName:
        sharp = normalize(name.pitch + 1)
        if spellings[sharp] is None:
            spellings[sharp] = Note(name, Accidental.SHARP)
    assert all(note is not None for note in spellings)
    return [note for note in spellings if note is not None]


# Default spelling per pitch class: A A# B C C# D D# E F F# G G#
_DEFAULT_SPELLINGS: list[Note] = _build_default_spellings()
