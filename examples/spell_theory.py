#!/usr/bin/env python3
"""
Example: Spell intervals, chords and scales.

This demonstrates the theory engine the quiz is built on.

Usage:
    python examples/spell_theory.py

Shows that:
1. Notes parse in any case and respell enharmonically
2. Intervals transpose notes up and down
3. Chords are stacked from their root
4. Scales and modes keep one letter per degree (Gb major has a Cb)
"""

from chuk_mcp_theory_quiz.core import (
    CanonicalInterval,
    ChordQuality,
    ModalScale,
    Mode,
    Note,
    Scale,
)


def spelled(notes: list[Note]) -> str:
    return " ".join(str(note) for note in notes)


def main() -> None:
    """Print a tour of the theory engine."""
    print("CHUK Theory Engine Demo")
    print("=" * 40)
    print()

    # Notes and enharmonics
    print("Enharmonics:")
    for text in ["c#", "Eb", "Fb", "B#", "Dbb", "G"]:
        note = Note.parse(text)
        print(f"  {note}: pitch class {note.pitch}, enharmonic {note.enharmonic()}")
    print()

    # Intervals
    root = Note.parse("C")
    print(f"Intervals from {root}:")
    for interval in [
        CanonicalInterval.MINOR_THIRD,
        CanonicalInterval.PERFECT_FIFTH,
        CanonicalInterval.MAJOR_SEVENTH,
    ]:
        up = root + interval
        down = root - interval
        print(f"  {interval.display_name} ({interval.short_name}): up {up}, down {down}")
    print()

    # Chords
    print("Chords on G:")
    for quality in ChordQuality.TRIADS + ChordQuality.SEVENTHS:
        print(f"  G {quality.name}: {spelled(quality.spell(Note.parse('G')))}")
    print()

    # Scales
    print("Scales:")
    for text in ["C", "Bb", "Gb"]:
        for scale in [Scale.MAJOR, Scale.MINOR, Scale.HARMONIC_MINOR]:
            print(f"  {text} {scale.name}: {spelled(scale.spell(Note.parse(text)))}")
    print()

    # Modes
    print("Modes of D major, each from D:")
    for mode in Mode:
        modal = ModalScale(Scale.MAJOR, mode)
        print(f"  D {modal.name}: {spelled(modal.spell(Note.parse('D')))}")
    print()

    print("Done!")


if __name__ == "__main__":
    main()
