"""
Core music theory engine.

These are the invariants everything else composes on:
- NoteName: The seven letter names with fixed pitch offsets
- Accidental: Semitone modifiers (bb, b, natural, #, ##)
- Note: A spelled pitch class; equal when enharmonic
- CanonicalInterval: Named semitone distances (0-21, no 18)
- ChordQuality: Stacked intervals spelled from a root
- Scale: Step patterns spelled from a root, rotatable into modes
- Mode / ModalScale: A scale rotated to one of its seven modes
"""

from chuk_mcp_theory_quiz.core.chord import ChordQuality
from chuk_mcp_theory_quiz.core.interval import CanonicalInterval
from chuk_mcp_theory_quiz.core.note import Note, UnrecognizedNoteError
from chuk_mcp_theory_quiz.core.pitch import Accidental, NoteName, normalize
from chuk_mcp_theory_quiz.core.scale import ModalScale, Mode, Scale

__all__ = [
    # Pitch
    "NoteName",
    "Accidental",
    "normalize",
    # Note
    "Note",
    "UnrecognizedNoteError",
    # Interval
    "CanonicalInterval",
    # Chord
    "ChordQuality",
    # Scale
    "Scale",
    "Mode",
    "ModalScale",
]
