"""
Theory tools - MCP tools over the core engine.

Stateless lookups: parse and respell notes, transpose by intervals,
spell chords and scales, list the catalogs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory_quiz.core import (
    CanonicalInterval,
    ChordQuality,
    ModalScale,
    Mode,
    Note,
    Scale,
)
from chuk_mcp_theory_quiz.game.catalog import (
    STANDARD_CHORD_QUALITIES,
    STANDARD_INTERVALS,
    STANDARD_NOTES,
    STANDARD_SCALES,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _note_dict(note: Note) -> dict[str, Any]:
    return {
        "note": str(note),
        "letter": note.name.name,
        "accidental": note.accidental.symbol,
        "pitch_class": note.pitch,
    }


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_parse_note(text: str) -> str:
        """
        Parse a note name.

        Accepts a letter A-G (any case) followed by '', 'b', 'bb', '#' or '##'.

        Args:
            text: Note text (e.g., 'C', 'f#', 'Dbb')

        Returns:
            JSON string with the spelled note and its pitch class

        Example:
            theory_parse_note(text="Eb")
        """
        try:
            note = Note.parse(text)
            return json.dumps({"status": "success", **_note_dict(note)})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_parse_note"] = theory_parse_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_enharmonic(note: str) -> str:
        """
        Respell a note enharmonically.

        D# becomes Eb, Eb becomes D#, naturals stay as they are.

        Args:
            note: Note text (e.g., 'D#')

        Returns:
            JSON string with the original and respelled note

        Example:
            theory_enharmonic(note="Gb")
        """
        try:
            parsed = Note.parse(note)
            return json.dumps(
                {
                    "status": "success",
                    "note": str(parsed),
                    "enharmonic": str(parsed.enharmonic()),
                    "pitch_class": parsed.pitch,
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to respell note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_enharmonic"] = theory_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(note: str, interval: str, descending: bool = False) -> str:
        """
        Transpose a note by an interval.

        Args:
            note: Note text (e.g., 'C')
            interval: Interval name (e.g., 'Major 3', 'M3', 'perfect_fifth')
            descending: Transpose down instead of up

        Returns:
            JSON string with the resulting note

        Example:
            theory_transpose(note="A", interval="Minor 3", descending=True)
        """
        try:
            root = Note.parse(note)
            step = CanonicalInterval.parse(interval)
            result = root - step if descending else root + step
            return json.dumps(
                {
                    "status": "success",
                    "root": str(root),
                    "interval": step.display_name,
                    "direction": "down" if descending else "up",
                    "result": str(result),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_spell_chord(root: str, quality: str) -> str:
        """
        Spell a chord.

        Args:
            root: Root note (e.g., 'C')
            quality: Chord quality (e.g., 'Maj', 'Min7', 'Min7(b5)', 'Dim(Maj7)')

        Returns:
            JSON string with the chord tones

        Example:
            theory_spell_chord(root="G", quality="Dom7")
        """
        try:
            root_note = Note.parse(root)
            chord = ChordQuality.parse(quality)
            return json.dumps(
                {
                    "status": "success",
                    "root": str(root_note),
                    "quality": chord.name,
                    "intervals": [i.display_name for i in chord.intervals],
                    "notes": [str(n) for n in chord.spell(root_note)],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_spell_chord"] = theory_spell_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_spell_scale(root: str, scale: str = "Major", mode: str | None = None) -> str:
        """
        Spell a scale, optionally in one of its modes.

        Args:
            root: Root note (e.g., 'F#')
            scale: Scale name ('Major', 'Minor', 'Harmonic Minor')
            mode: Optional mode ('Ionian' ... 'Locrian') to rotate the scale into

        Returns:
            JSON string with the scale notes

        Example:
            theory_spell_scale(root="F#", scale="Major", mode="Aeolian")
        """
        try:
            root_note = Note.parse(root)
            base = Scale.parse(scale)
            spelled: Scale | ModalScale = base
            if mode is not None:
                spelled = ModalScale(base, Mode.parse(mode))
            return json.dumps(
                {
                    "status": "success",
                    "root": str(root_note),
                    "scale": base.name,
                    "mode": spelled.name if isinstance(spelled, ModalScale) else None,
                    "notes": [str(n) for n in spelled.spell(root_note)],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to spell scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_spell_scale"] = theory_spell_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_catalog() -> str:
        """
        List the notes, intervals, chords, scales and modes the quiz uses.

        Returns:
            JSON string with the standard pools and the full chord catalog

        Example:
            theory_list_catalog()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "notes": [str(n) for n in STANDARD_NOTES],
                    "intervals": [
                        {"name": i.display_name, "short": i.short_name, "semitones": i.semitones}
                        for i in STANDARD_INTERVALS
                    ],
                    "quiz_chords": [q.name for q in STANDARD_CHORD_QUALITIES],
                    "chords": [
                        {"name": q.name, "intervals": [i.semitones for i in q.intervals]}
                        for q in ChordQuality.TRIADS + ChordQuality.SEVENTHS
                    ],
                    "scales": [
                        {"name": s.name, "steps": [i.semitones for i in s.intervals]}
                        for s in STANDARD_SCALES
                    ],
                    "modes": [m.display_name for m in Mode],
                }
            )
        except Exception as e:
            logger.exception("Failed to list catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_catalog"] = theory_list_catalog

    return tools
