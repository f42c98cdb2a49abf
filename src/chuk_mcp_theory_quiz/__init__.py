"""
CHUK Theory Quiz - music theory drills with a correctly spelled engine.

- core: notes, accidentals, intervals, chords, scales and modes
- game: quiz rounds, scoring and sessions
- tools: MCP tools over both
"""

__version__ = "0.1.0"
