"""
MCP tool implementations.

Tools are organized by domain:
- theory - Note parsing, transposition, chord and scale spelling
- quiz - Session lifecycle, rounds and scoring
"""

from chuk_mcp_theory_quiz.tools.quiz import register_quiz_tools
from chuk_mcp_theory_quiz.tools.theory import register_theory_tools

__all__ = [
    "register_quiz_tools",
    "register_theory_tools",
]
