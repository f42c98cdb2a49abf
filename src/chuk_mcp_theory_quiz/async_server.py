#!/usr/bin/env python3
"""
Async Theory Quiz MCP Server using chuk-mcp-server

This server provides MCP tools for music theory drills. The theory engine
spells notes, intervals, chords and scales with correct letter names; the
quiz layer turns them into randomized questions and grades typed answers.

The server provides tools for:
- Parsing and respelling notes
- Transposing by named intervals
- Spelling chords and scales (including modes)
- Playing quiz sessions and reporting scores
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory_quiz.game.session import QuizSessionManager
from chuk_mcp_theory_quiz.tools import register_quiz_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory-quiz")

# Create managers
session_manager = QuizSessionManager()

# Register all tools
theory_tools = register_theory_tools(mcp)
quiz_tools = register_quiz_tools(mcp, session_manager)

# Export tool functions for direct access
theory_parse_note = theory_tools["theory_parse_note"]
theory_enharmonic = theory_tools["theory_enharmonic"]
theory_transpose = theory_tools["theory_transpose"]
theory_spell_chord = theory_tools["theory_spell_chord"]
theory_spell_scale = theory_tools["theory_spell_scale"]
theory_list_catalog = theory_tools["theory_list_catalog"]

quiz_start = quiz_tools["quiz_start"]
quiz_next_round = quiz_tools["quiz_next_round"]
quiz_answer = quiz_tools["quiz_answer"]
quiz_report = quiz_tools["quiz_report"]

logger.info("CHUK Theory Quiz MCP Server initialized")
logger.info(f"  Theory tools: {len(theory_tools)}")
logger.info(f"  Quiz tools: {len(quiz_tools)}")
