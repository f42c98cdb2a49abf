"""
Quiz tools - MCP tools for playing quiz sessions.

A player starts a session, asks for a round, answers it, and asks for a
report. Sessions are kept per player name.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory_quiz.constants import ErrorMessages
from chuk_mcp_theory_quiz.game.mode import parse_mode
from chuk_mcp_theory_quiz.game.session import QuizSessionManager
from chuk_mcp_theory_quiz.models.quiz import QuizOptions

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_quiz_tools(
    mcp: ChukMCPServer,
    manager: QuizSessionManager,
) -> dict[str, Any]:
    """
    Register quiz tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The quiz session manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def quiz_start(
        player: str = "default",
        mode: str = "mixed",
        seed: int | None = None,
    ) -> str:
        """
        Start a quiz session.

        Replaces any session the player already has.

        Args:
            player: Player name
            mode: Round kinds to play ('mixed', 'intervals', 'chords', 'scales')
            seed: Optional random seed for a reproducible session

        Returns:
            JSON string with the session options

        Example:
            quiz_start(player="sam", mode="chords")
        """
        try:
            options = QuizOptions(mode=parse_mode(mode), seed=seed)
            manager.start(player, options)
            return json.dumps(
                {
                    "status": "success",
                    "player": player,
                    "options": options.model_dump(mode="json"),
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to start quiz")
            return json.dumps({"status": "error", "message": str(e)})

    tools["quiz_start"] = quiz_start

    @mcp.tool  # type: ignore[arg-type]
    async def quiz_next_round(player: str = "default") -> str:
        """
        Get the next question.

        Args:
            player: Player name

        Returns:
            JSON string with the round prompt

        Example:
            quiz_next_round(player="sam")
        """
        try:
            session = manager.get(player)
            if session is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_SESSION})

            prompt = session.next_round()
            return json.dumps(
                {
                    "status": "success",
                    "round": prompt.model_dump(mode="json"),
                    "text": prompt.to_text(),
                }
            )
        except Exception as e:
            logger.exception("Failed to generate round")
            return json.dumps({"status": "error", "message": str(e)})

    tools["quiz_next_round"] = quiz_next_round

    @mcp.tool  # type: ignore[arg-type]
    async def quiz_answer(answer: str, player: str = "default") -> str:
        """
        Answer the open question.

        Interval rounds take one note; chord and scale rounds take notes
        separated by spaces (e.g., 'C E G'). Any enharmonic spelling counts.
        An answer that does not parse leaves the round open.

        Args:
            answer: The answer text
            player: Player name

        Returns:
            JSON string with the graded result

        Example:
            quiz_answer(answer="F# A C#", player="sam")
        """
        try:
            session = manager.get(player)
            if session is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_SESSION})
            if session.current_round is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_ROUND})

            result = session.answer(answer)
            return json.dumps(
                {
                    "status": "success",
                    "result": result.model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to grade answer")
            return json.dumps({"status": "error", "message": str(e)})

    tools["quiz_answer"] = quiz_answer

    @mcp.tool  # type: ignore[arg-type]
    async def quiz_report(player: str = "default", end: bool = False) -> str:
        """
        Get a player's score.

        Args:
            player: Player name
            end: Also end the session

        Returns:
            JSON string with the score report

        Example:
            quiz_report(player="sam", end=True)
        """
        try:
            if end:
                report = manager.end(player)
            else:
                session = manager.get(player)
                report = session.report() if session is not None else None

            if report is None:
                return json.dumps({"status": "error", "message": ErrorMessages.NO_SESSION})

            return json.dumps(
                {
                    "status": "success",
                    "report": report.model_dump(mode="json"),
                    "text": report.to_text(),
                }
            )
        except Exception as e:
            logger.exception("Failed to report score")
            return json.dumps({"status": "error", "message": str(e)})

    tools["quiz_report"] = quiz_report

    return tools
