"""
Quiz Session - drives rounds for a single player.

Holds the random source, the game mode, the scorekeeper and the round
currently awaiting an answer. Used by the MCP quiz tools, which ask for a
round and submit an answer in separate calls.
"""

from __future__ import annotations

import logging
import random

from chuk_mcp_theory_quiz.constants import ErrorMessages, RoundOutcome
from chuk_mcp_theory_quiz.game.mode import new_round
from chuk_mcp_theory_quiz.game.rounds import Round
from chuk_mcp_theory_quiz.game.scorekeeper import Scorekeeper
from chuk_mcp_theory_quiz.models.quiz import QuizOptions, RoundPrompt, RoundResult, ScoreReport

logger = logging.getLogger(__name__)


class QuizSession:
    """
    A stateful quiz.

    A round stays open until it gets a scored answer; an answer that fails
    to parse leaves it open for another try.
    """

    def __init__(self, options: QuizOptions | None = None, scorekeeper: Scorekeeper | None = None):
        """
        Initialize the session.

        Args:
            options: Mode and seed (defaults to a mixed, unseeded session)
            scorekeeper: Scorekeeper to record into (a new one by default)
        """
        self.options = options or QuizOptions()
        self.rng = random.Random(self.options.seed)
        self.scorekeeper = scorekeeper or Scorekeeper()
        self._current: Round | None = None

    @property
    def current_round(self) -> Round | None:
        """The round awaiting an answer, if any."""
        return self._current

    def next_round(self) -> RoundPrompt:
        """Generate a new round, replacing any open one."""
        self._current = new_round(self.options.mode, self.rng)
        self.scorekeeper.restart_timer()
        prompt = self._current.to_prompt()
        logger.debug(f"New round: {prompt.to_text()}")
        return prompt

    def answer(self, text: str) -> RoundResult:
        """
        Grade an answer against the open round.

        Raises:
            ValueError: there is no open round
        """
        if self._current is None:
            raise ValueError(ErrorMessages.NO_ROUND)

        result = self._current.evaluate(text, self.scorekeeper)
        if result.outcome != RoundOutcome.ERROR:
            self._current = None
        return result

    def report(self) -> ScoreReport:
        """Summarize the session so far."""
        return self.scorekeeper.report()


class QuizSessionManager:
    """
    Keeps quiz sessions by player name.

    Sessions live in memory only; scores are never persisted.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, QuizSession] = {}

    def start(self, player: str, options: QuizOptions | None = None) -> QuizSession:
        """
        Start a new session for a player, replacing any existing one.

        Args:
            player: Player name
            options: Mode and seed

        Returns:
            The new QuizSession
        """
        session = QuizSession(options)
        self._sessions[player] = session
        logger.info(f"Started {session.options.mode.value} quiz for {player!r}")
        return session

    def get(self, player: str) -> QuizSession | None:
        """Get a player's session, or None if they have not started one."""
        return self._sessions.get(player)

    def end(self, player: str) -> ScoreReport | None:
        """End a player's session and return its final report."""
        session = self._sessions.pop(player, None)
        if session is None:
            return None
        return session.report()

    def players(self) -> list[str]:
        """Names of players with an active session."""
        return sorted(self._sessions)
