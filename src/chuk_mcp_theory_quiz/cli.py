#!/usr/bin/env python3
"""
Interactive theory quiz for the terminal.

Asks one question per line and grades the typed answer. An empty line,
'exit', end of input or Ctrl-C ends the session and prints the final score.

Usage:
    theory-quiz                 # mixed rounds
    theory-quiz scales --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable

from chuk_mcp_theory_quiz.constants import GameMode, RoundOutcome
from chuk_mcp_theory_quiz.game.mode import new_round
from chuk_mcp_theory_quiz.game.scorekeeper import Scorekeeper
from chuk_mcp_theory_quiz.models.quiz import QuizOptions, ScoreReport

logger = logging.getLogger(__name__)

EXIT_WORDS = ("", "exit")


def read_answer(read_line: Callable[[str], str], prompt: str) -> str | None:
    """
    Read one answer line.

    Returns:
        The answer without its trailing whitespace, or None when the player
        wants to stop (empty line, 'exit' or end of input)
    """
    try:
        line = read_line(prompt)
    except EOFError:
        return None

    line = line.rstrip()
    if line in EXIT_WORDS:
        return None
    return line


def run_quiz(
    options: QuizOptions,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    scorekeeper: Scorekeeper | None = None,
) -> ScoreReport:
    """
    Play rounds until the player stops, then print the final report.

    A parse error is shown and the same question is asked again.

    Args:
        options: Mode and seed
        read_line: Prompting line reader (input() by default)
        write: Line writer (print() by default)
        scorekeeper: Scorekeeper to record into (a new one by default)

    Returns:
        The final ScoreReport
    """
    rng = random.Random(options.seed)
    scorekeeper = scorekeeper or Scorekeeper()

    try:
        while True:
            quiz_round = new_round(options.mode, rng)
            prompt = f"{quiz_round.to_prompt().to_text()}: "
            scorekeeper.restart_timer()

            while True:
                answer = read_answer(read_line, prompt)
                if answer is None:
                    return _finish(scorekeeper, write)

                result = quiz_round.evaluate(answer, scorekeeper)
                write(f"  {result.feedback}")
                if result.outcome != RoundOutcome.ERROR:
                    break
    except KeyboardInterrupt:
        logger.debug("Interrupted, reporting final score")
        return _finish(scorekeeper, write)


def _finish(scorekeeper: Scorekeeper, write: Callable[[str], None]) -> ScoreReport:
    with scorekeeper.lock:
        report = scorekeeper.report()
        write("")
        write(report.to_text())
    return report


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Music theory quiz")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=[m.value for m in GameMode],
        default=GameMode.MIXED.value,
        help="Round kinds to play (default: mixed)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible session",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    options = QuizOptions(mode=GameMode(args.mode), seed=args.seed)
    logger.debug(f"Starting quiz with {options!r}")
    run_quiz(options)


if __name__ == "__main__":
    main()
