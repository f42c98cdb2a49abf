"""
Scorekeeper - timing and tallying of scored answers.

The interactive loop writes results while the interrupt path reads the
final report, so every access goes through a re-entrant lock.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from chuk_mcp_theory_quiz.models.quiz import ScoreReport


class Scorekeeper:
    """
    Records (correct, seconds) for each scored answer.

    Each answer is timed from the previous result, or from creation for
    the first one.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the scorekeeper.

        Args:
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self._clock = clock
        self._lock = threading.RLock()
        self._attempt_start = clock()
        self._results: list[tuple[bool, float]] = []

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding this scorekeeper."""
        return self._lock

    def add_result(self, correct: bool) -> float:
        """
        Record an answer and restart the timer.

        Returns:
            Seconds taken for this answer
        """
        with self._lock:
            now = self._clock()
            seconds = now - self._attempt_start
            self._results.append((correct, seconds))
            self._attempt_start = now
            return seconds

    def restart_timer(self) -> None:
        """Start timing the next answer from now."""
        with self._lock:
            self._attempt_start = self._clock()

    @property
    def attempts(self) -> int:
        """Number of scored answers."""
        with self._lock:
            return len(self._results)

    def report(self) -> ScoreReport:
        """Summarize the session. An empty session reports zeros."""
        with self._lock:
            attempts = len(self._results)
            correct_times = [seconds for correct, seconds in self._results if correct]

        if attempts == 0:
            return ScoreReport()

        correct = len(correct_times)
        return ScoreReport(
            attempts=attempts,
            correct=correct,
            percent_correct=correct / attempts * 100.0,
            average_seconds=sum(correct_times) / correct if correct else 0.0,
        )
