"""
Pydantic models for the quiz.

This module provides:
- QuizOptions: Session configuration (mode, seed)
- RoundPrompt: A question put to the player
- RoundResult: The graded outcome of an answer
- ScoreReport: Session summary
"""

from chuk_mcp_theory_quiz.models.quiz import QuizOptions, RoundPrompt, RoundResult, ScoreReport

__all__ = [
    "QuizOptions",
    "RoundPrompt",
    "RoundResult",
    "ScoreReport",
]
