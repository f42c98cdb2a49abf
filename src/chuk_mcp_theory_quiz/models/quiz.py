"""
Quiz models - options, prompts, results and score reports.

These are the serializable shapes that cross the session boundary:
the interactive loop prints them, the MCP tools dump them to JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_theory_quiz.constants import GameMode, RoundKind, RoundOutcome


class QuizOptions(BaseModel):
    """Session configuration."""

    mode: GameMode = Field(GameMode.MIXED, description="Which kinds of round to play")
    seed: int | None = Field(None, description="Random seed for a reproducible session")

    model_config = {"frozen": True}


class RoundPrompt(BaseModel):
    """A question put to the player."""

    kind: RoundKind = Field(..., description="Round kind")
    label: str = Field(..., description="Round label (e.g., 'Chord')")
    prompt: str = Field(..., description="Question text (e.g., 'C Maj7')")
    note_count: int = Field(..., gt=0, description="Number of notes the answer should have")

    model_config = {"frozen": True}

    def to_text(self) -> str:
        """Render as '<Label> - <prompt>'."""
        return f"{self.label} - {self.prompt}"


class RoundResult(BaseModel):
    """The graded outcome of one answer."""

    outcome: RoundOutcome = Field(..., description="Correct, incorrect or error")
    feedback: str = Field(..., description="Feedback text for the player")
    expected: list[str] = Field(default_factory=list, description="Expected notes, spelled")
    seconds: float | None = Field(None, ge=0, description="Time taken (scored answers only)")

    model_config = {"frozen": True}

    @property
    def correct(self) -> bool:
        """True if the answer was right."""
        return self.outcome == RoundOutcome.CORRECT


class ScoreReport(BaseModel):
    """Summary of a session's scored answers."""

    attempts: int = Field(0, ge=0, description="Scored answers")
    correct: int = Field(0, ge=0, description="Correct answers")
    percent_correct: float = Field(0.0, ge=0, le=100, description="Share of correct answers")
    average_seconds: float = Field(
        0.0, ge=0, description="Average time per correct answer, in seconds"
    )

    model_config = {"frozen": True}

    def to_text(self) -> str:
        """Render the final-results block."""
        return "\n".join(
            [
                "Final results:",
                f"  {self.percent_correct:.1f}% correct.",
                f"  {self.average_seconds:.2f} sec. average.",
            ]
        )
