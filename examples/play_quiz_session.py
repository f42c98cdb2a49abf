#!/usr/bin/env python3
"""
Example: Drive a quiz session through the MCP tools.

This plays a short seeded session the way an MCP client would: start,
ask for rounds, answer them, and fetch the final report.

Usage:
    python examples/play_quiz_session.py
"""

import json

from chuk_mcp_theory_quiz.async_server import (
    quiz_answer,
    quiz_next_round,
    quiz_report,
    quiz_start,
    session_manager,
)


async def main() -> None:
    """Play five rounds, answering every other one correctly."""
    print("CHUK Theory Quiz Session")
    print("=" * 40)

    data = json.loads(await quiz_start(player="demo", mode="mixed", seed=2024))
    print(f"Options: {data['options']}")
    print()

    for number in range(5):
        prompt = json.loads(await quiz_next_round(player="demo"))
        print(prompt["text"])

        if number % 2 == 0:
            session = session_manager.get("demo")
            answer = " ".join(str(n) for n in session.current_round.expected())
        else:
            answer = "C"
        print(f"  > {answer}")

        result = json.loads(await quiz_answer(answer=answer, player="demo"))
        print(f"  {result['result']['feedback']}")
    print()

    report = json.loads(await quiz_report(player="demo", end=True))
    print(report["text"])


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
