"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

ANSWER_SEPARATOR: str = "|"

QUESTIONS_FILE: Path = Path("quiz.txt")
QUESTIONS_PER_GAME: int = 10
MILLIS_PER_QUESTION: int = 10_000
TIMER_TICK_INTERVAL_MS: int = 10
MIN_TIMER_DURATION_MS: int = 1
