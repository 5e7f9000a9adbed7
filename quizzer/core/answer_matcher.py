"""Fuzzy acceptance of typed answers.

An answer matches a known answer when the known answer appears inside it and
makes up at least half (rounded down) of what was typed. Comparison ignores
case and surrounding whitespace. "the skin" is accepted for "skin", and so is
"not skin"; the heuristic is intentionally loose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quizzer.core.models import Question


def _normalize(answer: str) -> str:
    return answer.lower().strip()


def matches(known_answer: str, given_answer: str) -> bool:
    """Return True if ``given_answer`` is close enough to ``known_answer``."""
    known = _normalize(known_answer)
    given = _normalize(given_answer)
    if known not in given:
        return False
    return len(known) >= len(given) // 2


def is_accepted(question: Question, given_answer: str) -> bool:
    """Return True if ``given_answer`` matches any of the question's answers.

    Empty accepted answers (from a line such as ``"text||answer"``) never match.
    """
    return any(
        matches(known, given_answer) for known in question.answers if known.strip()
    )
