"""Single-line text encoding for quiz questions.

File format (one question per line):

    Question text|first accepted answer|second accepted answer|...

The question text comes first, followed by every accepted answer in order.
Neither the text nor the answers may contain the ``|`` separator. The first
answer is the one displayed when a player misses the question.

Example:

    What is the largest organ of the human body?|skin|the skin
"""

from __future__ import annotations

from pathlib import Path

from quizzer.constants.quiz_constants import ANSWER_SEPARATOR
from quizzer.core.errors import FormatError
from quizzer.core.models import Question

_MINIMUM_FIELDS = 2


def encode_question(question: Question) -> str:
    return ANSWER_SEPARATOR.join((question.text, *question.answers))


def decode_question(line: str) -> Question:
    """Decode one encoded line into a :class:`Question`.

    Trailing empty fields are dropped, so ``"text|answer|"`` has one answer
    and ``"text|"`` has none. Raises FormatError when the line has no answers,
    and ValidationError when the decoded fields do not form a valid question.
    """
    fields = line.rstrip("\r\n").split(ANSWER_SEPARATOR)
    while fields and not fields[-1]:
        fields.pop()
    if len(fields) < _MINIMUM_FIELDS:
        raise FormatError(f"Invalid encoded question: '{line}' (does not contain any answers).")
    return Question(text=fields[0], answers=tuple(fields[1:]))


def read_encoded_lines(file_path: Path) -> list[str]:
    """Return every line of a question file, blank lines included."""
    return Path(file_path).read_text(encoding="utf-8").splitlines()


def save_questions_to_file(file_path: Path, questions: list[Question]) -> None:
    """Persist the provided questions to disk, one encoded question per line."""

    if not questions:
        raise ValueError("Cannot export an empty quiz.")

    file_path = Path(file_path).resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    document = "\n".join(encode_question(question) for question in questions) + "\n"
    file_path.write_text(document, encoding="utf-8")
