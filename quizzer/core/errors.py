"""Exceptions raised by the quiz domain core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for quiz domain errors."""


class ValidationError(QuizError, ValueError):
    """Raised when a question is constructed from invalid inputs."""


class FormatError(QuizError, ValueError):
    """Raised when an encoded question line cannot be decoded."""


class NotOnQuizError(QuizError, LookupError):
    """Raised when an operation references a question that is not on the quiz."""
