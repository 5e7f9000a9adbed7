"""Static metadata describing Quizzer."""

APP_NAME = "Quizzer"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "Quizzer is a small desktop quiz game built with Qt. Each question is answered "
    "against the clock and typed answers are matched loosely, so 'the skin' counts for 'skin'."
)

HELP_TEXT = (
    "Questions are read from a plain text file with one question per line. "
    "Write the question first, then every accepted answer, separated by '|':\n\n"
    "What is the largest organ of the human body?|skin|the skin\n"
    "What is the capital of France?|paris"
)
