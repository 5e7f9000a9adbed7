"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quizzer!"
WINDOW_WIDTH: int = 600
WINDOW_HEIGHT: int = 400
ELEMENT_SPACING: int = 25

HOME_TITLE: str = "Quizzer"
HOME_START_BUTTON: str = "Start Quiz"
HOME_HELP_BUTTON: str = "Help"

ANSWER_PLACEHOLDER: str = "Enter your answer"
SUBMIT_BUTTON: str = "Submit"
FINISH_BUTTON: str = "End Game"
RUNNING_SCORE_TEMPLATE: str = "Current score: {score}"
REMAINING_TIME_TEMPLATE: str = "Remaining time: {seconds:.2f}s"

SUMMARY_EXIT_BUTTON: str = "Exit"

TIMER_SAFE_COLOR: str = "#90EE90"
TIMER_DANGER_COLOR: str = "#FF0000"

LOAD_FAILED_TITLE: str = "Could not load quiz"
