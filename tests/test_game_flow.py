"""Plays a complete game headlessly, the way the desktop shell drives the core."""

from threading import Event

from quizzer.core.question_codec import save_questions_to_file
from quizzer.core.quiz import Quiz
from quizzer.core.services.countdown_timer import CountdownTimer, TimerState
from quizzer.core.summary import summarize_quiz


def test_full_game(tmp_path, questions):
    path = tmp_path / "quiz.txt"
    save_questions_to_file(path, questions)
    quiz = Quiz.from_questions_file(path, max_questions=10, shuffle=False)
    assert quiz.get_question_count() == 3

    expired = Event()
    timer = CountdownTimer(
        30,
        on_tick=lambda remaining_ms: None,
        on_expire=expired.set,
        tick_interval_ms=10,
    )

    typed = {
        questions[0].text: "it is the skin",
        questions[1].text: None,  # player lets the clock run out
        questions[2].text: "Eight",
    }

    while (question := quiz.get_next_question()) is not None:
        expired.clear()
        timer.restart()
        answer = typed[question.text]
        if answer is None:
            assert expired.wait(timeout=5)
            answer = ""
        else:
            timer.cancel()
        quiz.answer_question(question, answer)

    timer.join(timeout=5)
    assert timer.state in (TimerState.CANCELLED, TimerState.EXPIRED)

    summary = summarize_quiz(quiz)
    assert summary.score_line() == "2/3 Correctly Answered"
    assert [entry.question_text for entry in summary.missed] == [questions[1].text]
    assert summary.missed[0].given_answer == ""
    assert summary.missed[0].correct_answer == "paris"

    quiz.reset()
    assert quiz.get_answered_count() == 0
    assert quiz.get_next_question() == questions[0]
