from __future__ import annotations

import pytest
from pydantic import ValidationError

from quizapp.questions import QUESTIONS, Question


def test_bank_holds_three_valid_questions():
    assert len(QUESTIONS) == 3
    for question in QUESTIONS:
        assert len(question.options) >= 2
        assert 0 <= question.correct_option_index < len(question.options)


def test_bank_answers():
    answers = {q.prompt: q.options[q.correct_option_index] for q in QUESTIONS}
    assert answers == {
        "Capital of France?": "Paris",
        "Capital of Serbia?": "Belgrade",
        "Who was the first programmer?": "Ada Lovelace",
    }


def test_options_are_coerced_to_tuple():
    question = Question(prompt="2 + 2?", options=["3", "4"], correct_option_index=1)
    assert question.options == ("3", "4")


def test_question_is_frozen():
    with pytest.raises(ValidationError):
        QUESTIONS[0].correct_option_index = 1


@pytest.mark.parametrize(
    "options, correct",
    [
        (("only",), 0),
        ((), 0),
        (("a", "b"), 2),
        (("a", "b"), -1),
    ],
)
def test_invalid_questions_are_rejected(options, correct):
    with pytest.raises(ValidationError):
        Question(prompt="?", options=options, correct_option_index=correct)
