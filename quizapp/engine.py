"""
Quiz state machine.

The screen flow is Start -> Playing -> End -> Playing. Every transition is a
pure function taking the current ``QuizState`` and returning a new one;
``QuizStateMachine`` wraps them for the UI, which keeps the only reference.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .logs import get_logger
from .questions import Question

logger = get_logger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# ERRORS
# ─────────────────────────────────────────────────────────────────────────────
class QuizError(RuntimeError):
    """Base class for quiz errors."""


class InvalidTransition(QuizError):
    """An operation was invoked outside its precondition."""

    def __init__(self, operation: str, screen: "Screen", reason: str) -> None:
        self.operation = operation
        self.screen = screen
        self.reason = reason
        super().__init__(f"{operation}() not allowed on {screen.value} screen: {reason}")


# ─────────────────────────────────────────────────────────────────────────────
# STATE
# ─────────────────────────────────────────────────────────────────────────────
class Screen(str, Enum):
    START   = "start"
    PLAYING = "playing"
    END     = "end"


class OptionVisualState(str, Enum):
    DEFAULT   = "default"
    CORRECT   = "correct"
    INCORRECT = "incorrect"


class QuizState(BaseModel):
    """Read-only snapshot of a quiz session."""

    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.START
    score: int = 0
    questions_answered: int = 0
    current_question_index: Optional[int] = None
    selected_option_index: Optional[int] = None


def initial_state() -> QuizState:
    return QuizState()


# ─────────────────────────────────────────────────────────────────────────────
# PURE HELPERS
# ─────────────────────────────────────────────────────────────────────────────
def pick_random_index(bound: int, rng: random.Random) -> int:
    """Uniform index in ``[0, bound)``."""
    if bound < 1:
        raise ValueError(f"bound must be positive, got {bound}")
    return rng.randrange(bound)


def option_visual_state(
    selected: Optional[int], correct: int, option_index: int
) -> OptionVisualState:
    """How one answer option should be drawn given the current selection."""
    if selected is None:
        return OptionVisualState.DEFAULT
    if option_index == correct:
        return OptionVisualState.CORRECT
    if option_index == selected:
        return OptionVisualState.INCORRECT
    return OptionVisualState.DEFAULT


def score_line(state: QuizState) -> str:
    return f"Score: {state.score} / {state.questions_answered}"


def result_line(state: QuizState) -> str:
    return f"You've got {state.score} answers out of {state.questions_answered} right."


def _reject(operation: str, state: QuizState, reason: str) -> InvalidTransition:
    logger.warning(
        "quiz.invalid_transition",
        operation=operation,
        screen=state.screen.value,
        reason=reason,
    )
    return InvalidTransition(operation, state.screen, reason)


def _require_playing(operation: str, state: QuizState) -> None:
    if state.screen is not Screen.PLAYING:
        raise _reject(operation, state, "quiz is not in progress")


# ─────────────────────────────────────────────────────────────────────────────
# TRANSITIONS
# ─────────────────────────────────────────────────────────────────────────────
def start(state: QuizState, question_count: int, rng: random.Random) -> QuizState:
    """Begin a fresh round. Legal from any screen."""
    return QuizState(
        screen=Screen.PLAYING,
        score=0,
        questions_answered=0,
        current_question_index=pick_random_index(question_count, rng),
        selected_option_index=None,
    )


def select_answer(
    state: QuizState, questions: Sequence[Question], option_index: int
) -> QuizState:
    """
    Record the answer for the current question.

    Only the first selection per question counts; later calls return the
    state unchanged until ``next_question`` clears it.
    """
    _require_playing("select_answer", state)
    if state.selected_option_index is not None:
        return state

    if isinstance(option_index, bool) or not isinstance(option_index, int):
        raise _reject(
            "select_answer",
            state,
            f"option index must be an int, got {type(option_index).__name__}",
        )

    question = questions[state.current_question_index]
    if not 0 <= option_index < len(question.options):
        raise _reject(
            "select_answer",
            state,
            f"option {option_index} out of range for {len(question.options)} options",
        )

    correct = option_index == question.correct_option_index
    return state.model_copy(
        update={
            "selected_option_index": option_index,
            "questions_answered":    state.questions_answered + 1,
            "score":                 state.score + (1 if correct else 0),
        }
    )


def next_question(state: QuizState, question_count: int, rng: random.Random) -> QuizState:
    # The new index may equal the current one.
    _require_playing("next_question", state)
    if state.selected_option_index is None:
        raise _reject("next_question", state, "no answer selected yet")
    return state.model_copy(
        update={
            "current_question_index": pick_random_index(question_count, rng),
            "selected_option_index":  None,
        }
    )


def finish(state: QuizState) -> QuizState:
    _require_playing("finish", state)
    return state.model_copy(
        update={
            "screen":                 Screen.END,
            "current_question_index": None,
            "selected_option_index":  None,
        }
    )


def restart(state: QuizState, question_count: int, rng: random.Random) -> QuizState:
    if state.screen is not Screen.END:
        raise _reject("restart", state, "quiz has not finished")
    return start(state, question_count, rng)


# ─────────────────────────────────────────────────────────────────────────────
# MACHINE
# ─────────────────────────────────────────────────────────────────────────────
class QuizStateMachine:
    """Holds the question set, the random source and the current state."""

    def __init__(self, questions: Sequence[Question], rng: Optional[random.Random] = None):
        if not questions:
            raise ValueError("a quiz needs at least one question")
        self.questions = tuple(questions)
        self.rng = rng if rng is not None else random.Random()
        self.state = initial_state()

    @property
    def current_question(self) -> Optional[Question]:
        if self.state.screen is not Screen.PLAYING:
            return None
        return self.questions[self.state.current_question_index]

    @property
    def can_go_next(self) -> bool:
        return self.state.selected_option_index is not None

    def option_states(self) -> List[OptionVisualState]:
        question = self.current_question
        if question is None:
            return []
        return [
            option_visual_state(
                self.state.selected_option_index, question.correct_option_index, i
            )
            for i in range(len(question.options))
        ]

    def start(self) -> QuizState:
        self.state = start(self.state, len(self.questions), self.rng)
        logger.info("quiz.started", question_index=self.state.current_question_index)
        return self.state

    def select_answer(self, option_index: int) -> QuizState:
        previous = self.state
        self.state = select_answer(previous, self.questions, option_index)
        if self.state is previous:
            logger.debug("quiz.answer_ignored", option_index=option_index)
        else:
            logger.info(
                "quiz.answer_selected",
                option_index=option_index,
                correct=self.state.score > previous.score,
                score=self.state.score,
                answered=self.state.questions_answered,
            )
        return self.state

    def next_question(self) -> QuizState:
        self.state = next_question(self.state, len(self.questions), self.rng)
        logger.info("quiz.next_question", question_index=self.state.current_question_index)
        return self.state

    def finish(self) -> QuizState:
        self.state = finish(self.state)
        logger.info(
            "quiz.finished",
            score=self.state.score,
            answered=self.state.questions_answered,
        )
        return self.state

    def restart(self) -> QuizState:
        self.state = restart(self.state, len(self.questions), self.rng)
        logger.info("quiz.restarted", question_index=self.state.current_question_index)
        return self.state
