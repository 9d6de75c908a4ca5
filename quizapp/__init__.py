"""
Quiz App.

A small multiple-choice quiz: a welcome screen, a round of randomly picked
questions with instant feedback, and a results screen.
"""

from .config import Settings, load_settings
from .engine import (
    InvalidTransition,
    OptionVisualState,
    QuizError,
    QuizState,
    QuizStateMachine,
    Screen,
)
from .questions import QUESTIONS, Question

__all__ = [
    "InvalidTransition",
    "OptionVisualState",
    "QUESTIONS",
    "Question",
    "QuizError",
    "QuizState",
    "QuizStateMachine",
    "Screen",
    "Settings",
    "load_settings",
]
