"""Question model and the built-in question bank."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Question(BaseModel):
    """Single multiple-choice item."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    options: Tuple[str, ...] = Field(min_length=2)
    correct_option_index: int = Field(ge=0)

    @model_validator(mode="after")
    def correct_index_in_range(self) -> "Question":
        if self.correct_option_index >= len(self.options):
            raise ValueError(
                f"correct_option_index {self.correct_option_index} "
                f"out of range for {len(self.options)} options"
            )
        return self


QUESTIONS: Tuple[Question, ...] = (
    Question(
        prompt="Capital of France?",
        options=("Paris", "London", "Berlin"),
        correct_option_index=0,
    ),
    Question(
        prompt="Capital of Serbia?",
        options=("Madrid", "Bratislava", "Belgrade"),
        correct_option_index=2,
    ),
    Question(
        prompt="Who was the first programmer?",
        options=("Mark Zuckerberg", "Tim Apple", "Ada Lovelace"),
        correct_option_index=2,
    ),
)
