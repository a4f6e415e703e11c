"""
Pydantic v2 models for challenge deck YAML configuration.

A deck is the question content presented when a challenge token is
caught. Keeping it in data files lets the same controller run any quiz.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator


class TriviaQuestion(BaseModel):
    """
    A single multiple-choice question.

    The option at correct_index is the designated right answer.
    """
    model_config = {"frozen": True}

    prompt: str = Field(
        description="Question text shown to the player",
        min_length=1
    )
    options: List[str] = Field(
        description="Answer options in display order",
        min_length=2
    )
    correct_index: int = Field(
        description="Index into options of the correct answer",
        ge=0
    )

    @model_validator(mode='after')
    def validate_correct_index(self) -> 'TriviaQuestion':
        """Ensure correct_index points at an existing option."""
        if self.correct_index >= len(self.options):
            raise ValueError(
                f"correct_index {self.correct_index} out of range for "
                f"{len(self.options)} options"
            )
        return self


class ChallengeDeck(BaseModel):
    """
    Complete challenge deck from YAML.
    """
    model_config = {"frozen": True}

    id: str = Field(
        description="Unique identifier for the deck"
    )
    name: str = Field(
        description="Human-readable name of the deck"
    )
    description: str = Field(
        default="",
        description="Short description for menus"
    )
    questions: List[TriviaQuestion] = Field(
        description="Questions drawn at random when a token is caught",
        min_length=1
    )
