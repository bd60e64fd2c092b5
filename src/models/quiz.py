"""Pydantic models for quiz generation requests and normalized questions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Hard cap on questions per generated quiz, bounds model cost and latency
MAX_QUIZ_QUESTIONS = 30

DEFAULT_TIME_PER_QUESTION = 60

ANSWER_CODES = ("A", "B", "C", "D")


class QuizDifficulty(str, Enum):
    """Quiz difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuizSpec(BaseModel):
    """Parameters for one quiz generation request."""

    entity_name: str = Field(
        ...,
        min_length=1,
        description="Name of the course the quiz is about",
    )
    difficulty: QuizDifficulty = Field(
        default=QuizDifficulty.MEDIUM,
        description="Requested difficulty level",
    )
    question_count: int = Field(
        ...,
        ge=1,
        description="Number of questions requested (clamped to MAX_QUIZ_QUESTIONS)",
    )
    time_per_question: int = Field(
        default=DEFAULT_TIME_PER_QUESTION,
        ge=1,
        description="Seconds allowed per question",
    )

    @field_validator("entity_name")
    @classmethod
    def validate_entity_name(cls, v: str) -> str:
        """Strip the name and reject blank values."""
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Entity name cannot be blank")
        return cleaned

    @property
    def effective_question_count(self) -> int:
        """Question count after clamping to MAX_QUIZ_QUESTIONS."""
        return min(self.question_count, MAX_QUIZ_QUESTIONS)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "entity_name": "Introduction to Machine Learning",
                "difficulty": "medium",
                "question_count": 10,
                "time_per_question": 60,
            }
        },
    )


class QuizQuestion(BaseModel):
    """A normalized multiple choice question."""

    id: int = Field(..., ge=1, description="1-based position in the quiz")
    question: str = Field(..., min_length=1, description="The question text")
    options: list[str] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="Exactly four answer options, in A-D order",
    )
    correct_answer: str = Field(
        ...,
        pattern="^[A-D]$",
        description="Canonical answer code (A, B, C, or D)",
    )
    time_per_question: int = Field(
        default=DEFAULT_TIME_PER_QUESTION,
        ge=1,
        description="Seconds allowed for this question",
    )
    answer_defaulted: bool = Field(
        default=False,
        description="True when the answer could not be read and fell back to 'A'",
    )

    @property
    def correct_option(self) -> str:
        """Text of the option marked correct."""
        return self.options[ANSWER_CODES.index(self.correct_answer)]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "question": "What is the capital of France?",
                "options": ["London", "Paris", "Berlin", "Madrid"],
                "correctAnswer": "B",
                "timePerQuestion": 60,
                "answerDefaulted": False,
            }
        },
    )
