"""Models for scored quiz attempts and aggregate statistics."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .quiz import QuizDifficulty


class AnsweredQuestion(BaseModel):
    """A question together with the learner's answer."""

    question: str
    correct_answer: str = Field(..., pattern="^[A-D]$")
    user_answer: str | None = None
    is_correct: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuizResult(BaseModel):
    """Outcome of one quiz attempt."""

    course_name: str | None = None
    difficulty: QuizDifficulty = QuizDifficulty.MEDIUM
    questions: list[AnsweredQuestion] = Field(default_factory=list)
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=1)
    time_spent: int | None = Field(None, ge=0, description="Seconds spent on the quiz")
    date: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def percentage_score(self) -> float:
        """Score as a percentage of all questions."""
        return self.score / self.total_questions * 100

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuizStats(BaseModel):
    """Aggregate statistics over a learner's quiz results."""

    total_quizzes: int = Field(default=0, ge=0)
    average_score: int = Field(default=0, ge=0, le=100)
    total_questions: int = Field(default=0, ge=0)
    total_correct: int = Field(default=0, ge=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
