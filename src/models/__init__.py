"""Data models for quiz generation and course extraction."""

from .course import CourseExtractionParams, CourseInfo, Milestone
from .quiz import (
    ANSWER_CODES,
    MAX_QUIZ_QUESTIONS,
    QuizDifficulty,
    QuizQuestion,
    QuizSpec,
)
from .results import AnsweredQuestion, QuizResult, QuizStats
from .envelope import ServiceResponse, status_code_for

__all__ = [
    "ANSWER_CODES",
    "MAX_QUIZ_QUESTIONS",
    "QuizDifficulty",
    "QuizSpec",
    "QuizQuestion",
    "CourseExtractionParams",
    "CourseInfo",
    "Milestone",
    "AnsweredQuestion",
    "QuizResult",
    "QuizStats",
    "ServiceResponse",
    "status_code_for",
]
