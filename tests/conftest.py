"""Shared test fixtures and configuration for pytest."""

import json
from datetime import date
from typing import Any

import pytest
from langchain_core.language_models import FakeListChatModel

from src.models.course import CourseExtractionParams
from src.models.quiz import QuizDifficulty, QuizQuestion, QuizSpec


@pytest.fixture
def quiz_spec() -> QuizSpec:
    """Create a sample QuizSpec for testing."""
    return QuizSpec(
        entity_name="Introduction to Python",
        difficulty=QuizDifficulty.MEDIUM,
        question_count=3,
        time_per_question=45,
    )


@pytest.fixture
def course_params() -> CourseExtractionParams:
    """Create sample CourseExtractionParams for testing."""
    return CourseExtractionParams(
        course_url="https://www.coursera.org/learn/machine-learning",
        hours_per_week=10,
    )


@pytest.fixture
def anchor_date() -> date:
    """Fixed schedule start date."""
    return date(2025, 1, 1)


@pytest.fixture
def quiz_items() -> list[dict[str, Any]]:
    """Well-formed quiz items as the model should return them."""
    return [
        {
            "question": "Which keyword defines a function in Python?",
            "options": ["func", "def", "lambda", "fn"],
            "correctAnswer": "B",
        },
        {
            "question": "What is the type of 3 / 2 in Python 3?",
            "options": ["int", "decimal", "float", "fraction"],
            "correctAnswer": "C) float",
        },
        {
            "question": "Which structure is immutable?",
            "options": ["tuple", "list", "dict", "set"],
            "correctAnswer": "a",
        },
    ]


@pytest.fixture
def raw_quiz_response(quiz_items: list[dict[str, Any]]) -> str:
    """Quiz response wrapped in a markdown fence, as models often return it."""
    return f"```json\n{json.dumps(quiz_items, indent=2)}\n```"


@pytest.fixture
def course_data() -> dict[str, Any]:
    """Well-formed course information as the model should return it."""
    return {
        "name": "Machine Learning",
        "provider": "Coursera",
        "duration": "12 weeks",
        "pace": "10 hours per week",
        "objectives": [
            "Understand supervised learning",
            "Evaluate models",
            "Apply regularization",
        ],
        "milestones": [
            {"name": "Linear regression"},
            {"name": "Neural networks"},
            {"name": "Final project"},
        ],
        "prerequisites": ["Linear algebra", "Basic Python"],
        "mainSkills": ["Python", "NumPy", "Model evaluation"],
    }


@pytest.fixture
def raw_course_response(course_data: dict[str, Any]) -> str:
    """Course response surrounded by prose."""
    return f"Here is the course information:\n{json.dumps(course_data)}\nLet me know!"


@pytest.fixture
def sample_questions() -> list[QuizQuestion]:
    """Normalized questions for scoring tests."""
    return [
        QuizQuestion(
            id=1,
            question="What is 2 + 2?",
            options=["3", "4", "5", "6"],
            correct_answer="B",
        ),
        QuizQuestion(
            id=2,
            question="Who wrote '1984'?",
            options=["George Orwell", "Aldous Huxley", "Ray Bradbury", "H. G. Wells"],
            correct_answer="A",
        ),
        QuizQuestion(
            id=3,
            question="What is the chemical symbol for gold?",
            options=["Ag", "Gd", "Go", "Au"],
            correct_answer="D",
        ),
    ]


@pytest.fixture
def fake_llm_factory():
    """Build a fake chat model that replies with the given responses in order."""

    def _create(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return _create
