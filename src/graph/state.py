"""State carried through the generation workflows."""

from datetime import date
from typing import TypedDict

from src.models.course import CourseExtractionParams, CourseInfo
from src.models.quiz import QuizQuestion, QuizSpec


class GenerationState(TypedDict, total=False):
    """
    Request-scoped state for one quiz or course generation run.

    Exactly one of quiz_spec / course_params is set; the matching output
    (questions / course_info) is filled by the normalizer node.
    """

    # Inputs
    quiz_spec: QuizSpec | None
    course_params: CourseExtractionParams | None
    anchor_date: date | None

    # Intermediate
    prompt: str | None
    raw_response: str | None

    # Outputs
    questions: list[QuizQuestion] | None
    course_info: CourseInfo | None


def create_quiz_state(spec: QuizSpec) -> GenerationState:
    """Initial state for a quiz generation run."""
    return {
        "quiz_spec": spec,
        "course_params": None,
        "anchor_date": None,
        "prompt": None,
        "raw_response": None,
        "questions": None,
        "course_info": None,
    }


def create_course_state(
    params: CourseExtractionParams, anchor_date: date
) -> GenerationState:
    """Initial state for a course extraction run."""
    return {
        "quiz_spec": None,
        "course_params": params,
        "anchor_date": anchor_date,
        "prompt": None,
        "raw_response": None,
        "questions": None,
        "course_info": None,
    }
