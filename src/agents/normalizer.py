"""Normalizer nodes - Turn raw model text into validated records."""

import logging
from typing import Any

from src.graph.state import GenerationState
from src.pipeline.errors import MalformedAIResponse, MissingRequiredFields
from src.pipeline.normalize import normalize_course_response, normalize_quiz_response

logger = logging.getLogger(__name__)


def normalize_quiz(state: GenerationState) -> dict[str, Any]:
    """
    Quiz normalizer node: Parse and coerce the model's quiz questions.

    Args:
        state: Current state containing quiz_spec and raw_response

    Returns:
        Dictionary with updated state containing questions
    """
    spec = state["quiz_spec"]
    try:
        questions = normalize_quiz_response(state["raw_response"], spec)
    except MalformedAIResponse as e:
        logger.error("Could not parse quiz response: %s", e.preview())
        raise

    defaulted = sum(1 for q in questions if q.answer_defaulted)
    if defaulted:
        logger.warning(
            "%d of %d questions had no readable answer and default to 'A'",
            defaulted,
            len(questions),
        )
    if len(questions) < spec.effective_question_count:
        logger.warning(
            "Model returned %d of %d requested questions",
            len(questions),
            spec.effective_question_count,
        )

    return {"questions": questions}


def normalize_course(state: GenerationState) -> dict[str, Any]:
    """
    Course normalizer node: Validate course information and schedule milestones.

    Args:
        state: Current state containing anchor_date and raw_response

    Returns:
        Dictionary with updated state containing course_info
    """
    try:
        course_info = normalize_course_response(
            state["raw_response"], state["anchor_date"]
        )
    except MalformedAIResponse as e:
        logger.error("Could not parse course response: %s", e.preview())
        raise
    except MissingRequiredFields as e:
        logger.error("Course response incomplete: %s", ", ".join(e.missing))
        raise

    return {"course_info": course_info}
