"""Entry points of the response normalization pipeline.

Both functions are pure: they take the raw model text plus request parameters
and return validated records. Model calls, retries and persistence belong to
the caller.
"""

from datetime import date

from src.models.course import CourseInfo
from src.models.quiz import QuizQuestion, QuizSpec

from .coercion import (
    coerce_question,
    coerce_string_list,
    milestone_names,
    validate_course_fields,
)
from .extractor import extract_json
from .sanitizer import sanitize
from .scheduler import parse_duration_weeks, schedule_milestones


def normalize_quiz_response(raw_text: str, spec: QuizSpec) -> list[QuizQuestion]:
    """
    Turn a raw quiz response into normalized questions.

    Question-level defects are coerced rather than raised. The result holds at
    most spec.effective_question_count questions and never more than the model
    returned.

    Args:
        raw_text: Untrusted model output
        spec: The quiz request the prompt was built from

    Returns:
        Normalized questions with sequential ids

    Raises:
        MalformedAIResponse: If no JSON array can be recovered
    """
    items = extract_json(sanitize(raw_text), "array")
    limit = spec.effective_question_count
    return [
        QuizQuestion(**coerce_question(item, position, spec.time_per_question))
        for position, item in enumerate(items[:limit], start=1)
    ]


def normalize_course_response(raw_text: str, anchor_date: date) -> CourseInfo:
    """
    Turn a raw course extraction response into validated course information.

    Args:
        raw_text: Untrusted model output
        anchor_date: Date the milestone schedule starts from

    Returns:
        Course information with milestone deadlines

    Raises:
        MalformedAIResponse: If no JSON object can be recovered
        MissingRequiredFields: If required keys are absent or empty
    """
    data = extract_json(sanitize(raw_text), "object")
    validate_course_fields(data)

    duration = str(data["duration"]).strip()
    milestones = schedule_milestones(
        milestone_names(data["milestones"]),
        parse_duration_weeks(duration),
        anchor_date,
    )

    return CourseInfo(
        name=str(data["name"]).strip(),
        provider=str(data["provider"]).strip(),
        duration=duration,
        pace=str(data["pace"]).strip(),
        objectives=coerce_string_list(data["objectives"]),
        prerequisites=coerce_string_list(data["prerequisites"]),
        main_skills=coerce_string_list(data["mainSkills"]),
        milestones=milestones,
    )
