"""Field validation and coercion of parsed model output."""

import re
from typing import Any

from src.models.quiz import ANSWER_CODES

from .errors import MissingRequiredFields

PLACEHOLDER_OPTIONS = [f"Option {code}" for code in ANSWER_CODES]

DEFAULT_ANSWER = "A"

# "C", "C) Paris", "(c)", "Answer: C", "Option B - text"; the letter must not
# start a longer word so "COMPLETELY INVALID" is not read as "C"
_ANSWER_PATTERN = re.compile(
    r"^(?:(?:CORRECT\s+)?(?:ANSWER|OPTION)\s*[:\-]?\s*)?\(?([A-D])(?![A-Z0-9])"
)

REQUIRED_COURSE_FIELDS = (
    "name",
    "provider",
    "duration",
    "pace",
    "objectives",
    "milestones",
    "prerequisites",
    "mainSkills",
)

# Lists that may be present but empty; a course still needs milestones to schedule
EMPTY_LIST_ALLOWED = ("objectives", "prerequisites", "mainSkills")


def normalize_answer_code(value: Any) -> str | None:
    """
    Read a canonical answer letter from a loose model value.

    Returns:
        "A".."D", or None when no letter can be found
    """
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    match = _ANSWER_PATTERN.match(str(value).strip().upper())
    return match.group(1) if match else None


def coerce_options(value: Any) -> list[str]:
    """Exactly four trimmed options, padded with placeholders by position."""
    if not isinstance(value, list):
        return list(PLACEHOLDER_OPTIONS)

    options = []
    for index, placeholder in enumerate(PLACEHOLDER_OPTIONS):
        entry = value[index] if index < len(value) else None
        text = str(entry).strip() if entry is not None else ""
        options.append(text or placeholder)
    return options


def coerce_question(
    item: Any, position: int, time_per_question: int
) -> dict[str, Any]:
    """
    Coerce one parsed array element into question fields.

    Never raises. A missing or unreadable correct answer falls back to "A"
    and sets answer_defaulted so callers can tell it is not ground truth.

    Args:
        item: Parsed element (non-dicts are treated as empty)
        position: 1-based position in the quiz
        time_per_question: Seconds per question from the request

    Returns:
        Keyword arguments for QuizQuestion
    """
    data = item if isinstance(item, dict) else {}

    question = data.get("question")
    question_text = str(question).strip() if question is not None else ""

    answer = normalize_answer_code(data.get("correctAnswer"))

    return {
        "id": position,
        "question": question_text or f"Question {position}",
        "options": coerce_options(data.get("options")),
        "correct_answer": answer or DEFAULT_ANSWER,
        "time_per_question": time_per_question,
        "answer_defaulted": answer is None,
    }


def _is_missing(field: str, value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list) and field not in EMPTY_LIST_ALLOWED:
        return len(value) == 0
    return False


def find_missing_fields(data: dict[str, Any]) -> list[str]:
    """
    Required course keys that are absent, null or blank, in canonical order.

    An empty milestones list is missing too. Empty objectives, prerequisites
    and skills lists are accepted.
    """
    return [
        field
        for field in REQUIRED_COURSE_FIELDS
        if _is_missing(field, data.get(field))
    ]


def validate_course_fields(data: dict[str, Any]) -> None:
    """
    Check that every required course key is present.

    Raises:
        MissingRequiredFields: Naming the missing keys
    """
    missing = find_missing_fields(data)
    if missing:
        raise MissingRequiredFields(missing)


def coerce_string_list(value: Any) -> list[str]:
    """A list of non-empty trimmed strings; a bare string becomes one item."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def milestone_names(value: Any) -> list[str]:
    """Names of milestones given as objects with "name" or as bare strings."""
    if not isinstance(value, list):
        value = [value]

    names = []
    for index, item in enumerate(value, start=1):
        if isinstance(item, dict):
            name = item.get("name")
        else:
            name = item
        text = str(name).strip() if name is not None else ""
        names.append(text or f"Milestone {index}")
    return names
