"""Milestone deadline scheduling."""

import math
import re
from datetime import date, timedelta
from typing import Any

from src.models.course import Milestone

DEFAULT_DURATION_WEEKS = 12

# Ten years; longer durations are clamped so deadlines stay representable
MAX_DURATION_WEEKS = 520

_WEEKS_PATTERN = re.compile(r"\d+")


def parse_duration_weeks(duration: Any) -> int:
    """
    Read a week count from free-text duration such as "8 weeks".

    Falls back to DEFAULT_DURATION_WEEKS when no positive integer is present
    and clamps anything above MAX_DURATION_WEEKS.
    """
    if duration is None:
        return DEFAULT_DURATION_WEEKS
    match = _WEEKS_PATTERN.search(str(duration))
    if not match:
        return DEFAULT_DURATION_WEEKS
    digits = match.group(0).lstrip("0")
    if not digits:
        return DEFAULT_DURATION_WEEKS
    if len(digits) > len(str(MAX_DURATION_WEEKS)):
        return MAX_DURATION_WEEKS
    return min(int(digits), MAX_DURATION_WEEKS)


def schedule_milestones(
    names: list[str], duration_weeks: int, anchor: date
) -> list[Milestone]:
    """
    Spread milestones evenly across the course duration.

    Each milestone i (1-based) is due anchor + 7 * ceil(weeks / count) * i days,
    so the last deadline can overshoot the duration slightly.

    Args:
        names: Ordered milestone names (at least one)
        duration_weeks: Positive course length in weeks
        anchor: Date the schedule starts from

    Returns:
        Milestones with strictly increasing deadlines
    """
    if not names:
        raise ValueError("At least one milestone is required")
    if duration_weeks < 1:
        raise ValueError("Duration must be at least one week")

    weeks_per_milestone = math.ceil(duration_weeks / len(names))
    return [
        Milestone(
            name=name,
            deadline=anchor + timedelta(days=7 * weeks_per_milestone * index),
        )
        for index, name in enumerate(names, start=1)
    ]
