"""Recover the JSON payload embedded in sanitized model text."""

import json
import logging
import re
from typing import Any, Literal

from .errors import MalformedAIResponse

logger = logging.getLogger(__name__)

Shape = Literal["array", "object"]

BRACKETS: dict[str, tuple[str, str]] = {
    "array": ("[", "]"),
    "object": ("{", "}"),
}

PYTHON_TYPES: dict[str, type] = {
    "array": list,
    "object": dict,
}

# Upper bound on opening brackets tried by the raw_decode scan
MAX_SCAN_POSITIONS = 50


def _matches_shape(value: Any, shape: Shape) -> bool:
    return isinstance(value, PYTHON_TYPES[shape])


def _is_payload(value: Any, shape: Shape) -> bool:
    # Inside prose an array only counts when it holds records, so "[3]" in
    # "Here are [3] questions" is skipped
    if not _matches_shape(value, shape):
        return False
    if shape == "array":
        return all(isinstance(item, dict) for item in value)
    return True


def parse_strict(text: str, shape: Shape) -> Any | None:
    """
    Stage 1: parse the whole string as JSON.

    Args:
        text: Sanitized model text
        shape: Expected top-level shape ("array" or "object")

    Returns:
        The parsed value, or None if parsing fails or the shape is wrong
    """
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError):
        return None
    return value if _matches_shape(value, shape) else None


def bracket_candidates(text: str, shape: Shape) -> list[str]:
    """
    Substrings running from the first opening bracket to a closing bracket.

    The greedy candidate (last closing bracket) is listed before the non-greedy
    one (first closing bracket).
    """
    opening, closing = (re.escape(b) for b in BRACKETS[shape])
    candidates = []
    for pattern in (rf"{opening}.*{closing}", rf"{opening}.*?{closing}"):
        match = re.search(pattern, text, re.DOTALL)
        if match and match.group(0) not in candidates:
            candidates.append(match.group(0))
    return candidates


def _scan_decode(text: str, shape: Shape) -> Any | None:
    """Try json raw_decode from each opening bracket, left to right."""
    decoder = json.JSONDecoder()
    opening = BRACKETS[shape][0]
    position = text.find(opening)
    attempts = 0
    while position != -1 and attempts < MAX_SCAN_POSITIONS:
        attempts += 1
        try:
            value, _ = decoder.raw_decode(text, position)
        except (json.JSONDecodeError, RecursionError):
            pass
        else:
            if _is_payload(value, shape):
                return value
        position = text.find(opening, position + 1)
    return None


def extract_bracketed(text: str, shape: Shape) -> Any | None:
    """
    Stage 2: locate a bracketed JSON value inside surrounding prose.

    Tries the greedy and then the non-greedy regex candidate, then a bounded
    raw_decode scan from each opening bracket. An array found this way must
    hold only objects; bracketed prose such as "[3]" is passed over.

    Args:
        text: Sanitized model text
        shape: Expected top-level shape ("array" or "object")

    Returns:
        The parsed value, or None if nothing of the expected shape was found
    """
    for candidate in bracket_candidates(text, shape):
        value = parse_strict(candidate, shape)
        if value is not None and _is_payload(value, shape):
            return value
    return _scan_decode(text, shape)


def extract_json(text: str, shape: Shape) -> Any:
    """
    Extract exactly one JSON value of the expected shape.

    Args:
        text: Sanitized model text
        shape: Expected top-level shape ("array" or "object")

    Returns:
        A parsed list (for "array") or dict (for "object")

    Raises:
        MalformedAIResponse: If neither stage recovers a value
    """
    value = parse_strict(text, shape)
    if value is not None:
        return value

    logger.debug("Strict %s parse failed, trying bracket extraction", shape)
    value = extract_bracketed(text, shape)
    if value is not None:
        logger.debug("Recovered %s from surrounding text", shape)
        return value

    raise MalformedAIResponse(text, f"No JSON {shape} found in AI response")
