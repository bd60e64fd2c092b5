"""Cleanup of raw model text before JSON extraction."""

import re

# ```json / ``` fence markers, language tag in any case
FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)

# Models sometimes emit literal control characters inside JSON strings
CONTROL_PATTERN = re.compile(r"[\n\r\t]+")


def sanitize(text: str | None) -> str:
    """
    Strip markdown fences, collapse newlines/tabs to single spaces and trim.

    Total and idempotent: sanitize(sanitize(x)) == sanitize(x).

    Args:
        text: Raw model response (None is treated as empty)

    Returns:
        Cleaned text
    """
    if not text:
        return ""
    cleaned = FENCE_PATTERN.sub("", text)
    cleaned = CONTROL_PATTERN.sub(" ", cleaned)
    return cleaned.strip()
