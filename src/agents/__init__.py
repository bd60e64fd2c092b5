"""Workflow nodes for quiz generation and course extraction."""

from .generator import call_model
from .normalizer import normalize_course, normalize_quiz
from .prompter import build_prompt

__all__ = [
    "build_prompt",
    "call_model",
    "normalize_quiz",
    "normalize_course",
]
