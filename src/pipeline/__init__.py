"""Normalization pipeline for generative model responses."""

from .errors import MalformedAIResponse, MissingRequiredFields, PipelineError
from .extractor import extract_bracketed, extract_json, parse_strict
from .normalize import normalize_course_response, normalize_quiz_response
from .prompts import build_course_extraction_prompt, build_quiz_prompt
from .sanitizer import sanitize
from .scheduler import parse_duration_weeks, schedule_milestones

__all__ = [
    "build_quiz_prompt",
    "build_course_extraction_prompt",
    "sanitize",
    "parse_strict",
    "extract_bracketed",
    "extract_json",
    "parse_duration_weeks",
    "schedule_milestones",
    "normalize_quiz_response",
    "normalize_course_response",
    "PipelineError",
    "MalformedAIResponse",
    "MissingRequiredFields",
]
