"""Prompt node - Builds the model prompt for the current request."""

from typing import Any

from src.graph.state import GenerationState
from src.pipeline.prompts import build_course_extraction_prompt, build_quiz_prompt


def build_prompt(state: GenerationState) -> dict[str, Any]:
    """
    Prompt node: Build the prompt for a quiz or course extraction request.

    Args:
        state: Current state containing quiz_spec or course_params

    Returns:
        Dictionary with updated state containing prompt
    """
    spec = state.get("quiz_spec")
    if spec is not None:
        return {"prompt": build_quiz_prompt(spec)}

    params = state.get("course_params")
    if params is not None:
        return {"prompt": build_course_extraction_prompt(params)}

    raise ValueError("State has neither quiz_spec nor course_params")
