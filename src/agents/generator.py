"""Generator node - Sends the prompt to the injected chat model."""

import logging
from typing import Any

from langchain_core.language_models import BaseChatModel

from src.graph.state import GenerationState
from src.llm.client import invoke_model

logger = logging.getLogger(__name__)


def call_model(state: GenerationState, llm: BaseChatModel) -> dict[str, Any]:
    """
    Generator node: Make the single outbound model call for this request.

    Failures are logged and propagated; retry policy belongs to the caller.

    Args:
        state: Current state containing prompt
        llm: Chat model injected by the workflow factory

    Returns:
        Dictionary with updated state containing raw_response
    """
    prompt = state["prompt"]
    if not prompt:
        raise ValueError("No prompt to send to the model")

    try:
        raw_response = invoke_model(llm, prompt)
    except Exception:
        logger.exception("Model call failed")
        raise

    logger.info("Model returned %d characters", len(raw_response))
    return {"raw_response": raw_response}
