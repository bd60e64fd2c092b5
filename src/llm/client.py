"""Chat model construction and single-prompt invocation."""

import logging

from botocore.config import Config
from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from src.config.settings import Settings

logger = logging.getLogger(__name__)


def create_chat_model(settings: Settings) -> BaseChatModel:
    """
    Build a chat model client from settings.

    The client is returned to the caller and injected wherever it is needed;
    nothing here caches it.

    Args:
        settings: Application settings

    Returns:
        A configured LangChain chat model
    """
    logger.info(
        "Creating %s chat model %s", settings.model_provider, settings.model_name
    )

    if settings.model_provider == "anthropic":
        return ChatAnthropic(
            model=settings.model_name,
            temperature=settings.generation_temperature,
            timeout=settings.request_timeout,
            max_retries=0,
        )

    return ChatBedrock(
        model=settings.model_name,
        temperature=settings.generation_temperature,
        config=Config(
            read_timeout=settings.request_timeout,
            retries={"max_attempts": 1},
        ),
    )


def message_text(content: str | list) -> str:
    """Flatten message content that may be a list of content blocks."""
    if isinstance(content, str):
        return content

    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def invoke_model(llm: BaseChatModel, prompt: str) -> str:
    """
    Send one prompt to the model and return its raw text.

    Args:
        llm: Injected chat model
        prompt: Prompt text

    Returns:
        The model's untrusted text response
    """
    response = llm.invoke([HumanMessage(content=prompt)])
    return message_text(response.content)
