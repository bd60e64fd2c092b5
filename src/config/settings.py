"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Model Configuration
    model_provider: Literal["bedrock", "anthropic"] = Field(
        default="bedrock",
        description="Chat model provider used for generation",
        validation_alias="MODEL_PROVIDER",
    )

    model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (Bedrock model ID or Anthropic model name)",
        validation_alias="MODEL_NAME",
    )

    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for quiz and course generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    request_timeout: float = Field(
        default=180.0,  # matches the 3 minute guard on the web tier
        gt=0.0,
        description="Timeout in seconds for a single model call",
        validation_alias="REQUEST_TIMEOUT",
    )

    # Quiz Settings
    max_quiz_questions: int = Field(
        default=30,
        ge=1,
        le=30,
        description="Upper bound for questions requested in one quiz",
        validation_alias="MAX_QUIZ_QUESTIONS",
    )

    default_time_per_question: int = Field(
        default=60,
        ge=1,
        description="Seconds allowed per question when the caller gives none",
        validation_alias="DEFAULT_TIME_PER_QUESTION",
    )

    # Course Settings
    default_hours_per_week: float = Field(
        default=10,
        gt=0,
        description="Study pace used when extracting course information",
        validation_alias="DEFAULT_HOURS_PER_WEEK",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level for the CLI",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "protected_namespaces": (),
    }


# This is loaded the first time and then cached for further use by the callers
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
