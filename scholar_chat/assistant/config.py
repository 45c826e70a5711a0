"""Research assistant configuration loaded from the environment.

Any OpenAI-compatible endpoint works; point LLM_BASE_URL at it.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class AssistantConfig(BaseModel):
    """Model and answer-shape settings for the research assistant.

    Attributes:
        api_key: Key for the LLM provider.
        base_url: Provider URL, None for the OpenAI default.
        model_name: Chat model identifier.
        temperature: Sampling temperature.
        max_tokens: Upper bound on answer length.
        suggestion_count: Follow-up prompts requested per answer.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
    )
    base_url: str | None = Field(default_factory=lambda: os.getenv("LLM_BASE_URL") or None)
    model_name: str = Field(default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"))
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1024, ge=1, le=128000)
    suggestion_count: int = Field(
        default_factory=lambda: int(os.getenv("ASSISTANT_SUGGESTIONS", "3")),
        ge=0,
        le=6,
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Require a non-blank API key."""
        if not v or not v.strip():
            raise ValueError("API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env")
        return v.strip()


def get_assistant_config() -> AssistantConfig:
    """Create assistant configuration from environment.

    Raises:
        ValueError: If no API key is set.
    """
    return AssistantConfig()
