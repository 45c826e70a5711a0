"""Agno agent logic answering questions about scientific papers.

Responsibilities:
    - Agent initialization with OpenAI-compatible models
    - Structured answers with follow-up suggestions
    - Paper scoping of prompts

Maintains clean separation from the HTTP layer.
"""

from scholar_chat.assistant.config import AssistantConfig, get_assistant_config
from scholar_chat.assistant.service import (
    AssistantAnswer,
    AssistantError,
    AssistantService,
    get_assistant_service,
)

__all__ = [
    "AssistantAnswer",
    "AssistantConfig",
    "AssistantError",
    "AssistantService",
    "get_assistant_config",
    "get_assistant_service",
]
