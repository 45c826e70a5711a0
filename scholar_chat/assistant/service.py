"""Agno-backed research assistant producing answers with follow-up prompts.

The agent returns structured output (AssistantAnswer) so the chat endpoint
can hand suggestion chips to the UI without parsing free text.

Wrapping Agno in a service keeps the HTTP layer independent of the agent
API and gives one place for error handling and logging.
"""

import logging

from agno.agent import Agent
from agno.models.openai import OpenAIChat
from pydantic import BaseModel, Field

from scholar_chat.assistant.config import AssistantConfig, get_assistant_config

logger = logging.getLogger(__name__)


class AssistantAnswer(BaseModel):
    """Structured answer produced by the agent."""

    message: str = Field(..., description="Answer to the user's question, in markdown")
    suggestions: list[str] = Field(
        default_factory=list,
        description="Short follow-up questions the user could ask next",
    )


class AssistantError(Exception):
    """Raised when the agent does not produce a usable answer."""

    pass


class AssistantService:
    """Answers questions about scientific papers.

    Wraps Agno's Agent with:
    - OpenAI-compatible chat model from AssistantConfig
    - Structured output with follow-up suggestions
    - Paper context injected into the prompt when a paper id is given
    """

    def __init__(self, config: AssistantConfig | None = None) -> None:
        """Initialize the assistant service.

        Args:
            config: Optional assistant configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_assistant_config()
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            description="An assistant that helps researchers understand scientific papers.",
            instructions=[
                "Explain concepts, methods and results clearly and accurately.",
                "Recommend related work when it helps the user.",
                "When a paper id is given, keep the answer focused on that paper.",
                f"Offer up to {self._config.suggestion_count} short follow-up questions.",
            ],
            output_schema=AssistantAnswer,
        )

    @staticmethod
    def build_prompt(message: str, paper_id: str | None = None) -> str:
        """Prefix the user's message with paper context, if any."""
        if paper_id:
            return f"[Paper: {paper_id}]\n{message}"
        return message

    async def answer(self, message: str, paper_id: str | None = None) -> AssistantAnswer:
        """Answer a user message.

        Args:
            message: The user's question.
            paper_id: Optional paper the question is about.

        Returns:
            The answer with at most ``suggestion_count`` suggestions.

        Raises:
            AssistantError: If the agent returns no structured answer.
        """
        response = await self._agent.arun(self.build_prompt(message, paper_id))
        content = getattr(response, "content", None)

        if not isinstance(content, AssistantAnswer):
            logger.error(f"Agent returned unstructured content: {type(content).__name__}")
            raise AssistantError("Assistant returned an unstructured answer")

        limit = self._config.suggestion_count
        return content.model_copy(update={"suggestions": content.suggestions[:limit]})


# Module-level singleton instance
_assistant_service: AssistantService | None = None


def get_assistant_service() -> AssistantService:
    """Get or create the global assistant service.

    Returns:
        The AssistantService instance.
    """
    global _assistant_service
    if _assistant_service is None:
        _assistant_service = AssistantService()
    return _assistant_service
