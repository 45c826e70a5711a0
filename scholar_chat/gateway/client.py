"""HTTP client for the assistant chat endpoint."""

import logging

import httpx
from pydantic import ValidationError

from scholar_chat.gateway.config import GatewayConfig, get_gateway_config
from scholar_chat.models.schemas import GatewayReply
from scholar_chat.session.errors import GatewayFailure

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat"


class HttpAssistantGateway:
    """Sends user messages to ``POST /chat`` and validates the answer.

    Every failure mode (transport error, non-2xx status, malformed payload)
    surfaces as a single GatewayFailure so callers need not branch on cause.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            config: Optional gateway configuration.
                    Loads from environment if not provided.
            client: Optional shared HTTP client. A short-lived client is
                    opened per request if not provided.
        """
        self._config = config or get_gateway_config()
        self._client = client

    @property
    def timeout(self) -> float:
        return self._config.timeout

    async def send_message(self, text: str, scope: str | None = None) -> GatewayReply:
        """Ask the assistant to answer a message.

        Args:
            text: The user's message.
            scope: Optional paper id the conversation is about.

        Returns:
            The validated assistant reply.

        Raises:
            GatewayFailure: If the request fails or the payload is malformed.
        """
        url = f"{self._config.base_url}{CHAT_PATH}"
        payload = {"message": text, "paper_id": scope}
        logger.debug(f"POST {url} (paper_id={scope!r})")

        try:
            if self._client is not None:
                response = await self._client.post(url, json=payload)
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.post(url, json=payload)
            response.raise_for_status()
            return GatewayReply.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise GatewayFailure(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise GatewayFailure(f"Connection failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise GatewayFailure(f"Malformed assistant payload: {e}") from e


def get_gateway() -> HttpAssistantGateway:
    """Create an HTTP gateway configured from the environment."""
    return HttpAssistantGateway()
