"""Pydantic models shared by the session core, gateway, and API.

Provides type safety and validation at every boundary.

Models:
    - Speaker: Turn author (user or assistant)
    - Turn: Single immutable conversation message
    - SessionView: Snapshot read by the presentation shells
    - GatewayReply: Assistant payload received by the gateway client
    - ChatRequest: Incoming chat request payload
    - ChatResponse: Outgoing assistant answer with suggestions
"""

from scholar_chat.models.schemas import (
    ChatRequest,
    ChatResponse,
    GatewayReply,
    SessionView,
    Speaker,
    Turn,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "GatewayReply",
    "SessionView",
    "Speaker",
    "Turn",
]
