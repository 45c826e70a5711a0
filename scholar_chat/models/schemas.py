from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Speaker(str, Enum):
    """Author of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """One message in the conversation.

    Attributes:
        id: Unique within a session, increasing in creation order.
        text: Message text. Never blank for user turns.
        speaker: Who authored the turn.
        created_at: Creation timestamp, never mutated.
        suggestions: Follow-up prompts. Only assistant turns carry them.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    speaker: Speaker
    created_at: datetime
    suggestions: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_user_turn(self) -> "Turn":
        """Reject blank user turns and user turns with suggestions."""
        if self.speaker is Speaker.USER:
            if not self.text.strip():
                raise ValueError("User turns require non-empty text")
            if self.suggestions:
                raise ValueError("User turns cannot carry suggestions")
        return self


class SessionView(BaseModel):
    """Read-only state consumed by the presentation shells.

    Attributes:
        turns: Every turn in display order.
        is_submitting: Whether an assistant request is outstanding.
        suggestions: Prompts offered by the latest assistant turn.
    """

    model_config = ConfigDict(frozen=True)

    turns: tuple[Turn, ...]
    is_submitting: bool
    suggestions: tuple[str, ...]


class GatewayReply(BaseModel):
    """Assistant endpoint payload as seen by the gateway client.

    Attributes:
        message: Assistant answer text.
        timestamp: Server timestamp, ISO-8601. May be missing.
        suggestions: Follow-up prompts for the user.
    """

    message: str
    timestamp: str | None = None
    suggestions: list[str] = Field(default_factory=list)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt.
        paper_id: Optional paper the conversation is about.
    """

    message: str = Field(..., min_length=1)
    paper_id: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Assistant answer returned by the chat endpoint."""

    message: str
    timestamp: str
    suggestions: list[str] = Field(default_factory=list)
