"""Conversation session core shared by the chat widget and the chat page.

Responsibilities:
    - Append-only turn log with deterministic snapshots
    - Suggestion chips sourced from the latest assistant turn
    - Single in-flight request guard and failure fallback
    - Welcome turn seeding per paper scope

Pure Python with no UI or network code. The assistant gateway is injected.
"""

from scholar_chat.session.controller import (
    FALLBACK_TEXT,
    AssistantGateway,
    SessionController,
    SessionState,
)
from scholar_chat.session.errors import GatewayFailure, GatewayTimeout, InvariantViolation
from scholar_chat.session.store import MessageStore
from scholar_chat.session.suggestions import SuggestionRegistry
from scholar_chat.session.welcome import WelcomeContent, welcome_content

__all__ = [
    "FALLBACK_TEXT",
    "AssistantGateway",
    "GatewayFailure",
    "GatewayTimeout",
    "InvariantViolation",
    "MessageStore",
    "SessionController",
    "SessionState",
    "SuggestionRegistry",
    "WelcomeContent",
    "welcome_content",
]
