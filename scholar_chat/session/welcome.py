"""Opening message shown when a conversation starts."""

from typing import NamedTuple

PAPER_WELCOME_TEXT = (
    "Hello! I'm your intelligent assistant specialized in this paper. "
    "How can I help you today?"
)
PAPER_WELCOME_SUGGESTIONS = (
    "Can you explain the methods used?",
    "What are the main results?",
    "What related papers do you recommend?",
    "How to interpret the graphs?",
)

GENERAL_WELCOME_TEXT = (
    "Hello! I'm your intelligent assistant specialized in scientific papers. "
    "I can help you understand concepts, find related papers, explain "
    "methodologies and much more. How can I help you today?"
)
GENERAL_WELCOME_SUGGESTIONS = (
    "Can you explain what machine learning is?",
    "What papers are there about climate change?",
    "How does CRISPR gene editing work?",
    "What are the latest trends in renewable energy?",
)


class WelcomeContent(NamedTuple):
    """Text and opening suggestions of the welcome turn."""

    text: str
    suggestions: tuple[str, ...]


def welcome_content(scope: str | None) -> WelcomeContent:
    """Pick the paper-specific or general welcome for a session.

    Args:
        scope: Paper the session is about, or None for a general chat.

    Returns:
        The welcome text with its four opening suggestions.
    """
    if scope is not None:
        return WelcomeContent(PAPER_WELCOME_TEXT, PAPER_WELCOME_SUGGESTIONS)
    return WelcomeContent(GENERAL_WELCOME_TEXT, GENERAL_WELCOME_SUGGESTIONS)
