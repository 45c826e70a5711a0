"""Hosting state for the two chat presentations.

The shells only read from the session controller. Their own flags (open,
minimized) are UI state and never touch the conversation.
"""

from scholar_chat.models.schemas import Turn
from scholar_chat.session.controller import SessionController


class PageShell:
    """Full-page chat: always open and expanded."""

    def __init__(self, controller: SessionController) -> None:
        self.controller = controller

    @property
    def is_open(self) -> bool:
        return True

    @property
    def is_minimized(self) -> bool:
        return False

    @property
    def show_messages(self) -> bool:
        return self.is_open and not self.is_minimized

    @property
    def show_composing(self) -> bool:
        """Whether to render the transient "assistant is typing" bubble."""
        return self.controller.is_submitting

    @property
    def visible_turns(self) -> tuple[Turn, ...]:
        return self.controller.turns

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self.controller.suggestions


class WidgetShell(PageShell):
    """Floating widget with open/closed and minimized/expanded modes.

    Closing or minimizing keeps the conversation and any outstanding
    request untouched.
    """

    def __init__(self, controller: SessionController) -> None:
        super().__init__(controller)
        self._open = False
        self._minimized = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_minimized(self) -> bool:
        return self._minimized

    def open(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def toggle_minimized(self) -> None:
        self._minimized = not self._minimized
