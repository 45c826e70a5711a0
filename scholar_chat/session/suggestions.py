"""Follow-up prompts offered by the latest assistant turn."""

from scholar_chat.session.store import MessageStore


class SuggestionRegistry:
    """Exposes the suggestion chips derived from a message store.

    Nothing is cached: every read goes back to the store, so chips always
    reflect the latest assistant turn.
    """

    def __init__(self, store: MessageStore) -> None:
        self._store = store

    def current(self) -> tuple[str, ...]:
        """Return the prompts of the latest assistant turn, if any."""
        turn = self._store.latest_assistant_turn()
        if turn is None:
            return ()
        return turn.suggestions

    @staticmethod
    def select(prompt: str) -> str:
        """Return the text to pre-fill into the input buffer.

        Selecting a chip never submits it.
        """
        return prompt
