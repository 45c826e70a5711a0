"""Append-only log of conversation turns."""

from collections.abc import Iterator

from scholar_chat.models.schemas import Speaker, Turn
from scholar_chat.session.errors import InvariantViolation


class MessageStore:
    """Ordered turn sequence for one session.

    Insertion order is display order. Turns are never removed, reordered,
    or deduplicated.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._ids: set[int] = set()
        self._snapshot: tuple[Turn, ...] = ()

    def append(self, turn: Turn) -> None:
        """Add a turn to the end of the log.

        Args:
            turn: The turn to append.

        Raises:
            InvariantViolation: If a turn with the same id is already stored.
        """
        if turn.id in self._ids:
            raise InvariantViolation(f"Duplicate turn id: {turn.id}")
        self._turns.append(turn)
        self._ids.add(turn.id)
        self._snapshot = tuple(self._turns)

    def snapshot(self) -> tuple[Turn, ...]:
        """Return every turn in order as an immutable tuple."""
        return self._snapshot

    def latest_assistant_turn(self) -> Turn | None:
        """Return the most recent assistant turn, or None if there is none."""
        for turn in reversed(self._turns):
            if turn.speaker is Speaker.ASSISTANT:
                return turn
        return None

    @property
    def max_id(self) -> int:
        """Highest stored turn id, 0 when empty."""
        return max(self._ids, default=0)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self._snapshot)
