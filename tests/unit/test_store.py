"""Unit tests for MessageStore and Turn validation."""

from datetime import UTC, datetime

import pytest
import pytest_check as check
from pydantic import ValidationError

from scholar_chat.models.schemas import Speaker, Turn
from scholar_chat.session.errors import InvariantViolation
from scholar_chat.session.store import MessageStore

NOW = datetime(2025, 3, 1, tzinfo=UTC)


def make_turn(turn_id: int, speaker: Speaker = Speaker.USER, text: str = "hi", **kwargs) -> Turn:
    return Turn(id=turn_id, text=text, speaker=speaker, created_at=NOW, **kwargs)


class TestTurn:
    """Tests for Turn construction rules."""

    def test_user_turn_rejects_blank_text(self) -> None:
        """Whitespace-only user turns are invalid."""
        with pytest.raises(ValidationError, match="non-empty"):
            make_turn(1, text="   ")

    def test_user_turn_rejects_suggestions(self) -> None:
        """Only assistant turns carry suggestions."""
        with pytest.raises(ValidationError, match="suggestions"):
            make_turn(1, suggestions=("more?",))

    def test_assistant_turn_allows_empty_text(self) -> None:
        """Assistant turns may hold any string."""
        turn = make_turn(1, Speaker.ASSISTANT, text="")

        assert turn.text == ""

    def test_turn_is_frozen(self) -> None:
        """Turns cannot be mutated after creation."""
        turn = make_turn(1)

        with pytest.raises(ValidationError):
            turn.text = "changed"


class TestMessageStore:
    """Tests for append-only ordering and derived views."""

    def test_snapshot_preserves_insertion_order(self) -> None:
        """Turns come back in the order they were appended."""
        store = MessageStore()
        for turn_id in (3, 1, 2):
            store.append(make_turn(turn_id))

        assert [t.id for t in store.snapshot()] == [3, 1, 2]

    def test_duplicate_id_raises(self) -> None:
        """Appending an existing id violates the store invariant."""
        store = MessageStore()
        store.append(make_turn(1))

        with pytest.raises(InvariantViolation, match="Duplicate turn id: 1"):
            store.append(make_turn(1, Speaker.ASSISTANT))

        assert len(store) == 1

    def test_identical_text_is_not_deduplicated(self) -> None:
        """Repeated messages are kept as separate turns."""
        store = MessageStore()
        store.append(make_turn(1, text="again"))
        store.append(make_turn(2, text="again"))

        assert len(store) == 2

    def test_snapshot_is_immutable_and_stable(self) -> None:
        """A snapshot taken earlier does not change with later appends."""
        store = MessageStore()
        store.append(make_turn(1))
        before = store.snapshot()
        store.append(make_turn(2))

        check.is_instance(before, tuple)
        check.equal(len(before), 1)
        check.equal(len(store.snapshot()), 2)

    def test_latest_assistant_turn(self) -> None:
        """Most recent assistant turn is returned even if a user turn follows."""
        store = MessageStore()
        check.is_none(store.latest_assistant_turn())

        store.append(make_turn(1, Speaker.ASSISTANT, text="first"))
        store.append(make_turn(2, Speaker.ASSISTANT, text="second"))
        store.append(make_turn(3))

        latest = store.latest_assistant_turn()
        check.is_not_none(latest)
        check.equal(latest.text, "second")

    def test_max_id(self) -> None:
        """max_id tracks the highest stored id."""
        store = MessageStore()
        check.equal(store.max_id, 0)

        store.append(make_turn(7))
        store.append(make_turn(4))

        check.equal(store.max_id, 7)
        check.equal([t.id for t in store], [7, 4])
