"""Turn-based conversation controller shared by the chat widget and page.

Owns the message store of one session and drives it through a two-state
machine:

    IDLE --submit--> SUBMITTING --reply or failure--> IDLE

Only one assistant request can be outstanding at a time. Every submitted
user turn is followed by exactly one assistant turn (the reply, or a fixed
apology when the gateway fails) before the next user turn is accepted.
"""

import asyncio
import itertools
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol

from scholar_chat.models.schemas import GatewayReply, SessionView, Speaker, Turn
from scholar_chat.session.errors import GatewayTimeout
from scholar_chat.session.store import MessageStore
from scholar_chat.session.suggestions import SuggestionRegistry
from scholar_chat.session.welcome import welcome_content

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "Sorry, there was an error processing your message. Please try again."

ENTER_KEY = "Enter"


class AssistantGateway(Protocol):
    """External service that answers a user message."""

    async def send_message(self, text: str, scope: str | None = None) -> GatewayReply: ...


class SessionState(str, Enum):
    """Controller states."""

    IDLE = "idle"
    SUBMITTING = "submitting"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionController:
    """Conversation state machine for one presentation instance.

    Two controllers never share state. Each owns its store, its id counter,
    and its draft buffer.
    """

    def __init__(
        self,
        gateway: AssistantGateway,
        scope: str | None = None,
        *,
        store: MessageStore | None = None,
        timeout: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Create a session and seed the welcome turn if the store is empty.

        Args:
            gateway: Service answering user turns.
            scope: Optional paper id sent unchanged with every request.
                   A blank scope is treated as no scope.
            store: Existing turn log. A fresh one is created if not provided.
            timeout: Seconds to wait for a reply before falling back.
                     None waits indefinitely.
            clock: Source of local timestamps. Defaults to UTC now.
        """
        self._gateway = gateway
        if scope is not None and not scope.strip():
            scope = None
        self._scope = scope
        self._store = store if store is not None else MessageStore()
        self._registry = SuggestionRegistry(self._store)
        self._timeout = timeout
        self._clock = clock or _utcnow
        self._ids = itertools.count(self._store.max_id + 1)
        self._state = SessionState.IDLE
        self._listeners: list[Callable[[], None]] = []
        self.draft = ""

        if not len(self._store):
            welcome = welcome_content(self._scope)
            self._append(self._new_turn(Speaker.ASSISTANT, welcome.text, welcome.suggestions))

    @property
    def scope(self) -> str | None:
        return self._scope

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state is SessionState.SUBMITTING

    @property
    def turns(self) -> tuple[Turn, ...]:
        return self._store.snapshot()

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self._registry.current()

    def view(self) -> SessionView:
        """Return the state read by the presentation shells."""
        return SessionView(
            turns=self.turns,
            is_submitting=self.is_submitting,
            suggestions=self.suggestions,
        )

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a listener called after every turn append and state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def select_suggestion(self, prompt: str) -> str:
        """Pre-fill the draft with a suggestion without submitting it."""
        self.draft = self._registry.select(prompt)
        return self.draft

    async def handle_key(self, key: str, shift: bool = False) -> bool:
        """Apply the submit-on-enter policy to a key press.

        Plain Enter submits the draft. Shift+Enter never submits; the text
        input inserts the newline at the cursor itself and the draft picks
        it up through its binding. Other keys are ignored.

        Returns:
            Whether a turn was submitted.
        """
        if key != ENTER_KEY:
            return False
        if shift:
            return False
        return await self.submit(self.draft)

    async def submit(self, raw_text: str) -> bool:
        """Send a user message and wait for the assistant's answer.

        Blank input and calls made while a request is outstanding are
        ignored. Gateway failures are logged and turned into a fallback
        assistant turn; they are never raised to the caller.

        Args:
            raw_text: Text typed by the user.

        Returns:
            True if a user turn was appended, False if the call was ignored.
        """
        if not raw_text.strip() or self.is_submitting:
            return False

        self._append(self._new_turn(Speaker.USER, raw_text))
        self.draft = ""
        self._set_state(SessionState.SUBMITTING)
        logger.debug(f"Submitting turn (scope={self._scope!r})")

        try:
            reply = await self._request_reply(raw_text)
            answer = self._new_turn(
                Speaker.ASSISTANT,
                reply.message,
                reply.suggestions,
                created_at=self._reply_time(reply.timestamp),
            )
        except Exception as e:
            logger.warning(f"Assistant request failed (scope={self._scope!r}): {e!r}")
            answer = self._new_turn(Speaker.ASSISTANT, FALLBACK_TEXT)

        self._append(answer)
        self._set_state(SessionState.IDLE)
        return True

    async def _request_reply(self, text: str) -> GatewayReply:
        call = self._gateway.send_message(text, self._scope)
        if self._timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, self._timeout)
        except TimeoutError as e:
            raise GatewayTimeout(f"No reply within {self._timeout}s") from e

    def _reply_time(self, timestamp: str | None) -> datetime:
        if timestamp:
            try:
                return datetime.fromisoformat(timestamp)
            except ValueError:
                logger.debug(f"Unparseable reply timestamp: {timestamp!r}")
        return self._clock()

    def _new_turn(
        self,
        speaker: Speaker,
        text: str,
        suggestions: Sequence[str] = (),
        created_at: datetime | None = None,
    ) -> Turn:
        return Turn(
            id=next(self._ids),
            text=text,
            speaker=speaker,
            created_at=created_at or self._clock(),
            suggestions=tuple(suggestions),
        )

    def _append(self, turn: Turn) -> None:
        self._store.append(turn)
        self._notify()

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception:
                logger.exception(f"Session listener {callback!r} failed")
