"""Pytest fixtures and shared test configuration.

Fixtures:
    - gateway: In-memory assistant gateway recording every call
    - clock: Deterministic timestamp source for turns
    - controller: General (unscoped) session wired to the gateway
    - fake_assistant: Stand-in for the Agno assistant service
    - async_client: HTTPX client for API testing

The assistant LLM is never called; API tests override its dependency.
"""

import asyncio
from collections.abc import AsyncGenerator, Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from scholar_chat.api import app
from scholar_chat.api.chat import assistant_dependency
from scholar_chat.assistant.service import AssistantAnswer
from scholar_chat.models.schemas import GatewayReply
from scholar_chat.session.controller import SessionController

CLOCK_START = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)


class RecordingGateway:
    """Assistant gateway double.

    Returns ``reply`` or raises ``error``. When ``release`` is set, each call
    waits on it before settling, which keeps the request in flight.
    """

    def __init__(self) -> None:
        self.reply: GatewayReply = GatewayReply(
            message="Here is an answer.",
            timestamp="2024-01-01T00:00:00Z",
            suggestions=["Tell me more"],
        )
        self.error: Exception | None = None
        self.release: asyncio.Event | None = None
        self.calls: list[tuple[str, str | None]] = []

    async def send_message(self, text: str, scope: str | None = None) -> GatewayReply:
        self.calls.append((text, scope))
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.reply


class FakeAssistant:
    """Assistant service double used through FastAPI dependency overrides."""

    def __init__(self) -> None:
        self.answer_value = AssistantAnswer(
            message="CRISPR is a gene-editing technique.",
            suggestions=["Tell me more"],
        )
        self.error: Exception | None = None
        self.calls: list[tuple[str, str | None]] = []

    async def answer(self, message: str, paper_id: str | None = None) -> AssistantAnswer:
        self.calls.append((message, paper_id))
        if self.error is not None:
            raise self.error
        return self.answer_value


@pytest.fixture
def gateway() -> RecordingGateway:
    """Return a gateway that answers successfully by default."""
    return RecordingGateway()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Return a clock advancing one second per reading."""
    ticks = iter(range(10_000))
    return lambda: CLOCK_START + timedelta(seconds=next(ticks))


@pytest.fixture
def controller(gateway: RecordingGateway, clock: Callable[[], datetime]) -> SessionController:
    """Return a general-purpose session controller."""
    return SessionController(gateway, clock=clock)


@pytest.fixture
def fake_assistant() -> Iterator[FakeAssistant]:
    """Install a fake assistant for the chat endpoint.

    Yields:
        The fake, so tests can inspect calls or inject failures.
    """
    fake = FakeAssistant()
    app.dependency_overrides[assistant_dependency] = lambda: fake
    yield fake
    app.dependency_overrides.pop(assistant_dependency, None)


@pytest.fixture
async def async_client(fake_assistant: FakeAssistant) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
