"""Integration tests driving a session through the HTTP gateway and the API.

SessionController -> HttpAssistantGateway -> FastAPI app -> fake assistant.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from scholar_chat.api import app
from scholar_chat.gateway.client import HttpAssistantGateway
from scholar_chat.gateway.config import GatewayConfig
from scholar_chat.models.schemas import Speaker
from scholar_chat.session.controller import FALLBACK_TEXT, SessionController, SessionState
from tests.conftest import FakeAssistant


@pytest.fixture
async def http_gateway(fake_assistant: FakeAssistant) -> AsyncGenerator[HttpAssistantGateway]:
    """Gateway wired to the in-process app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport) as client:
        yield HttpAssistantGateway(GatewayConfig(base_url="http://test", timeout=5), client=client)


async def test_scoped_conversation_round_trip(
    http_gateway: HttpAssistantGateway, fake_assistant: FakeAssistant
) -> None:
    """A widget session asks about its paper and receives the answer."""
    controller = SessionController(http_gateway, scope="paper-42", timeout=http_gateway.timeout)

    assert await controller.submit("How does CRISPR work?")

    welcome, question, answer = controller.turns
    assert welcome.speaker is Speaker.ASSISTANT
    assert question.text == "How does CRISPR work?"
    assert answer.text == "CRISPR is a gene-editing technique."
    assert controller.suggestions == ("Tell me more",)
    assert controller.state is SessionState.IDLE
    assert fake_assistant.calls == [("How does CRISPR work?", "paper-42")]


async def test_server_failure_becomes_fallback_turn(
    http_gateway: HttpAssistantGateway, fake_assistant: FakeAssistant
) -> None:
    """A 502 from the API leaves the session usable with an apology turn."""
    fake_assistant.error = RuntimeError("model unavailable")
    controller = SessionController(http_gateway)

    await controller.submit("hello")

    assert controller.turns[-1].text == FALLBACK_TEXT
    assert controller.suggestions == ()

    fake_assistant.error = None
    await controller.submit("hello")

    assert controller.turns[-1].text == "CRISPR is a gene-editing technique."
    assert len(controller.turns) == 5
