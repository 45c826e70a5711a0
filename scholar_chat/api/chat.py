"""Chat endpoint answering one user message at a time."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, status

from scholar_chat.assistant.service import AssistantService, get_assistant_service
from scholar_chat.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def assistant_dependency() -> AssistantService:
    """Resolve the assistant service for a request.

    Raises:
        HTTPException: 503 if the assistant is not configured.
    """
    try:
        return get_assistant_service()
    except ValueError as e:
        logger.error(f"Assistant unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Assistant is not configured",
        ) from e


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    assistant: AssistantService = Depends(assistant_dependency),
) -> ChatResponse:
    """Answer a message, optionally in the context of one paper.

    Args:
        request: The user's message and optional paper id.
        assistant: Service producing the answer.

    Returns:
        ChatResponse with answer text, server timestamp, and suggestions.

    Raises:
        422: Empty or missing message.
        502: The assistant failed to answer.
    """
    try:
        answer = await assistant.answer(request.message, paper_id=request.paper_id)
    except Exception as e:
        logger.error(f"Assistant failed for paper_id={request.paper_id!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Assistant failed to answer",
        ) from e

    return ChatResponse(
        message=answer.message,
        timestamp=datetime.now(UTC).isoformat(),
        suggestions=answer.suggestions,
    )
