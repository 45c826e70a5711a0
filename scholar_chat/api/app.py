"""Assistant HTTP service: the backend the chat widget and page talk to."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scholar_chat import __version__
from scholar_chat.api.chat import router as chat_router
from scholar_chat.assistant.config import get_assistant_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Report at startup whether /chat can reach a model."""
    try:
        config = get_assistant_config()
    except ValueError:
        logger.warning("No LLM API key configured; /chat will answer 503")
    else:
        logger.info(f"Assistant model: {config.model_name}")
    yield
    logger.info("Scholar Chat API stopped")


def create_app() -> FastAPI:
    """Build the API with the chat router and a health check.

    CORS is open so the browser front end can be served from another origin.
    """
    application = FastAPI(
        title="Scholar Chat API",
        description=(
            "Answers questions about scientific papers, in general or scoped "
            "to one paper, and proposes follow-up questions."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "scholar-chat"}

    return application


app = create_app()
