"""FastAPI endpoints for the research assistant.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Answer one message, optionally scoped to a paper
"""

from scholar_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
