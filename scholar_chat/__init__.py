"""Scholar Chat - conversational assistant for research-paper browsing.

Combines FastAPI for the assistant endpoint, Agno for LLM orchestration,
NiceGUI for the chat widget and page, and Pydantic for data validation.

Components:
    - session: turn log, suggestion chips, and the session controller
    - gateway: HTTP client for the assistant endpoint
    - assistant: LLM-backed answer generation
    - api: HTTP endpoints
    - ui: floating widget and full-page chat
    - models: Request/response and turn schemas
"""

__version__ = "0.1.0"
