"""Integration tests for components working together.

Coverage:
    - Chat endpoint through the real FastAPI app
    - Session controller talking to the app through the HTTP gateway

The assistant service is swapped for a fake so no API key is needed.
"""
