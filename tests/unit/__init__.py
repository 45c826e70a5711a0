"""Unit tests for individual components in isolation.

Coverage:
    - session/: turn log, suggestions, controller state machine, welcome
    - gateway/: HTTP client error mapping and configuration
    - assistant/: configuration and agent wiring
    - ui/: widget and page shell flags

External services are replaced by in-memory doubles or mocks.
"""
