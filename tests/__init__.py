"""Test package for Scholar Chat.

Structure:
    - unit/: Session core, gateway client, assistant service, UI shells
    - integration/: API endpoint and controller-to-API round trips

No test calls a real LLM. Uses pytest with pytest-check for soft assertions.
"""
