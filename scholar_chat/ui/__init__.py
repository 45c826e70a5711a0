"""Presentation layer for the research assistant.

Two hosts consume the same session controller:
    - Full chat page at /
    - Floating widget on paper pages, scoped to the paper

Contains no conversation logic. Pages are registered by importing
scholar_chat.ui.chat_page.
"""
