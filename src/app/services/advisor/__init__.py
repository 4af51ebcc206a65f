"""Natural-language helper over the current school list."""

from .gemini_client import (
    EMPTY_ANSWER_MESSAGE,
    ERROR_MESSAGE,
    MISSING_KEY_MESSAGE,
    GeminiClient,
    ask_advisor,
    build_context,
    build_prompt,
    is_configured,
)

__all__ = [
    "GeminiClient",
    "ask_advisor",
    "build_context",
    "build_prompt",
    "is_configured",
    "MISSING_KEY_MESSAGE",
    "EMPTY_ANSWER_MESSAGE",
    "ERROR_MESSAGE",
]
