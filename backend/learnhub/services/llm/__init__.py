"""
Text generation backends.

`send_chat(messages)` picks the configured provider (DEFAULT_LLM_PROVIDER)
and returns a ChatResult.
"""

from learnhub.services.llm.base import ChatResult, LLMProviderError
from learnhub.services.llm.registry import get_provider, reset_providers, send_chat

__all__ = [
    "ChatResult",
    "LLMProviderError",
    "get_provider",
    "reset_providers",
    "send_chat",
]
