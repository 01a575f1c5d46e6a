"""
Provider registry.

Maps provider names to LLMProvider classes and exposes `send_chat`, the one
entry point the rest of the app uses. Providers are created lazily on first
use and reused afterwards.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional

from learnhub.core.config import DEFAULT_LLM_MODEL, DEFAULT_LLM_PROVIDER, DEFAULT_LLM_TEMPERATURE
from learnhub.services.llm.base import ChatMessages, ChatResult, LLMProvider, LLMProviderError

logger = logging.getLogger(__name__)

# Recognised but without an adapter yet
_UNCONFIGURED = {
    "gemini": "GEMINI_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "claude": "CLAUDE_API_KEY",
}

_provider_instances: Dict[str, LLMProvider] = {}


def _create_provider(name: str) -> LLMProvider:
    if name == "openai":
        from learnhub.services.llm.openai_chat import OpenAIChatProvider
        return OpenAIChatProvider()
    if name == "openrouter":
        from learnhub.services.llm.openrouter import OpenRouterProvider
        return OpenRouterProvider()
    if name in _UNCONFIGURED:
        raise LLMProviderError(
            f"{name.capitalize()} provider not configured. "
            f"Please set {_UNCONFIGURED[name]} and implement adapter."
        )
    raise LLMProviderError(f"Unknown provider: {name}")


def get_provider(name: Optional[str] = None) -> LLMProvider:
    name = (name or DEFAULT_LLM_PROVIDER).strip().lower()
    if name not in _provider_instances:
        _provider_instances[name] = _create_provider(name)
    return _provider_instances[name]


def reset_providers() -> None:
    """Drop cached provider instances (used after config changes and in tests)."""
    _provider_instances.clear()


def send_chat(
    messages: ChatMessages,
    provider: Optional[str] = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> ChatResult:
    """
    Generate text from role-tagged messages.

    Raises:
        LLMProviderError: provider unknown, not configured, or the call failed.
    """
    llm = get_provider(provider)
    model = model or DEFAULT_LLM_MODEL or llm.default_model
    temperature = DEFAULT_LLM_TEMPERATURE if temperature is None else temperature
    logger.debug("LLM call provider=%s model=%s messages=%d", llm.provider_name, model, len(messages))
    return llm.chat(messages, model=model, temperature=temperature)
