"""OpenRouter provider — OpenAI-compatible chat completions over plain HTTP."""
from __future__ import annotations
import requests

from learnhub.core.config import (
    LLM_TIMEOUT_SECONDS,
    OPENROUTER_API_KEY,
    OPENROUTER_API_URL,
    OPENROUTER_DEFAULT_MODEL,
)
from learnhub.services.llm.base import ChatMessages, ChatResult, LLMProvider, LLMProviderError


def _clean_key(key: str) -> str:
    # Common copy-paste damage: "sk or v1..." and stray spaces
    key = key.strip()
    if key.startswith("sk or v1"):
        key = "sk-or-v1" + key[8:]
    return key.replace(" ", "")


class OpenRouterProvider(LLMProvider):

    provider_name = "openrouter"
    default_model = OPENROUTER_DEFAULT_MODEL

    def __init__(self, api_key: str = OPENROUTER_API_KEY, base_url: str = OPENROUTER_API_URL):
        api_key = _clean_key(api_key)
        if not api_key:
            raise LLMProviderError("OpenRouter provider not configured. Set OPENROUTER_API_KEY.")
        self.url = f"{base_url}/chat/completions"
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "X-Title": "LearnHub",
        })

    def chat(self, messages: ChatMessages, model: str, temperature: float) -> ChatResult:
        payload = {"model": model, "messages": messages, "temperature": temperature}
        try:
            response = self.session.post(self.url, json=payload, timeout=LLM_TIMEOUT_SECONDS)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise LLMProviderError(f"OpenRouter request failed: {e}") from e

        choices = data.get("choices") or []
        content = ""
        if choices:
            content = (choices[0].get("message") or {}).get("content") or ""
        return ChatResult(content=content, raw=data)
