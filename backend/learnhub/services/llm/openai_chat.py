"""OpenAI Chat Completions provider (official SDK)."""
from __future__ import annotations
import openai

from learnhub.core.config import LLM_TIMEOUT_SECONDS, OPENAI_API_KEY, OPENAI_DEFAULT_MODEL
from learnhub.services.llm.base import ChatMessages, ChatResult, LLMProvider, LLMProviderError


class OpenAIChatProvider(LLMProvider):

    provider_name = "openai"
    default_model = OPENAI_DEFAULT_MODEL

    def __init__(self, api_key: str = OPENAI_API_KEY):
        if not api_key:
            raise LLMProviderError("OpenAI provider not configured. Set OPENAI_API_KEY.")
        self.client = openai.OpenAI(api_key=api_key, timeout=LLM_TIMEOUT_SECONDS)

    def chat(self, messages: ChatMessages, model: str, temperature: float) -> ChatResult:
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": m["role"], "content": m["content"]} for m in messages],
                temperature=temperature,
            )
        except openai.OpenAIError as e:
            raise LLMProviderError(f"OpenAI request failed: {e}") from e

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        return ChatResult(content=content, raw=response)
