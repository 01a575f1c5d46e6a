"""
Base types for text-generation providers.

A provider turns a list of role-tagged messages into generated text. Which
provider serves a call is decided by the registry.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

ChatMessages = List[Dict[str, str]]  # [{"role": "system"|"user"|"assistant", "content": "..."}]


class LLMProviderError(RuntimeError):
    """Provider missing, misconfigured, or the upstream call failed."""


@dataclass
class ChatResult:
    content: str
    raw: Optional[Any] = None


class LLMProvider(ABC):

    provider_name: str = "base"
    default_model: str = ""

    @abstractmethod
    def chat(self, messages: ChatMessages, model: str, temperature: float) -> ChatResult:
        """Send the messages and return the generated text."""
        ...
