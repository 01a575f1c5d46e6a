import pytest

from learnhub.services.llm import registry
from learnhub.services.llm.base import ChatResult, LLMProvider, LLMProviderError


@pytest.fixture(autouse=True)
def _fresh_registry():
    registry.reset_providers()
    yield
    registry.reset_providers()


class EchoProvider(LLMProvider):
    provider_name = "echo"
    default_model = "echo-1"

    def __init__(self):
        self.seen = []

    def chat(self, messages, model, temperature):
        self.seen.append((model, temperature))
        return ChatResult(content=messages[-1]["content"])


@pytest.mark.parametrize("name", ["gemini", "mistral", "claude"])
def test_stub_providers_report_not_configured(name):
    with pytest.raises(LLMProviderError, match="not configured"):
        registry.send_chat([{"role": "user", "content": "hi"}], provider=name)


def test_unknown_provider():
    with pytest.raises(LLMProviderError, match="Unknown provider: llama"):
        registry.get_provider("llama")


def test_openai_without_key():
    from learnhub.services.llm import openai_chat

    with pytest.raises(LLMProviderError, match="OPENAI_API_KEY"):
        openai_chat.OpenAIChatProvider(api_key="")


def test_send_chat_uses_provider_defaults(monkeypatch):
    echo = EchoProvider()
    monkeypatch.setattr(registry, "_create_provider", lambda name: echo)
    monkeypatch.setattr(registry, "DEFAULT_LLM_MODEL", "")

    result = registry.send_chat([{"role": "user", "content": "ping"}], provider="echo")

    assert result.content == "ping"
    assert echo.seen == [("echo-1", registry.DEFAULT_LLM_TEMPERATURE)]


def test_providers_are_reused(monkeypatch):
    created = []

    def factory(name):
        created.append(name)
        return EchoProvider()

    monkeypatch.setattr(registry, "_create_provider", factory)
    first = registry.get_provider("echo")
    second = registry.get_provider("ECHO")

    assert first is second
    assert created == ["echo"]


def test_openrouter_posts_chat_completion(monkeypatch):
    from learnhub.services.llm import openrouter

    captured = {}

    class FakeResponse:
        def raise_for_status(self):
            pass

        def json(self):
            return {"choices": [{"message": {"content": "hello"}}]}

    def fake_post(self, url, json, timeout):
        captured["url"] = url
        captured["payload"] = json
        return FakeResponse()

    monkeypatch.setattr(openrouter.requests.Session, "post", fake_post)
    provider = openrouter.OpenRouterProvider(api_key="sk or v1-abc", base_url="https://example.test/api/v1")

    result = provider.chat([{"role": "user", "content": "hi"}], model="m", temperature=0.1)

    assert result.content == "hello"
    assert captured["url"] == "https://example.test/api/v1/chat/completions"
    assert captured["payload"]["model"] == "m"
    assert provider.session.headers["Authorization"] == "Bearer sk-or-v1-abc"
