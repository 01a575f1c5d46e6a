"""TutorService tests with a fake chat backend."""
import pytest

from learnhub.application.tutor_service import (
    TUTOR_ERROR_MESSAGE,
    TutorService,
    parse_json_reply,
    resources_for_content,
)
from learnhub.persistence.repositories.memory.memory_storage import MemoryStorage
from learnhub.persistence.seed import seed_storage
from learnhub.services.llm import ChatResult, LLMProviderError


class FakeChat:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def __call__(self, messages, **kwargs):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return ChatResult(content=self.reply)


@pytest.fixture
def storage():
    s = MemoryStorage()
    seed_storage(s)
    return s


# ------------------------------------------------------------------
# Tutor replies
# ------------------------------------------------------------------
def test_tutor_response_grounds_prompt_on_retrieved_passages(storage):
    chat = FakeChat("Neurons pass signals forward. Try the practice exercise.")
    tutor = TutorService(storage, chat=chat, top_k=4)

    reply = tutor.generate_tutor_response("neural networks")

    messages = chat.calls[0]
    assert [m["role"] for m in messages] == ["system", "user", "user"]
    assert "Topic: Neural Networks Fundamentals" in messages[1]["content"]
    assert "Lesson: Introduction to Neural Networks" in messages[1]["content"]
    assert messages[2]["content"] == "Question: neural networks"

    assert reply.message.startswith("Neurons pass signals")
    assert [s.topic_id for s in reply.sources] == ["neural-networks", "cnn"]
    assert reply.resources == [{"title": "Interactive Coding Exercise", "url": "/sandbox", "type": "exercise"}]


def test_tutor_response_without_matches_still_asks_llm(storage):
    chat = FakeChat("I can help with that.")
    reply = TutorService(storage, chat=chat).generate_tutor_response("quantum chemistry")

    assert reply.sources == []
    assert chat.calls[0][1]["content"] == "Context passages:\n"


def test_tutor_response_degrades_when_llm_fails(storage):
    chat = FakeChat(error=LLMProviderError("OpenAI provider not configured. Set OPENAI_API_KEY."))
    reply = TutorService(storage, chat=chat).generate_tutor_response("neural networks")

    assert reply.message == TUTOR_ERROR_MESSAGE
    assert reply.sources == []


def test_tutor_response_degrades_when_corpus_fails():
    class Broken(MemoryStorage):
        def list_topics(self):
            raise RuntimeError("boom")

    chat = FakeChat("unused")
    reply = TutorService(Broken(), chat=chat).generate_tutor_response("anything")

    assert reply.message == TUTOR_ERROR_MESSAGE
    assert chat.calls == []


# ------------------------------------------------------------------
# Assessment / paths / summaries
# ------------------------------------------------------------------
def test_assessment_parses_fenced_json(storage):
    chat = FakeChat('```json\n{"level": "advanced", "strengths": ["math"], "weaknesses": []}\n```')
    result = TutorService(storage, chat=chat).assess_user_knowledge({"q1": "a"})
    assert result == {"level": "advanced", "strengths": ["math"], "weaknesses": []}


def test_assessment_falls_back_to_beginner(storage):
    result = TutorService(storage, chat=FakeChat("You seem keen!")).assess_user_knowledge([])
    assert result == {"level": "beginner", "strengths": [], "weaknesses": []}


def test_assessment_propagates_llm_errors(storage):
    tutor = TutorService(storage, chat=FakeChat(error=LLMProviderError("down")))
    with pytest.raises(LLMProviderError):
        tutor.assess_user_knowledge([])


def test_learning_path_fallback(storage):
    result = TutorService(storage, chat=FakeChat("not json")).generate_learning_path(["ml"], "beginner")
    assert result[0]["id"] == "ml-basics"


def test_learning_path_passthrough(storage):
    chat = FakeChat('[{"id": "cnn", "title": "CNNs", "lessons": []}]')
    result = TutorService(storage, chat=chat).generate_learning_path(["vision"], "intermediate")
    assert result == [{"id": "cnn", "title": "CNNs", "lessons": []}]
    assert '["vision"]' in chat.calls[0][0]["content"]


def test_summary_fallback_keeps_raw_text(storage):
    result = TutorService(storage, chat=FakeChat("A short summary.")).summarize_research_paper("T", "A")
    assert result == {
        "summary": "A short summary.",
        "keyPoints": [],
        "relevantTopics": [],
        "difficulty": "intermediate",
    }


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------
def test_parse_json_reply_rejects_prose():
    with pytest.raises(ValueError):
        parse_json_reply("no json here")


def test_resources_for_content_caps_at_two():
    text = "Use PyTorch or TensorFlow, then practice with an exercise."
    resources = resources_for_content(text)
    assert [r["type"] for r in resources] == ["article", "exercise"]
    assert resources_for_content("nothing relevant") == []


def test_tutor_response_replays_recent_history(storage):
    chat = FakeChat("ok")
    history = [{"role": "user", "content": f"q{i}"} for i in range(25)]

    TutorService(storage, chat=chat).generate_tutor_response("cnn", {"previous_messages": history})

    messages = chat.calls[0]
    assert len(messages) == 1 + 20 + 2
    assert messages[1]["content"] == "q5"
    assert messages[-1]["content"] == "Question: cnn"
