"""AI tutor and the other LLM-backed helpers (assessment, path generation, paper summaries)."""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from learnhub.core.config import RAG_TOP_K
from learnhub.domain.rag import retriever
from learnhub.domain.rag.models import RetrievedPassage
from learnhub.persistence.interfaces.storage import TopicCorpus
from learnhub.services.llm import ChatResult, send_chat

logger = logging.getLogger(__name__)

TUTOR_SYSTEM_PROMPT = (
    "You are a helpful AI tutor. Use the provided context passages from the course "
    "material to answer the user. If insufficient, answer succinctly and recommend "
    "lessons to study."
)
TUTOR_ERROR_MESSAGE = "Sorry — the tutor encountered an error. Try again later."

# Prior chat turns replayed to the model
MAX_HISTORY_MESSAGES = 20

FALLBACK_LEARNING_PATH = [
    {"id": "ml-basics", "title": "Machine Learning Basics", "lessons": [{"id": "ml-intro", "title": "Intro to ML"}]},
]

ChatFn = Callable[..., ChatResult]


@dataclass
class TutorResponse:
    message: str
    sources: List[RetrievedPassage] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    resources: List[Dict[str, str]] = field(default_factory=list)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------
def format_passages(passages: List[RetrievedPassage]) -> str:
    return "\n---\n".join(
        f"Topic: {p.topic_title}\nLesson: {p.lesson_title or ''}\nSnippet: {p.snippet}"
        for p in passages
    )


def parse_json_reply(content: str) -> Any:
    """json.loads that tolerates a ```json fenced block. Raises ValueError."""
    text = content or ""
    if "```json" in text:
        text = text.split("```json", 1)[1].split("```", 1)[0]
    elif "```" in text:
        text = text.split("```", 1)[1].split("```", 1)[0]
    return json.loads(text.strip())


def resources_for_content(content: str) -> List[Dict[str, str]]:
    text = (content or "").lower()
    resources = []
    if "tensorflow" in text or "pytorch" in text:
        resources.append({"title": "Official PyTorch Tutorials", "url": "https://pytorch.org/tutorials/", "type": "article"})
    if "practice" in text or "exercise" in text:
        resources.append({"title": "Interactive Coding Exercise", "url": "/sandbox", "type": "exercise"})
    return resources[:2]


# ------------------------------------------------------------------
# Service
# ------------------------------------------------------------------
class TutorService:
    """
    Wraps the text-generation backend with prompts for each AI feature.

    `chat` defaults to the configured provider; tests pass a fake.
    """

    def __init__(self, corpus: TopicCorpus, chat: Optional[ChatFn] = None, top_k: int = RAG_TOP_K):
        self._corpus = corpus
        self._chat = chat or send_chat
        self._top_k = top_k

    def _ask(self, prompt: str) -> str:
        return self._chat([{"role": "user", "content": prompt}]).content or ""

    def generate_tutor_response(self, message: str, context: Optional[Dict[str, Any]] = None) -> TutorResponse:
        """
        Answer a learner question grounded on retrieved course passages.

        Never raises: any retrieval or generation failure yields a degraded
        reply without sources.
        """
        try:
            sources = retriever.search(self._corpus, message, self._top_k)
            history = (context or {}).get("previous_messages") or []
            messages = [{"role": "system", "content": TUTOR_SYSTEM_PROMPT}]
            messages += [
                {"role": m["role"], "content": m["content"]} for m in history[-MAX_HISTORY_MESSAGES:]
            ]
            messages += [
                {"role": "user", "content": f"Context passages:\n{format_passages(sources)}"},
                {"role": "user", "content": f"Question: {message}"},
            ]
            content = self._chat(messages).content or ""
        except Exception:
            logger.exception("Tutor failed to answer; returning degraded reply")
            return TutorResponse(message=TUTOR_ERROR_MESSAGE)

        return TutorResponse(
            message=content,
            sources=sources,
            resources=resources_for_content(content),
        )

    def assess_user_knowledge(self, responses: Any) -> Dict[str, Any]:
        prompt = (
            "Given these assessment responses, classify the user's overall level "
            "(beginner/intermediate/advanced) and list strengths and weaknesses. "
            'Reply with JSON: {"level", "strengths", "weaknesses"}. '
            f"Responses: {json.dumps(responses)}"
        )
        content = self._ask(prompt)
        try:
            parsed = parse_json_reply(content)
        except ValueError:
            logger.warning("Assessment reply was not JSON; defaulting to beginner")
            return {"level": "beginner", "strengths": [], "weaknesses": []}
        if not isinstance(parsed, dict):
            return {"level": "beginner", "strengths": [], "weaknesses": []}
        return parsed

    def generate_learning_path(self, goals: List[str], level: str) -> Any:
        prompt = (
            f"Create a personalized learning path for goals: {json.dumps(goals)} at level {level}. "
            "Provide a JSON array of topics with id,title,lessons[]."
        )
        content = self._ask(prompt)
        try:
            return parse_json_reply(content)
        except ValueError:
            logger.warning("Learning path reply was not JSON; using fallback path")
            return [dict(t) for t in FALLBACK_LEARNING_PATH]

    def summarize_research_paper(self, title: str, abstract: str) -> Dict[str, Any]:
        prompt = (
            f"Summarize this paper for a learner: Title: {title}\nAbstract: {abstract}\n"
            "Provide JSON: {summary,keyPoints[],relevantTopics[],difficulty}"
        )
        content = self._ask(prompt)
        try:
            parsed = parse_json_reply(content)
            if isinstance(parsed, dict):
                return parsed
        except ValueError:
            pass
        return {"summary": content, "keyPoints": [], "relevantTopics": [], "difficulty": "intermediate"}
