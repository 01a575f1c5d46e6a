"""Transient records produced by the passage retriever."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from learnhub.domain.learning.models import Lesson, Topic

SNIPPET_LENGTH = 200


@dataclass(frozen=True)
class ScoredMatch:
    topic: Topic
    lesson: Optional[Lesson]  # always one of topic.content.lessons
    score: int


@dataclass(frozen=True)
class RetrievedPassage:
    topic_id: str
    topic_title: str
    lesson_id: Optional[str]
    lesson_title: Optional[str]
    snippet: str  # at most SNIPPET_LENGTH chars
