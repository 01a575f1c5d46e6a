"""
Keyword passage retriever.

Scores every topic in the corpus by case-insensitive substring match of the
query against the topic title and the title/body of each of its lessons, and
returns the best passages for splicing into a tutor prompt.

Scoring:
    topic title contains query   -> 3
    lesson body contains query   -> 2
    lesson title contains query  -> 2
    topic score = title score + score of its best lesson

Nothing is cached between calls and the corpus is never mutated. Errors
raised by the corpus provider propagate to the caller unchanged.
"""
from __future__ import annotations
from typing import List, Optional

from learnhub.domain.learning.models import Lesson, Topic
from learnhub.domain.rag.models import SNIPPET_LENGTH, RetrievedPassage, ScoredMatch
from learnhub.persistence.interfaces.storage import TopicCorpus

TITLE_SCORE = 3
LESSON_BODY_SCORE = 2
LESSON_TITLE_SCORE = 2


def _contains(text: Optional[str], needle: str) -> bool:
    return needle in (text or "").lower()


def score_lesson(lesson: Lesson, needle: str) -> int:
    score = 0
    if _contains(lesson.content, needle):
        score += LESSON_BODY_SCORE
    if _contains(lesson.title, needle):
        score += LESSON_TITLE_SCORE
    return score


def score_topic(topic: Topic, needle: str) -> Optional[ScoredMatch]:
    """Return the topic's match for an already lower-cased needle, or None if it scores 0."""
    title_score = TITLE_SCORE if _contains(topic.title, needle) else 0

    best_lesson: Optional[Lesson] = None
    best_score = 0
    # Topics without a content block are scored on their title alone
    lessons = topic.content.lessons if topic.content is not None else []
    for lesson in lessons:
        s = score_lesson(lesson, needle)
        if s > best_score:  # strict: the first lesson wins ties
            best_score = s
            best_lesson = lesson

    total = title_score + best_score
    if total <= 0:
        return None
    return ScoredMatch(topic=topic, lesson=best_lesson, score=total)


def to_passage(match: ScoredMatch) -> RetrievedPassage:
    if match.lesson is not None:
        snippet = (match.lesson.content or "")[:SNIPPET_LENGTH]
    else:
        snippet = (match.topic.description or "")[:SNIPPET_LENGTH]
    return RetrievedPassage(
        topic_id=match.topic.id,
        topic_title=match.topic.title,
        lesson_id=match.lesson.id if match.lesson else None,
        lesson_title=match.lesson.title if match.lesson else None,
        snippet=snippet,
    )


def search(corpus: TopicCorpus, query: str, top_k: int = 3) -> List[RetrievedPassage]:
    """
    Return up to `top_k` passages ordered by descending score.

    Equal scores keep corpus order. An empty or whitespace-only query matches
    nothing, since every string contains the empty string.
    """
    needle = (query or "").lower()
    if not needle.strip() or top_k <= 0:
        return []

    matches: List[ScoredMatch] = []
    for topic in corpus.list_topics():
        match = score_topic(topic, needle)
        if match is not None:
            matches.append(match)

    # sorted() is stable, so ties stay in corpus order
    ranked = sorted(matches, key=lambda m: m.score, reverse=True)
    return [to_passage(m) for m in ranked[:top_k]]
