"""Passage retriever tests against small fixture corpora."""
import pytest

from learnhub.domain.learning.models import Lesson, Topic, TopicContent
from learnhub.domain.rag import retriever
from learnhub.persistence.interfaces.storage import TopicCorpus
from learnhub.persistence.seed import default_topics


class ListCorpus(TopicCorpus):
    def __init__(self, topics):
        self.topics = topics
        self.calls = 0

    def list_topics(self):
        self.calls += 1
        return self.topics


class BrokenCorpus(TopicCorpus):
    def list_topics(self):
        raise ConnectionError("store unavailable")


def make_topic(topic_id, title, description="", lessons=None):
    content = TopicContent(lessons=lessons) if lessons is not None else None
    return Topic(
        id=topic_id,
        name=topic_id,
        title=title,
        description=description,
        category="Test",
        difficulty="beginner",
        estimated_time=10,
        content=content,
    )


# ------------------------------------------------------------------
# Basic contract
# ------------------------------------------------------------------
def test_empty_corpus_returns_nothing():
    assert retriever.search(ListCorpus([]), "anything", 5) == []


def test_exact_title_match_uses_description_snippet():
    description = "Learn the basic building blocks of deep learning. " * 10
    corpus = ListCorpus([make_topic("nn", "Neural Networks Fundamentals", description)])

    results = retriever.search(corpus, "neural networks", 5)

    assert len(results) == 1
    assert results[0].topic_id == "nn"
    assert results[0].topic_title == "Neural Networks Fundamentals"
    assert results[0].lesson_id is None
    assert results[0].lesson_title is None
    assert results[0].snippet == description[:200]


def test_lesson_match_populates_lesson_and_body_snippet():
    lesson = Lesson(id="l1", title="Intro", content="Gradient descent walks downhill on the loss surface.")
    corpus = ListCorpus([make_topic("x", "X", "topic description", [lesson])])

    results = retriever.search(corpus, "gradient descent", 5)

    assert len(results) == 1
    assert results[0].lesson_id == "l1"
    assert results[0].lesson_title == "Intro"
    assert results[0].snippet == lesson.content
    assert results[0].snippet != "topic description"


def test_top_k_truncates_and_orders_by_score():
    q = "tensor"
    topics = [
        # 2: lesson body only
        make_topic("t2", "A", lessons=[Lesson(id="a", title="a", content="tensor ops")]),
        # 7: title + lesson title + body
        make_topic("t7", "Tensor basics", lessons=[Lesson(id="b", title="Tensor shapes", content="a tensor")]),
        # 3: title only
        make_topic("t3", "Tensor math"),
        # 4: lesson title + body
        make_topic("t4", "B", lessons=[Lesson(id="c", title="Tensor", content="tensor")]),
        # 5: title + lesson body
        make_topic("t5", "Tensors", lessons=[Lesson(id="d", title="d", content="tensor")]),
    ]

    results = retriever.search(ListCorpus(topics), q, 3)

    assert [r.topic_id for r in results] == ["t7", "t5", "t4"]


def test_lesson_and_title_match_outranks_title_only():
    title_only = make_topic("title-only", "Python loops")
    both = make_topic(
        "both",
        "Python loops in depth",
        lessons=[Lesson(id="l", title="Python loops explained", content="Python loops repeat work")],
    )

    results = retriever.search(ListCorpus([title_only, both]), "python loops", 5)

    assert [r.topic_id for r in results] == ["both", "title-only"]


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_blank_query_matches_nothing(query):
    corpus = ListCorpus(default_topics())
    assert retriever.search(corpus, query, 5) == []


def test_repeated_search_is_identical_and_leaves_corpus_untouched():
    topics = default_topics()
    snapshot = [t.title for t in topics], [len(t.content.lessons) for t in topics]
    corpus = ListCorpus(topics)

    first = retriever.search(corpus, "neural", 3)
    second = retriever.search(corpus, "neural", 3)

    assert first == second
    assert ([t.title for t in topics], [len(t.content.lessons) for t in topics]) == snapshot


def test_snippets_never_exceed_200_chars():
    long_body = "attention " * 100
    topics = [
        make_topic("a", "Attention", "attention " * 50),
        make_topic("b", "B", lessons=[Lesson(id="l", title="Attention", content=long_body)]),
    ]

    results = retriever.search(ListCorpus(topics), "attention", 10)

    assert len(results) == 2
    assert all(len(r.snippet) <= 200 for r in results)


# ------------------------------------------------------------------
# Edge cases
# ------------------------------------------------------------------
def test_matching_is_case_insensitive():
    corpus = ListCorpus([make_topic("cnn", "Convolutional Neural Networks")])
    assert [r.topic_id for r in retriever.search(corpus, "CONVOLUTIONAL", 3)] == ["cnn"]


def test_topic_without_content_is_scored_on_title_only():
    corpus = ListCorpus([make_topic("bare", "Reinforcement Learning", "Agents and rewards")])

    results = retriever.search(corpus, "reinforcement", 3)

    assert len(results) == 1
    assert results[0].lesson_id is None
    assert results[0].snippet == "Agents and rewards"


def test_first_lesson_wins_ties():
    lessons = [
        Lesson(id="first", title="one", content="backprop"),
        Lesson(id="second", title="two", content="backprop again"),
    ]
    corpus = ListCorpus([make_topic("t", "T", lessons=lessons)])

    assert retriever.search(corpus, "backprop", 1)[0].lesson_id == "first"


def test_equal_scores_keep_corpus_order():
    topics = [make_topic(f"t{i}", f"Linear algebra {i}") for i in range(4)]
    results = retriever.search(ListCorpus(topics), "linear algebra", 4)
    assert [r.topic_id for r in results] == ["t0", "t1", "t2", "t3"]


def test_non_positive_top_k_returns_nothing():
    corpus = ListCorpus(default_topics())
    assert retriever.search(corpus, "neural", 0) == []


def test_fewer_matches_than_top_k():
    results = retriever.search(ListCorpus(default_topics()), "convolutional", 10)
    assert [r.topic_id for r in results] == ["cnn"]


def test_seed_corpus_ranks_lesson_backed_match_first():
    # cnn matches "neural networks" in title and lesson body (3 + 2);
    # neural-networks matches title, lesson title and body (3 + 4)
    results = retriever.search(ListCorpus(default_topics()), "neural networks", 3)
    assert [r.topic_id for r in results] == ["neural-networks", "cnn"]
    assert results[0].lesson_id == "nn-intro"


def test_corpus_failure_propagates():
    with pytest.raises(ConnectionError):
        retriever.search(BrokenCorpus(), "neural", 3)


def test_corpus_is_read_once_per_search():
    corpus = ListCorpus(default_topics())
    retriever.search(corpus, "learning", 3)
    assert corpus.calls == 1
