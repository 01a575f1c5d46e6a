from learnhub.domain.learning.models import ResearchPaper, UserProgress
from learnhub.persistence.repositories.memory.memory_storage import MemoryStorage
from learnhub.persistence.seed import seed_storage


def _seeded():
    s = MemoryStorage()
    seed_storage(s)
    return s


def test_seed_loads_catalog_in_order():
    s = _seeded()
    assert [t.id for t in s.list_topics()] == ["ml-basics", "neural-networks", "cnn"]
    assert s.get_topic_by_name("cnn").title == "Convolutional Neural Networks"
    assert [t.id for t in s.list_topics_by_category("Deep Learning")] == ["neural-networks"]
    assert s.get_project("image-classifier").steps[0].hints


def test_returned_records_are_copies():
    s = _seeded()
    topic = s.get_topic("cnn")
    topic.title = "changed"
    topic.content.lessons.clear()

    fresh = s.get_topic("cnn")
    assert fresh.title == "Convolutional Neural Networks"
    assert len(fresh.content.lessons) == 1


def test_update_merges_known_fields_and_stamps_access_time():
    s = MemoryStorage()
    s.create_progress(UserProgress(id="p1", user_id="u1", topic_id="cnn", status="in_progress"))

    updated = s.update_progress("p1", {"progress_percentage": 40, "bogus": 1, "user_id": "other"})

    assert updated.progress_percentage == 40
    assert updated.user_id == "u1"
    assert updated.last_accessed_at
    assert s.get_progress("u1", "cnn").progress_percentage == 40


def test_update_unknown_id_returns_none():
    s = MemoryStorage()
    assert s.update_progress("missing", {"status": "completed"}) is None
    assert s.update_learning_path("missing", {}) is None
    assert s.update_chat_session("missing", {}) is None
    assert s.update_user_project("missing", {}) is None


def test_trending_papers_sorted_and_limited():
    s = _seeded()
    s.create_research_paper(ResearchPaper(
        id="low", title="Low", authors=[], abstract="", url="", category="NLP",
        reading_time=5, trending_score=10,
    ))
    s.create_research_paper(ResearchPaper(
        id="high", title="High", authors=[], abstract="", url="", category="NLP",
        reading_time=5, trending_score=99,
    ))

    assert [p.id for p in s.list_trending_papers(2)] == ["high", "attention-is-all-you-need"]
    assert [p.id for p in s.list_papers_by_category("NLP")] == ["low", "high"]
