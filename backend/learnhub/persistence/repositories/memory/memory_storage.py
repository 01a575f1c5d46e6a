"""In-memory implementation of Storage. State is lost on restart."""
from __future__ import annotations
import copy
import dataclasses
from typing import Any, Dict, List, Optional, TypeVar

from learnhub.domain.common.ids import now_iso
from learnhub.domain.learning.models import (
    ChatSession,
    LearningPath,
    Project,
    ResearchPaper,
    Topic,
    User,
    UserProgress,
    UserProject,
)
from learnhub.persistence.interfaces.storage import Storage

T = TypeVar("T")

# Fields an update may never overwrite
_IMMUTABLE_FIELDS = {"id", "user_id", "created_at"}


def _merge(record: T, updates: Dict[str, Any], **stamps: Any) -> T:
    names = {f.name for f in dataclasses.fields(record)}
    changes = {
        k: v for k, v in updates.items()
        if k in names and k not in _IMMUTABLE_FIELDS
    }
    changes.update(stamps)
    return dataclasses.replace(record, **changes)


class MemoryStorage(Storage):
    """
    Dict-backed store. Dicts keep insertion order, so list_* methods return
    records in the order they were created. Records are copied on the way in
    and out so callers never hold a reference into the store.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._learning_paths: Dict[str, LearningPath] = {}
        self._topics: Dict[str, Topic] = {}
        self._progress: Dict[str, UserProgress] = {}
        self._projects: Dict[str, Project] = {}
        self._user_projects: Dict[str, UserProject] = {}
        self._chat_sessions: Dict[str, ChatSession] = {}
        self._papers: Dict[str, ResearchPaper] = {}

    @staticmethod
    def _put(table: Dict[str, T], record: T) -> T:
        table[record.id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    @staticmethod
    def _get(table: Dict[str, T], key: str) -> Optional[T]:
        record = table.get(key)
        return copy.deepcopy(record) if record is not None else None

    @staticmethod
    def _select(table: Dict[str, T], **criteria: Any) -> List[T]:
        return [
            copy.deepcopy(r) for r in table.values()
            if all(getattr(r, k) == v for k, v in criteria.items())
        ]

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: str) -> Optional[User]:
        return self._get(self._users, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        matches = self._select(self._users, username=username)
        return matches[0] if matches else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        matches = self._select(self._users, email=email)
        return matches[0] if matches else None

    def create_user(self, user: User) -> User:
        return self._put(self._users, user)

    # ------------------------------------------------------------------
    # Learning paths
    # ------------------------------------------------------------------
    def get_learning_path(self, path_id: str) -> Optional[LearningPath]:
        return self._get(self._learning_paths, path_id)

    def list_learning_paths_by_user(self, user_id: str) -> List[LearningPath]:
        return self._select(self._learning_paths, user_id=user_id)

    def create_learning_path(self, path: LearningPath) -> LearningPath:
        return self._put(self._learning_paths, path)

    def update_learning_path(self, path_id: str, updates: Dict[str, Any]) -> Optional[LearningPath]:
        existing = self._learning_paths.get(path_id)
        if existing is None:
            return None
        return self._put(self._learning_paths, _merge(existing, updates, updated_at=now_iso()))

    # ------------------------------------------------------------------
    # Topics
    # ------------------------------------------------------------------
    def get_topic(self, topic_id: str) -> Optional[Topic]:
        return self._get(self._topics, topic_id)

    def get_topic_by_name(self, name: str) -> Optional[Topic]:
        matches = self._select(self._topics, name=name)
        return matches[0] if matches else None

    def list_topics(self) -> List[Topic]:
        return self._select(self._topics)

    def list_topics_by_category(self, category: str) -> List[Topic]:
        return self._select(self._topics, category=category)

    def create_topic(self, topic: Topic) -> Topic:
        return self._put(self._topics, topic)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    def get_progress(self, user_id: str, topic_id: str) -> Optional[UserProgress]:
        matches = self._select(self._progress, user_id=user_id, topic_id=topic_id)
        return matches[0] if matches else None

    def get_progress_by_id(self, progress_id: str) -> Optional[UserProgress]:
        return self._get(self._progress, progress_id)

    def list_progress_by_user(self, user_id: str) -> List[UserProgress]:
        return self._select(self._progress, user_id=user_id)

    def create_progress(self, progress: UserProgress) -> UserProgress:
        if not progress.last_accessed_at:
            progress = dataclasses.replace(progress, last_accessed_at=now_iso())
        return self._put(self._progress, progress)

    def update_progress(self, progress_id: str, updates: Dict[str, Any]) -> Optional[UserProgress]:
        existing = self._progress.get(progress_id)
        if existing is None:
            return None
        return self._put(self._progress, _merge(existing, updates, last_accessed_at=now_iso()))

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def get_project(self, project_id: str) -> Optional[Project]:
        return self._get(self._projects, project_id)

    def list_projects(self) -> List[Project]:
        return self._select(self._projects)

    def list_projects_by_category(self, category: str) -> List[Project]:
        return self._select(self._projects, category=category)

    def create_project(self, project: Project) -> Project:
        return self._put(self._projects, project)

    # ------------------------------------------------------------------
    # User projects
    # ------------------------------------------------------------------
    def get_user_project(self, user_id: str, project_id: str) -> Optional[UserProject]:
        matches = self._select(self._user_projects, user_id=user_id, project_id=project_id)
        return matches[0] if matches else None

    def list_user_projects_by_user(self, user_id: str) -> List[UserProject]:
        return self._select(self._user_projects, user_id=user_id)

    def create_user_project(self, user_project: UserProject) -> UserProject:
        return self._put(self._user_projects, user_project)

    def update_user_project(self, user_project_id: str, updates: Dict[str, Any]) -> Optional[UserProject]:
        existing = self._user_projects.get(user_project_id)
        if existing is None:
            return None
        return self._put(self._user_projects, _merge(existing, updates))

    # ------------------------------------------------------------------
    # Chat sessions
    # ------------------------------------------------------------------
    def get_chat_session(self, session_id: str) -> Optional[ChatSession]:
        return self._get(self._chat_sessions, session_id)

    def list_chat_sessions_by_user(self, user_id: str) -> List[ChatSession]:
        return self._select(self._chat_sessions, user_id=user_id)

    def create_chat_session(self, session: ChatSession) -> ChatSession:
        return self._put(self._chat_sessions, session)

    def update_chat_session(self, session_id: str, updates: Dict[str, Any]) -> Optional[ChatSession]:
        existing = self._chat_sessions.get(session_id)
        if existing is None:
            return None
        return self._put(self._chat_sessions, _merge(existing, updates, updated_at=now_iso()))

    # ------------------------------------------------------------------
    # Research papers
    # ------------------------------------------------------------------
    def get_research_paper(self, paper_id: str) -> Optional[ResearchPaper]:
        return self._get(self._papers, paper_id)

    def list_trending_papers(self, limit: int = 5) -> List[ResearchPaper]:
        papers = sorted(self._select(self._papers), key=lambda p: p.trending_score, reverse=True)
        return papers[:max(limit, 0)]

    def list_papers_by_category(self, category: str) -> List[ResearchPaper]:
        return self._select(self._papers, category=category)

    def create_research_paper(self, paper: ResearchPaper) -> ResearchPaper:
        return self._put(self._papers, paper)
