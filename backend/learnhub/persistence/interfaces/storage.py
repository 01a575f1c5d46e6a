"""Abstract storage interfaces for the learning aggregates."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

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


class TopicCorpus(ABC):
    """Read-only view of the topic catalog. This is all the retriever needs."""

    @abstractmethod
    def list_topics(self) -> List[Topic]:
        """Return every topic, in insertion order."""
        ...


class Storage(TopicCorpus):
    """
    Full store used by the application layer.

    `update_*` methods merge the given fields into the existing record and
    return the updated copy, or None when the id is unknown.
    """

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, user: User) -> User: ...

    # ------------------------------------------------------------------
    # Learning paths
    # ------------------------------------------------------------------
    @abstractmethod
    def get_learning_path(self, path_id: str) -> Optional[LearningPath]: ...

    @abstractmethod
    def list_learning_paths_by_user(self, user_id: str) -> List[LearningPath]: ...

    @abstractmethod
    def create_learning_path(self, path: LearningPath) -> LearningPath: ...

    @abstractmethod
    def update_learning_path(self, path_id: str, updates: Dict[str, Any]) -> Optional[LearningPath]: ...

    # ------------------------------------------------------------------
    # Topics
    # ------------------------------------------------------------------
    @abstractmethod
    def get_topic(self, topic_id: str) -> Optional[Topic]: ...

    @abstractmethod
    def get_topic_by_name(self, name: str) -> Optional[Topic]: ...

    @abstractmethod
    def list_topics_by_category(self, category: str) -> List[Topic]: ...

    @abstractmethod
    def create_topic(self, topic: Topic) -> Topic: ...

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    @abstractmethod
    def get_progress(self, user_id: str, topic_id: str) -> Optional[UserProgress]: ...

    @abstractmethod
    def get_progress_by_id(self, progress_id: str) -> Optional[UserProgress]: ...

    @abstractmethod
    def list_progress_by_user(self, user_id: str) -> List[UserProgress]: ...

    @abstractmethod
    def create_progress(self, progress: UserProgress) -> UserProgress: ...

    @abstractmethod
    def update_progress(self, progress_id: str, updates: Dict[str, Any]) -> Optional[UserProgress]: ...

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    @abstractmethod
    def get_project(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_projects(self) -> List[Project]: ...

    @abstractmethod
    def list_projects_by_category(self, category: str) -> List[Project]: ...

    @abstractmethod
    def create_project(self, project: Project) -> Project: ...

    # ------------------------------------------------------------------
    # User projects
    # ------------------------------------------------------------------
    @abstractmethod
    def get_user_project(self, user_id: str, project_id: str) -> Optional[UserProject]: ...

    @abstractmethod
    def list_user_projects_by_user(self, user_id: str) -> List[UserProject]: ...

    @abstractmethod
    def create_user_project(self, user_project: UserProject) -> UserProject: ...

    @abstractmethod
    def update_user_project(self, user_project_id: str, updates: Dict[str, Any]) -> Optional[UserProject]: ...

    # ------------------------------------------------------------------
    # Chat sessions
    # ------------------------------------------------------------------
    @abstractmethod
    def get_chat_session(self, session_id: str) -> Optional[ChatSession]: ...

    @abstractmethod
    def list_chat_sessions_by_user(self, user_id: str) -> List[ChatSession]: ...

    @abstractmethod
    def create_chat_session(self, session: ChatSession) -> ChatSession: ...

    @abstractmethod
    def update_chat_session(self, session_id: str, updates: Dict[str, Any]) -> Optional[ChatSession]: ...

    # ------------------------------------------------------------------
    # Research papers
    # ------------------------------------------------------------------
    @abstractmethod
    def get_research_paper(self, paper_id: str) -> Optional[ResearchPaper]: ...

    @abstractmethod
    def list_trending_papers(self, limit: int = 5) -> List[ResearchPaper]:
        """Papers ordered by descending trending_score."""
        ...

    @abstractmethod
    def list_papers_by_category(self, category: str) -> List[ResearchPaper]: ...

    @abstractmethod
    def create_research_paper(self, paper: ResearchPaper) -> ResearchPaper: ...
