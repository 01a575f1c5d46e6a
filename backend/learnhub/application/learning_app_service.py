"""Application service — orchestrates validate → domain op → persist for learner data."""
from __future__ import annotations
import dataclasses
from typing import Any, Dict, List, Optional

import bcrypt

from learnhub.application.tutor_service import TutorResponse, TutorService
from learnhub.domain.common.ids import new_id, now_iso
from learnhub.domain.common.result import Result
from learnhub.domain.learning import rules
from learnhub.domain.learning.models import (
    ChatMessage,
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


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def _known_fields(model: type, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in dataclasses.fields(model)}
    return {k: v for k, v in data.items() if k in names}


class LearningAppService:
    def __init__(self, storage: Storage):
        self._storage = storage

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, data: Dict[str, Any]) -> Result[User]:
        validation = rules.validate_user(data)
        if not validation.is_success:
            return Result.fail(validation.error)
        if self._storage.get_user_by_username(data["username"]):
            return Result.fail(f"Username '{data['username']}' is already taken.")
        if self._storage.get_user_by_email(data["email"]):
            return Result.fail(f"Email '{data['email']}' is already registered.")

        user = User(
            id=new_id(),
            username=data["username"],
            email=data["email"],
            password_hash=hash_password(data["password"]),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            created_at=now_iso(),
        )
        return Result.ok(self._storage.create_user(user))

    def get_user(self, user_id: str) -> Optional[User]:
        return self._storage.get_user(user_id)

    # ------------------------------------------------------------------
    # Topics
    # ------------------------------------------------------------------
    def list_topics(self) -> List[Topic]:
        return self._storage.list_topics()

    def get_topic(self, topic_id: str) -> Optional[Topic]:
        return self._storage.get_topic(topic_id)

    def list_topics_by_category(self, category: str) -> List[Topic]:
        return self._storage.list_topics_by_category(category)

    # ------------------------------------------------------------------
    # Learning paths
    # ------------------------------------------------------------------
    def list_learning_paths(self, user_id: str) -> List[LearningPath]:
        return self._storage.list_learning_paths_by_user(user_id)

    def create_learning_path(self, data: Dict[str, Any]) -> Result[LearningPath]:
        validation = rules.validate_learning_path(data)
        if not validation.is_success:
            return Result.fail(validation.error)
        now = now_iso()
        fields = _known_fields(LearningPath, data)
        fields.update(id=new_id(), created_at=now, updated_at=now)
        return Result.ok(self._storage.create_learning_path(LearningPath(**fields)))

    def update_learning_path(self, path_id: str, updates: Dict[str, Any]) -> Result[LearningPath]:
        validation = rules.validate_learning_path(updates, partial=True)
        if not validation.is_success:
            return Result.fail(validation.error)
        updated = self._storage.update_learning_path(path_id, updates)
        if updated is None:
            return Result.not_found("Learning path not found")
        return Result.ok(updated)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    def list_progress(self, user_id: str) -> List[UserProgress]:
        return self._storage.list_progress_by_user(user_id)

    def get_progress(self, user_id: str, topic_id: str) -> Optional[UserProgress]:
        return self._storage.get_progress(user_id, topic_id)

    def create_progress(self, data: Dict[str, Any]) -> Result[UserProgress]:
        validation = rules.validate_progress(data)
        if not validation.is_success:
            return Result.fail(validation.error)
        now = now_iso()
        fields = _known_fields(UserProgress, rules.apply_completion(data, now))
        fields.update(id=new_id(), last_accessed_at=now)
        return Result.ok(self._storage.create_progress(UserProgress(**fields)))

    def update_progress(self, progress_id: str, updates: Dict[str, Any]) -> Result[UserProgress]:
        validation = rules.validate_progress(updates, partial=True)
        if not validation.is_success:
            return Result.fail(validation.error)
        updated = self._storage.update_progress(progress_id, rules.apply_completion(updates, now_iso()))
        if updated is None:
            return Result.not_found("Progress not found")
        return Result.ok(updated)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def list_projects(self) -> List[Project]:
        return self._storage.list_projects()

    def get_project(self, project_id: str) -> Optional[Project]:
        return self._storage.get_project(project_id)

    def list_user_projects(self, user_id: str) -> List[UserProject]:
        return self._storage.list_user_projects_by_user(user_id)

    def start_user_project(self, user_id: str, project_id: str) -> Result[UserProject]:
        """Return the learner's existing attempt, or open a new one seeded with the starter code."""
        project = self._storage.get_project(project_id)
        if project is None:
            return Result.not_found(f"Project '{project_id}' not found")
        existing = self._storage.get_user_project(user_id, project_id)
        if existing is not None:
            return Result.ok(existing)
        attempt = UserProject(
            id=new_id(),
            user_id=user_id,
            project_id=project_id,
            status="in_progress",
            code=project.starter_code,
        )
        return Result.ok(self._storage.create_user_project(attempt))

    def update_user_project(self, user_project_id: str, updates: Dict[str, Any]) -> Result[UserProject]:
        validation = rules.validate_user_project_update(updates)
        if not validation.is_success:
            return Result.fail(validation.error)
        if updates.get("status") == "completed":
            updates = dict(updates)
            updates.setdefault("submitted_at", now_iso())
        updated = self._storage.update_user_project(user_project_id, updates)
        if updated is None:
            return Result.not_found("User project not found")
        return Result.ok(updated)

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------
    def list_chat_sessions(self, user_id: str) -> List[ChatSession]:
        return self._storage.list_chat_sessions_by_user(user_id)

    def create_chat_session(self, user_id: str, context: Optional[Dict[str, Any]] = None) -> Result[ChatSession]:
        if not (user_id or "").strip():
            return Result.fail("'user_id' is required and cannot be empty.")
        now = now_iso()
        session = ChatSession(id=new_id(), user_id=user_id, context=context or {}, created_at=now, updated_at=now)
        return Result.ok(self._storage.create_chat_session(session))

    def post_chat_message(
        self,
        session_id: str,
        message: str,
        context: Optional[Dict[str, Any]],
        tutor: TutorService,
    ) -> Result[tuple[TutorResponse, ChatSession]]:
        validation = rules.validate_chat_message(message)
        if not validation.is_success:
            return Result.fail(validation.error)
        session = self._storage.get_chat_session(session_id)
        if session is None:
            return Result.not_found("Chat session not found")

        tutor_context = dict(context or {})
        tutor_context["previous_messages"] = [{"role": m.role, "content": m.content} for m in session.messages]
        reply = tutor.generate_tutor_response(message, tutor_context)

        now = now_iso()
        messages = session.messages + [
            ChatMessage(id=new_id(), role="user", content=message, timestamp=now),
            ChatMessage(id=new_id(), role="assistant", content=reply.message, timestamp=now),
        ]
        updates: Dict[str, Any] = {"messages": messages}
        if context is not None:
            updates["context"] = context
        updated = self._storage.update_chat_session(session_id, updates)
        return Result.ok((reply, updated))

    # ------------------------------------------------------------------
    # Research papers
    # ------------------------------------------------------------------
    def trending_papers(self, limit: int = 5) -> List[ResearchPaper]:
        return self._storage.list_trending_papers(limit)

    def papers_by_category(self, category: str) -> List[ResearchPaper]:
        return self._storage.list_papers_by_category(category)

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    def dashboard(self, user_id: str) -> Result[Dict[str, Any]]:
        user = self._storage.get_user(user_id)
        if user is None:
            return Result.not_found("User not found")

        progress = self._storage.list_progress_by_user(user_id)
        paths = self._storage.list_learning_paths_by_user(user_id)
        sessions = self._storage.list_chat_sessions_by_user(user_id)
        return Result.ok({
            "user": user,
            "stats": rules.dashboard_stats(progress, paths),
            "current_learning_path": paths[0] if paths else None,
            "progress": progress,
            "trending_papers": self._storage.list_trending_papers(3),
            "recent_chat_sessions": sessions[:1],
        })
