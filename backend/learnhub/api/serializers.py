"""Domain object → JSON dict, in the camelCase shape the web client reads."""
from __future__ import annotations
from typing import Any, Dict, Optional

from learnhub.application.tutor_service import TutorResponse
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
from learnhub.domain.rag.models import RetrievedPassage


def serialize_user(u: User) -> dict:
    # password_hash never leaves the server
    return {
        "id": u.id,
        "username": u.username,
        "email": u.email,
        "firstName": u.first_name,
        "lastName": u.last_name,
        "createdAt": u.created_at,
    }


def serialize_topic(t: Topic) -> dict:
    content = None
    if t.content is not None:
        content = {
            "lessons": [
                {
                    "id": lesson.id,
                    "title": lesson.title,
                    "content": lesson.content,
                    "type": lesson.type,
                    "estimatedTime": lesson.estimated_time,
                }
                for lesson in t.content.lessons
            ],
            "prerequisites": t.content.prerequisites,
            "learningObjectives": t.content.learning_objectives,
        }
    return {
        "id": t.id,
        "name": t.name,
        "title": t.title,
        "description": t.description,
        "content": content,
        "difficulty": t.difficulty,
        "estimatedTime": t.estimated_time,
        "category": t.category,
        "tags": t.tags,
        "connections": t.connections,
    }


def serialize_passage(p: RetrievedPassage) -> dict:
    return {
        "topicId": p.topic_id,
        "topicTitle": p.topic_title,
        "lessonId": p.lesson_id,
        "lessonTitle": p.lesson_title,
        "snippet": p.snippet,
    }


def serialize_learning_path(lp: Optional[LearningPath]) -> Optional[dict]:
    if lp is None:
        return None
    return {
        "id": lp.id,
        "userId": lp.user_id,
        "name": lp.name,
        "description": lp.description,
        "difficulty": lp.difficulty,
        "topics": lp.topics,
        "completedTopics": lp.completed_topics,
        "currentTopicIndex": lp.current_topic_index,
        "progressPercentage": lp.progress_percentage,
        "createdAt": lp.created_at,
        "updatedAt": lp.updated_at,
    }


def serialize_progress(p: UserProgress) -> dict:
    return {
        "id": p.id,
        "userId": p.user_id,
        "topicId": p.topic_id,
        "status": p.status,
        "progressPercentage": p.progress_percentage,
        "completedLessons": p.completed_lessons,
        "timeSpent": p.time_spent,
        "lastAccessedAt": p.last_accessed_at,
        "completedAt": p.completed_at,
    }


def serialize_project(p: Project) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "description": p.description,
        "difficulty": p.difficulty,
        "category": p.category,
        "estimatedTime": p.estimated_time,
        "technologies": p.technologies,
        "instructions": {
            "steps": [
                {
                    "id": s.id,
                    "title": s.title,
                    "description": s.description,
                    "code": s.code,
                    "hints": s.hints,
                }
                for s in p.steps
            ],
        },
        "starterCode": p.starter_code,
        "solutionCode": p.solution_code,
    }


def serialize_user_project(up: UserProject) -> dict:
    return {
        "id": up.id,
        "userId": up.user_id,
        "projectId": up.project_id,
        "status": up.status,
        "code": up.code,
        "submittedAt": up.submitted_at,
        "score": up.score,
    }


def serialize_chat_session(s: Optional[ChatSession]) -> Optional[dict]:
    if s is None:
        return None
    return {
        "id": s.id,
        "userId": s.user_id,
        "messages": [
            {"id": m.id, "role": m.role, "content": m.content, "timestamp": m.timestamp}
            for m in s.messages
        ],
        "context": s.context,
        "createdAt": s.created_at,
        "updatedAt": s.updated_at,
    }


def serialize_tutor_response(r: TutorResponse) -> dict:
    return {
        "message": r.message,
        "suggestions": r.suggestions,
        "resources": r.resources,
        "sources": [serialize_passage(p) for p in r.sources],
    }


def serialize_paper(p: ResearchPaper) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "authors": p.authors,
        "abstract": p.abstract,
        "url": p.url,
        "publishedDate": p.published_date,
        "category": p.category,
        "tags": p.tags,
        "aiSummary": p.ai_summary,
        "trendingScore": p.trending_score,
        "readingTime": p.reading_time,
    }


def serialize_dashboard(d: Dict[str, Any]) -> dict:
    stats = d["stats"]
    return {
        "user": serialize_user(d["user"]),
        "stats": {
            "completedTopics": stats["completed_topics"],
            "totalTopics": stats["total_topics"],
            "overallProgress": stats["overall_progress"],
            "learningPaths": stats["learning_paths"],
            "recentActivity": [serialize_progress(p) for p in stats["recent_activity"]],
        },
        "currentLearningPath": serialize_learning_path(d["current_learning_path"]),
        "progress": [serialize_progress(p) for p in d["progress"]],
        "trendingPapers": [serialize_paper(p) for p in d["trending_papers"]],
        "recentChatSessions": [serialize_chat_session(s) for s in d["recent_chat_sessions"]],
    }
