"""Request bodies. The web client speaks camelCase; fields are snake_case in Python."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------
class UserCreateBody(CamelModel):
    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ------------------------------------------------------------------
# Learning paths
# ------------------------------------------------------------------
class LearningPathCreateBody(CamelModel):
    user_id: str
    name: str
    difficulty: str
    description: Optional[str] = None
    topics: List[str] = []
    completed_topics: List[str] = []
    current_topic_index: int = 0
    progress_percentage: int = 0


class LearningPathUpdateBody(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    difficulty: Optional[str] = None
    topics: Optional[List[str]] = None
    completed_topics: Optional[List[str]] = None
    current_topic_index: Optional[int] = None
    progress_percentage: Optional[int] = None


class GenerateLearningPathBody(CamelModel):
    goals: List[str] = []
    level: str = "beginner"
    # Older clients send everything under userProfile
    user_profile: Optional[Dict[str, Any]] = None


# ------------------------------------------------------------------
# Progress
# ------------------------------------------------------------------
class ProgressCreateBody(CamelModel):
    user_id: str
    topic_id: str
    status: str
    progress_percentage: int = 0
    completed_lessons: List[str] = []
    time_spent: int = 0


class ProgressUpdateBody(CamelModel):
    status: Optional[str] = None
    progress_percentage: Optional[int] = None
    completed_lessons: Optional[List[str]] = None
    time_spent: Optional[int] = None


# ------------------------------------------------------------------
# Projects
# ------------------------------------------------------------------
class UserProjectCreateBody(CamelModel):
    user_id: str
    project_id: str


class UserProjectUpdateBody(CamelModel):
    status: Optional[str] = None
    code: Optional[str] = None
    score: Optional[int] = Field(default=None, ge=0, le=100)


# ------------------------------------------------------------------
# Tutor / AI
# ------------------------------------------------------------------
class ChatSessionCreateBody(CamelModel):
    user_id: str
    context: Optional[Dict[str, Any]] = None


class ChatMessageBody(CamelModel):
    session_id: str
    message: str
    context: Optional[Dict[str, Any]] = None


class AssessmentBody(CamelModel):
    responses: Any = None


class SummarizeBody(CamelModel):
    title: str
    abstract: str
