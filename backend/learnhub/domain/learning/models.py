"""Learning domain models — pure Python, no storage or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class User:
    id: str
    username: str
    email: str
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: str = ""


# ------------------------------------------------------------------
# Topic catalog
# ------------------------------------------------------------------
@dataclass
class Lesson:
    id: str
    title: str
    content: str = ""
    type: str = "article"  # article | video | interactive
    estimated_time: int = 0


@dataclass
class TopicContent:
    lessons: List[Lesson] = field(default_factory=list)
    prerequisites: List[str] = field(default_factory=list)
    learning_objectives: List[str] = field(default_factory=list)


@dataclass
class Topic:
    id: str
    name: str
    title: str
    description: str
    category: str
    difficulty: str
    estimated_time: int
    tags: List[str] = field(default_factory=list)
    connections: List[str] = field(default_factory=list)
    content: Optional[TopicContent] = None


# ------------------------------------------------------------------
# Learner state
# ------------------------------------------------------------------
@dataclass
class LearningPath:
    id: str
    user_id: str
    name: str
    difficulty: str  # beginner | intermediate | advanced
    description: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    completed_topics: List[str] = field(default_factory=list)
    current_topic_index: int = 0
    progress_percentage: int = 0
    created_at: str = ""
    updated_at: str = ""


@dataclass
class UserProgress:
    id: str
    user_id: str
    topic_id: str
    status: str  # not_started | in_progress | completed
    progress_percentage: int = 0
    completed_lessons: List[str] = field(default_factory=list)
    time_spent: int = 0  # minutes
    last_accessed_at: str = ""
    completed_at: Optional[str] = None


# ------------------------------------------------------------------
# Projects (code sandbox)
# ------------------------------------------------------------------
@dataclass
class ProjectStep:
    id: str
    title: str
    description: str
    code: Optional[str] = None
    hints: List[str] = field(default_factory=list)


@dataclass
class Project:
    id: str
    title: str
    description: str
    difficulty: str
    category: str
    estimated_time: int
    technologies: List[str] = field(default_factory=list)
    steps: List[ProjectStep] = field(default_factory=list)
    starter_code: Optional[str] = None
    solution_code: Optional[str] = None


@dataclass
class UserProject:
    id: str
    user_id: str
    project_id: str
    status: str  # not_started | in_progress | completed
    code: Optional[str] = None
    submitted_at: Optional[str] = None
    score: Optional[int] = None


# ------------------------------------------------------------------
# Tutor chat
# ------------------------------------------------------------------
@dataclass
class ChatMessage:
    id: str
    role: str  # user | assistant
    content: str
    timestamp: str


@dataclass
class ChatSession:
    id: str
    user_id: str
    messages: List[ChatMessage] = field(default_factory=list)
    context: Dict[str, Any] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""


# ------------------------------------------------------------------
# Research feed
# ------------------------------------------------------------------
@dataclass
class ResearchPaper:
    id: str
    title: str
    authors: List[str]
    abstract: str
    url: str
    category: str
    reading_time: int  # minutes
    published_date: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    ai_summary: Optional[str] = None
    trending_score: int = 0
