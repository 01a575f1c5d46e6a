"""Read-mostly catalog endpoints: topics, passage search, projects, research papers."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from learnhub.api.errors import raise_for_result
from learnhub.api.schemas import UserProjectCreateBody, UserProjectUpdateBody
from learnhub.api.serializers import (
    serialize_paper,
    serialize_passage,
    serialize_project,
    serialize_topic,
    serialize_user_project,
)
from learnhub.application.learning_app_service import LearningAppService
from learnhub.container import get_learning_app_service, get_storage
from learnhub.domain.rag import retriever
from learnhub.persistence.interfaces.storage import TopicCorpus

router = APIRouter(tags=["catalog"])


# ------------------------------------------------------------------
# Health check
# ------------------------------------------------------------------
@router.get("/health")
def health():
    return {"status": "ok"}


# ------------------------------------------------------------------
# Topics
# ------------------------------------------------------------------
@router.get("/api/topics")
def list_topics(svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_topic(t) for t in svc.list_topics()]


@router.get("/api/topics/category/{category}")
def list_topics_by_category(category: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_topic(t) for t in svc.list_topics_by_category(category)]


@router.get("/api/topics/{topic_id}")
def get_topic(topic_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    topic = svc.get_topic(topic_id)
    if not topic:
        raise HTTPException(status_code=404, detail="Topic not found")
    return serialize_topic(topic)


@router.get("/api/search")
def search_passages(
    q: str = Query(""),
    k: int = Query(3, ge=1, le=20),
    corpus: TopicCorpus = Depends(get_storage),
):
    """Course passages matching q, best first (same retrieval the tutor uses)."""
    return [serialize_passage(p) for p in retriever.search(corpus, q, k)]


# ------------------------------------------------------------------
# Projects (sandbox)
# ------------------------------------------------------------------
@router.get("/api/projects")
def list_projects(svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_project(p) for p in svc.list_projects()]


@router.get("/api/projects/{project_id}")
def get_project(project_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    project = svc.get_project(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return serialize_project(project)


@router.get("/api/user-projects/{user_id}")
def list_user_projects(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_user_project(up) for up in svc.list_user_projects(user_id)]


@router.post("/api/user-projects", status_code=status.HTTP_201_CREATED)
def start_user_project(body: UserProjectCreateBody, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.start_user_project(body.user_id, body.project_id)
    raise_for_result(result)
    return serialize_user_project(result.value)


@router.put("/api/user-projects/{user_project_id}")
def update_user_project(
    user_project_id: str,
    body: UserProjectUpdateBody,
    svc: LearningAppService = Depends(get_learning_app_service),
):
    result = svc.update_user_project(user_project_id, body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return serialize_user_project(result.value)


# ------------------------------------------------------------------
# Research papers
# ------------------------------------------------------------------
@router.get("/api/research/trending")
def trending_papers(
    limit: int = Query(5, ge=1, le=50),
    svc: LearningAppService = Depends(get_learning_app_service),
):
    return [serialize_paper(p) for p in svc.trending_papers(limit)]


@router.get("/api/research/category/{category}")
def papers_by_category(category: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_paper(p) for p in svc.papers_by_category(category)]
