"""Learner data endpoints: users, learning paths, progress, dashboard."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from learnhub.api.errors import raise_for_result
from learnhub.api.schemas import (
    LearningPathCreateBody,
    LearningPathUpdateBody,
    ProgressCreateBody,
    ProgressUpdateBody,
    UserCreateBody,
)
from learnhub.api.serializers import (
    serialize_dashboard,
    serialize_learning_path,
    serialize_progress,
    serialize_user,
)
from learnhub.application.learning_app_service import LearningAppService
from learnhub.container import get_learning_app_service

router = APIRouter(prefix="/api", tags=["learning"])


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------
@router.post("/users", status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreateBody, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.create_user(body.model_dump())
    raise_for_result(result)
    return serialize_user(result.value)


@router.get("/users/{user_id}")
def get_user(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    user = svc.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return serialize_user(user)


# ------------------------------------------------------------------
# Learning paths
# ------------------------------------------------------------------
@router.get("/learning-paths/user/{user_id}")
def list_learning_paths(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_learning_path(lp) for lp in svc.list_learning_paths(user_id)]


@router.post("/learning-paths", status_code=status.HTTP_201_CREATED)
def create_learning_path(body: LearningPathCreateBody, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.create_learning_path(body.model_dump())
    raise_for_result(result)
    return serialize_learning_path(result.value)


@router.put("/learning-paths/{path_id}")
def update_learning_path(
    path_id: str,
    body: LearningPathUpdateBody,
    svc: LearningAppService = Depends(get_learning_app_service),
):
    result = svc.update_learning_path(path_id, body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return serialize_learning_path(result.value)


# ------------------------------------------------------------------
# Progress
# ------------------------------------------------------------------
# Registered before /progress/{user_id}/{topic_id}, which would otherwise shadow it
@router.get("/progress/user/{user_id}")
def list_progress(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_progress(p) for p in svc.list_progress(user_id)]


@router.get("/progress/{user_id}/{topic_id}")
def get_progress(user_id: str, topic_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    progress = svc.get_progress(user_id, topic_id)
    if not progress:
        raise HTTPException(status_code=404, detail="Progress not found")
    return serialize_progress(progress)


@router.post("/progress", status_code=status.HTTP_201_CREATED)
def create_progress(body: ProgressCreateBody, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.create_progress(body.model_dump())
    raise_for_result(result)
    return serialize_progress(result.value)


@router.put("/progress/{progress_id}")
def update_progress(
    progress_id: str,
    body: ProgressUpdateBody,
    svc: LearningAppService = Depends(get_learning_app_service),
):
    result = svc.update_progress(progress_id, body.model_dump(exclude_unset=True))
    raise_for_result(result)
    return serialize_progress(result.value)


# ------------------------------------------------------------------
# Dashboard
# ------------------------------------------------------------------
@router.get("/dashboard/{user_id}")
def dashboard(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.dashboard(user_id)
    raise_for_result(result)
    return serialize_dashboard(result.value)
