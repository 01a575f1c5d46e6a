"""AI tutor chat and the other LLM-backed endpoints."""
from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from learnhub.api.errors import raise_for_result
from learnhub.api.schemas import (
    AssessmentBody,
    ChatMessageBody,
    ChatSessionCreateBody,
    GenerateLearningPathBody,
    SummarizeBody,
)
from learnhub.api.serializers import serialize_chat_session, serialize_tutor_response
from learnhub.application.learning_app_service import LearningAppService
from learnhub.application.tutor_service import TutorService
from learnhub.container import get_learning_app_service, get_tutor_service
from learnhub.services.llm import LLMProviderError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tutor"])


def _llm_failure(what: str, e: LLMProviderError) -> HTTPException:
    logger.error("%s: %s", what, e)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=what)


# ------------------------------------------------------------------
# Chat sessions
# ------------------------------------------------------------------
@router.get("/chat/sessions/{user_id}")
def list_chat_sessions(user_id: str, svc: LearningAppService = Depends(get_learning_app_service)):
    return [serialize_chat_session(s) for s in svc.list_chat_sessions(user_id)]


@router.post("/chat/sessions", status_code=status.HTTP_201_CREATED)
def create_chat_session(body: ChatSessionCreateBody, svc: LearningAppService = Depends(get_learning_app_service)):
    result = svc.create_chat_session(body.user_id, body.context)
    raise_for_result(result)
    return serialize_chat_session(result.value)


@router.post("/chat/message")
def post_chat_message(
    body: ChatMessageBody,
    svc: LearningAppService = Depends(get_learning_app_service),
    tutor: TutorService = Depends(get_tutor_service),
):
    result = svc.post_chat_message(body.session_id, body.message, body.context, tutor)
    raise_for_result(result)
    reply, session = result.value
    return {
        "response": serialize_tutor_response(reply),
        "session": serialize_chat_session(session),
    }


# ------------------------------------------------------------------
# Generated content
# ------------------------------------------------------------------
@router.post("/learning-paths/generate")
def generate_learning_path(body: GenerateLearningPathBody, tutor: TutorService = Depends(get_tutor_service)):
    goals, level = body.goals, body.level
    if body.user_profile:
        goals = body.user_profile.get("goals", goals)
        level = body.user_profile.get("level", level)
    try:
        return tutor.generate_learning_path(goals, level)
    except LLMProviderError as e:
        raise _llm_failure("Failed to generate learning path", e)


@router.post("/assessment/knowledge")
def assess_knowledge(body: AssessmentBody, tutor: TutorService = Depends(get_tutor_service)):
    try:
        return tutor.assess_user_knowledge(body.responses)
    except LLMProviderError as e:
        raise _llm_failure("Failed to assess knowledge", e)


@router.post("/research/summarize")
def summarize_paper(body: SummarizeBody, tutor: TutorService = Depends(get_tutor_service)):
    try:
        return tutor.summarize_research_paper(body.title, body.abstract)
    except LLMProviderError as e:
        raise _llm_failure("Failed to summarize paper", e)
