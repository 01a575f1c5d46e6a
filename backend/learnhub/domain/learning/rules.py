"""Business rules for learner data — validation and progress bookkeeping."""
from __future__ import annotations
from typing import Any, Dict, List

from learnhub.domain.common.result import Result
from learnhub.domain.learning.models import LearningPath, UserProgress

VALID_DIFFICULTIES = {"beginner", "intermediate", "advanced"}
VALID_PROGRESS_STATUSES = {"not_started", "in_progress", "completed"}

RECENT_ACTIVITY_LIMIT = 5


def _required(data: Dict[str, Any], *names: str) -> Result[Dict[str, Any]]:
    for name in names:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            return Result.fail(f"'{name}' is required and cannot be empty.")
    return Result.ok(data)


def _not_null(data: Dict[str, Any], *names: str) -> Result[Dict[str, Any]]:
    """Partial updates may omit a field but never clear one that is always set."""
    for name in names:
        if name in data and data[name] is None:
            return Result.fail(f"'{name}' cannot be null.")
    return Result.ok(data)


def _percentage(data: Dict[str, Any], name: str) -> Result[Dict[str, Any]]:
    value = data.get(name)
    if value is not None and not 0 <= value <= 100:
        return Result.fail(f"'{name}' must be between 0 and 100, got {value}.")
    return Result.ok(data)


def validate_user(data: Dict[str, Any]) -> Result[Dict[str, Any]]:
    check = _required(data, "username", "email", "password")
    if not check.is_success:
        return check
    if "@" not in data["email"]:
        return Result.fail(f"'{data['email']}' is not a valid email address.")
    return Result.ok(data)


def validate_difficulty(difficulty: str) -> Result[str]:
    if difficulty not in VALID_DIFFICULTIES:
        return Result.fail(
            f"'{difficulty}' is not a valid difficulty. Must be one of {sorted(VALID_DIFFICULTIES)}."
        )
    return Result.ok(difficulty)


def validate_learning_path(data: Dict[str, Any], partial: bool = False) -> Result[Dict[str, Any]]:
    if not partial:
        check = _required(data, "user_id", "name", "difficulty")
    else:
        check = _not_null(
            data, "name", "difficulty", "topics", "completed_topics", "current_topic_index", "progress_percentage"
        )
    if not check.is_success:
        return check
    if data.get("difficulty") is not None:
        check = validate_difficulty(data["difficulty"])
        if not check.is_success:
            return Result.fail(check.error)
    return _percentage(data, "progress_percentage")


def validate_progress(data: Dict[str, Any], partial: bool = False) -> Result[Dict[str, Any]]:
    if not partial:
        check = _required(data, "user_id", "topic_id", "status")
    else:
        check = _not_null(data, "status", "progress_percentage", "completed_lessons", "time_spent")
    if not check.is_success:
        return check
    status = data.get("status")
    if status is not None and status not in VALID_PROGRESS_STATUSES:
        return Result.fail(
            f"'{status}' is not a valid status. Must be one of {sorted(VALID_PROGRESS_STATUSES)}."
        )
    return _percentage(data, "progress_percentage")


def validate_user_project_update(data: Dict[str, Any]) -> Result[Dict[str, Any]]:
    check = _not_null(data, "status")
    if not check.is_success:
        return check
    status = data.get("status")
    if status is not None and status not in VALID_PROGRESS_STATUSES:
        return Result.fail(f"'{status}' is not a valid status.")
    return Result.ok(data)


def validate_chat_message(message: str) -> Result[str]:
    if not (message or "").strip():
        return Result.fail("'message' is required and cannot be empty.")
    return Result.ok(message)


def apply_completion(updates: Dict[str, Any], now: str) -> Dict[str, Any]:
    """Completing a topic pins progress at 100% and stamps completed_at."""
    if updates.get("status") != "completed":
        return updates
    updates = dict(updates)
    updates["progress_percentage"] = 100
    updates.setdefault("completed_at", now)
    return updates


def dashboard_stats(progress: List[UserProgress], learning_paths: List[LearningPath]) -> Dict[str, Any]:
    completed = sum(1 for p in progress if p.status == "completed")
    total = len(progress)
    return {
        "completed_topics": completed,
        "total_topics": total,
        # half-up, not banker's rounding
        "overall_progress": int(completed * 100 / total + 0.5) if total else 0,
        "learning_paths": len(learning_paths),
        "recent_activity": progress[:RECENT_ACTIVITY_LIMIT],
    }
