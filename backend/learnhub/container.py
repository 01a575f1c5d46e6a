"""Dependency injection container — wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from learnhub.application.learning_app_service import LearningAppService
from learnhub.application.tutor_service import TutorService
from learnhub.persistence.repositories.memory.memory_storage import MemoryStorage
from learnhub.persistence.seed import seed_storage


@lru_cache(maxsize=1)
def get_storage() -> MemoryStorage:
    storage = MemoryStorage()
    seed_storage(storage)
    return storage


@lru_cache(maxsize=1)
def get_learning_app_service() -> LearningAppService:
    return LearningAppService(storage=get_storage())


@lru_cache(maxsize=1)
def get_tutor_service() -> TutorService:
    return TutorService(corpus=get_storage())


def reset() -> None:
    """Forget every singleton; the next call builds a fresh seeded store."""
    get_tutor_service.cache_clear()
    get_learning_app_service.cache_clear()
    get_storage.cache_clear()
