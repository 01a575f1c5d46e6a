"""FastAPI application entry point."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnhub.api import catalog, learning, tutor
from learnhub.core.config import CORS_ORIGINS
from learnhub.core.logging import setup_logging

setup_logging()

# ------------------------------------------------------------------
# App creation
# ------------------------------------------------------------------
app = FastAPI(
    title="LearnHub API",
    description="Topic catalog, progress tracking and AI tutor for the LearnHub dashboard",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------------------------------------------
# Routers
# ------------------------------------------------------------------
app.include_router(catalog.router)
app.include_router(learning.router)
app.include_router(tutor.router)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("learnhub.main:app", host="0.0.0.0", port=8000)
