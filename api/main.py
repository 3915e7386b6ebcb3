"""
Hooked Sentiment - API.

============================================================
RESPONSIBILITY
============================================================
Wires the hook registry, fetcher and scorer into a FastAPI app:

- GET  /         health probe with request counters
- POST /analyze  score inline text
- POST /task     fetch text through a hook, then score it
============================================================
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import analyze, health, task
from api.stats import ServiceStats
from sentiment import (
    HookRegistry,
    RemoteFetcher,
    SentimentMerger,
    SentimentScorer,
    ServiceSettings,
    TaskOrchestrator,
    load_registry,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[ServiceSettings] = None,
    registry: Optional[HookRegistry] = None,
    fetcher: Optional[RemoteFetcher] = None,
    scorer: Optional[SentimentScorer] = None,
) -> FastAPI:
    """
    Build the application. Hooks are loaded here, once, and never change.
    """
    if settings is None:
        settings = ServiceSettings.from_env()
    if registry is None:
        registry = load_registry(settings.hooks_path)
    if fetcher is None:
        fetcher = RemoteFetcher(timeout=settings.fetch_timeout_seconds)
    if scorer is None:
        scorer = SentimentScorer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Hooked Sentiment API up with hooks: {registry.hook_ids}")
        yield
        await fetcher.close()

    app = FastAPI(
        title="Hooked Sentiment API",
        description="Scores text sentiment inline or fetched through caller-registered hooks.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.scorer = scorer
    app.state.stats = ServiceStats()
    app.state.orchestrator = TaskOrchestrator(
        registry=registry,
        fetcher=fetcher,
        merger=SentimentMerger(scorer),
    )

    app.add_exception_handler(RequestValidationError, request_malformed_handler)

    # Include Routers
    app.include_router(health.router)
    app.include_router(analyze.router)
    app.include_router(task.router)

    return app


async def request_malformed_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing, empty or invalid request bodies are a 400, not a 422."""
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    logger.info(f"Malformed request to {request.url.path}: {problems}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "RequestMalformed",
            "message": "; ".join(problems) or "Request body is malformed",
        },
    )
