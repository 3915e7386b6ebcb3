"""
FastAPI dependencies resolving shared service components from app state.
"""
from fastapi import Request

from api.stats import ServiceStats
from sentiment import SentimentScorer, TaskOrchestrator


def get_scorer(request: Request) -> SentimentScorer:
    return request.app.state.scorer


def get_orchestrator(request: Request) -> TaskOrchestrator:
    return request.app.state.orchestrator


def get_stats(request: Request) -> ServiceStats:
    return request.app.state.stats
